"""
Abate model - Eventos de abate e acerto financeiro
"""
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from acaboi.core.database import Base


class Abate(Base):
    __tablename__ = "abates"

    id = Column(Integer, primary_key=True, index=True)
    id_produtor = Column(Integer, ForeignKey("produtores.id"), nullable=False, index=True)
    # Linhas importadas de planilha não trazem a propriedade
    id_propriedade = Column(Integer, ForeignKey("propriedades.id"), nullable=True)
    id_frigorifico = Column(Integer, ForeignKey("frigorificos.id"), nullable=False, index=True)
    id_categoria_animal = Column(Integer, ForeignKey("categoria_animais.id"), nullable=False)

    nome_lote = Column(String(120), nullable=True)
    data_abate = Column(Date, nullable=False, index=True)
    quantidade = Column(Integer, nullable=False)

    valor_arroba_negociada = Column(Numeric(12, 2), nullable=False)
    valor_arroba_prazo_ou_vista = Column(Numeric(12, 2), nullable=True)
    valor_total_acerto = Column(Numeric(14, 2), nullable=False)

    # Bonificações
    trace = Column(Boolean, nullable=False, default=False, server_default="false")
    hilton = Column(Boolean, nullable=False, default=False, server_default="false")
    novilho_precoce = Column(Boolean, nullable=False, default=False, server_default="false")

    desconto = Column(Numeric(12, 2), nullable=True)
    dias_cocho = Column(Integer, nullable=True)
    reembolso = Column(Numeric(12, 2), nullable=True)
    carcacas_avaliadas = Column(Integer, nullable=True)
    observacao = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    produtor = relationship("Produtor")
    propriedade = relationship("Propriedade")
    frigorifico = relationship("Frigorifico")
    categoria_animal = relationship("CategoriaAnimal")

    @property
    def produtor_nome(self):
        return self.produtor.nome if self.produtor else None

    @property
    def propriedade_nome(self):
        return self.propriedade.nome if self.propriedade else None

    @property
    def frigorifico_nome(self):
        return self.frigorifico.nome if self.frigorifico else None

    @property
    def categoria_nome(self):
        return self.categoria_animal.nome if self.categoria_animal else None
