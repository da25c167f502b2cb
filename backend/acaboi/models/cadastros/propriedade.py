"""
Propriedade model - Fazendas de cada produtor
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from acaboi.core.database import Base


class ClassificacaoPropriedade(str, enum.Enum):
    A = "A"
    B = "B"
    C = "C"


CLASSIFICACAO_LABELS = {
    ClassificacaoPropriedade.A: "A - Premium",
    ClassificacaoPropriedade.B: "B - Padrão",
    ClassificacaoPropriedade.C: "C - Básica",
}


class Propriedade(Base):
    __tablename__ = "propriedades"

    id = Column(Integer, primary_key=True, index=True)
    id_produtor = Column(Integer, ForeignKey("produtores.id", ondelete="CASCADE"), nullable=False, index=True)
    nome = Column(String(200), nullable=False)
    telefone = Column(String(30), nullable=True)
    celular = Column(String(30), nullable=True)
    endereco = Column(String(300), nullable=False)
    localizacao = Column(String(300), nullable=True)
    cidade = Column(String(120), nullable=False)
    inscricao_estadual = Column(String(40), nullable=True)
    classificacao = Column(
        Enum(ClassificacaoPropriedade, name="classificacao_propriedade", native_enum=False, length=1),
        nullable=False,
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    produtor = relationship("Produtor", back_populates="propriedades")

    @property
    def produtor_nome(self):
        return self.produtor.nome if self.produtor else None
