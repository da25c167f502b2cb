"""
Escala models - Programação de abates e técnicos
"""
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from acaboi.core.database import Base


class Protocolo(Base):
    __tablename__ = "protocolos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(120), nullable=False)


class Tecnico(Base):
    __tablename__ = "tecnicos"

    id = Column(Integer, primary_key=True, index=True)
    empresa = Column(String(120), nullable=True)
    id_usuario = Column(String(36), ForeignKey("profiles.id"), nullable=True)

    usuario = relationship("Profile")

    @property
    def nome(self):
        return self.usuario.name if self.usuario else None


class EscalaAbate(Base):
    __tablename__ = "escala_abates"

    id = Column(Integer, primary_key=True, index=True)
    tipo_servico = Column(String(40), nullable=False)
    data_embarque = Column(Date, nullable=False)
    data_abate = Column(Date, nullable=False, index=True)
    id_frigorifico = Column(Integer, ForeignKey("frigorificos.id"), nullable=False)
    quantidade = Column(Integer, nullable=False)
    categoria = Column(String(10), nullable=False)
    id_produtor = Column(Integer, ForeignKey("produtores.id"), nullable=False)
    id_propriedade = Column(Integer, ForeignKey("propriedades.id"), nullable=False)
    municipio = Column(String(120), nullable=False)
    id_protocolo = Column(Integer, ForeignKey("protocolos.id"), nullable=True)
    preco_arroba = Column(Numeric(12, 2), nullable=True)
    preco_cabeca = Column(Numeric(12, 2), nullable=True)
    tipo_negociacao = Column(String(40), nullable=False)
    forma_pagamento = Column(String(40), nullable=False)
    id_tecnico_negociador = Column(Integer, ForeignKey("tecnicos.id"), nullable=True)
    id_tecnico_responsavel = Column(Integer, ForeignKey("tecnicos.id"), nullable=True)
    observacoes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    produtor = relationship("Produtor")
    propriedade = relationship("Propriedade")
    frigorifico = relationship("Frigorifico")
    protocolo = relationship("Protocolo")
    tecnico_negociador = relationship("Tecnico", foreign_keys=[id_tecnico_negociador])
    tecnico_responsavel = relationship("Tecnico", foreign_keys=[id_tecnico_responsavel])

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
    def protocolo_nome(self):
        return self.protocolo.nome if self.protocolo else None

    @property
    def tecnico_negociador_nome(self):
        return self.tecnico_negociador.nome if self.tecnico_negociador else None

    @property
    def tecnico_responsavel_nome(self):
        return self.tecnico_responsavel.nome if self.tecnico_responsavel else None
