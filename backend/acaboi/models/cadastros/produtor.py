"""
Produtor model - Produtores rurais
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from acaboi.core.database import Base


class Produtor(Base):
    __tablename__ = "produtores"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(200), nullable=False, index=True)
    endereco = Column(String(300), nullable=False)
    cidade = Column(String(120), nullable=False)
    cnpj = Column(String(20), nullable=False)
    marca_produtor = Column(String(120), nullable=False)
    email = Column(String(150), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    propriedades = relationship(
        "Propriedade",
        back_populates="produtor",
        order_by="Propriedade.id",
        cascade="all, delete-orphan",
    )
