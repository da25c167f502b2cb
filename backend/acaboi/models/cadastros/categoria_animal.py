"""
CategoriaAnimal model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from acaboi.core.database import Base


class CategoriaAnimal(Base):
    __tablename__ = "categoria_animais"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False, unique=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
