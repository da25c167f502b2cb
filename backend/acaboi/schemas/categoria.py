"""
CategoriaAnimal schemas
"""
from pydantic import BaseModel, Field, field_validator

from .common import texto_obrigatorio


class CategoriaBase(BaseModel):
    nome: str = Field(..., max_length=100)

    @field_validator("nome")
    @classmethod
    def _obrigatorio(cls, value):
        return texto_obrigatorio(value, "Nome é obrigatório")


class CategoriaCreate(CategoriaBase):
    pass


class CategoriaResponse(CategoriaBase):
    id: int

    class Config:
        from_attributes = True
