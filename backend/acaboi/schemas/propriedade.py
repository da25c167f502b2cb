"""
Propriedade schemas
"""
from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import Optional
from datetime import datetime

from acaboi.models.cadastros import ClassificacaoPropriedade
from .common import texto_obrigatorio, vazio_para_none

MENSAGENS_OBRIGATORIOS = {
    "nome": "Nome é obrigatório",
    "endereco": "Endereço é obrigatório",
    "cidade": "Cidade é obrigatória",
}


class PropriedadeBase(BaseModel):
    id_produtor: int = Field(..., gt=0)
    nome: str = Field(..., max_length=200)
    telefone: Optional[str] = Field(None, max_length=30)
    celular: Optional[str] = Field(None, max_length=30)
    endereco: str = Field(..., max_length=300)
    localizacao: Optional[str] = Field(None, max_length=300)
    cidade: str = Field(..., max_length=120)
    inscricao_estadual: Optional[str] = Field(None, max_length=40)
    classificacao: ClassificacaoPropriedade

    @field_validator("nome", "endereco", "cidade")
    @classmethod
    def _obrigatorio(cls, value, info: ValidationInfo):
        return texto_obrigatorio(value, MENSAGENS_OBRIGATORIOS[info.field_name])

    @field_validator("telefone", "celular", "localizacao", "inscricao_estadual", mode="before")
    @classmethod
    def _opcional(cls, value):
        return vazio_para_none(value)


class PropriedadeCreate(PropriedadeBase):
    pass


class PropriedadeUpdate(BaseModel):
    id_produtor: Optional[int] = Field(None, gt=0)
    nome: Optional[str] = Field(None, max_length=200)
    telefone: Optional[str] = Field(None, max_length=30)
    celular: Optional[str] = Field(None, max_length=30)
    endereco: Optional[str] = Field(None, max_length=300)
    localizacao: Optional[str] = Field(None, max_length=300)
    cidade: Optional[str] = Field(None, max_length=120)
    inscricao_estadual: Optional[str] = Field(None, max_length=40)
    classificacao: Optional[ClassificacaoPropriedade] = None

    @field_validator("nome", "endereco", "cidade")
    @classmethod
    def _obrigatorio(cls, value, info: ValidationInfo):
        return texto_obrigatorio(value, MENSAGENS_OBRIGATORIOS[info.field_name])


class PropriedadeResponse(BaseModel):
    id: int
    id_produtor: int
    nome: str
    telefone: Optional[str] = None
    celular: Optional[str] = None
    endereco: str
    localizacao: Optional[str] = None
    cidade: str
    inscricao_estadual: Optional[str] = None
    classificacao: ClassificacaoPropriedade
    produtor_nome: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
