"""
Produtor schemas
"""
from pydantic import BaseModel, EmailStr, Field, field_validator, ValidationInfo
from typing import List, Optional
from datetime import datetime

from .common import texto_obrigatorio, vazio_para_none

MENSAGENS_OBRIGATORIOS = {
    "nome": "Nome é obrigatório",
    "endereco": "Endereço é obrigatório",
    "cidade": "Cidade é obrigatória",
    "cnpj": "CNPJ é obrigatório",
    "marca_produtor": "Marca do produtor é obrigatória",
}


class ProdutorBase(BaseModel):
    nome: str = Field(..., max_length=200)
    endereco: str = Field(..., max_length=300)
    cidade: str = Field(..., max_length=120)
    cnpj: str = Field(..., max_length=20)
    marca_produtor: str = Field(..., max_length=120)
    email: Optional[EmailStr] = None

    @field_validator("nome", "endereco", "cidade", "cnpj", "marca_produtor")
    @classmethod
    def _obrigatorio(cls, value, info: ValidationInfo):
        return texto_obrigatorio(value, MENSAGENS_OBRIGATORIOS[info.field_name])

    @field_validator("email", mode="before")
    @classmethod
    def _email_vazio(cls, value):
        return vazio_para_none(value)


class ProdutorCreate(ProdutorBase):
    pass


class ProdutorUpdate(BaseModel):
    nome: Optional[str] = Field(None, max_length=200)
    endereco: Optional[str] = Field(None, max_length=300)
    cidade: Optional[str] = Field(None, max_length=120)
    cnpj: Optional[str] = Field(None, max_length=20)
    marca_produtor: Optional[str] = Field(None, max_length=120)
    email: Optional[EmailStr] = None

    @field_validator("nome", "endereco", "cidade", "cnpj", "marca_produtor")
    @classmethod
    def _obrigatorio(cls, value, info: ValidationInfo):
        return texto_obrigatorio(value, MENSAGENS_OBRIGATORIOS[info.field_name])

    @field_validator("email", mode="before")
    @classmethod
    def _email_vazio(cls, value):
        return vazio_para_none(value)


class PropriedadeResumo(BaseModel):
    id: int
    nome: str

    class Config:
        from_attributes = True


class ProdutorResponse(BaseModel):
    id: int
    nome: str
    endereco: str
    cidade: str
    cnpj: str
    marca_produtor: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    propriedades: List[PropriedadeResumo] = []

    class Config:
        from_attributes = True
