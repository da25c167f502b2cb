"""
Frigorifico schemas
"""
from pydantic import BaseModel, EmailStr, Field, field_validator, ValidationInfo
from typing import Optional
from datetime import datetime

from .common import texto_obrigatorio, vazio_para_none

MENSAGENS_OBRIGATORIOS = {
    "nome": "Nome é obrigatório",
    "endereco": "Endereço é obrigatório",
    "cidade": "Cidade é obrigatória",
    "cnpj": "CNPJ é obrigatório",
}


class FrigorificoBase(BaseModel):
    nome: str = Field(..., max_length=200)
    endereco: str = Field(..., max_length=300)
    cidade: str = Field(..., max_length=120)
    cnpj: str = Field(..., max_length=20)
    email: Optional[EmailStr] = None

    @field_validator("nome", "endereco", "cidade", "cnpj")
    @classmethod
    def _obrigatorio(cls, value, info: ValidationInfo):
        return texto_obrigatorio(value, MENSAGENS_OBRIGATORIOS[info.field_name])

    @field_validator("email", mode="before")
    @classmethod
    def _email_vazio(cls, value):
        return vazio_para_none(value)


class FrigorificoCreate(FrigorificoBase):
    pass


class FrigorificoUpdate(BaseModel):
    nome: Optional[str] = Field(None, max_length=200)
    endereco: Optional[str] = Field(None, max_length=300)
    cidade: Optional[str] = Field(None, max_length=120)
    cnpj: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None

    @field_validator("nome", "endereco", "cidade", "cnpj")
    @classmethod
    def _obrigatorio(cls, value, info: ValidationInfo):
        return texto_obrigatorio(value, MENSAGENS_OBRIGATORIOS[info.field_name])

    @field_validator("email", mode="before")
    @classmethod
    def _email_vazio(cls, value):
        return vazio_para_none(value)


class FrigorificoResponse(BaseModel):
    id: int
    nome: str
    endereco: str
    cidade: str
    cnpj: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
