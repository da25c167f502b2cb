"""
Usuários (perfis) schemas
"""
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator
from typing import Optional
from datetime import datetime

from acaboi.core.permissions import UserType
from .common import texto_obrigatorio

SENHA_MINIMA = 6


def _validar_senha(password: Optional[str], confirm_password: Optional[str]) -> None:
    if not password:
        raise ValueError("Senha é obrigatória")
    if len(password) < SENHA_MINIMA:
        raise ValueError(f"A senha deve ter pelo menos {SENHA_MINIMA} caracteres")
    if password != confirm_password:
        raise ValueError("As senhas não coincidem")


class UsuarioCreate(BaseModel):
    name: str = Field(..., max_length=150)
    email: EmailStr
    type: UserType = UserType.TECNICO
    password: str
    confirm_password: str

    @field_validator("name")
    @classmethod
    def _nome(cls, value):
        return texto_obrigatorio(value, "Nome é obrigatório")

    @model_validator(mode="after")
    def _senhas(self):
        _validar_senha(self.password, self.confirm_password)
        return self


class UsuarioUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=150)
    email: Optional[EmailStr] = None
    type: Optional[UserType] = None
    active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def _nome(cls, value):
        return texto_obrigatorio(value, "Nome é obrigatório")


class SenhaReset(BaseModel):
    password: str
    confirm_password: str

    @model_validator(mode="after")
    def _senhas(self):
        _validar_senha(self.password, self.confirm_password)
        return self


class UsuarioResponse(BaseModel):
    id: str
    email: str
    name: str
    type: str
    active: bool
    telefone: Optional[str] = None
    created_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None

    class Config:
        from_attributes = True
