"""
Autenticação schemas
"""
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator
from typing import List, Optional

from .common import texto_obrigatorio, vazio_para_none
from .usuario import _validar_senha


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    name: str = Field(..., max_length=150)
    email: EmailStr
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


class ResetPasswordRequest(BaseModel):
    email: EmailStr
    redirect_to: Optional[str] = None


class PerfilUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=150)
    telefone: Optional[str] = Field(None, max_length=30)

    @field_validator("name")
    @classmethod
    def _nome(cls, value):
        return texto_obrigatorio(value, "Nome é obrigatório")

    @field_validator("telefone", mode="before")
    @classmethod
    def _telefone(cls, value):
        return vazio_para_none(value)


class CurrentUserResponse(BaseModel):
    id: str
    email: str
    name: str
    type: str
    active: bool = True
    permissions: List[str] = []


class LoginResponse(BaseModel):
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None
    token_type: str = "bearer"
    user: CurrentUserResponse
