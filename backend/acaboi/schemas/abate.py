"""
Abate schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

from .common import vazio_para_none


class AbateBase(BaseModel):
    id_produtor: int = Field(..., gt=0)
    id_propriedade: Optional[int] = Field(None, gt=0)
    id_frigorifico: int = Field(..., gt=0)
    id_categoria_animal: int = Field(..., gt=0)
    nome_lote: Optional[str] = Field(None, max_length=120)
    data_abate: date
    quantidade: int = Field(..., ge=1)
    valor_arroba_negociada: Decimal = Field(..., gt=0)
    valor_arroba_prazo_ou_vista: Optional[Decimal] = Field(None, ge=0)
    # Quando omitido é calculado como quantidade x valor da arroba
    valor_total_acerto: Optional[Decimal] = Field(None, gt=0)
    trace: bool = False
    hilton: bool = False
    novilho_precoce: bool = False
    desconto: Optional[Decimal] = Field(None, ge=0)
    dias_cocho: Optional[int] = Field(None, ge=0)
    reembolso: Optional[Decimal] = Field(None, ge=0)
    carcacas_avaliadas: Optional[int] = Field(None, ge=0)
    observacao: Optional[str] = None

    @field_validator("nome_lote", "observacao", mode="before")
    @classmethod
    def _opcional(cls, value):
        return vazio_para_none(value)


class AbateCreate(AbateBase):
    pass


class AbateUpdate(BaseModel):
    id_produtor: Optional[int] = Field(None, gt=0)
    id_propriedade: Optional[int] = Field(None, gt=0)
    id_frigorifico: Optional[int] = Field(None, gt=0)
    id_categoria_animal: Optional[int] = Field(None, gt=0)
    nome_lote: Optional[str] = Field(None, max_length=120)
    data_abate: Optional[date] = None
    quantidade: Optional[int] = Field(None, ge=1)
    valor_arroba_negociada: Optional[Decimal] = Field(None, gt=0)
    valor_arroba_prazo_ou_vista: Optional[Decimal] = Field(None, ge=0)
    valor_total_acerto: Optional[Decimal] = Field(None, gt=0)
    trace: Optional[bool] = None
    hilton: Optional[bool] = None
    novilho_precoce: Optional[bool] = None
    desconto: Optional[Decimal] = Field(None, ge=0)
    dias_cocho: Optional[int] = Field(None, ge=0)
    reembolso: Optional[Decimal] = Field(None, ge=0)
    carcacas_avaliadas: Optional[int] = Field(None, ge=0)
    observacao: Optional[str] = None


class AbateResponse(AbateBase):
    id: int
    valor_total_acerto: Decimal
    produtor_nome: Optional[str] = None
    propriedade_nome: Optional[str] = None
    frigorifico_nome: Optional[str] = None
    categoria_nome: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
