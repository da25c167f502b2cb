"""
Escala de abates schemas
"""
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal

from .common import texto_obrigatorio, vazio_para_none


class TipoServico(str, Enum):
    ABATE = "ABATE"
    CERTIFICACAO = "CERTIFICAÇÃO"
    DESOSSA = "DESOSSA"
    VISITA_TECNICA = "VISITA TÉCNICA"


class CategoriaEscala(str, Enum):
    MC = "MC"
    MI = "MI"
    IM = "IM"
    F = "F"


class TipoNegociacao(str, Enum):
    DIRETO_PRODUTOR = "DIRETO PRODUTOR"
    PECBR = "PECBR"


class FormaPagamento(str, Enum):
    A_VISTA = "À vista"
    DIAS_07 = "07 dias"
    DIAS_15 = "15 dias"
    DIAS_30 = "30 dias"


class EscalaBase(BaseModel):
    tipo_servico: TipoServico
    data_embarque: date
    data_abate: date
    id_frigorifico: int = Field(..., gt=0)
    quantidade: int = Field(..., gt=0)
    categoria: CategoriaEscala
    id_produtor: int = Field(..., gt=0)
    id_propriedade: int = Field(..., gt=0)
    municipio: str = Field(..., max_length=120)
    id_protocolo: Optional[int] = None
    preco_arroba: Optional[Decimal] = Field(None, ge=0)
    preco_cabeca: Optional[Decimal] = Field(None, ge=0)
    tipo_negociacao: TipoNegociacao
    forma_pagamento: FormaPagamento
    id_tecnico_negociador: Optional[int] = None
    id_tecnico_responsavel: Optional[int] = None
    observacoes: Optional[str] = None

    @field_validator("municipio")
    @classmethod
    def _municipio(cls, value):
        return texto_obrigatorio(value, "Município é obrigatório")

    @field_validator(
        "id_protocolo", "id_tecnico_negociador", "id_tecnico_responsavel",
        "preco_arroba", "preco_cabeca", "observacoes",
        mode="before",
    )
    @classmethod
    def _opcional(cls, value):
        return vazio_para_none(value)


class EscalaCreate(EscalaBase):
    pass


class EscalaUpdate(BaseModel):
    tipo_servico: Optional[TipoServico] = None
    data_embarque: Optional[date] = None
    data_abate: Optional[date] = None
    id_frigorifico: Optional[int] = Field(None, gt=0)
    quantidade: Optional[int] = Field(None, gt=0)
    categoria: Optional[CategoriaEscala] = None
    id_produtor: Optional[int] = Field(None, gt=0)
    id_propriedade: Optional[int] = Field(None, gt=0)
    municipio: Optional[str] = Field(None, max_length=120)
    id_protocolo: Optional[int] = None
    preco_arroba: Optional[Decimal] = Field(None, ge=0)
    preco_cabeca: Optional[Decimal] = Field(None, ge=0)
    tipo_negociacao: Optional[TipoNegociacao] = None
    forma_pagamento: Optional[FormaPagamento] = None
    id_tecnico_negociador: Optional[int] = None
    id_tecnico_responsavel: Optional[int] = None
    observacoes: Optional[str] = None


class EscalaResponse(EscalaBase):
    id: int
    produtor_nome: Optional[str] = None
    propriedade_nome: Optional[str] = None
    frigorifico_nome: Optional[str] = None
    protocolo_nome: Optional[str] = None
    tecnico_negociador_nome: Optional[str] = None
    tecnico_responsavel_nome: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProtocoloResponse(BaseModel):
    id: int
    nome: str

    class Config:
        from_attributes = True


class TecnicoResponse(BaseModel):
    id: int
    empresa: Optional[str] = None
    id_usuario: Optional[str] = None
    nome: Optional[str] = None

    class Config:
        from_attributes = True


class EscalaOpcoes(BaseModel):
    tipos_servico: List[str]
    categorias: List[str]
    tipos_negociacao: List[str]
    formas_pagamento: List[str]
