"""
Dashboard schemas
"""
from pydantic import BaseModel
from typing import List
from datetime import date
from decimal import Decimal


class CategoriaResumo(BaseModel):
    categoria: str
    quantidade: int


class MesResumo(BaseModel):
    mes: str  # YYYY-MM
    quantidade: int
    valor: Decimal


class Bonificacoes(BaseModel):
    trace: int = 0
    hilton: int = 0
    novilho_precoce: int = 0


class DashboardResumo(BaseModel):
    total_abates: int
    total_animais: int
    valor_total_acerto: Decimal
    media_arroba_negociada: Decimal
    abates_por_categoria: List[CategoriaResumo]
    abates_por_mes: List[MesResumo]
    bonificacoes: Bonificacoes


class AtividadeRecente(BaseModel):
    id: int
    data_abate: date
    produtor_nome: str
    frigorifico_nome: str
    quantidade: int
    valor_total_acerto: Decimal
