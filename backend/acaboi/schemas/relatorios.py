"""
Relatórios schemas
"""
from enum import Enum
from pydantic import BaseModel
from typing import Optional
from datetime import date
from decimal import Decimal


class TipoRelatorio(str, Enum):
    ABATES = "abates"
    PRODUTORES = "produtores"
    FRIGORIFICOS = "frigorificos"


class FiltrosRelatorio(BaseModel):
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    id_produtor: Optional[int] = None
    id_frigorifico: Optional[int] = None
    id_categoria: Optional[int] = None


class AbateRelatorio(BaseModel):
    id: int
    data_abate: date
    nome_lote: Optional[str] = None
    quantidade: int
    valor_arroba_negociada: Decimal
    valor_total_acerto: Decimal
    id_produtor: int
    produtor_nome: Optional[str] = None
    propriedade_nome: Optional[str] = None
    id_frigorifico: int
    frigorifico_nome: Optional[str] = None
    id_categoria_animal: int
    categoria_nome: Optional[str] = None
    trace: bool = False
    hilton: bool = False
    novilho_precoce: bool = False

    class Config:
        from_attributes = True


class ResumoProdutor(BaseModel):
    id: int
    nome: str
    propriedade: str = "N/A"
    total_abates: int = 0
    total_animais: int = 0
    valor_total: Decimal = Decimal("0")
    media_arroba: Decimal = Decimal("0")
    trace: int = 0
    hilton: int = 0
    novilho_precoce: int = 0


class ResumoFrigorifico(BaseModel):
    id: int
    nome: str
    total_abates: int = 0
    total_animais: int = 0
    valor_total: Decimal = Decimal("0")
