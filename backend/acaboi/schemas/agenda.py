"""
Agenda schemas
"""
from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar
from datetime import date
from decimal import Decimal

ItemT = TypeVar("ItemT")


class AgendaRow(BaseModel):
    id: int
    tipo_servico: str
    data_embarque: Optional[date] = None
    data_abate: date
    quantidade: int
    categoria: str
    municipio: Optional[str] = None
    tipo_negociacao: Optional[str] = None
    forma_pagamento: Optional[str] = None
    preco_arroba: Optional[Decimal] = None
    preco_cabeca: Optional[Decimal] = None
    observacoes: Optional[str] = None
    id_produtor: int
    produtor_nome: Optional[str] = None
    id_propriedade: Optional[int] = None
    propriedade_nome: Optional[str] = None
    id_frigorifico: int
    frigorifico_nome: Optional[str] = None
    protocolo_nome: Optional[str] = None
    id_tecnico_negociador: Optional[int] = None
    tecnico_negociador_nome: Optional[str] = None
    tecnico_negociador_empresa: Optional[str] = None
    id_tecnico_responsavel: Optional[int] = None
    tecnico_responsavel_nome: Optional[str] = None
    tecnico_responsavel_empresa: Optional[str] = None
    cor_tecnico: str
    semana: int
    ano: int
    dia_semana: str


class PublicAgendaItem(BaseModel):
    id: int
    data_abate: date
    produtor_nome: str = "Sem produtor"
    frigorifico_nome: str = "Sem frigorífico"
    quantidade: int
    categoria: Optional[str] = None
    tecnico_responsavel_nome: str = "Sem técnico"
    cor_tecnico: str


class DiaAgendaSchema(BaseModel, Generic[ItemT]):
    data: date
    dia_semana: str
    label: str
    total: int
    itens: List[ItemT]


class GradeSemana(BaseModel, Generic[ItemT]):
    semana: int
    ano: int
    inicio: date
    fim: date
    dias: List[DiaAgendaSchema[ItemT]]
    total: int


class SemanaInfo(BaseModel):
    semana: int
    inicio: date
    fim: date


class SemanasResponse(BaseModel):
    ano: int
    semana_atual: int
    ano_atual: int
    semanas: List[SemanaInfo]


class CompartilharResponse(BaseModel):
    semana: int
    ano: int
    url: str
