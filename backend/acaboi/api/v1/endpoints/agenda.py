"""
Agenda de abates endpoints

A rota ``/agenda/publica`` não exige autenticação: é a página
compartilhável da semana.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from acaboi.api.auth import CurrentUser, require_permission
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.agenda import (
    AgendaRow,
    CompartilharResponse,
    GradeSemana,
    PublicAgendaItem,
    SemanaInfo,
    SemanasResponse,
)
from acaboi.services.agenda.agenda_service import (
    linhas_da_janela,
    listar_agenda,
    para_publico,
    url_compartilhamento,
)
from acaboi.services.agenda.calendario import (
    agrupar_por_dia,
    intervalo_semana,
    semana_atual,
    semanas_no_ano,
    total_semana,
)

router = APIRouter(prefix="/agenda", tags=["agenda"])

can_access = require_permission(Permission.AGENDA)


def _resolve_semana(semana: Optional[int], ano: Optional[int]) -> tuple:
    atual_semana, atual_ano = semana_atual()
    semana = semana or atual_semana
    ano = ano or atual_ano
    if semana > semanas_no_ano(ano):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"O ano {ano} tem apenas {semanas_no_ano(ano)} semanas",
        )
    return semana, ano


def _grade(linhas: list, semana: int, ano: int) -> dict:
    intervalo = intervalo_semana(semana, ano)
    dias = agrupar_por_dia(linhas, semana, ano)
    return {
        "semana": semana,
        "ano": ano,
        "inicio": intervalo.inicio,
        "fim": intervalo.fim,
        "dias": [
            {
                "data": dia.data,
                "dia_semana": dia.dia_semana,
                "label": dia.label,
                "total": dia.total,
                "itens": dia.itens,
            }
            for dia in dias
        ],
        "total": total_semana(dias),
    }


@router.get("", response_model=List[AgendaRow])
async def get_agenda(
    semana: Optional[int] = Query(None, ge=1, le=53),
    ano: Optional[int] = Query(None, ge=2000),
    dia_semana: Optional[List[str]] = Query(None, description="Dias em inglês, ex.: Monday"),
    id_tecnico: Optional[int] = None,
    id_frigorifico: Optional[int] = None,
    id_produtor: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Filtered agenda rows ordered by slaughter date"""
    return listar_agenda(
        db,
        semana=semana,
        ano=ano,
        dias_semana=dia_semana,
        id_tecnico=id_tecnico,
        id_frigorifico=id_frigorifico,
        id_produtor=id_produtor,
    )


@router.get("/grade", response_model=GradeSemana[AgendaRow])
async def get_grade(
    semana: Optional[int] = Query(None, ge=1, le=53),
    ano: Optional[int] = Query(None, ge=2000),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Monday to Saturday grid with the head count of each day"""
    semana, ano = _resolve_semana(semana, ano)
    return _grade(linhas_da_janela(db, semana, ano), semana, ano)


@router.get("/semanas", response_model=SemanasResponse)
async def get_semanas(
    ano: Optional[int] = Query(None, ge=2000),
    user: CurrentUser = Depends(can_access),
):
    """Weeks of a year for the week selector"""
    atual_semana, atual_ano = semana_atual()
    ano = ano or atual_ano
    semanas = []
    for numero in range(1, semanas_no_ano(ano) + 1):
        intervalo = intervalo_semana(numero, ano)
        semanas.append(SemanaInfo(semana=numero, inicio=intervalo.inicio, fim=intervalo.fim))
    return SemanasResponse(ano=ano, semana_atual=atual_semana, ano_atual=atual_ano, semanas=semanas)


@router.get("/compartilhar", response_model=CompartilharResponse)
async def get_link_compartilhamento(
    semana: Optional[int] = Query(None, ge=1, le=53),
    ano: Optional[int] = Query(None, ge=2000),
    user: CurrentUser = Depends(can_access),
):
    """Public URL of the week view"""
    semana, ano = _resolve_semana(semana, ano)
    return CompartilharResponse(semana=semana, ano=ano, url=url_compartilhamento(semana, ano))


@router.get("/publica", response_model=GradeSemana[PublicAgendaItem])
async def get_agenda_publica(
    semana: Optional[int] = Query(None, ge=1, le=53),
    ano: Optional[int] = Query(None, ge=2000),
    db: Session = Depends(get_db),
):
    """Read-only week view, no authentication required"""
    semana, ano = _resolve_semana(semana, ano)
    linhas = [para_publico(linha) for linha in linhas_da_janela(db, semana, ano)]
    return _grade(linhas, semana, ano)
