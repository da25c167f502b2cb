"""
Consulta da agenda de abates

As linhas da agenda são montadas a partir da escala, com nomes resolvidos
e semana/ano/dia da semana calculados pelo módulo ``calendario``. A view
``view_agenda_abates`` criada na migration expõe as mesmas colunas para
leitores externos.
"""
import logging
from typing import List, Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from acaboi.core.config import settings
from acaboi.models import EscalaAbate
from acaboi.schemas.agenda import AgendaRow, PublicAgendaItem
from acaboi.services.agenda.calendario import (
    cor_tecnico,
    intervalo_semana,
    nome_dia,
    semana_do_dia,
)
from acaboi.services.escala_service import escala

logger = logging.getLogger(__name__)


def _empresa(tecnico) -> Optional[str]:
    return tecnico.empresa if tecnico else None


def montar_linha(item: EscalaAbate) -> AgendaRow:
    semana, ano = semana_do_dia(item.data_abate)
    return AgendaRow(
        id=item.id,
        tipo_servico=item.tipo_servico,
        data_embarque=item.data_embarque,
        data_abate=item.data_abate,
        quantidade=item.quantidade,
        categoria=item.categoria,
        municipio=item.municipio,
        tipo_negociacao=item.tipo_negociacao,
        forma_pagamento=item.forma_pagamento,
        preco_arroba=item.preco_arroba,
        preco_cabeca=item.preco_cabeca,
        observacoes=item.observacoes,
        id_produtor=item.id_produtor,
        produtor_nome=item.produtor_nome,
        id_propriedade=item.id_propriedade,
        propriedade_nome=item.propriedade_nome,
        id_frigorifico=item.id_frigorifico,
        frigorifico_nome=item.frigorifico_nome,
        protocolo_nome=item.protocolo_nome,
        id_tecnico_negociador=item.id_tecnico_negociador,
        tecnico_negociador_nome=item.tecnico_negociador_nome,
        tecnico_negociador_empresa=_empresa(item.tecnico_negociador),
        id_tecnico_responsavel=item.id_tecnico_responsavel,
        tecnico_responsavel_nome=item.tecnico_responsavel_nome,
        tecnico_responsavel_empresa=_empresa(item.tecnico_responsavel),
        cor_tecnico=cor_tecnico(item.tecnico_responsavel_nome),
        semana=semana,
        ano=ano,
        dia_semana=nome_dia(item.data_abate),
    )


def listar_agenda(
    db: Session,
    semana: Optional[int] = None,
    ano: Optional[int] = None,
    dias_semana: Optional[Sequence[str]] = None,
    id_tecnico: Optional[int] = None,
    id_frigorifico: Optional[int] = None,
    id_produtor: Optional[int] = None,
) -> List[AgendaRow]:
    """Linhas da agenda filtradas e ordenadas pela data de abate.

    Com semana e ano, a janela vai de segunda a domingo da semana.
    """
    query = escala.query(db)
    if semana is not None and ano is not None:
        intervalo = intervalo_semana(semana, ano)
        query = query.filter(
            EscalaAbate.data_abate >= intervalo.inicio,
            EscalaAbate.data_abate <= intervalo.domingo,
        )
    if id_tecnico is not None:
        query = query.filter(
            or_(
                EscalaAbate.id_tecnico_negociador == id_tecnico,
                EscalaAbate.id_tecnico_responsavel == id_tecnico,
            )
        )
    if id_frigorifico is not None:
        query = query.filter(EscalaAbate.id_frigorifico == id_frigorifico)
    if id_produtor is not None:
        query = query.filter(EscalaAbate.id_produtor == id_produtor)

    linhas = [montar_linha(item) for item in query.order_by(EscalaAbate.data_abate, EscalaAbate.id).all()]
    if semana is not None and ano is None:
        linhas = [linha for linha in linhas if linha.semana == semana]
    elif ano is not None and semana is None:
        linhas = [linha for linha in linhas if linha.ano == ano]
    if dias_semana:
        wanted = {dia.strip().capitalize() for dia in dias_semana}
        linhas = [linha for linha in linhas if linha.dia_semana in wanted]
    logger.debug("Agenda filtrada: %d linhas", len(linhas))
    return linhas


def linhas_da_janela(db: Session, semana: int, ano: int) -> List[AgendaRow]:
    """Linhas de segunda a sábado, usadas pela grade e pela página pública."""
    intervalo = intervalo_semana(semana, ano)
    query = escala.query(db).filter(
        EscalaAbate.data_abate >= intervalo.inicio,
        EscalaAbate.data_abate <= intervalo.fim,
    )
    return [montar_linha(item) for item in query.order_by(EscalaAbate.data_abate, EscalaAbate.id).all()]


def para_publico(linha: AgendaRow) -> PublicAgendaItem:
    return PublicAgendaItem(
        id=linha.id,
        data_abate=linha.data_abate,
        produtor_nome=linha.produtor_nome or "Sem produtor",
        frigorifico_nome=linha.frigorifico_nome or "Sem frigorífico",
        quantidade=linha.quantidade,
        categoria=linha.categoria,
        tecnico_responsavel_nome=linha.tecnico_responsavel_nome or "Sem técnico",
        cor_tecnico=linha.cor_tecnico,
    )


def url_compartilhamento(semana: int, ano: int) -> str:
    return f"{settings.PUBLIC_APP_URL.rstrip('/')}/agenda_view?semana={semana}&ano={ano}"
