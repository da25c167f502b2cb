"""
Agregação dos relatórios de abates

Os resumos são calculados em uma única passada sobre os abates filtrados,
agrupando por produtor ou por frigorífico.
"""
from collections import OrderedDict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from acaboi.core.config import settings
from acaboi.models import Abate, Produtor
from acaboi.schemas.relatorios import (
    AbateRelatorio,
    FiltrosRelatorio,
    ResumoFrigorifico,
    ResumoProdutor,
)

ZERO = Decimal("0")


def buscar_abates(db: Session, filtros: FiltrosRelatorio) -> List[Abate]:
    query = db.query(Abate).options(
        joinedload(Abate.produtor).selectinload(Produtor.propriedades),
        joinedload(Abate.propriedade),
        joinedload(Abate.frigorifico),
        joinedload(Abate.categoria_animal),
    )
    if filtros.data_inicio:
        query = query.filter(Abate.data_abate >= filtros.data_inicio)
    if filtros.data_fim:
        query = query.filter(Abate.data_abate <= filtros.data_fim)
    if filtros.id_produtor:
        query = query.filter(Abate.id_produtor == filtros.id_produtor)
    if filtros.id_frigorifico:
        query = query.filter(Abate.id_frigorifico == filtros.id_frigorifico)
    if filtros.id_categoria:
        query = query.filter(Abate.id_categoria_animal == filtros.id_categoria)
    return query.order_by(Abate.data_abate.desc(), Abate.id.desc()).all()


def linhas_abates(abates: Iterable[Abate]) -> List[AbateRelatorio]:
    return [AbateRelatorio.model_validate(abate) for abate in abates]


def _decimal(value) -> Decimal:
    if value is None:
        return ZERO
    return value if isinstance(value, Decimal) else Decimal(str(value))


def media_arroba(valor_total: Decimal, total_animais: int, arrobas_por_cabeca: Optional[int] = None) -> Decimal:
    """Valor médio por arroba: valor total / (animais x arrobas por cabeça)."""
    fator = arrobas_por_cabeca or settings.ARROBAS_POR_CABECA
    if not total_animais:
        return ZERO
    media = valor_total / (Decimal(total_animais) * fator)
    return media.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _nome_propriedade(abate: Abate) -> str:
    produtor = abate.produtor
    if produtor is not None and produtor.propriedades:
        return produtor.propriedades[0].nome
    return "N/A"


def resumo_por_produtor(
    abates: Iterable[Abate], arrobas_por_cabeca: Optional[int] = None
) -> List[ResumoProdutor]:
    grupos: Dict[int, ResumoProdutor] = OrderedDict()
    for abate in abates:
        resumo = grupos.get(abate.id_produtor)
        if resumo is None:
            resumo = ResumoProdutor(
                id=abate.id_produtor,
                nome=abate.produtor_nome or f"Produtor {abate.id_produtor}",
                propriedade=_nome_propriedade(abate),
            )
            grupos[abate.id_produtor] = resumo
        resumo.total_abates += 1
        resumo.total_animais += abate.quantidade or 0
        resumo.valor_total += _decimal(abate.valor_total_acerto)
        resumo.trace += 1 if abate.trace else 0
        resumo.hilton += 1 if abate.hilton else 0
        resumo.novilho_precoce += 1 if abate.novilho_precoce else 0

    for resumo in grupos.values():
        resumo.media_arroba = media_arroba(resumo.valor_total, resumo.total_animais, arrobas_por_cabeca)
    return list(grupos.values())


def resumo_por_frigorifico(abates: Iterable[Abate]) -> List[ResumoFrigorifico]:
    grupos: Dict[int, ResumoFrigorifico] = OrderedDict()
    for abate in abates:
        resumo = grupos.get(abate.id_frigorifico)
        if resumo is None:
            resumo = ResumoFrigorifico(
                id=abate.id_frigorifico,
                nome=abate.frigorifico_nome or f"Frigorífico {abate.id_frigorifico}",
            )
            grupos[abate.id_frigorifico] = resumo
        resumo.total_abates += 1
        resumo.total_animais += abate.quantidade or 0
        resumo.valor_total += _decimal(abate.valor_total_acerto)
    return list(grupos.values())
