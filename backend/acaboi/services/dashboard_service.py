"""
Resumo do dashboard: totais, média ponderada da arroba e séries por
categoria e por mês
"""
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List

from sqlalchemy.orm import Session, joinedload

from acaboi.models import Abate
from acaboi.schemas.dashboard import (
    AtividadeRecente,
    Bonificacoes,
    CategoriaResumo,
    DashboardResumo,
    MesResumo,
)

ZERO = Decimal("0")


def resumir_abates(abates: Iterable[Abate]) -> DashboardResumo:
    total_abates = 0
    total_animais = 0
    valor_total = ZERO
    soma_arroba_ponderada = ZERO
    por_categoria = defaultdict(int)
    por_mes = defaultdict(lambda: [0, ZERO])
    bonificacoes = Bonificacoes()

    for abate in abates:
        quantidade = abate.quantidade or 0
        total_abates += 1
        total_animais += quantidade
        valor_total += abate.valor_total_acerto or ZERO
        soma_arroba_ponderada += quantidade * (abate.valor_arroba_negociada or ZERO)

        por_categoria[abate.categoria_nome or "Sem categoria"] += quantidade

        mes = por_mes[abate.data_abate.strftime("%Y-%m")]
        mes[0] += quantidade
        mes[1] += abate.valor_total_acerto or ZERO

        bonificacoes.trace += 1 if abate.trace else 0
        bonificacoes.hilton += 1 if abate.hilton else 0
        bonificacoes.novilho_precoce += 1 if abate.novilho_precoce else 0

    media = ZERO
    if total_animais:
        media = (soma_arroba_ponderada / total_animais).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    return DashboardResumo(
        total_abates=total_abates,
        total_animais=total_animais,
        valor_total_acerto=valor_total,
        media_arroba_negociada=media,
        abates_por_categoria=[
            CategoriaResumo(categoria=nome, quantidade=qtd)
            for nome, qtd in sorted(por_categoria.items())
        ],
        abates_por_mes=[
            MesResumo(mes=mes, quantidade=valores[0], valor=valores[1])
            for mes, valores in sorted(por_mes.items())
        ],
        bonificacoes=bonificacoes,
    )


def resumo_dashboard(db: Session) -> DashboardResumo:
    abates = db.query(Abate).options(joinedload(Abate.categoria_animal)).all()
    return resumir_abates(abates)


def atividades_recentes(db: Session, limite: int = 5) -> List[AtividadeRecente]:
    abates = (
        db.query(Abate)
        .options(joinedload(Abate.produtor), joinedload(Abate.frigorifico))
        .order_by(Abate.created_at.desc(), Abate.id.desc())
        .limit(limite)
        .all()
    )
    return [
        AtividadeRecente(
            id=abate.id,
            data_abate=abate.data_abate,
            produtor_nome=abate.produtor_nome or "-",
            frigorifico_nome=abate.frigorifico_nome or "-",
            quantidade=abate.quantidade,
            valor_total_acerto=abate.valor_total_acerto,
        )
        for abate in abates
    ]
