"""
Serviço de abates
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, joinedload

from acaboi.models import Abate
from acaboi.services.cadastros_service import verificar_propriedade_do_produtor
from acaboi.services.gateway import CrudGateway

abates = CrudGateway(
    Abate,
    "abate",
    order_by=[Abate.data_abate.desc(), Abate.id.desc()],
    options=[
        joinedload(Abate.produtor),
        joinedload(Abate.propriedade),
        joinedload(Abate.frigorifico),
        joinedload(Abate.categoria_animal),
    ],
)


def calcular_total(quantidade: Optional[int], valor_arroba: Optional[Decimal]) -> Optional[Decimal]:
    """Total do acerto sugerido: quantidade x valor da arroba negociada."""
    if quantidade is None or valor_arroba is None:
        return None
    total = Decimal(quantidade) * Decimal(str(valor_arroba))
    return total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def listar_abates(
    db: Session,
    id_produtor: Optional[int] = None,
    id_frigorifico: Optional[int] = None,
) -> List[Abate]:
    return abates.listar(db, id_produtor=id_produtor, id_frigorifico=id_frigorifico)


def criar_abate(db: Session, dados: Dict[str, Any]) -> Abate:
    verificar_propriedade_do_produtor(db, dados["id_produtor"], dados.get("id_propriedade"))
    if dados.get("valor_total_acerto") is None:
        dados["valor_total_acerto"] = calcular_total(
            dados["quantidade"], dados["valor_arroba_negociada"]
        )
    return abates.criar(db, dados)


def atualizar_abate(db: Session, abate: Abate, dados: Dict[str, Any]) -> Abate:
    id_produtor = dados.get("id_produtor", abate.id_produtor)
    id_propriedade = dados.get("id_propriedade", abate.id_propriedade)
    if "id_produtor" in dados or "id_propriedade" in dados:
        verificar_propriedade_do_produtor(db, id_produtor, id_propriedade)

    # Total recalculado só quando não informado e quantidade/arroba mudaram
    if dados.get("valor_total_acerto") is None:
        dados.pop("valor_total_acerto", None)
        recalcular = "quantidade" in dados or "valor_arroba_negociada" in dados
    else:
        recalcular = False
    if recalcular:
        dados["valor_total_acerto"] = calcular_total(
            dados.get("quantidade", abate.quantidade),
            dados.get("valor_arroba_negociada", abate.valor_arroba_negociada),
        )
    return abates.atualizar(db, abate, dados)
