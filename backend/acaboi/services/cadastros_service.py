"""
Cadastros: produtores, propriedades, frigoríficos e categorias de animais
"""
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from acaboi.models import CategoriaAnimal, Frigorifico, Produtor, Propriedade
from acaboi.models.cadastros import CLASSIFICACAO_LABELS
from acaboi.services.gateway import CrudGateway, InvariantError

produtores = CrudGateway(
    Produtor,
    "produtor",
    order_by=[Produtor.nome],
    options=[selectinload(Produtor.propriedades)],
)
propriedades = CrudGateway(
    Propriedade,
    "propriedade",
    order_by=[Propriedade.nome],
    options=[joinedload(Propriedade.produtor)],
)
frigorificos = CrudGateway(Frigorifico, "frigorífico", order_by=[Frigorifico.nome])
categorias = CrudGateway(CategoriaAnimal, "categoria de animal", order_by=[CategoriaAnimal.nome])


def propriedades_por_produtor(db: Session, id_produtor: int) -> List[Propriedade]:
    return propriedades.listar(db, id_produtor=id_produtor)


def opcoes_classificacao() -> List[dict]:
    return [{"value": c.value, "label": label} for c, label in CLASSIFICACAO_LABELS.items()]


def verificar_propriedade_do_produtor(
    db: Session, id_produtor: Optional[int], id_propriedade: Optional[int]
) -> None:
    """A propriedade informada precisa pertencer ao produtor informado."""
    if id_propriedade is None:
        return
    propriedade = db.get(Propriedade, id_propriedade)
    if propriedade is None:
        raise InvariantError("Propriedade não encontrada")
    if propriedade.id_produtor != id_produtor:
        raise InvariantError("A propriedade selecionada não pertence ao produtor informado")
