"""
Cadastros models
"""
from .produtor import Produtor
from .propriedade import Propriedade, ClassificacaoPropriedade, CLASSIFICACAO_LABELS
from .frigorifico import Frigorifico
from .categoria_animal import CategoriaAnimal

__all__ = [
    "Produtor",
    "Propriedade",
    "ClassificacaoPropriedade",
    "CLASSIFICACAO_LABELS",
    "Frigorifico",
    "CategoriaAnimal",
]
