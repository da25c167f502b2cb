"""
ACABOI models
"""
from .cadastros import (
    Produtor,
    Propriedade,
    ClassificacaoPropriedade,
    Frigorifico,
    CategoriaAnimal,
)
from .abate import Abate
from .escala import EscalaAbate, Protocolo, Tecnico
from .profile import Profile

__all__ = [
    "Produtor",
    "Propriedade",
    "ClassificacaoPropriedade",
    "Frigorifico",
    "CategoriaAnimal",
    "Abate",
    "EscalaAbate",
    "Protocolo",
    "Tecnico",
    "Profile",
]
