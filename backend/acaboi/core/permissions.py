"""
Papéis e permissões do ACABOI

admin tem acesso a tudo; tecnico apenas à escala e à agenda.
"""
from enum import Enum
from typing import Dict, FrozenSet, Optional


class UserType(str, Enum):
    ADMIN = "admin"
    TECNICO = "tecnico"


class Permission(str, Enum):
    DASHBOARD = "dashboard"
    ESCALA = "escala"
    AGENDA = "agenda"
    PRODUTORES = "produtores"
    PROPRIEDADES = "propriedades"
    FRIGORIFICOS = "frigorificos"
    ABATES = "abates"
    IMPORTAR = "importar"
    RELATORIOS = "relatorios"
    ADMIN_USERS = "admin_users"


ACCESS_DENIED_TITLE = "Acesso Restrito"
ACCESS_DENIED_MESSAGE = "Você não tem permissão para acessar esta funcionalidade."

ALL_PERMISSIONS: FrozenSet[Permission] = frozenset(Permission)

ROLE_PERMISSIONS: Dict[UserType, FrozenSet[Permission]] = {
    UserType.ADMIN: ALL_PERMISSIONS,
    UserType.TECNICO: frozenset({Permission.ESCALA, Permission.AGENDA}),
}


def resolve_user_type(value: Optional[str]) -> UserType:
    """Converte o tipo gravado no perfil; valores desconhecidos viram tecnico."""
    try:
        return UserType(value)
    except ValueError:
        return UserType.TECNICO


def has_permission(user_type: Optional[str], permission: Permission) -> bool:
    return permission in ROLE_PERMISSIONS[resolve_user_type(user_type)]


def permissions_for(user_type: Optional[str]) -> list:
    return sorted(p.value for p in ROLE_PERMISSIONS[resolve_user_type(user_type)])
