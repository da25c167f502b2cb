"""
Gestão de usuários: perfis na tabela ``profiles`` ligados ao Supabase Auth
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from acaboi.models import Profile
from acaboi.schemas.usuario import UsuarioCreate, UsuarioUpdate
from acaboi.services.gateway import CrudGateway
from acaboi.services.supabase_client import (
    SupabaseAdminError,
    create_supabase_user,
    delete_supabase_user,
    update_supabase_user,
)

logger = logging.getLogger(__name__)

profiles = CrudGateway(Profile, "perfil", order_by=[Profile.name])


class UsuarioError(RuntimeError):
    """Falha ao criar ou alterar um usuário."""


def listar_usuarios(db: Session) -> List[Profile]:
    return profiles.listar(db)


def criar_usuario(db: Session, dados: UsuarioCreate, client: Any) -> Profile:
    """Cria o usuário no Supabase Auth e depois o perfil.

    Se o perfil não puder ser gravado, o usuário do Auth é removido.
    """
    if db.query(Profile).filter(Profile.email == dados.email).first():
        raise UsuarioError("Já existe um usuário com este e-mail")

    try:
        auth_user = create_supabase_user(
            email=dados.email,
            password=dados.password,
            user_metadata={"name": dados.name, "type": dados.type.value},
            client=client,
        )
    except SupabaseAdminError as exc:
        raise UsuarioError(f"Erro ao criar usuário: {exc}") from exc

    try:
        return profiles.criar(
            db,
            {
                "id": str(auth_user.id),
                "email": dados.email,
                "name": dados.name,
                "type": dados.type.value,
                "active": True,
            },
        )
    except SQLAlchemyError as exc:
        logger.warning("Perfil não gravado, removendo usuário %s do Auth", auth_user.id)
        try:
            delete_supabase_user(auth_user.id, client=client)
        except SupabaseAdminError:
            logger.exception("Não foi possível remover o usuário %s do Auth", auth_user.id)
        raise UsuarioError("Erro ao criar perfil do usuário") from exc


def atualizar_usuario(db: Session, profile: Profile, dados: UsuarioUpdate, client: Any) -> Profile:
    changes: Dict[str, Any] = dados.model_dump(exclude_unset=True, exclude_none=True)
    if "type" in changes:
        changes["type"] = changes["type"].value

    attributes: Dict[str, Any] = {}
    if "email" in changes:
        attributes["email"] = changes["email"]
    if "name" in changes or "type" in changes:
        attributes["user_metadata"] = {
            "name": changes.get("name", profile.name),
            "type": changes.get("type", profile.type),
        }
    if attributes:
        try:
            update_supabase_user(profile.id, attributes, client=client)
        except SupabaseAdminError as exc:
            raise UsuarioError(f"Erro ao atualizar usuário: {exc}") from exc

    return profiles.atualizar(db, profile, changes)


def alternar_ativo(db: Session, profile: Profile) -> Profile:
    return profiles.atualizar(db, profile, {"active": not profile.active})


def redefinir_senha(profile: Profile, password: str, client: Any) -> None:
    try:
        update_supabase_user(profile.id, {"password": password}, client=client)
    except SupabaseAdminError as exc:
        raise UsuarioError(f"Erro ao redefinir senha: {exc}") from exc
    logger.info("Senha redefinida para o usuário %s", profile.id)


def registrar_login(db: Session, user_id: str) -> Optional[Profile]:
    """Atualiza ``last_sign_in_at``; devolve None quando o perfil não existe."""
    profile = profiles.obter(db, user_id)
    if profile is None:
        return None
    return profiles.atualizar(db, profile, {"last_sign_in_at": datetime.now(timezone.utc)})


def criar_perfil_cadastro(db: Session, user_id: str, email: str, name: str) -> Profile:
    """Perfil criado no auto-cadastro, sempre como técnico."""
    existente = profiles.obter(db, user_id)
    if existente is not None:
        return existente
    return profiles.criar(
        db, {"id": user_id, "email": email, "name": name, "type": "tecnico", "active": True}
    )


def atualizar_perfil(db: Session, profile: Profile, changes: Dict[str, Any]) -> Profile:
    return profiles.atualizar(db, profile, changes)
