"""
Gestão de usuários endpoints (somente administradores)
"""
from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from acaboi.api.auth import CurrentUser, require_permission
from acaboi.api.v1.endpoints.common import get_or_404
from acaboi.core.auth_context import AuthContext, get_auth_context
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.usuario import SenhaReset, UsuarioCreate, UsuarioResponse, UsuarioUpdate
from acaboi.services.supabase_client import SupabaseNotConfigured, get_supabase_client
from acaboi.services.usuarios_service import (
    UsuarioError,
    alternar_ativo,
    atualizar_usuario,
    criar_usuario,
    listar_usuarios,
    profiles,
    redefinir_senha,
)

router = APIRouter(prefix="/usuarios", tags=["usuarios"])

admin_only = require_permission(Permission.ADMIN_USERS)


def get_admin_client() -> Any:
    """Supabase client with the service role key."""
    try:
        return get_supabase_client()
    except SupabaseNotConfigured as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.get("", response_model=List[UsuarioResponse])
async def get_usuarios(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(admin_only),
):
    """Get all users ordered by name"""
    return listar_usuarios(db)


@router.get("/{user_id}", response_model=UsuarioResponse)
async def get_usuario(
    user_id: str,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(admin_only),
):
    """Get a specific user"""
    return get_or_404(profiles, db, user_id)


@router.post("", response_model=UsuarioResponse, status_code=status.HTTP_201_CREATED)
async def create_usuario(
    dados: UsuarioCreate,
    db: Session = Depends(get_db),
    client: Any = Depends(get_admin_client),
    user: CurrentUser = Depends(admin_only),
):
    """Create the auth user and its profile"""
    try:
        return criar_usuario(db, dados, client)
    except UsuarioError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.put("/{user_id}", response_model=UsuarioResponse)
async def update_usuario(
    user_id: str,
    dados: UsuarioUpdate,
    db: Session = Depends(get_db),
    client: Any = Depends(get_admin_client),
    auth: AuthContext = Depends(get_auth_context),
    user: CurrentUser = Depends(admin_only),
):
    """Update name, e-mail, role or status of a user"""
    profile = get_or_404(profiles, db, user_id)
    try:
        updated = atualizar_usuario(db, profile, dados, client)
    except UsuarioError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    auth.user_updated(user_id, dados.model_dump(exclude_unset=True))
    return updated


@router.post("/{user_id}/toggle-active", response_model=UsuarioResponse)
async def toggle_usuario_ativo(
    user_id: str,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(admin_only),
):
    """Activate or deactivate a user"""
    profile = get_or_404(profiles, db, user_id)
    if profile.id == user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Você não pode desativar o próprio usuário",
        )
    return alternar_ativo(db, profile)


@router.post("/{user_id}/reset-password", status_code=status.HTTP_204_NO_CONTENT)
async def reset_usuario_senha(
    user_id: str,
    dados: SenhaReset,
    db: Session = Depends(get_db),
    client: Any = Depends(get_admin_client),
    user: CurrentUser = Depends(admin_only),
):
    """Set a new password for a user"""
    profile = get_or_404(profiles, db, user_id)
    try:
        redefinir_senha(profile, dados.password, client)
    except UsuarioError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return None
