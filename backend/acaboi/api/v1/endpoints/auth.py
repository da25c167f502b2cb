"""
Autenticação endpoints (login, logout, cadastro, perfil)
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from acaboi.api.auth import CurrentUser, get_current_user
from acaboi.core.auth_context import AuthContext, AuthError, AuthTimeout, get_auth_context
from acaboi.core.database import get_db
from acaboi.schemas.auth import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    PerfilUpdate,
    RegisterRequest,
    ResetPasswordRequest,
)
from acaboi.services.usuarios_service import (
    atualizar_perfil,
    criar_perfil_cadastro,
    profiles,
    registrar_login,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_http_error(exc: AuthError) -> HTTPException:
    if isinstance(exc, AuthTimeout):
        return HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(exc))
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))


def _user_response(user: CurrentUser) -> CurrentUserResponse:
    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        type=user.type,
        active=user.active,
        permissions=user.permissions,
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
):
    """Sign in with e-mail and password; the role comes from the profile"""
    try:
        session = await auth.sign_in(credentials.email, credentials.password)
    except AuthError as exc:
        raise _auth_http_error(exc) from exc

    profile = registrar_login(db, session.user_id)
    if profile is None:
        user = CurrentUser(id=session.user_id, email=session.email, name=session.email, type="tecnico")
    elif not profile.active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Usuário inativo")
    else:
        user = CurrentUser.from_profile(profile)

    return LoginResponse(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=session.expires_at,
        user=_user_response(user),
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    user: CurrentUser = Depends(get_current_user),
    auth: AuthContext = Depends(get_auth_context),
):
    """Revoke the current session"""
    try:
        await auth.sign_out(user.id, user.access_token)
    except AuthError as exc:
        raise _auth_http_error(exc) from exc
    return None


@router.post("/register", response_model=CurrentUserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    dados: RegisterRequest,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
):
    """Self sign-up; new accounts are always tecnico"""
    try:
        session = await auth.sign_up(dados.email, dados.password, dados.name)
    except AuthTimeout as exc:
        raise _auth_http_error(exc) from exc
    except AuthError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    profile = criar_perfil_cadastro(db, session.user_id, dados.email, dados.name)
    return _user_response(CurrentUser.from_profile(profile))


@router.post("/reset-password", status_code=status.HTTP_202_ACCEPTED)
async def reset_password(
    dados: ResetPasswordRequest,
    auth: AuthContext = Depends(get_auth_context),
):
    """Send the password recovery e-mail"""
    try:
        await auth.reset_password(dados.email, dados.redirect_to)
    except AuthTimeout as exc:
        raise _auth_http_error(exc) from exc
    except AuthError as exc:
        # Não revela se o e-mail existe
        logger.warning("Falha ao solicitar recuperação de senha: %s", exc)
    return {"message": "Se o e-mail estiver cadastrado, você receberá as instruções de recuperação."}


@router.get("/me", response_model=CurrentUserResponse)
async def me(user: CurrentUser = Depends(get_current_user)):
    """Current user with role and permissions"""
    return _user_response(user)


@router.put("/perfil", response_model=CurrentUserResponse)
async def update_perfil(
    dados: PerfilUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
    auth: AuthContext = Depends(get_auth_context),
):
    """Update the name and phone of the logged user"""
    profile = profiles.obter(db, user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Perfil não encontrado")
    changes = dados.model_dump(exclude_unset=True)
    profile = atualizar_perfil(db, profile, changes)
    auth.user_updated(user.id, changes)
    return _user_response(CurrentUser.from_profile(profile))
