"""Authentication helpers for Supabase JWT tokens and role checks"""
from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from acaboi.core.auth_context import AuthContext, AuthError, AuthTimeout, get_auth_context
from acaboi.core.database import get_db
from acaboi.core.permissions import (
    ACCESS_DENIED_MESSAGE,
    ACCESS_DENIED_TITLE,
    Permission,
    has_permission,
    permissions_for,
    resolve_user_type,
)
from acaboi.models import Profile

logger = logging.getLogger(__name__)

ACCESS_DENIED_DETAIL = f"{ACCESS_DENIED_TITLE}. {ACCESS_DENIED_MESSAGE}"


@dataclass
class CurrentUser:
    id: str
    email: str
    name: str
    type: str
    active: bool = True
    access_token: Optional[str] = None

    @property
    def permissions(self) -> List[str]:
        return permissions_for(self.type)

    def can(self, permission: Permission) -> bool:
        return has_permission(self.type, permission)

    @classmethod
    def from_profile(cls, profile: Profile, access_token: Optional[str] = None) -> "CurrentUser":
        return cls(
            id=profile.id,
            email=profile.email,
            name=profile.name,
            type=resolve_user_type(profile.type).value,
            active=profile.active,
            access_token=access_token,
        )


def _decode_jwt_no_verify(token: str) -> Dict[str, Any]:
    """Decode a JWT payload without verifying the signature.

    Only a cheap pre-check; the token itself is validated by Supabase Auth
    in `get_current_user`.
    """
    try:
        payload_segment = token.split(".")[1]
    except IndexError as exc:
        raise ValueError("Token malformado") from exc

    # base64url sem padding
    missing_padding = (-len(payload_segment)) % 4
    if missing_padding:
        payload_segment += "=" * missing_padding

    try:
        payload_bytes = base64.urlsafe_b64decode(payload_segment.encode("utf-8"))
        return json.loads(payload_bytes.decode("utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ValueError("Não foi possível decodificar o token") from exc


def get_bearer_token(
    authorization: Optional[str] = Header(None, alias="Authorization")
) -> str:
    """Extract the Bearer token from the Authorization header."""
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token ausente")

    prefix = "Bearer "
    if not authorization.startswith(prefix):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Formato de Authorization inválido")

    token = authorization[len(prefix):].strip()
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token ausente")
    return token


async def get_current_user(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> CurrentUser:
    """Resolve the logged user and role.

    The token is checked by Supabase Auth before the `sub` claim is trusted;
    the role comes from the profiles table.
    """
    try:
        payload = _decode_jwt_no_verify(token)
        user_id = payload.get("sub")
        if not user_id:
            raise ValueError("Claim 'sub' ausente no token")
    except (ValueError, TypeError) as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido") from exc

    try:
        verified = await auth.get_user(token)
    except AuthTimeout as exc:
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(exc)) from exc
    except AuthError as exc:
        logger.warning("Token recusado pelo Supabase Auth para o usuário %s", user_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido ou expirado") from exc
    if verified.user_id != str(user_id):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido")

    profile = db.get(Profile, verified.user_id)
    if profile is None:
        # Usuário do Auth sem perfil: acesso mínimo de técnico
        email = verified.email or ""
        return CurrentUser(id=verified.user_id, email=email, name=email, type="tecnico", access_token=token)

    if not profile.active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Usuário inativo")
    return CurrentUser.from_profile(profile, access_token=token)


def require_permission(permission: Permission):
    """Dependency factory: the current user must hold `permission`."""

    def _dependency(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not user.can(permission):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCESS_DENIED_DETAIL)
        return user

    return _dependency
