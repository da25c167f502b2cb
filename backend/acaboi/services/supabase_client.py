"""Utility helpers to interact with Supabase Auth"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional

from supabase import Client, create_client
from supabase_auth.errors import AuthApiError

from acaboi.core.config import settings


class SupabaseNotConfigured(RuntimeError):
    """Raised when Supabase credentials are missing."""


class SupabaseAdminError(RuntimeError):
    """Raised when Supabase admin operations fail."""


@lru_cache
def get_supabase_client() -> Client:
    """Instantiate a Supabase client using the service role key."""
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise SupabaseNotConfigured(
            "URL do Supabase ou Service Role Key não configurados. Atualize as variáveis de ambiente."
        )
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)


@lru_cache
def get_supabase_public_client() -> Client:
    """Client com a anon key, usado para login, cadastro e recuperação de senha."""
    if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
        raise SupabaseNotConfigured(
            "URL do Supabase ou Anon Key não configurados. Atualize as variáveis de ambiente."
        )
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)


def create_supabase_user(
    *,
    email: str,
    password: str,
    user_metadata: Optional[Dict[str, Any]] = None,
    client: Optional[Client] = None,
) -> Any:
    """Create a confirmed Supabase Auth user and return it."""
    client = client or get_supabase_client()
    try:
        response = client.auth.admin.create_user(  # type: ignore[arg-type]
            {
                "email": email,
                "password": password,
                "email_confirm": True,
                "user_metadata": user_metadata or {},
            }
        )
    except AuthApiError as exc:
        raise SupabaseAdminError(str(exc)) from exc

    user = response.user
    if user is None:
        raise SupabaseAdminError("A resposta do Supabase não contém um usuário válido.")
    return user


def update_supabase_user(
    auth_user_id,
    attributes: Dict[str, Any],
    client: Optional[Client] = None,
) -> None:
    """Update e-mail, password or metadata of a Supabase Auth user."""
    client = client or get_supabase_client()
    try:
        client.auth.admin.update_user_by_id(str(auth_user_id), attributes)  # type: ignore[arg-type]
    except AuthApiError as exc:
        raise SupabaseAdminError(str(exc)) from exc


def delete_supabase_user(auth_user_id, client: Optional[Client] = None) -> None:
    """Delete a Supabase Auth user by their UUID."""
    client = client or get_supabase_client()
    try:
        client.auth.admin.delete_user(str(auth_user_id))
    except AuthApiError as exc:
        raise SupabaseAdminError(str(exc)) from exc
