"""
Contexto de autenticação

Criado uma única vez no lifespan da aplicação e guardado em ``app.state``.
Os endpoints recebem o contexto via ``Depends(get_auth_context)``; quem
precisa reagir a login/logout se inscreve com ``subscribe``.
"""
from __future__ import annotations

import asyncio
import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request
from supabase_auth.errors import AuthApiError

logger = logging.getLogger(__name__)


class AuthEvent(str, Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    SIGNED_UP = "SIGNED_UP"
    USER_UPDATED = "USER_UPDATED"
    PASSWORD_RECOVERY = "PASSWORD_RECOVERY"


class AuthError(RuntimeError):
    """Falha de autenticação reportada pelo Supabase Auth."""


class AuthTimeout(AuthError):
    """O Supabase Auth não respondeu dentro do tempo configurado."""


@dataclass
class AuthSession:
    user_id: str
    email: str
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None
    user_metadata: Optional[Dict[str, Any]] = None


Listener = Callable[[AuthEvent, Dict[str, Any]], None]


def _session_from_response(response: Any) -> AuthSession:
    user = getattr(response, "user", None)
    if user is None:
        raise AuthError("Resposta do Supabase sem usuário")
    session = getattr(response, "session", None)
    return AuthSession(
        user_id=str(user.id),
        email=user.email,
        access_token=getattr(session, "access_token", None),
        refresh_token=getattr(session, "refresh_token", None),
        expires_at=getattr(session, "expires_at", None),
        user_metadata=getattr(user, "user_metadata", None) or {},
    )


class AuthContext:
    """Operações de autenticação com timeout e notificação de eventos."""

    def __init__(
        self,
        public_client_factory: Callable[[], Any],
        admin_client_factory: Callable[[], Any],
        timeout: float = 5.0,
    ):
        self._public_client_factory = public_client_factory
        self._admin_client_factory = admin_client_factory
        self.timeout = timeout
        self._listeners: List[Listener] = []
        self._closed = False

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registra um listener e devolve a função que cancela a inscrição."""
        self._listeners.append(listener)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, event: AuthEvent, payload: Dict[str, Any]) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, payload)
            except Exception:
                logger.exception("Listener de autenticação falhou em %s", event.value)

    async def _call(self, func: Callable[..., Any], *args, **kwargs) -> Any:
        if self._closed:
            raise AuthError("Contexto de autenticação encerrado")
        try:
            # O executor deixa a chamada lenta para trás quando o tempo esgota
            loop = asyncio.get_running_loop()
            call = functools.partial(func, *args, **kwargs)
            return await asyncio.wait_for(loop.run_in_executor(None, call), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise AuthTimeout(
                "Tempo esgotado ao contatar o serviço de autenticação. Tente novamente."
            ) from exc
        except AuthApiError as exc:
            raise AuthError(str(exc)) from exc

    async def sign_in(self, email: str, password: str) -> AuthSession:
        client = self._public_client_factory()
        response = await self._call(
            client.auth.sign_in_with_password, {"email": email, "password": password}
        )
        session = _session_from_response(response)
        logger.info("Login efetuado: %s", email)
        self._notify(AuthEvent.SIGNED_IN, {"user_id": session.user_id, "email": email})
        return session

    async def sign_up(self, email: str, password: str, name: str) -> AuthSession:
        client = self._public_client_factory()
        response = await self._call(
            client.auth.sign_up,
            {
                "email": email,
                "password": password,
                "options": {"data": {"name": name, "type": "tecnico"}},
            },
        )
        session = _session_from_response(response)
        self._notify(AuthEvent.SIGNED_UP, {"user_id": session.user_id, "email": email})
        return session

    async def sign_out(self, user_id: str, access_token: str) -> None:
        client = self._admin_client_factory()
        await self._call(client.auth.admin.sign_out, access_token)
        self._notify(AuthEvent.SIGNED_OUT, {"user_id": user_id})

    async def reset_password(self, email: str, redirect_to: Optional[str] = None) -> None:
        client = self._public_client_factory()
        options = {"redirect_to": redirect_to} if redirect_to else {}
        await self._call(client.auth.reset_password_for_email, email, options)
        self._notify(AuthEvent.PASSWORD_RECOVERY, {"email": email})

    async def get_user(self, access_token: str) -> AuthSession:
        """Valida o token no Supabase Auth e devolve o usuário dono dele."""
        client = self._public_client_factory()
        response = await self._call(client.auth.get_user, access_token)
        session = _session_from_response(response)
        session.access_token = access_token
        return session

    def user_updated(self, user_id: str, changes: Dict[str, Any]) -> None:
        self._notify(AuthEvent.USER_UPDATED, {"user_id": user_id, "changes": changes})

    def close(self) -> None:
        self._listeners.clear()
        self._closed = True


def log_auth_event(event: AuthEvent, payload: Dict[str, Any]) -> None:
    logger.info("Evento de autenticação %s: %s", event.value, payload.get("user_id") or payload.get("email"))


def get_auth_context(request: Request) -> AuthContext:
    """Dependency que devolve o contexto criado no lifespan."""
    return request.app.state.auth_context
