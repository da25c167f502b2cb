import asyncio
import time

import pytest

from acaboi.core.auth_context import AuthContext, AuthError, AuthEvent, AuthTimeout
from acaboi.models import Profile


def test_login_returns_session_and_role(client, db, fake_supabase):
    user_id = fake_supabase.auth.add_account("joao@acaboi.com.br", "segredo1")
    db.add(Profile(id=user_id, email="joao@acaboi.com.br", name="JOÃO PEDRO", type="admin"))
    db.commit()

    res = client.post("/api/v1/auth/login", json={"email": "joao@acaboi.com.br", "password": "segredo1"})
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["access_token"] == f"token-{user_id}"
    assert body["user"]["type"] == "admin"

    db.expire_all()
    assert db.get(Profile, user_id).last_sign_in_at is not None


def test_login_with_wrong_password(client, fake_supabase):
    fake_supabase.auth.add_account("joao@acaboi.com.br", "segredo1")
    res = client.post("/api/v1/auth/login", json={"email": "joao@acaboi.com.br", "password": "errada"})
    assert res.status_code == 401


def test_register_creates_tecnico_profile(client, db):
    payload = {
        "name": "Luana",
        "email": "luana@acaboi.com.br",
        "password": "segredo1",
        "confirm_password": "segredo1",
    }
    res = client.post("/api/v1/auth/register", json=payload)
    assert res.status_code == 201, res.text
    assert res.json()["type"] == "tecnico"
    assert db.query(Profile).filter(Profile.email == "luana@acaboi.com.br").one().type == "tecnico"


def test_reset_password_does_not_reveal_unknown_email(client, fake_supabase):
    res = client.post("/api/v1/auth/reset-password", json={"email": "quem@acaboi.com.br"})
    assert res.status_code == 202
    assert fake_supabase.auth.recoveries == [("quem@acaboi.com.br", {})]


def test_update_own_profile(admin_client, db):
    db.add(Profile(id="admin-1", email="admin@acaboi.com.br", name="Admin", type="admin"))
    db.commit()
    res = admin_client.put("/api/v1/auth/perfil", json={"name": "Administrador", "telefone": "67 99999-0000"})
    assert res.status_code == 200, res.text
    assert res.json()["name"] == "Administrador"


def test_logout_revokes_token(client, db, fake_supabase):
    token = fake_supabase.auth.issue_token("u-9")
    res = client.post("/api/v1/auth/logout", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 204
    assert fake_supabase.auth.admin.signed_out == [token]


# -----------------------------
# AuthContext
# -----------------------------
def test_listeners_receive_events_until_unsubscribed(auth_context, fake_supabase):
    fake_supabase.auth.add_account("a@acaboi.com.br", "segredo1")
    events = []
    unsubscribe = auth_context.subscribe(lambda event, payload: events.append(event))

    asyncio.run(auth_context.sign_in("a@acaboi.com.br", "segredo1"))
    unsubscribe()
    asyncio.run(auth_context.sign_in("a@acaboi.com.br", "segredo1"))

    assert events == [AuthEvent.SIGNED_IN]


def test_failing_listener_does_not_break_login(auth_context, fake_supabase):
    fake_supabase.auth.add_account("a@acaboi.com.br", "segredo1")

    def broken(event, payload):
        raise RuntimeError("boom")

    auth_context.subscribe(broken)
    session = asyncio.run(auth_context.sign_in("a@acaboi.com.br", "segredo1"))
    assert session.email == "a@acaboi.com.br"


def test_slow_auth_service_times_out(fake_supabase):
    def slow_sign_in(credentials):
        time.sleep(0.5)

    fake_supabase.auth.sign_in_with_password = slow_sign_in
    context = AuthContext(lambda: fake_supabase, lambda: fake_supabase, timeout=0.05)
    with pytest.raises(AuthTimeout):
        asyncio.run(context.sign_in("a@acaboi.com.br", "segredo1"))


def test_closed_context_refuses_calls(auth_context):
    auth_context.close()
    with pytest.raises(AuthError):
        asyncio.run(auth_context.reset_password("a@acaboi.com.br"))


def test_get_user_checks_token_with_supabase(auth_context, fake_supabase):
    token = fake_supabase.auth.issue_token("u-5", "ana@acaboi.com.br")
    session = asyncio.run(auth_context.get_user(token))
    assert (session.user_id, session.email, session.access_token) == ("u-5", "ana@acaboi.com.br", token)

    with pytest.raises(AuthError):
        asyncio.run(auth_context.get_user(token + "x"))
