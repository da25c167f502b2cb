from acaboi.api.auth import ACCESS_DENIED_DETAIL
from acaboi.core.permissions import Permission, has_permission, permissions_for, resolve_user_type
from acaboi.models import Profile
from conftest import bearer_token

NOVO = {
    "name": "Gabriela",
    "email": "gabriela@acaboi.com.br",
    "type": "tecnico",
    "password": "segredo1",
    "confirm_password": "segredo1",
}


def test_role_permissions():
    assert has_permission("admin", Permission.ADMIN_USERS)
    assert has_permission("tecnico", Permission.AGENDA)
    assert not has_permission("tecnico", Permission.RELATORIOS)
    assert permissions_for("tecnico") == ["agenda", "escala"]
    assert resolve_user_type("gerente").value == "tecnico"


def test_tecnico_sees_access_restricted_message(tecnico_client):
    res = tecnico_client.get("/api/v1/usuarios")
    assert res.status_code == 403
    assert res.json()["detail"] == ACCESS_DENIED_DETAIL
    assert ACCESS_DENIED_DETAIL.startswith("Acesso Restrito")


def test_admin_creates_user_in_auth_and_profiles(admin_client, db, fake_supabase):
    res = admin_client.post("/api/v1/usuarios", json=NOVO)
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["type"] == "tecnico"
    assert body["active"] is True

    auth_user = fake_supabase.auth.admin.users[body["id"]]
    assert auth_user["email_confirm"] is True
    assert auth_user["user_metadata"] == {"name": "Gabriela", "type": "tecnico"}
    assert db.get(Profile, body["id"]).email == "gabriela@acaboi.com.br"


def test_duplicate_email_is_rejected(admin_client):
    assert admin_client.post("/api/v1/usuarios", json=NOVO).status_code == 201
    res = admin_client.post("/api/v1/usuarios", json=NOVO)
    assert res.status_code == 400
    assert res.json()["detail"] == "Já existe um usuário com este e-mail"


def test_password_rules(admin_client):
    res = admin_client.post("/api/v1/usuarios", json={**NOVO, "password": "123", "confirm_password": "123"})
    assert res.status_code == 422
    assert "A senha deve ter pelo menos 6 caracteres" in res.text

    res = admin_client.post("/api/v1/usuarios", json={**NOVO, "confirm_password": "outra1"})
    assert res.status_code == 422
    assert "As senhas não coincidem" in res.text


def test_update_toggle_and_reset_password(admin_client, fake_supabase):
    user_id = admin_client.post("/api/v1/usuarios", json=NOVO).json()["id"]

    res = admin_client.put(f"/api/v1/usuarios/{user_id}", json={"type": "admin"})
    assert res.status_code == 200, res.text
    assert res.json()["type"] == "admin"
    assert fake_supabase.auth.admin.users[user_id]["user_metadata"]["type"] == "admin"

    res = admin_client.post(f"/api/v1/usuarios/{user_id}/toggle-active")
    assert res.json()["active"] is False

    res = admin_client.post(
        f"/api/v1/usuarios/{user_id}/reset-password",
        json={"password": "novasenha", "confirm_password": "novasenha"},
    )
    assert res.status_code == 204
    assert fake_supabase.auth.admin.users[user_id]["password"] == "novasenha"


def test_unknown_user(admin_client):
    assert admin_client.get("/api/v1/usuarios/nao-existe").status_code == 404


# -----------------------------
# Dependência de autenticação real
# -----------------------------
def test_missing_token(client):
    res = client.get("/api/v1/auth/me")
    assert res.status_code == 401


def test_token_resolves_role_from_profile(client, db, fake_supabase):
    db.add(Profile(id="u-1", email="luana@acaboi.com.br", name="Luana", type="admin"))
    db.commit()
    res = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {fake_supabase.auth.issue_token('u-1')}"})
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["type"] == "admin"
    assert "admin_users" in body["permissions"]


def test_user_without_profile_is_tecnico(client, fake_supabase):
    res = client.get(
        "/api/v1/auth/me",
        headers={"Authorization": f"Bearer {fake_supabase.auth.issue_token('sem-perfil', 'novo@acaboi.com.br')}"},
    )
    assert res.json()["type"] == "tecnico"
    assert res.json()["email"] == "novo@acaboi.com.br"


def test_inactive_user_is_blocked(client, db, fake_supabase):
    db.add(Profile(id="u-2", email="ex@acaboi.com.br", name="Ex", type="tecnico", active=False))
    db.commit()
    res = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {fake_supabase.auth.issue_token('u-2')}"})
    assert res.status_code == 403


def test_malformed_token(client):
    res = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer abc"})
    assert res.status_code == 401


def test_forged_token_is_rejected(client):
    token = bearer_token("qualquer-um", "intruso@acaboi.com.br")
    res = client.get("/api/v1/agenda/semanas", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_forged_token_with_admin_id_is_rejected(client, db):
    db.add(Profile(id="u-admin", email="chefe@acaboi.com.br", name="Chefe", type="admin"))
    db.commit()
    res = client.get(
        "/api/v1/usuarios",
        headers={"Authorization": f"Bearer {bearer_token('u-admin', 'chefe@acaboi.com.br')}"},
    )
    assert res.status_code == 401


def test_token_must_belong_to_its_sub(client, db, fake_supabase):
    db.add(Profile(id="u-admin", email="chefe@acaboi.com.br", name="Chefe", type="admin"))
    db.commit()
    # Token válido de outro usuário com o `sub` trocado para o do admin
    token = bearer_token("u-admin", "chefe@acaboi.com.br")
    fake_supabase.auth.tokens[token] = ("u-tecnico", "tec@acaboi.com.br")
    res = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
