# backend/tests/conftest.py
import base64
import json
import os

# Banco e Supabase de teste antes de importar a aplicação
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("PUBLIC_APP_URL", "https://agenda.acaboi.test")

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from supabase_auth.errors import AuthApiError

from acaboi.api.auth import CurrentUser, get_current_user
from acaboi.api.v1.endpoints.usuarios import get_admin_client
from acaboi.core.auth_context import AuthContext, get_auth_context
from acaboi.core.database import Base, get_db
from acaboi.main import app
from acaboi.models import (
    Abate,
    CategoriaAnimal,
    EscalaAbate,
    Frigorifico,
    Produtor,
    Profile,
    Propriedade,
    Tecnico,
)

# -----------------------------
# Test DB: SQLite em memória compartilhado
# -----------------------------
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def bearer_token(sub, email="x@acaboi.com.br"):
    """JWT com payload legível e assinatura falsa; só vale se emitido pelo FakeAuth."""
    def seg(data):
        return base64.urlsafe_b64encode(json.dumps(data).encode()).decode().rstrip("=")
    return f"{seg({'alg': 'HS256'})}.{seg({'sub': sub, 'email': email})}.assinatura"


ADMIN = CurrentUser(id="admin-1", email="admin@acaboi.com.br", name="Admin", type="admin")
TECNICO = CurrentUser(id="tecnico-1", email="caiki@acaboi.com.br", name="CAIKI", type="tecnico")


# -----------------------------
# Supabase falso
# -----------------------------
class FakeAuthAdmin:
    def __init__(self):
        self.users = {}
        self.signed_out = []

    def create_user(self, attributes):
        user_id = str(uuid4())
        self.users[user_id] = dict(attributes)
        user = SimpleNamespace(
            id=user_id,
            email=attributes["email"],
            user_metadata=attributes.get("user_metadata", {}),
        )
        return SimpleNamespace(user=user)

    def update_user_by_id(self, user_id, attributes):
        self.users.setdefault(user_id, {}).update(attributes)

    def delete_user(self, user_id):
        self.users.pop(user_id, None)

    def sign_out(self, token):
        self.signed_out.append(token)


class FakeAuth:
    def __init__(self):
        self.admin = FakeAuthAdmin()
        self.accounts = {}
        self.recoveries = []
        self.tokens = {}

    def add_account(self, email, password, user_id=None):
        user_id = user_id or str(uuid4())
        self.accounts[email] = (password, user_id)
        return user_id

    def _response(self, email, user_id, metadata=None):
        return SimpleNamespace(
            user=SimpleNamespace(id=user_id, email=email, user_metadata=metadata or {}),
            session=SimpleNamespace(access_token=f"token-{user_id}", refresh_token="refresh", expires_at=1700000000),
        )

    def sign_in_with_password(self, credentials):
        account = self.accounts.get(credentials["email"])
        if account is None or account[0] != credentials["password"]:
            raise AuthApiError("Invalid login credentials", 400, "invalid_credentials")
        return self._response(credentials["email"], account[1])

    def sign_up(self, credentials):
        if credentials["email"] in self.accounts:
            raise AuthApiError("User already registered", 422, "user_already_exists")
        user_id = self.add_account(credentials["email"], credentials["password"])
        return self._response(credentials["email"], user_id, credentials["options"]["data"])

    def reset_password_for_email(self, email, options):
        self.recoveries.append((email, options))

    def issue_token(self, user_id, email="x@acaboi.com.br"):
        token = bearer_token(user_id, email)
        self.tokens[token] = (user_id, email)
        return token

    def get_user(self, jwt):
        if jwt not in self.tokens:
            raise AuthApiError("invalid JWT: unable to parse or verify signature", 401, "bad_jwt")
        user_id, email = self.tokens[jwt]
        return SimpleNamespace(user=SimpleNamespace(id=user_id, email=email, user_metadata={}))


@pytest.fixture
def fake_supabase():
    return SimpleNamespace(auth=FakeAuth())


@pytest.fixture
def auth_context(fake_supabase):
    context = AuthContext(lambda: fake_supabase, lambda: fake_supabase, timeout=2.0)
    yield context
    context.close()


# -----------------------------
# Fixtures
# -----------------------------
@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(auth_context, fake_supabase):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auth_context] = lambda: auth_context
    app.dependency_overrides[get_admin_client] = lambda: fake_supabase
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    app.dependency_overrides[get_current_user] = lambda: ADMIN
    return client


@pytest.fixture
def tecnico_client(client):
    app.dependency_overrides[get_current_user] = lambda: TECNICO
    return client


@pytest.fixture
def cadastros(db):
    """Produtor com uma propriedade, um frigorífico e uma categoria."""
    produtor = Produtor(
        nome="Fazendas Reunidas",
        endereco="Rod. BR-163, km 12",
        cidade="Campo Grande",
        cnpj="12.345.678/0001-90",
        marca_produtor="FR",
    )
    produtor.propriedades.append(
        Propriedade(
            nome="Fazenda Santa Rita",
            endereco="Estrada Vicinal 4",
            cidade="Campo Grande",
            classificacao="A",
        )
    )
    frigorifico = Frigorifico(
        nome="Frigorífico Pantanal",
        endereco="Av. Industrial, 500",
        cidade="Campo Grande",
        cnpj="98.765.432/0001-10",
    )
    categoria = CategoriaAnimal(nome="Boi")
    db.add_all([produtor, frigorifico, categoria])
    db.commit()
    return SimpleNamespace(
        produtor=produtor.id,
        propriedade=produtor.propriedades[0].id,
        frigorifico=frigorifico.id,
        categoria=categoria.id,
    )


@pytest.fixture
def tecnico_caiki(db):
    profile = Profile(id=TECNICO.id, email=TECNICO.email, name="CAIKI", type="tecnico")
    tecnico = Tecnico(empresa="ACABOI", usuario=profile)
    db.add(tecnico)
    db.commit()
    return tecnico.id


def make_abate(db, ids, **overrides):
    dados = {
        "id_produtor": ids.produtor,
        "id_propriedade": ids.propriedade,
        "id_frigorifico": ids.frigorifico,
        "id_categoria_animal": ids.categoria,
        "data_abate": date(2024, 3, 5),
        "quantidade": 50,
        "valor_arroba_negociada": Decimal("300.00"),
        "valor_total_acerto": Decimal("15000.00"),
    }
    dados.update(overrides)
    abate = Abate(**dados)
    db.add(abate)
    db.commit()
    return abate


def make_escala(db, ids, **overrides):
    dados = {
        "tipo_servico": "ABATE",
        "data_embarque": date(2024, 3, 4),
        "data_abate": date(2024, 3, 5),
        "id_frigorifico": ids.frigorifico,
        "quantidade": 40,
        "categoria": "MC",
        "id_produtor": ids.produtor,
        "id_propriedade": ids.propriedade,
        "municipio": "Campo Grande",
        "tipo_negociacao": "DIRETO PRODUTOR",
        "forma_pagamento": "À vista",
    }
    dados.update(overrides)
    item = EscalaAbate(**dados)
    db.add(item)
    db.commit()
    return item
