from datetime import date

from conftest import make_escala


def test_agenda_rows_carry_week_and_names(admin_client, db, cadastros, tecnico_caiki):
    make_escala(db, cadastros, id_tecnico_responsavel=tecnico_caiki)
    res = admin_client.get("/api/v1/agenda", params={"semana": 10, "ano": 2024})
    assert res.status_code == 200, res.text
    (row,) = res.json()
    assert row["semana"] == 10
    assert row["ano"] == 2024
    assert row["dia_semana"] == "Tuesday"
    assert row["produtor_nome"] == "Fazendas Reunidas"
    assert row["tecnico_responsavel_nome"] == "CAIKI"
    assert row["tecnico_responsavel_empresa"] == "ACABOI"
    assert row["cor_tecnico"] == "#4a6da7"


def test_agenda_filters(admin_client, db, cadastros, tecnico_caiki):
    make_escala(db, cadastros, data_abate=date(2024, 3, 4), id_tecnico_negociador=tecnico_caiki)
    make_escala(db, cadastros, data_abate=date(2024, 3, 10))
    make_escala(db, cadastros, data_abate=date(2024, 3, 20))

    semana = admin_client.get("/api/v1/agenda", params={"semana": 10, "ano": 2024}).json()
    # A lista inclui o domingo da semana
    assert [r["data_abate"] for r in semana] == ["2024-03-04", "2024-03-10"]

    segunda = admin_client.get(
        "/api/v1/agenda", params={"semana": 10, "ano": 2024, "dia_semana": ["Monday"]}
    ).json()
    assert [r["data_abate"] for r in segunda] == ["2024-03-04"]

    por_tecnico = admin_client.get("/api/v1/agenda", params={"id_tecnico": tecnico_caiki}).json()
    assert [r["data_abate"] for r in por_tecnico] == ["2024-03-04"]


def test_grade_groups_monday_to_saturday(tecnico_client, db, cadastros):
    make_escala(db, cadastros, data_abate=date(2024, 3, 4), quantidade=30)
    make_escala(db, cadastros, data_abate=date(2024, 3, 4), quantidade=20)
    make_escala(db, cadastros, data_abate=date(2024, 3, 9), quantidade=10)
    make_escala(db, cadastros, data_abate=date(2024, 3, 10), quantidade=99)

    res = tecnico_client.get("/api/v1/agenda/grade", params={"semana": 10, "ano": 2024})
    assert res.status_code == 200, res.text
    grade = res.json()
    assert grade["inicio"] == "2024-03-04"
    assert grade["fim"] == "2024-03-09"
    assert len(grade["dias"]) == 6
    assert grade["dias"][0]["total"] == 50
    assert grade["dias"][0]["label"] == "Segunda-feira"
    assert grade["dias"][5]["total"] == 10
    assert grade["total"] == 60


def test_week_beyond_year_is_rejected(admin_client):
    res = admin_client.get("/api/v1/agenda/grade", params={"semana": 53, "ano": 2024})
    assert res.status_code == 400


def test_semanas_lists_every_week(admin_client):
    body = admin_client.get("/api/v1/agenda/semanas", params={"ano": 2025}).json()
    assert body["semanas"][0] == {"semana": 1, "inicio": "2024-12-30", "fim": "2025-01-04"}
    assert len(body["semanas"]) == 52


def test_share_link(admin_client):
    body = admin_client.get("/api/v1/agenda/compartilhar", params={"semana": 3, "ano": 2025}).json()
    assert body["url"].endswith("/agenda_view?semana=3&ano=2025")


def test_public_agenda_needs_no_login(client, db, cadastros):
    make_escala(db, cadastros, data_abate=date(2024, 3, 5))
    res = client.get("/api/v1/agenda/publica", params={"semana": 10, "ano": 2024})
    assert res.status_code == 200, res.text
    item = res.json()["dias"][1]["itens"][0]
    assert item["produtor_nome"] == "Fazendas Reunidas"
    assert item["tecnico_responsavel_nome"] == "Sem técnico"
    assert "preco_arroba" not in item


def test_private_agenda_needs_login(client):
    res = client.get("/api/v1/agenda")
    assert res.status_code == 401
