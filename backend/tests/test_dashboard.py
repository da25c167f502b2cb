from datetime import date
from decimal import Decimal

from conftest import make_abate


def test_resumo_weighted_average_and_breakdowns(admin_client, db, cadastros):
    make_abate(db, cadastros, quantidade=50, valor_arroba_negociada=Decimal("300"), trace=True)
    make_abate(
        db,
        cadastros,
        quantidade=10,
        valor_arroba_negociada=Decimal("330"),
        valor_total_acerto=Decimal("3300"),
        data_abate=date(2024, 4, 2),
    )

    res = admin_client.get("/api/v1/dashboard/resumo")
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["total_abates"] == 2
    assert body["total_animais"] == 60
    assert Decimal(body["valor_total_acerto"]) == Decimal("18300")
    # (50 x 300 + 10 x 330) / 60
    assert Decimal(body["media_arroba_negociada"]) == Decimal("305.00")
    assert body["abates_por_categoria"] == [{"categoria": "Boi", "quantidade": 60}]
    assert [m["mes"] for m in body["abates_por_mes"]] == ["2024-03", "2024-04"]
    assert body["bonificacoes"]["trace"] == 1


def test_resumo_without_abates(admin_client):
    body = admin_client.get("/api/v1/dashboard/resumo").json()
    assert body["total_abates"] == 0
    assert Decimal(body["media_arroba_negociada"]) == 0


def test_recentes_respects_limit(admin_client, db, cadastros):
    for lote in ("a", "b", "c"):
        make_abate(db, cadastros, nome_lote=lote)
    res = admin_client.get("/api/v1/dashboard/recentes", params={"limite": 2})
    assert res.status_code == 200, res.text
    assert len(res.json()) == 2
    assert res.json()[0]["produtor_nome"] == "Fazendas Reunidas"


def test_dashboard_is_admin_only(tecnico_client):
    assert tecnico_client.get("/api/v1/dashboard/resumo").status_code == 403
