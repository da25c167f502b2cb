from datetime import date
from decimal import Decimal

from acaboi.api.auth import ACCESS_DENIED_DETAIL
from acaboi.models import Produtor, Propriedade
from conftest import make_abate

PRODUTOR = {
    "nome": "Agropecuária Boa Vista",
    "endereco": "Rua das Palmeiras, 10",
    "cidade": "Dourados",
    "cnpj": "11.222.333/0001-44",
    "marca_produtor": "BV",
    "email": "",
}


def test_create_and_list_produtores(admin_client):
    res = admin_client.post("/api/v1/produtores", json=PRODUTOR)
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["email"] is None
    assert body["propriedades"] == []

    res = admin_client.get("/api/v1/produtores")
    assert [p["nome"] for p in res.json()] == ["Agropecuária Boa Vista"]


def test_blank_required_field_is_rejected(admin_client):
    res = admin_client.post("/api/v1/produtores", json={**PRODUTOR, "cidade": "   "})
    assert res.status_code == 422
    assert "Cidade é obrigatória" in res.text


def test_produtor_not_found(admin_client):
    res = admin_client.get("/api/v1/produtores/999")
    assert res.status_code == 404
    assert res.json()["detail"] == "Produtor não encontrado"


def test_delete_produtor_removes_propriedades(admin_client, db, cadastros):
    res = admin_client.delete(f"/api/v1/produtores/{cadastros.produtor}")
    assert res.status_code == 204
    db.expire_all()
    assert db.get(Produtor, cadastros.produtor) is None
    assert db.query(Propriedade).count() == 0


def test_tecnico_can_read_but_not_write(tecnico_client, cadastros):
    assert tecnico_client.get("/api/v1/produtores").status_code == 200
    res = tecnico_client.post("/api/v1/produtores", json=PRODUTOR)
    assert res.status_code == 403
    assert res.json()["detail"] == ACCESS_DENIED_DETAIL


def test_propriedades_of_a_produtor(admin_client, cadastros):
    payload = {
        "id_produtor": cadastros.produtor,
        "nome": "Fazenda Esperança",
        "endereco": "Linha 7",
        "cidade": "Sidrolândia",
        "classificacao": "B",
        "telefone": "",
    }
    res = admin_client.post("/api/v1/propriedades", json=payload)
    assert res.status_code == 201, res.text
    assert res.json()["produtor_nome"] == "Fazendas Reunidas"
    assert res.json()["telefone"] is None

    res = admin_client.get(f"/api/v1/produtores/{cadastros.produtor}/propriedades")
    assert sorted(p["nome"] for p in res.json()) == ["Fazenda Esperança", "Fazenda Santa Rita"]


def test_propriedade_requires_existing_produtor(admin_client):
    payload = {
        "id_produtor": 42,
        "nome": "Fazenda X",
        "endereco": "Linha 1",
        "cidade": "Maracaju",
        "classificacao": "C",
    }
    res = admin_client.post("/api/v1/propriedades", json=payload)
    assert res.status_code == 422
    assert res.json()["detail"] == "Produtor não encontrado"


def test_classificacoes(admin_client):
    res = admin_client.get("/api/v1/propriedades/classificacoes")
    assert [item["value"] for item in res.json()] == ["A", "B", "C"]


def test_frigorificos_crud(admin_client):
    payload = {"nome": "Frigo Sul", "endereco": "Av. 1", "cidade": "Naviraí", "cnpj": "00.111.222/0001-33"}
    res = admin_client.post("/api/v1/frigorificos", json=payload)
    assert res.status_code == 201, res.text
    frig_id = res.json()["id"]

    res = admin_client.put(f"/api/v1/frigorificos/{frig_id}", json={"cidade": "Nova Andradina"})
    assert res.json()["cidade"] == "Nova Andradina"

    assert admin_client.delete(f"/api/v1/frigorificos/{frig_id}").status_code == 204
    assert admin_client.get(f"/api/v1/frigorificos/{frig_id}").status_code == 404


# -----------------------------
# Abates
# -----------------------------
def _abate_payload(ids, **overrides):
    payload = {
        "id_produtor": ids.produtor,
        "id_propriedade": ids.propriedade,
        "id_frigorifico": ids.frigorifico,
        "id_categoria_animal": ids.categoria,
        "data_abate": "2024-03-05",
        "quantidade": 50,
        "valor_arroba_negociada": "300.00",
    }
    payload.update(overrides)
    return payload


def test_abate_total_defaults_to_quantity_times_price(admin_client, cadastros):
    res = admin_client.post("/api/v1/abates", json=_abate_payload(cadastros))
    assert res.status_code == 201, res.text
    body = res.json()
    assert Decimal(body["valor_total_acerto"]) == Decimal("15000.00")
    assert body["produtor_nome"] == "Fazendas Reunidas"
    assert body["categoria_nome"] == "Boi"


def test_abate_total_can_be_overridden(admin_client, cadastros):
    res = admin_client.post("/api/v1/abates", json=_abate_payload(cadastros, valor_total_acerto="14800.50"))
    assert Decimal(res.json()["valor_total_acerto"]) == Decimal("14800.50")


def test_abate_update_recalculates_total(admin_client, db, cadastros):
    abate = make_abate(db, cadastros)
    res = admin_client.put(f"/api/v1/abates/{abate.id}", json={"quantidade": 10})
    assert res.status_code == 200, res.text
    assert Decimal(res.json()["valor_total_acerto"]) == Decimal("3000.00")


def test_abate_rejects_propriedade_of_another_produtor(admin_client, db, cadastros):
    outro = Produtor(nome="Outro", endereco="x", cidade="y", cnpj="z", marca_produtor="O")
    db.add(outro)
    db.commit()
    res = admin_client.post("/api/v1/abates", json=_abate_payload(cadastros, id_produtor=outro.id))
    assert res.status_code == 422
    assert res.json()["detail"] == "A propriedade selecionada não pertence ao produtor informado"


def test_abate_quantity_must_be_positive(admin_client, cadastros):
    res = admin_client.post("/api/v1/abates", json=_abate_payload(cadastros, quantidade=0))
    assert res.status_code == 422


def test_abates_most_recent_first(admin_client, db, cadastros):
    make_abate(db, cadastros, nome_lote="antigo")
    make_abate(db, cadastros, nome_lote="novo", data_abate=date(2024, 4, 1))
    res = admin_client.get("/api/v1/abates")
    assert [a["nome_lote"] for a in res.json()] == ["novo", "antigo"]


# -----------------------------
# Escala
# -----------------------------
def _escala_payload(ids, **overrides):
    payload = {
        "tipo_servico": "ABATE",
        "data_embarque": "2024-03-04",
        "data_abate": "2024-03-05",
        "id_frigorifico": ids.frigorifico,
        "quantidade": 40,
        "categoria": "MC",
        "id_produtor": ids.produtor,
        "id_propriedade": ids.propriedade,
        "municipio": "Campo Grande",
        "tipo_negociacao": "DIRETO PRODUTOR",
        "forma_pagamento": "À vista",
    }
    payload.update(overrides)
    return payload


def test_tecnico_manages_escala(tecnico_client, cadastros, tecnico_caiki):
    payload = _escala_payload(cadastros, id_tecnico_responsavel=tecnico_caiki)
    res = tecnico_client.post("/api/v1/escala", json=payload)
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["frigorifico_nome"] == "Frigorífico Pantanal"
    assert body["tecnico_responsavel_nome"] == "CAIKI"

    res = tecnico_client.put(f"/api/v1/escala/{body['id']}", json={"quantidade": 35})
    assert res.json()["quantidade"] == 35


def test_escala_rejects_unknown_option(admin_client, cadastros):
    res = admin_client.post("/api/v1/escala", json=_escala_payload(cadastros, categoria="XX"))
    assert res.status_code == 422


def test_escala_opcoes(admin_client):
    body = admin_client.get("/api/v1/escala/opcoes").json()
    assert body["categorias"] == ["MC", "MI", "IM", "F"]
    assert "VISITA TÉCNICA" in body["tipos_servico"]


def test_tecnicos_list_names(admin_client, tecnico_caiki):
    res = admin_client.get("/api/v1/escala/tecnicos")
    assert res.status_code == 200, res.text
    assert res.json()[0]["nome"] == "CAIKI"
