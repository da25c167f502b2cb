import io
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from openpyxl import load_workbook

from acaboi.models import CategoriaAnimal, Frigorifico, Produtor
from acaboi.schemas.relatorios import FiltrosRelatorio, TipoRelatorio
from acaboi.services.relatorios.exportacao import exportar_excel, exportar_pdf
from acaboi.services.relatorios.report_service import (
    buscar_abates,
    linhas_abates,
    media_arroba,
    resumo_por_frigorifico,
    resumo_por_produtor,
)
from conftest import make_abate


def _abate(id_produtor, id_frigorifico, quantidade, total, **extra):
    dados = dict(
        id_produtor=id_produtor,
        produtor_nome=f"Produtor {id_produtor}",
        produtor=None,
        id_frigorifico=id_frigorifico,
        frigorifico_nome=f"Frigo {id_frigorifico}",
        quantidade=quantidade,
        valor_total_acerto=Decimal(total),
        trace=False,
        hilton=False,
        novilho_precoce=False,
    )
    dados.update(extra)
    return SimpleNamespace(**dados)


ABATES = [
    _abate(1, 10, 50, "15000", trace=True),
    _abate(2, 10, 20, "6000"),
    _abate(1, 11, 30, "9000", hilton=True),
    _abate(3, 11, 5, "1500"),
]


def test_group_totals_match_individual_events():
    for resumo, chave in (
        (resumo_por_produtor(ABATES), "id_produtor"),
        (resumo_por_frigorifico(ABATES), "id_frigorifico"),
    ):
        assert sum(g.total_abates for g in resumo) == len(ABATES)
        for grupo in resumo:
            eventos = [a for a in ABATES if getattr(a, chave) == grupo.id]
            assert grupo.total_animais == sum(a.quantidade for a in eventos)


def test_resumo_por_produtor():
    primeiro = resumo_por_produtor(ABATES)[0]
    assert primeiro.id == 1
    assert primeiro.total_abates == 2
    assert primeiro.valor_total == Decimal("24000")
    assert primeiro.trace == 1
    assert primeiro.hilton == 1
    assert primeiro.propriedade == "N/A"
    # 24000 / (80 cabeças x 15 arrobas)
    assert primeiro.media_arroba == Decimal("20.00")


def test_media_arroba():
    assert media_arroba(Decimal("15000"), 50) == Decimal("20.00")
    assert media_arroba(Decimal("15000"), 50, arrobas_por_cabeca=20) == Decimal("15.00")
    assert media_arroba(Decimal("100"), 0) == Decimal("0")


def test_filters(db, cadastros):
    outra_categoria = CategoriaAnimal(nome="Novilha")
    db.add(outra_categoria)
    db.commit()
    make_abate(db, cadastros, data_abate=date(2024, 1, 10))
    make_abate(db, cadastros, data_abate=date(2024, 2, 10), id_categoria_animal=outra_categoria.id)
    make_abate(db, cadastros, data_abate=date(2024, 3, 10))

    periodo = buscar_abates(db, FiltrosRelatorio(data_inicio=date(2024, 2, 1), data_fim=date(2024, 3, 31)))
    assert [a.data_abate for a in periodo] == [date(2024, 3, 10), date(2024, 2, 10)]

    categoria = buscar_abates(db, FiltrosRelatorio(id_categoria=outra_categoria.id))
    assert len(categoria) == 1

    linhas = linhas_abates(periodo)
    assert linhas[0].propriedade_nome == "Fazenda Santa Rita"
    assert linhas[1].categoria_nome == "Novilha"


def test_produtor_summary_uses_first_propriedade(db, cadastros):
    make_abate(db, cadastros)
    (resumo,) = resumo_por_produtor(buscar_abates(db, FiltrosRelatorio()))
    assert resumo.propriedade == "Fazenda Santa Rita"


def test_excel_export_has_styled_header(db, cadastros):
    make_abate(db, cadastros, trace=True)
    dados = linhas_abates(buscar_abates(db, FiltrosRelatorio()))
    wb = load_workbook(io.BytesIO(exportar_excel(TipoRelatorio.ABATES, dados)))
    ws = wb["Dados"]
    headers = [cell.value for cell in ws[1]]
    assert headers[:3] == ["ID", "Data", "Lote"]
    assert "TRACE" in headers
    assert ws.cell(row=2, column=2).value == "05/03/2024"
    assert ws.cell(row=2, column=6).value == "R$ 15.000,00"
    assert ws.cell(row=2, column=headers.index("TRACE") + 1).value == "Sim"


def test_pdf_export_without_rows():
    buffer = exportar_pdf(TipoRelatorio.FRIGORIFICOS, [])
    assert buffer.getvalue().startswith(b"%PDF")


def test_relatorio_endpoints(admin_client, db, cadastros):
    outro = Frigorifico(nome="Frigo Norte", endereco="x", cidade="y", cnpj="z")
    db.add(outro)
    db.commit()
    make_abate(db, cadastros)
    make_abate(db, cadastros, id_frigorifico=outro.id, quantidade=10, valor_total_acerto=Decimal("3000"))

    produtores = admin_client.get("/api/v1/relatorios/produtores").json()
    assert produtores[0]["total_animais"] == 60

    frigorificos = admin_client.get("/api/v1/relatorios/frigorificos").json()
    assert sorted(f["total_animais"] for f in frigorificos) == [10, 50]

    abates = admin_client.get(
        "/api/v1/relatorios/abates", params={"id_frigorifico": outro.id}
    ).json()
    assert [a["quantidade"] for a in abates] == [10]


def test_relatorio_downloads(admin_client, db, cadastros):
    make_abate(db, cadastros)
    res = admin_client.get("/api/v1/relatorios/produtores/excel")
    assert res.status_code == 200
    assert res.headers["content-disposition"].startswith("attachment; filename=relatorio_produtores_")

    res = admin_client.get("/api/v1/relatorios/abates/pdf")
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/pdf"
    assert res.content.startswith(b"%PDF")


def test_invalid_period_is_rejected(admin_client):
    res = admin_client.get(
        "/api/v1/relatorios/abates", params={"data_inicio": "2024-03-01", "data_fim": "2024-02-01"}
    )
    assert res.status_code == 400


def test_tecnico_cannot_see_reports(tecnico_client):
    assert tecnico_client.get("/api/v1/relatorios/abates").status_code == 403
