"""
Exportação dos relatórios para Excel (openpyxl) e PDF (reportlab)
"""
from datetime import datetime
from io import BytesIO
from typing import Any, Callable, List, Sequence, Tuple

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from acaboi.schemas.relatorios import TipoRelatorio
from acaboi.utils.formatters import (
    format_boolean,
    format_currency,
    format_date,
    format_integer,
)
from acaboi.utils.pdf_layout import generate_table_pdf

LARGURA_COLUNA = 20
NOME_ABA = "Dados"

TITULOS = {
    TipoRelatorio.ABATES: "Relatório de Abates",
    TipoRelatorio.PRODUTORES: "Relatório de Produtores",
    TipoRelatorio.FRIGORIFICOS: "Relatório de Frigoríficos",
}

Coluna = Tuple[str, Callable[[Any], Any]]

# Colunas do PDF (mais enxutas por causa da largura da página)
COLUNAS_PDF: dict = {
    TipoRelatorio.ABATES: [
        ("ID", lambda a: a.id),
        ("Data", lambda a: format_date(a.data_abate)),
        ("Lote", lambda a: a.nome_lote or "-"),
        ("Qtd", lambda a: format_integer(a.quantidade)),
        ("R$/Arroba", lambda a: format_currency(a.valor_arroba_negociada)),
        ("Total", lambda a: format_currency(a.valor_total_acerto)),
        ("Produtor", lambda a: a.produtor_nome or "-"),
        ("Frigorífico", lambda a: a.frigorifico_nome or "-"),
        ("Categoria", lambda a: a.categoria_nome or "-"),
    ],
    TipoRelatorio.PRODUTORES: [
        ("ID", lambda p: p.id),
        ("Nome", lambda p: p.nome),
        ("Propriedade", lambda p: p.propriedade),
        ("Total Abates", lambda p: format_integer(p.total_abates)),
        ("Total Animais", lambda p: format_integer(p.total_animais)),
        ("Valor Total", lambda p: format_currency(p.valor_total)),
        ("Média Arroba", lambda p: format_currency(p.media_arroba)),
    ],
    TipoRelatorio.FRIGORIFICOS: [
        ("ID", lambda f: f.id),
        ("Nome", lambda f: f.nome),
        ("Total Abates", lambda f: format_integer(f.total_abates)),
        ("Total Animais", lambda f: format_integer(f.total_animais)),
        ("Valor Total", lambda f: format_currency(f.valor_total)),
    ],
}

# A planilha de abates traz também propriedade e bonificações
COLUNAS_EXCEL: dict = {
    **COLUNAS_PDF,
    TipoRelatorio.ABATES: [
        ("ID", lambda a: a.id),
        ("Data", lambda a: format_date(a.data_abate)),
        ("Lote", lambda a: a.nome_lote or "-"),
        ("Quantidade", lambda a: a.quantidade),
        ("R$/Arroba", lambda a: format_currency(a.valor_arroba_negociada)),
        ("Total", lambda a: format_currency(a.valor_total_acerto)),
        ("Produtor", lambda a: a.produtor_nome or "-"),
        ("Propriedade", lambda a: a.propriedade_nome or "-"),
        ("Frigorífico", lambda a: a.frigorifico_nome or "-"),
        ("Categoria", lambda a: a.categoria_nome or "-"),
        ("TRACE", lambda a: format_boolean(a.trace)),
        ("HILTON", lambda a: format_boolean(a.hilton)),
        ("Novilho Precoce", lambda a: format_boolean(a.novilho_precoce)),
    ],
}

Dados = Sequence[Any]  # AbateRelatorio | ResumoProdutor | ResumoFrigorifico


def _tabela(colunas: List[Coluna], dados: Dados) -> Tuple[List[str], List[List[Any]]]:
    headers = [titulo for titulo, _ in colunas]
    rows = [[extrair(item) for _, extrair in colunas] for item in dados]
    return headers, rows


def exportar_excel(tipo: TipoRelatorio, dados: Dados) -> bytes:
    """Planilha com uma aba 'Dados' e colunas de largura fixa."""
    headers, rows = _tabela(COLUNAS_EXCEL[tipo], dados)

    wb = Workbook()
    ws = wb.active
    ws.title = NOME_ABA
    ws.append(headers)
    for cell in ws[1]:
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = PatternFill("solid", fgColor="A6CE39")
    for row in rows:
        ws.append(row)
    for idx in range(1, len(headers) + 1):
        ws.column_dimensions[get_column_letter(idx)].width = LARGURA_COLUNA

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def exportar_pdf(tipo: TipoRelatorio, dados: Dados) -> BytesIO:
    headers, rows = _tabela(COLUNAS_PDF[tipo], dados)
    return generate_table_pdf(TITULOS[tipo], headers, rows)


def nome_arquivo(tipo: TipoRelatorio, extensao: str) -> str:
    return f"relatorio_{tipo.value}_{datetime.now().strftime('%Y%m%d')}.{extensao}"
