"""
Leitura de planilhas para importação de abates

Formatos aceitos: .xlsx (openpyxl), .xls (xlrd) e .csv. A primeira linha é
o cabeçalho; cada célula vira um ``Cell`` com o tipo de origem explícito.
"""
import csv
import io
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Sequence

import xlrd
from openpyxl import load_workbook

EXTENSOES_SUPORTADAS = (".xlsx", ".xls", ".csv")


class ParseError(ValueError):
    """Arquivo ilegível ou em formato não suportado."""


class CellKind(str, Enum):
    EMPTY = "empty"
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    value: Any = None

    @classmethod
    def from_value(cls, value: Any) -> "Cell":
        if value is None:
            return EMPTY_CELL
        # bool antes de int: True também é int
        if isinstance(value, bool):
            return cls(CellKind.BOOLEAN, value)
        if isinstance(value, (int, float)):
            if isinstance(value, float) and math.isnan(value):
                return EMPTY_CELL
            return cls(CellKind.NUMBER, value)
        if isinstance(value, (datetime, date)):
            return cls(CellKind.DATE, value)
        text = str(value).strip()
        if not text:
            return EMPTY_CELL
        return cls(CellKind.TEXT, text)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    def as_text(self) -> str:
        if self.is_empty:
            return ""
        if self.kind is CellKind.DATE:
            return self.value.isoformat()
        return str(self.value)

    def to_json(self) -> Any:
        if self.kind is CellKind.DATE:
            return self.value.isoformat()
        return self.value


EMPTY_CELL = Cell(CellKind.EMPTY)


@dataclass
class Planilha:
    cabecalho: List[str]
    linhas: List[List[Cell]] = field(default_factory=list)

    @property
    def total_linhas(self) -> int:
        """Linhas do arquivo, contando o cabeçalho."""
        return len(self.linhas) + (1 if self.cabecalho else 0)


def _montar_planilha(rows: Sequence[Sequence[Cell]]) -> Planilha:
    # Ignora linhas totalmente vazias (comum no fim de planilhas Excel)
    rows = [list(row) for row in rows if any(not cell.is_empty for cell in row)]
    if not rows:
        return Planilha(cabecalho=[])

    header_row = rows[0]
    cabecalho = [
        cell.as_text() or f"Coluna {idx + 1}" for idx, cell in enumerate(header_row)
    ]
    largura = len(cabecalho)
    linhas = []
    for row in rows[1:]:
        row = row[:largura] + [EMPTY_CELL] * (largura - len(row))
        linhas.append(row)
    return Planilha(cabecalho=cabecalho, linhas=linhas)


def _ler_xlsx(content: bytes) -> Planilha:
    wb = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    try:
        ws = wb.active
        rows = [
            [Cell.from_value(value) for value in row]
            for row in ws.iter_rows(values_only=True)
        ]
    finally:
        wb.close()
    return _montar_planilha(rows)


def _xls_cell(cell: "xlrd.sheet.Cell", datemode: int) -> Cell:
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return EMPTY_CELL
    if cell.ctype == xlrd.XL_CELL_DATE:
        return Cell(CellKind.DATE, xlrd.xldate_as_datetime(cell.value, datemode))
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return Cell(CellKind.BOOLEAN, bool(cell.value))
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return EMPTY_CELL
    return Cell.from_value(cell.value)


def _ler_xls(content: bytes) -> Planilha:
    book = xlrd.open_workbook(file_contents=content)
    sheet = book.sheet_by_index(0)
    rows = [
        [_xls_cell(cell, book.datemode) for cell in sheet.row(idx)]
        for idx in range(sheet.nrows)
    ]
    return _montar_planilha(rows)


def _decode(content: bytes) -> str:
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        return content.decode("latin-1")


def _ler_csv(content: bytes) -> Planilha:
    text = _decode(content)
    try:
        dialect = csv.Sniffer().sniff(text[:4096], delimiters=";,")
        delimiter = dialect.delimiter
    except csv.Error:
        delimiter = ";"
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    rows = [[Cell.from_value(value) for value in row] for row in reader]
    return _montar_planilha(rows)


def ler_planilha(filename: str, content: bytes) -> Planilha:
    """Lê a primeira aba do arquivo enviado."""
    nome = (filename or "").lower()
    if not nome.endswith(EXTENSOES_SUPORTADAS):
        raise ParseError("O arquivo deve estar no formato Excel (.xlsx, .xls) ou CSV (.csv)")

    try:
        if nome.endswith(".xlsx"):
            return _ler_xlsx(content)
        if nome.endswith(".xls"):
            return _ler_xls(content)
        return _ler_csv(content)
    except ParseError:
        raise
    except Exception as exc:
        raise ParseError(f"Não foi possível ler o arquivo: {exc}") from exc
