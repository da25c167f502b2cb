"""
Conversão das células mapeadas para os tipos dos campos de abate

Cada campo tem um conversor próprio. Um valor que não pode ser convertido
gera ``CoercionError``, reportado como erro da linha; células vazias viram
``None`` e ficam para a validação de obrigatórios.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional, Sequence

from openpyxl.utils.datetime import from_excel

from acaboi.services.importacao.leitor import Cell, CellKind
from acaboi.services.importacao.mapeamento import (
    CAMPOS_BOOLEANOS,
    CampoImportacao,
    ColumnMapping,
)
from acaboi.services.importacao.validacao import ErroValidacao, MENSAGEM_DATA_INVALIDA

VALORES_VERDADEIROS = frozenset({"sim", "s", "yes", "y", "true", "1"})
FORMATOS_DATA = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%Y/%m/%d")
_NUMERO_RE = re.compile(r"^-?\d+(\.\d+)?$")


class CoercionError(ValueError):
    """Valor da célula incompatível com o campo de destino."""


def _serial_para_data(serial: float) -> str:
    try:
        value = from_excel(serial)
    except (ValueError, OverflowError, TypeError) as exc:
        raise CoercionError(MENSAGEM_DATA_INVALIDA) from exc
    # Seriais abaixo de 1 são só hora do dia (datetime.time)
    if not isinstance(value, datetime):
        raise CoercionError(MENSAGEM_DATA_INVALIDA)
    return value.date().isoformat()


def converter_data(cell: Cell) -> Optional[str]:
    """Data de abate em YYYY-MM-DD (serial do Excel, data nativa ou texto)."""
    if cell.is_empty:
        return None
    if cell.kind is CellKind.DATE:
        value = cell.value
        return (value.date() if isinstance(value, datetime) else value).isoformat()
    if cell.kind is CellKind.NUMBER:
        return _serial_para_data(cell.value)
    if cell.kind is CellKind.TEXT:
        text = cell.value.strip()
        # Texto com data e hora: considera só a data
        candidate = text[:10]
        for fmt in FORMATOS_DATA:
            try:
                return datetime.strptime(candidate, fmt).date().isoformat()
            except ValueError:
                continue
        if _NUMERO_RE.match(text):
            return _serial_para_data(float(text))
    raise CoercionError(MENSAGEM_DATA_INVALIDA)


def _texto_para_decimal(text: str) -> Decimal:
    cleaned = text.replace("R$", "").replace(" ", "").strip()
    if "," in cleaned and "." in cleaned:
        # O separador que aparece por último é o decimal
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        cleaned = cleaned.replace(",", ".")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise CoercionError(f"Valor numérico inválido: {text}") from exc
    if not value.is_finite():
        raise CoercionError(f"Valor numérico inválido: {text}")
    return value


def converter_decimal(cell: Cell) -> Optional[Decimal]:
    if cell.is_empty:
        return None
    if cell.kind is CellKind.NUMBER:
        return Decimal(str(cell.value))
    if cell.kind is CellKind.TEXT:
        return _texto_para_decimal(cell.value)
    raise CoercionError(f"Valor numérico inválido: {cell.as_text()}")


def converter_inteiro(cell: Cell) -> Optional[int]:
    value = converter_decimal(cell)
    if value is None:
        return None
    if value != value.to_integral_value():
        raise CoercionError(f"Valor deve ser um número inteiro: {cell.as_text()}")
    return int(value)


def converter_booleano(cell: Cell) -> bool:
    """Nunca falha: o que não é reconhecido como verdadeiro vale False."""
    if cell.kind is CellKind.BOOLEAN:
        return bool(cell.value)
    if cell.kind is CellKind.NUMBER:
        return cell.value == 1
    if cell.kind is CellKind.TEXT:
        return cell.value.strip().lower() in VALORES_VERDADEIROS
    return False


def converter_texto(cell: Cell) -> Optional[str]:
    text = cell.as_text().strip()
    return text or None


CONVERSORES: Dict[CampoImportacao, Callable[[Cell], Any]] = {
    CampoImportacao.DATA_ABATE: converter_data,
    CampoImportacao.NOME_LOTE: converter_texto,
    CampoImportacao.QUANTIDADE: converter_inteiro,
    CampoImportacao.VALOR_ARROBA_NEGOCIADA: converter_decimal,
    CampoImportacao.VALOR_TOTAL_ACERTO: converter_decimal,
    CampoImportacao.ID_PRODUTOR: converter_inteiro,
    CampoImportacao.ID_FRIGORIFICO: converter_inteiro,
    CampoImportacao.ID_CATEGORIA_ANIMAL: converter_inteiro,
    CampoImportacao.TRACE: converter_booleano,
    CampoImportacao.HILTON: converter_booleano,
    CampoImportacao.NOVILHO_PRECOCE: converter_booleano,
}


@dataclass
class ConversionResult:
    registros: List[Dict[str, Any]] = field(default_factory=list)
    erros: List[ErroValidacao] = field(default_factory=list)


def converter_linhas(
    cabecalho: Sequence[str],
    linhas: Sequence[Sequence[Cell]],
    mapping: Sequence[ColumnMapping],
) -> ConversionResult:
    """Aplica o mapeamento a cada linha de dados (linha 2 em diante do arquivo)."""
    indices = {}
    for idx, header in enumerate(cabecalho):
        indices.setdefault(header, idx)

    result = ConversionResult()
    for row_idx, row in enumerate(linhas):
        registro: Dict[str, Any] = {campo.value: False for campo in CAMPOS_BOOLEANOS}
        for item in mapping:
            idx = indices.get(item.coluna)
            if idx is None:
                continue
            cell = row[idx] if idx < len(row) else Cell(CellKind.EMPTY)
            try:
                registro[item.campo.value] = CONVERSORES[item.campo](cell)
            except CoercionError as exc:
                registro[item.campo.value] = None
                result.erros.append(
                    ErroValidacao(row=row_idx + 2, field=item.campo.value, message=str(exc))
                )
        result.registros.append(registro)
    return result
