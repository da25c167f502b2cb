"""
Formatação de valores no padrão brasileiro (pt-BR)

Todas as funções devolvem "-" quando o valor está ausente.
"""
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float, Decimal]

MISSING = "-"

DIAS_SEMANA_PT = {
    "Monday": "Segunda-feira",
    "Tuesday": "Terça-feira",
    "Wednesday": "Quarta-feira",
    "Thursday": "Quinta-feira",
    "Friday": "Sexta-feira",
    "Saturday": "Sábado",
    "Sunday": "Domingo",
}


def _swap_separators(text: str) -> str:
    # 1,234.56 -> 1.234,56
    return text.replace(",", "#").replace(".", ",").replace("#", ".")


def _quantize(value: Number, places: int) -> Decimal:
    exp = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exp, rounding=ROUND_HALF_UP)


def format_decimal(value: Optional[Number], places: int = 2) -> str:
    """1234.5 -> '1.234,50'"""
    if value is None:
        return MISSING
    return _swap_separators(f"{_quantize(value, places):,.{places}f}")


def format_currency(value: Optional[Number]) -> str:
    """1234.56 -> 'R$ 1.234,56'"""
    if value is None:
        return MISSING
    amount = _quantize(value, 2)
    text = f"R$ {format_decimal(abs(amount))}"
    return f"-{text}" if amount < 0 else text


def format_integer(value: Optional[Number]) -> str:
    """1234 -> '1.234'"""
    if value is None:
        return MISSING
    return f"{int(_quantize(value, 0)):,}".replace(",", ".")


def parse_date_local(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Lê a data de calendário local dos 10 primeiros caracteres, sem conversão de fuso."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()[:10]
    if not text:
        return None
    return datetime.strptime(text, "%Y-%m-%d").date()


def format_date(value: Union[str, date, datetime, None]) -> str:
    """'2024-03-05' -> '05/03/2024'"""
    parsed = parse_date_local(value)
    if parsed is None:
        return MISSING
    return parsed.strftime("%d/%m/%Y")


def format_date_br(value: Union[str, date, datetime, None]) -> str:
    """Data curta para títulos e cartões: '05/03'."""
    parsed = parse_date_local(value)
    if parsed is None:
        return MISSING
    return parsed.strftime("%d/%m")


def format_day_of_week(value: Optional[str]) -> str:
    """Nome do dia em inglês -> português."""
    if not value:
        return MISSING
    return DIAS_SEMANA_PT.get(value.strip().capitalize(), value)


def format_boolean(value: Optional[bool]) -> str:
    return "Sim" if value else "Não"
