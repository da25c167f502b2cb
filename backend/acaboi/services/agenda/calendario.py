"""
Cálculo de semanas da agenda

Única implementação usada pela lista, pela grade semanal e pela página
pública. A semana 1 começa na segunda-feira da semana de 1º de janeiro
(que pode cair em dezembro do ano anterior); a janela de exibição vai de
segunda a sábado.
"""
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from acaboi.utils.formatters import DIAS_SEMANA_PT, parse_date_local

DIAS_EXIBIDOS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DIAS_INGLES = DIAS_EXIBIDOS + ("Sunday",)

CORES_TECNICOS = {
    "CAIKI": "#4a6da7",
    "GABRIELA": "#a72a31",
    "LUANA": "#a72a31",
    "JOÃO PEDRO": "#4d9652",
}
COR_TECNICO_PADRAO = "#f39c12"


@dataclass(frozen=True)
class WeekRange:
    inicio: date  # segunda-feira
    fim: date  # sábado

    @property
    def domingo(self) -> date:
        return self.fim + timedelta(days=1)


@dataclass
class DiaAgenda:
    data: date
    dia_semana: str
    label: str
    itens: List[Any] = field(default_factory=list)
    total: int = 0


def primeira_segunda(ano: int) -> date:
    """Segunda-feira que abre a semana 1 do ano."""
    jan1 = date(ano, 1, 1)
    # weekday(): segunda=0 ... domingo=6
    return jan1 - timedelta(days=jan1.weekday())


def nome_dia(dia: date) -> str:
    """Nome do dia em inglês, independente do locale do servidor."""
    return DIAS_INGLES[dia.weekday()]


def semanas_no_ano(ano: int) -> int:
    return (primeira_segunda(ano + 1) - primeira_segunda(ano)).days // 7


def intervalo_semana(semana: int, ano: int) -> WeekRange:
    """Segunda e sábado da semana informada."""
    if semana < 1:
        raise ValueError("Semana deve ser maior que zero")
    inicio = primeira_segunda(ano) + timedelta(weeks=semana - 1)
    return WeekRange(inicio=inicio, fim=inicio + timedelta(days=5))


def semana_do_dia(dia: date) -> Tuple[int, int]:
    """(semana, ano) que contém o dia; inverso de ``intervalo_semana``."""
    ano = dia.year
    # A semana que contém 1º de janeiro do ano seguinte já pertence a ele
    if dia >= primeira_segunda(ano + 1):
        ano += 1
    semana = (dia - primeira_segunda(ano)).days // 7 + 1
    return semana, ano


def semana_atual(hoje: Optional[date] = None) -> Tuple[int, int]:
    return semana_do_dia(hoje or date.today())


def dias_da_semana(semana: int, ano: int) -> List[DiaAgenda]:
    intervalo = intervalo_semana(semana, ano)
    dias = []
    for offset, nome in enumerate(DIAS_EXIBIDOS):
        dias.append(
            DiaAgenda(
                data=intervalo.inicio + timedelta(days=offset),
                dia_semana=nome,
                label=DIAS_SEMANA_PT[nome],
            )
        )
    return dias


def _valor(item: Any, nome: str) -> Any:
    if isinstance(item, dict):
        return item.get(nome)
    return getattr(item, nome, None)


def agrupar_por_dia(itens: Iterable[Any], semana: int, ano: int) -> List[DiaAgenda]:
    """Distribui as linhas da agenda nos seis dias exibidos (segunda a sábado).

    A data é lida como data local (10 primeiros caracteres); linhas fora da
    janela ou no domingo ficam de fora.
    """
    dias = dias_da_semana(semana, ano)
    por_data: Dict[date, DiaAgenda] = {dia.data: dia for dia in dias}
    for item in itens:
        data = parse_date_local(_valor(item, "data_abate"))
        dia = por_data.get(data)
        if dia is None:
            continue
        dia.itens.append(item)
        dia.total += int(_valor(item, "quantidade") or 0)
    return dias


def total_semana(dias: Iterable[DiaAgenda]) -> int:
    return sum(dia.total for dia in dias)


def cor_tecnico(nome: Optional[str]) -> str:
    if not nome:
        return COR_TECNICO_PADRAO
    return CORES_TECNICOS.get(nome.strip().upper(), COR_TECNICO_PADRAO)
