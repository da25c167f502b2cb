"""
Mapeamento de colunas da planilha para campos de abate

O mapeamento é 1:1: cada campo de destino pertence a no máximo uma coluna.
"""
import unicodedata
from enum import Enum
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel


class CampoImportacao(str, Enum):
    DATA_ABATE = "data_abate"
    NOME_LOTE = "nome_lote"
    QUANTIDADE = "quantidade"
    VALOR_ARROBA_NEGOCIADA = "valor_arroba_negociada"
    VALOR_TOTAL_ACERTO = "valor_total_acerto"
    ID_PRODUTOR = "id_produtor"
    ID_FRIGORIFICO = "id_frigorifico"
    ID_CATEGORIA_ANIMAL = "id_categoria_animal"
    TRACE = "trace"
    HILTON = "hilton"
    NOVILHO_PRECOCE = "novilho_precoce"


CAMPOS_LABELS: Dict[CampoImportacao, str] = {
    CampoImportacao.DATA_ABATE: "Data de Abate",
    CampoImportacao.NOME_LOTE: "Nome do Lote",
    CampoImportacao.QUANTIDADE: "Quantidade",
    CampoImportacao.VALOR_ARROBA_NEGOCIADA: "Valor da Arroba",
    CampoImportacao.VALOR_TOTAL_ACERTO: "Valor Total",
    CampoImportacao.ID_PRODUTOR: "ID do Produtor",
    CampoImportacao.ID_FRIGORIFICO: "ID do Frigorífico",
    CampoImportacao.ID_CATEGORIA_ANIMAL: "ID da Categoria",
    CampoImportacao.TRACE: "TRACE",
    CampoImportacao.HILTON: "HILTON",
    CampoImportacao.NOVILHO_PRECOCE: "Novilho Precoce",
}

CAMPOS_OBRIGATORIOS = frozenset({
    CampoImportacao.DATA_ABATE,
    CampoImportacao.QUANTIDADE,
    CampoImportacao.VALOR_ARROBA_NEGOCIADA,
    CampoImportacao.VALOR_TOTAL_ACERTO,
    CampoImportacao.ID_PRODUTOR,
    CampoImportacao.ID_FRIGORIFICO,
    CampoImportacao.ID_CATEGORIA_ANIMAL,
})

CAMPOS_BOOLEANOS = frozenset({
    CampoImportacao.TRACE,
    CampoImportacao.HILTON,
    CampoImportacao.NOVILHO_PRECOCE,
})

# Ordem importa: o primeiro sinônimo contido no cabeçalho vence
SINONIMOS = (
    ("data", CampoImportacao.DATA_ABATE),
    ("data abate", CampoImportacao.DATA_ABATE),
    ("data_abate", CampoImportacao.DATA_ABATE),
    ("lote", CampoImportacao.NOME_LOTE),
    ("nome_lote", CampoImportacao.NOME_LOTE),
    ("nome do lote", CampoImportacao.NOME_LOTE),
    ("quantidade", CampoImportacao.QUANTIDADE),
    ("qtd", CampoImportacao.QUANTIDADE),
    ("arroba", CampoImportacao.VALOR_ARROBA_NEGOCIADA),
    ("valor_arroba", CampoImportacao.VALOR_ARROBA_NEGOCIADA),
    ("valor arroba", CampoImportacao.VALOR_ARROBA_NEGOCIADA),
    ("valor_arroba_negociada", CampoImportacao.VALOR_ARROBA_NEGOCIADA),
    ("total", CampoImportacao.VALOR_TOTAL_ACERTO),
    ("valor_total", CampoImportacao.VALOR_TOTAL_ACERTO),
    ("valor total", CampoImportacao.VALOR_TOTAL_ACERTO),
    ("valor_total_acerto", CampoImportacao.VALOR_TOTAL_ACERTO),
    ("produtor", CampoImportacao.ID_PRODUTOR),
    ("id_produtor", CampoImportacao.ID_PRODUTOR),
    ("frigorifico", CampoImportacao.ID_FRIGORIFICO),
    ("id_frigorifico", CampoImportacao.ID_FRIGORIFICO),
    ("categoria", CampoImportacao.ID_CATEGORIA_ANIMAL),
    ("id_categoria", CampoImportacao.ID_CATEGORIA_ANIMAL),
    ("id_categoria_animal", CampoImportacao.ID_CATEGORIA_ANIMAL),
    ("trace", CampoImportacao.TRACE),
    ("hilton", CampoImportacao.HILTON),
    ("novilho_precoce", CampoImportacao.NOVILHO_PRECOCE),
    ("novilho", CampoImportacao.NOVILHO_PRECOCE),
)


class MapeamentoInvalido(ValueError):
    """Mapeamento recebido que não é 1:1."""


class ColumnMapping(BaseModel):
    coluna: str
    campo: CampoImportacao


def normalizar_cabecalho(header: str) -> str:
    """Minúsculas, sem espaços nas pontas e sem acentos."""
    decomposed = unicodedata.normalize("NFKD", str(header or "").strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def sugerir_campo(header: str, ocupados: Optional[set] = None) -> Optional[CampoImportacao]:
    normalized = normalizar_cabecalho(header)
    ocupados = ocupados or set()
    for sinonimo, campo in SINONIMOS:
        if campo in ocupados:
            continue
        if sinonimo in normalized:
            return campo
    return None


def auto_mapear(headers: Sequence[str]) -> List[ColumnMapping]:
    """Sugere o mapeamento inicial; colunas sem correspondência ficam de fora."""
    mapping: List[ColumnMapping] = []
    ocupados: set = set()
    for header in headers:
        campo = sugerir_campo(header, ocupados)
        if campo is None:
            continue
        ocupados.add(campo)
        mapping.append(ColumnMapping(coluna=header, campo=campo))
    return mapping


def atribuir_mapeamento(
    mapping: Sequence[ColumnMapping],
    coluna: str,
    campo: Optional[CampoImportacao],
) -> List[ColumnMapping]:
    """Aplica a escolha do usuário para uma coluna.

    Um campo atribuído a ``coluna`` é removido de qualquer outra coluna;
    ``campo=None`` remove o mapeamento da coluna.
    """
    if campo is None:
        return [m for m in mapping if m.coluna != coluna]

    result: List[ColumnMapping] = []
    encontrado = False
    for item in mapping:
        if item.coluna == coluna:
            result.append(ColumnMapping(coluna=coluna, campo=campo))
            encontrado = True
        elif item.campo != campo:
            result.append(item)
    if not encontrado:
        result.append(ColumnMapping(coluna=coluna, campo=campo))
    return result


def verificar_mapeamento(mapping: Sequence[ColumnMapping]) -> None:
    """Recusa colunas repetidas e campos atribuídos a mais de uma coluna."""
    colunas: set = set()
    campos: set = set()
    for item in mapping:
        if item.coluna in colunas:
            raise MapeamentoInvalido(f"A coluna '{item.coluna}' aparece mais de uma vez no mapeamento")
        if item.campo in campos:
            raise MapeamentoInvalido(f"O campo '{item.campo.value}' está mapeado para mais de uma coluna")
        colunas.add(item.coluna)
        campos.add(item.campo)


def campos_disponiveis() -> List[dict]:
    return [
        {
            "campo": campo.value,
            "label": CAMPOS_LABELS[campo],
            "obrigatorio": campo in CAMPOS_OBRIGATORIOS,
        }
        for campo in CampoImportacao
    ]
