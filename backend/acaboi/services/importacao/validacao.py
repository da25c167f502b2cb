"""
Validação dos registros convertidos antes da gravação

Não consulta o banco: só verifica presença, formato e valores positivos.
"""
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

DATA_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MENSAGEM_DATA_INVALIDA = "Formato de data inválido. Use YYYY-MM-DD"


@dataclass(frozen=True)
class ErroValidacao:
    row: int
    field: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _positivo(value: Any) -> bool:
    try:
        return value is not None and value > 0
    except TypeError:
        return False


# (campo, teste, mensagem)
REGRAS = (
    ("quantidade", _positivo, "Quantidade deve ser maior que zero"),
    ("valor_arroba_negociada", _positivo, "Valor da arroba deve ser maior que zero"),
    ("valor_total_acerto", _positivo, "Valor total deve ser maior que zero"),
    ("id_produtor", lambda v: v is not None and v != 0, "Produtor é obrigatório"),
    ("id_frigorifico", lambda v: v is not None and v != 0, "Frigorífico é obrigatório"),
    ("id_categoria_animal", lambda v: v is not None and v != 0, "Categoria do animal é obrigatória"),
)


def _validar_data(value: Optional[str]) -> Optional[str]:
    if not value:
        return "Data de abate é obrigatória"
    if not DATA_RE.match(str(value)):
        return MENSAGEM_DATA_INVALIDA
    return None


def validar_registros(
    registros: Sequence[Dict[str, Any]],
    erros_conversao: Iterable[ErroValidacao] = (),
) -> List[ErroValidacao]:
    """Lista de erros por linha; a linha 1 do arquivo é o cabeçalho.

    Um campo que já falhou na conversão não é reportado de novo.
    """
    erros = list(erros_conversao)
    ja_reportados = {(erro.row, erro.field) for erro in erros}

    for idx, registro in enumerate(registros):
        row = idx + 2
        if (row, "data_abate") not in ja_reportados:
            mensagem = _validar_data(registro.get("data_abate"))
            if mensagem:
                erros.append(ErroValidacao(row=row, field="data_abate", message=mensagem))

        for campo, teste, mensagem in REGRAS:
            if (row, campo) in ja_reportados:
                continue
            if not teste(registro.get(campo)):
                erros.append(ErroValidacao(row=row, field=campo, message=mensagem))

    erros.sort(key=lambda erro: erro.row)
    return erros
