"""
Validadores compartilhados pelos formulários
"""
from typing import Any, Optional


def texto_obrigatorio(value: Any, mensagem: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(mensagem)
    return str(value).strip()


def vazio_para_none(value: Any) -> Optional[Any]:
    """Campos opcionais enviados em branco pelo formulário valem None."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
