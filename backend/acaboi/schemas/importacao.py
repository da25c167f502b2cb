"""
Importação schemas
"""
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from acaboi.services.importacao.mapeamento import CampoImportacao, ColumnMapping


class CampoInfo(BaseModel):
    campo: CampoImportacao
    label: str
    obrigatorio: bool


class PreviewResponse(BaseModel):
    cabecalho: List[str]
    linhas: List[List[Any]]
    total_linhas: int
    mapeamento: List[ColumnMapping]


class MapeamentoRequest(BaseModel):
    mapeamento: List[ColumnMapping] = []
    coluna: str
    campo: Optional[CampoImportacao] = None


class ErroValidacaoSchema(BaseModel):
    row: int
    field: str
    message: str


class ValidacaoResponse(BaseModel):
    registros: List[Dict[str, Any]]
    erros: List[ErroValidacaoSchema]
    valido: bool
    mensagem: Optional[str] = None


class ImportResultResponse(BaseModel):
    success: int
    errors: int
