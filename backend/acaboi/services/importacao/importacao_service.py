"""
Serviço de importação de abates a partir de planilhas

Fluxo: leitura -> mapeamento -> conversão -> validação -> gravação em lote.
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from acaboi.models import Abate
from acaboi.services.importacao.conversao import converter_linhas
from acaboi.services.importacao.leitor import Planilha, ler_planilha
from acaboi.services.importacao.mapeamento import (
    ColumnMapping,
    MapeamentoInvalido,
    auto_mapear,
    verificar_mapeamento,
)
from acaboi.services.importacao.validacao import ErroValidacao, validar_registros

logger = logging.getLogger(__name__)

LINHAS_PREVIEW = 5

MENSAGEM_DADOS_INSUFICIENTES = "O arquivo não contém dados suficientes para importação."
MENSAGEM_MAPEAMENTO_VAZIO = "Faça o mapeamento de pelo menos uma coluna para continuar."


class ImportacaoError(ValueError):
    """Planilha ou mapeamento que não permite continuar a importação."""


@dataclass
class ImportResult:
    success: int = 0
    errors: int = 0


@dataclass
class ProcessamentoImportacao:
    registros: List[Dict[str, Any]] = field(default_factory=list)
    erros: List[ErroValidacao] = field(default_factory=list)

    @property
    def valido(self) -> bool:
        return not self.erros

    def mensagem_bloqueio(self) -> Optional[str]:
        if self.valido:
            return None
        return f"Existem {len(self.erros)} erros que precisam ser corrigidos antes de continuar."


def carregar_planilha(filename: str, content: bytes) -> Planilha:
    planilha = ler_planilha(filename, content)
    if planilha.total_linhas < 2:
        raise ImportacaoError(MENSAGEM_DADOS_INSUFICIENTES)
    return planilha


def gerar_preview(planilha: Planilha, linhas: int = LINHAS_PREVIEW) -> Dict[str, Any]:
    """Cabeçalho, primeiras linhas e mapeamento sugerido."""
    return {
        "cabecalho": planilha.cabecalho,
        "linhas": [[cell.to_json() for cell in row] for row in planilha.linhas[:linhas]],
        "total_linhas": len(planilha.linhas),
        "mapeamento": auto_mapear(planilha.cabecalho),
    }


def processar_planilha(planilha: Planilha, mapping: Sequence[ColumnMapping]) -> ProcessamentoImportacao:
    if not mapping:
        raise ImportacaoError(MENSAGEM_MAPEAMENTO_VAZIO)
    try:
        verificar_mapeamento(mapping)
    except MapeamentoInvalido as exc:
        raise ImportacaoError(f"Mapeamento inválido: {exc}") from exc
    conversao = converter_linhas(planilha.cabecalho, planilha.linhas, mapping)
    erros = validar_registros(conversao.registros, conversao.erros)
    return ProcessamentoImportacao(registros=conversao.registros, erros=erros)


def _valor_campos(registro: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "data_abate": date.fromisoformat(registro["data_abate"]),
        "nome_lote": registro.get("nome_lote"),
        "quantidade": registro["quantidade"],
        "valor_arroba_negociada": registro["valor_arroba_negociada"],
        "valor_total_acerto": registro["valor_total_acerto"],
        "id_produtor": registro["id_produtor"],
        "id_frigorifico": registro["id_frigorifico"],
        "id_categoria_animal": registro["id_categoria_animal"],
        "trace": bool(registro.get("trace")),
        "hilton": bool(registro.get("hilton")),
        "novilho_precoce": bool(registro.get("novilho_precoce")),
    }


def persistir_lote(db: Session, registros: Sequence[Dict[str, Any]]) -> ImportResult:
    """Grava todos os registros numa única transação.

    Qualquer falha do banco desfaz o lote inteiro.
    """
    if not registros:
        return ImportResult()

    try:
        db.add_all([Abate(**_valor_campos(registro)) for registro in registros])
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Falha ao gravar lote de %d abates: %s", len(registros), exc)
        return ImportResult(success=0, errors=len(registros))

    logger.info("Lote importado com %d abates", len(registros))
    return ImportResult(success=len(registros), errors=0)


def importar_arquivo(
    db: Session,
    filename: str,
    content: bytes,
    mapping: Optional[Sequence[ColumnMapping]] = None,
) -> Dict[str, Any]:
    """Executa o fluxo completo; usado pelo script de linha de comando."""
    planilha = carregar_planilha(filename, content)
    if mapping is None:
        mapping = auto_mapear(planilha.cabecalho)
    processamento = processar_planilha(planilha, mapping)
    if not processamento.valido:
        return {
            "success": 0,
            "errors": len(processamento.registros),
            "erros": [erro.to_dict() for erro in processamento.erros],
        }
    result = persistir_lote(db, processamento.registros)
    return {"success": result.success, "errors": result.errors, "erros": []}
