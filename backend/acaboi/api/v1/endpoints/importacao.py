"""
Importação de abates (Excel/CSV) endpoints

O fluxo é sem estado: o cliente reenvia o arquivo e o mapeamento em cada
etapa (preview, validação e execução).
"""
import json
import logging
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session
from typing import List, Optional

from acaboi.api.auth import CurrentUser, require_permission
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.importacao import (
    CampoInfo,
    ImportResultResponse,
    MapeamentoRequest,
    PreviewResponse,
    ValidacaoResponse,
)
from acaboi.services.importacao.importacao_service import (
    ImportacaoError,
    carregar_planilha,
    gerar_preview,
    persistir_lote,
    processar_planilha,
)
from acaboi.services.importacao.leitor import ParseError, Planilha
from acaboi.services.importacao.mapeamento import (
    ColumnMapping,
    MapeamentoInvalido,
    atribuir_mapeamento,
    campos_disponiveis,
    verificar_mapeamento,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/importacao", tags=["importacao"])

can_import = require_permission(Permission.IMPORTAR)

_mapping_adapter = TypeAdapter(List[ColumnMapping])


async def _read_planilha(file: UploadFile) -> Planilha:
    content = await file.read()
    try:
        return carregar_planilha(file.filename, content)
    except (ParseError, ImportacaoError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


def _parse_mapping(raw: Optional[str]) -> List[ColumnMapping]:
    try:
        mapping = _mapping_adapter.validate_python(json.loads(raw or "[]"))
        verificar_mapeamento(mapping)
    except (json.JSONDecodeError, ValidationError, MapeamentoInvalido) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Mapeamento inválido") from exc
    return mapping


def _processar(planilha: Planilha, mapping: List[ColumnMapping]):
    try:
        return processar_planilha(planilha, mapping)
    except ImportacaoError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/campos", response_model=List[CampoInfo])
async def get_campos(user: CurrentUser = Depends(can_import)):
    """Target fields available for the column mapping"""
    return campos_disponiveis()


@router.post("/preview", response_model=PreviewResponse)
async def preview_planilha(
    file: UploadFile = File(...),
    user: CurrentUser = Depends(can_import),
):
    """Header, first rows and suggested mapping of an uploaded sheet"""
    planilha = await _read_planilha(file)
    return gerar_preview(planilha)


@router.post("/mapeamento", response_model=List[ColumnMapping])
async def alterar_mapeamento(
    request: MapeamentoRequest,
    user: CurrentUser = Depends(can_import),
):
    """Assign (or clear) the target field of one column, keeping the mapping 1:1"""
    return atribuir_mapeamento(request.mapeamento, request.coluna, request.campo)


@router.post("/validar", response_model=ValidacaoResponse)
async def validar_planilha(
    file: UploadFile = File(...),
    mapeamento: str = Form(...),
    user: CurrentUser = Depends(can_import),
):
    """Convert and validate every row without writing to the database"""
    planilha = await _read_planilha(file)
    processamento = _processar(planilha, _parse_mapping(mapeamento))
    return ValidacaoResponse(
        registros=processamento.registros,
        erros=[erro.to_dict() for erro in processamento.erros],
        valido=processamento.valido,
        mensagem=processamento.mensagem_bloqueio(),
    )


@router.post("/executar", response_model=ImportResultResponse)
async def executar_importacao(
    file: UploadFile = File(...),
    mapeamento: str = Form(...),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_import),
):
    """Persist the sheet as one batch; blocked while any row has errors"""
    planilha = await _read_planilha(file)
    processamento = _processar(planilha, _parse_mapping(mapeamento))
    if not processamento.valido:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "message": processamento.mensagem_bloqueio(),
                "erros": [erro.to_dict() for erro in processamento.erros],
            },
        )

    result = persistir_lote(db, processamento.registros)
    logger.info(
        "Importação de %s por %s: %d gravados, %d com erro",
        file.filename, user.email, result.success, result.errors,
    )
    return ImportResultResponse(success=result.success, errors=result.errors)
