"""
Relatórios endpoints
"""
from datetime import date
from io import BytesIO
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session
from typing import List, Optional

from acaboi.api.auth import CurrentUser, require_permission
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.relatorios import (
    AbateRelatorio,
    FiltrosRelatorio,
    ResumoFrigorifico,
    ResumoProdutor,
    TipoRelatorio,
)
from acaboi.services.relatorios.exportacao import exportar_excel, exportar_pdf, nome_arquivo
from acaboi.services.relatorios.report_service import (
    buscar_abates,
    linhas_abates,
    resumo_por_frigorifico,
    resumo_por_produtor,
)

router = APIRouter(prefix="/relatorios", tags=["relatorios"])

can_access = require_permission(Permission.RELATORIOS)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def get_filtros(
    data_inicio: Optional[date] = Query(None),
    data_fim: Optional[date] = Query(None),
    id_produtor: Optional[int] = Query(None),
    id_frigorifico: Optional[int] = Query(None),
    id_categoria: Optional[int] = Query(None),
) -> FiltrosRelatorio:
    if data_inicio and data_fim and data_inicio > data_fim:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A data inicial deve ser anterior à data final",
        )
    return FiltrosRelatorio(
        data_inicio=data_inicio,
        data_fim=data_fim,
        id_produtor=id_produtor,
        id_frigorifico=id_frigorifico,
        id_categoria=id_categoria,
    )


def _dados(db: Session, tipo: TipoRelatorio, filtros: FiltrosRelatorio) -> list:
    abates = buscar_abates(db, filtros)
    if tipo is TipoRelatorio.PRODUTORES:
        return resumo_por_produtor(abates)
    if tipo is TipoRelatorio.FRIGORIFICOS:
        return resumo_por_frigorifico(abates)
    return linhas_abates(abates)


@router.get("/abates", response_model=List[AbateRelatorio])
async def get_relatorio_abates(
    filtros: FiltrosRelatorio = Depends(get_filtros),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Filtered abates with names resolved"""
    return _dados(db, TipoRelatorio.ABATES, filtros)


@router.get("/produtores", response_model=List[ResumoProdutor])
async def get_relatorio_produtores(
    filtros: FiltrosRelatorio = Depends(get_filtros),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Per-producer summary of the filtered abates"""
    return _dados(db, TipoRelatorio.PRODUTORES, filtros)


@router.get("/frigorificos", response_model=List[ResumoFrigorifico])
async def get_relatorio_frigorificos(
    filtros: FiltrosRelatorio = Depends(get_filtros),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Per-slaughterhouse summary of the filtered abates"""
    return _dados(db, TipoRelatorio.FRIGORIFICOS, filtros)


@router.get("/{tipo}/excel")
async def export_excel(
    tipo: TipoRelatorio,
    filtros: FiltrosRelatorio = Depends(get_filtros),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Download the report as an Excel workbook"""
    content = exportar_excel(tipo, _dados(db, tipo, filtros))
    filename = nome_arquivo(tipo, "xlsx")
    return StreamingResponse(
        BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/{tipo}/pdf")
async def export_pdf(
    tipo: TipoRelatorio,
    filtros: FiltrosRelatorio = Depends(get_filtros),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Download the report as a PDF"""
    pdf_buffer = exportar_pdf(tipo, _dados(db, tipo, filtros))
    filename = nome_arquivo(tipo, "pdf")
    return StreamingResponse(
        pdf_buffer,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
