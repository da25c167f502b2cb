"""
Dashboard endpoints
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from acaboi.api.auth import CurrentUser, require_permission
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.dashboard import AtividadeRecente, DashboardResumo
from acaboi.services.dashboard_service import atividades_recentes, resumo_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

can_access = require_permission(Permission.DASHBOARD)


@router.get("/resumo", response_model=DashboardResumo)
async def get_resumo(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Totals, weighted arroba average and series by category and month"""
    return resumo_dashboard(db)


@router.get("/recentes", response_model=List[AtividadeRecente])
async def get_recentes(
    limite: int = Query(5, ge=1, le=50),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Most recently registered abates"""
    return atividades_recentes(db, limite)
