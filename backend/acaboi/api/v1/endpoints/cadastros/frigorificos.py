"""
Frigoríficos endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from acaboi.api.auth import CurrentUser, get_current_user, require_permission
from acaboi.api.v1.endpoints.common import delete_or_409, get_or_404
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.frigorifico import FrigorificoCreate, FrigorificoUpdate, FrigorificoResponse
from acaboi.services.cadastros_service import frigorificos

router = APIRouter()

can_edit = require_permission(Permission.FRIGORIFICOS)


@router.get("/frigorificos", response_model=List[FrigorificoResponse])
async def get_frigorificos(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get all frigorificos ordered by name"""
    return frigorificos.listar(db)


@router.get("/frigorificos/{frigorifico_id}", response_model=FrigorificoResponse)
async def get_frigorifico(
    frigorifico_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get a specific frigorifico"""
    return get_or_404(frigorificos, db, frigorifico_id)


@router.post("/frigorificos", response_model=FrigorificoResponse, status_code=status.HTTP_201_CREATED)
async def create_frigorifico(
    frigorifico: FrigorificoCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Create a new frigorifico"""
    return frigorificos.criar(db, frigorifico.model_dump())


@router.put("/frigorificos/{frigorifico_id}", response_model=FrigorificoResponse)
async def update_frigorifico(
    frigorifico_id: int,
    frigorifico: FrigorificoUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Update a frigorifico"""
    db_frigorifico = get_or_404(frigorificos, db, frigorifico_id)
    return frigorificos.atualizar(db, db_frigorifico, frigorifico.model_dump(exclude_unset=True))


@router.delete("/frigorificos/{frigorifico_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_frigorifico(
    frigorifico_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Delete a frigorifico"""
    db_frigorifico = get_or_404(frigorificos, db, frigorifico_id)
    delete_or_409(frigorificos, db, db_frigorifico)
    return None
