"""
Abates endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from acaboi.api.auth import CurrentUser, get_current_user, require_permission
from acaboi.api.v1.endpoints.common import delete_or_409, get_or_404, invariant_to_422
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.abate import AbateCreate, AbateUpdate, AbateResponse
from acaboi.services.abates_service import abates, atualizar_abate, criar_abate, listar_abates
from acaboi.services.gateway import InvariantError

router = APIRouter(prefix="/abates", tags=["abates"])

can_edit = require_permission(Permission.ABATES)


@router.get("", response_model=List[AbateResponse])
async def get_abates(
    id_produtor: Optional[int] = None,
    id_frigorifico: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get abates, most recent first"""
    return listar_abates(db, id_produtor=id_produtor, id_frigorifico=id_frigorifico)


@router.get("/{abate_id}", response_model=AbateResponse)
async def get_abate(
    abate_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get a specific abate"""
    return get_or_404(abates, db, abate_id)


@router.post("", response_model=AbateResponse, status_code=status.HTTP_201_CREATED)
async def create_abate(
    abate: AbateCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Create a new abate (total defaults to quantidade x valor da arroba)"""
    try:
        return criar_abate(db, abate.model_dump())
    except InvariantError as exc:
        raise invariant_to_422(exc) from exc


@router.put("/{abate_id}", response_model=AbateResponse)
async def update_abate(
    abate_id: int,
    abate: AbateUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Update an abate"""
    db_abate = get_or_404(abates, db, abate_id)
    try:
        return atualizar_abate(db, db_abate, abate.model_dump(exclude_unset=True))
    except InvariantError as exc:
        raise invariant_to_422(exc) from exc


@router.delete("/{abate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_abate(
    abate_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Delete an abate"""
    db_abate = get_or_404(abates, db, abate_id)
    delete_or_409(abates, db, db_abate)
    return None
