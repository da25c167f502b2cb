"""
Escala de abates endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from acaboi.api.auth import CurrentUser, require_permission
from acaboi.api.v1.endpoints.common import delete_or_409, get_or_404, invariant_to_422
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.escala import (
    EscalaCreate,
    EscalaOpcoes,
    EscalaResponse,
    EscalaUpdate,
    ProtocoloResponse,
    TecnicoResponse,
)
from acaboi.services.escala_service import (
    atualizar_escala,
    criar_escala,
    escala,
    opcoes_escala,
    protocolos,
    tecnicos,
)
from acaboi.services.gateway import InvariantError

router = APIRouter(prefix="/escala", tags=["escala"])

can_access = require_permission(Permission.ESCALA)


@router.get("", response_model=List[EscalaResponse])
async def get_escala(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Get the whole schedule ordered by slaughter date"""
    return escala.listar(db)


@router.get("/opcoes", response_model=EscalaOpcoes)
async def get_opcoes(user: CurrentUser = Depends(can_access)):
    """Fixed option lists for the schedule form"""
    return opcoes_escala()


@router.get("/protocolos", response_model=List[ProtocoloResponse])
async def get_protocolos(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Get protocolos"""
    return protocolos.listar(db)


@router.get("/tecnicos", response_model=List[TecnicoResponse])
async def get_tecnicos(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Get tecnicos with their user names"""
    return tecnicos.listar(db)


@router.get("/{escala_id}", response_model=EscalaResponse)
async def get_escala_item(
    escala_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Get a specific schedule entry"""
    return get_or_404(escala, db, escala_id)


@router.post("", response_model=EscalaResponse, status_code=status.HTTP_201_CREATED)
async def create_escala(
    item: EscalaCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Create a schedule entry"""
    try:
        return criar_escala(db, item.model_dump())
    except InvariantError as exc:
        raise invariant_to_422(exc) from exc


@router.put("/{escala_id}", response_model=EscalaResponse)
async def update_escala(
    escala_id: int,
    item: EscalaUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Update a schedule entry"""
    db_item = get_or_404(escala, db, escala_id)
    try:
        return atualizar_escala(db, db_item, item.model_dump(exclude_unset=True))
    except InvariantError as exc:
        raise invariant_to_422(exc) from exc


@router.delete("/{escala_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_escala(
    escala_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_access),
):
    """Delete a schedule entry"""
    db_item = get_or_404(escala, db, escala_id)
    delete_or_409(escala, db, db_item)
    return None
