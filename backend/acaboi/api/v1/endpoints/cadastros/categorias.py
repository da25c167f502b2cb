"""
Categorias de animais endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from acaboi.api.auth import CurrentUser, get_current_user, require_permission
from acaboi.api.v1.endpoints.common import delete_or_409, get_or_404
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.categoria import CategoriaCreate, CategoriaResponse
from acaboi.services.cadastros_service import categorias

router = APIRouter()

can_edit = require_permission(Permission.ABATES)


@router.get("/categorias", response_model=List[CategoriaResponse])
async def get_categorias(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get all animal categories"""
    return categorias.listar(db)


@router.post("/categorias", response_model=CategoriaResponse, status_code=status.HTTP_201_CREATED)
async def create_categoria(
    categoria: CategoriaCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Create a new animal category"""
    return categorias.criar(db, categoria.model_dump())


@router.delete("/categorias/{categoria_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_categoria(
    categoria_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Delete an animal category"""
    db_categoria = get_or_404(categorias, db, categoria_id)
    delete_or_409(categorias, db, db_categoria)
    return None
