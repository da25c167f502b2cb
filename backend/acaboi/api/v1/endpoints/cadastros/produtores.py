"""
Produtores endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from acaboi.api.auth import CurrentUser, get_current_user, require_permission
from acaboi.api.v1.endpoints.common import delete_or_409, get_or_404
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.produtor import ProdutorCreate, ProdutorUpdate, ProdutorResponse
from acaboi.schemas.propriedade import PropriedadeResponse
from acaboi.services.cadastros_service import produtores, propriedades_por_produtor

router = APIRouter()

can_edit = require_permission(Permission.PRODUTORES)


@router.get("/produtores", response_model=List[ProdutorResponse])
async def get_produtores(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get all produtores ordered by name"""
    return produtores.listar(db)


@router.get("/produtores/{produtor_id}", response_model=ProdutorResponse)
async def get_produtor(
    produtor_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get a specific produtor"""
    return get_or_404(produtores, db, produtor_id)


@router.get("/produtores/{produtor_id}/propriedades", response_model=List[PropriedadeResponse])
async def get_propriedades_do_produtor(
    produtor_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get the propriedades of a produtor"""
    get_or_404(produtores, db, produtor_id)
    return propriedades_por_produtor(db, produtor_id)


@router.post("/produtores", response_model=ProdutorResponse, status_code=status.HTTP_201_CREATED)
async def create_produtor(
    produtor: ProdutorCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Create a new produtor"""
    return produtores.criar(db, produtor.model_dump())


@router.put("/produtores/{produtor_id}", response_model=ProdutorResponse)
async def update_produtor(
    produtor_id: int,
    produtor: ProdutorUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Update a produtor"""
    db_produtor = get_or_404(produtores, db, produtor_id)
    return produtores.atualizar(db, db_produtor, produtor.model_dump(exclude_unset=True))


@router.delete("/produtores/{produtor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_produtor(
    produtor_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Delete a produtor and its propriedades"""
    db_produtor = get_or_404(produtores, db, produtor_id)
    delete_or_409(produtores, db, db_produtor)
    return None
