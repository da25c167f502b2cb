"""
Propriedades endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from acaboi.api.auth import CurrentUser, get_current_user, require_permission
from acaboi.api.v1.endpoints.common import delete_or_409, get_or_404
from acaboi.core.database import get_db
from acaboi.core.permissions import Permission
from acaboi.schemas.propriedade import PropriedadeCreate, PropriedadeUpdate, PropriedadeResponse
from acaboi.services.cadastros_service import opcoes_classificacao, produtores, propriedades

router = APIRouter()

can_edit = require_permission(Permission.PROPRIEDADES)


def _check_produtor(db: Session, id_produtor: int) -> None:
    if produtores.obter(db, id_produtor) is None:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Produtor não encontrado")


@router.get("/propriedades", response_model=List[PropriedadeResponse])
async def get_propriedades(
    id_produtor: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get all propriedades, optionally of one produtor"""
    return propriedades.listar(db, id_produtor=id_produtor)


@router.get("/propriedades/classificacoes")
async def get_classificacoes(user: CurrentUser = Depends(get_current_user)):
    """Classification options for the propriedade form"""
    return opcoes_classificacao()


@router.get("/propriedades/{propriedade_id}", response_model=PropriedadeResponse)
async def get_propriedade(
    propriedade_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get a specific propriedade"""
    return get_or_404(propriedades, db, propriedade_id)


@router.post("/propriedades", response_model=PropriedadeResponse, status_code=status.HTTP_201_CREATED)
async def create_propriedade(
    propriedade: PropriedadeCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Create a new propriedade"""
    _check_produtor(db, propriedade.id_produtor)
    return propriedades.criar(db, propriedade.model_dump())


@router.put("/propriedades/{propriedade_id}", response_model=PropriedadeResponse)
async def update_propriedade(
    propriedade_id: int,
    propriedade: PropriedadeUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Update a propriedade"""
    db_propriedade = get_or_404(propriedades, db, propriedade_id)
    update_data = propriedade.model_dump(exclude_unset=True)
    if update_data.get("id_produtor") is not None:
        _check_produtor(db, update_data["id_produtor"])
    return propriedades.atualizar(db, db_propriedade, update_data)


@router.delete("/propriedades/{propriedade_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_propriedade(
    propriedade_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(can_edit),
):
    """Delete a propriedade"""
    db_propriedade = get_or_404(propriedades, db, propriedade_id)
    delete_or_409(propriedades, db, db_propriedade)
    return None
