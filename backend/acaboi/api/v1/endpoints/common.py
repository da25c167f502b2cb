"""
Common helpers for ACABOI endpoints
"""
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from acaboi.services.gateway import CrudGateway, InvariantError


def get_or_404(gateway: CrudGateway, db: Session, obj_id):
    obj = gateway.obter(db, obj_id)
    if not obj:
        raise HTTPException(status_code=404, detail=f"{gateway.label.capitalize()} não encontrado")
    return obj


def invariant_to_422(exc: InvariantError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))


def delete_or_409(gateway: CrudGateway, db: Session, obj) -> None:
    try:
        gateway.excluir(db, obj)
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Não é possível excluir: existem registros vinculados a este {gateway.label}",
        ) from exc
