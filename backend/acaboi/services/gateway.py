"""
Acesso genérico às tabelas do banco

Cada operação registra o erro com o nome da entidade, desfaz a transação e
repassa a exceção; não há nova tentativa nem cache.
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from acaboi.core.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class InvariantError(ValueError):
    """Dados que violam uma regra entre tabelas (ex.: propriedade de outro produtor)."""


class CrudGateway(Generic[ModelT]):
    def __init__(
        self,
        model: Type[ModelT],
        label: str,
        order_by: Optional[Sequence[Any]] = None,
        options: Optional[Sequence[Any]] = None,
    ):
        self.model = model
        self.label = label
        self.order_by = list(order_by or [])
        self.options = list(options or [])

    def query(self, db: Session):
        query = db.query(self.model)
        if self.options:
            query = query.options(*self.options)
        return query

    def listar(self, db: Session, **filtros: Any) -> List[ModelT]:
        try:
            query = self.query(db)
            for campo, valor in filtros.items():
                if valor is not None:
                    query = query.filter(getattr(self.model, campo) == valor)
            if self.order_by:
                query = query.order_by(*self.order_by)
            return query.all()
        except SQLAlchemyError as exc:
            logger.error("Erro ao listar %s: %s", self.label, exc)
            raise

    def obter(self, db: Session, obj_id: Any) -> Optional[ModelT]:
        try:
            return self.query(db).filter(self.model.id == obj_id).first()
        except SQLAlchemyError as exc:
            logger.error("Erro ao buscar %s %s: %s", self.label, obj_id, exc)
            raise

    def _commit(self, db: Session, obj: ModelT, acao: str) -> ModelT:
        try:
            db.commit()
            db.refresh(obj)
            return obj
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Erro ao %s %s: %s", acao, self.label, exc)
            raise

    def criar(self, db: Session, dados: Dict[str, Any]) -> ModelT:
        obj = self.model(**dados)
        db.add(obj)
        return self._commit(db, obj, "criar")

    def atualizar(self, db: Session, obj: ModelT, dados: Dict[str, Any]) -> ModelT:
        for campo, valor in dados.items():
            setattr(obj, campo, valor)
        return self._commit(db, obj, "atualizar")

    def excluir(self, db: Session, obj: ModelT) -> None:
        try:
            db.delete(obj)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Erro ao excluir %s %s: %s", self.label, obj.id, exc)
            raise
