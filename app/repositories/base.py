import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ErrorKind, PersistenceError

logger = logging.getLogger(__name__)


class SqlRepository:
    """Base dos repositórios SQLAlchemy: guarda a sessão e traduz erros do banco."""

    def __init__(self, db: Session):
        self.db = db

    def _falha(self, contexto: str, exc: SQLAlchemyError) -> PersistenceError:
        self.db.rollback()
        logger.error("%s: %s", contexto, exc)
        if isinstance(exc, IntegrityError):
            # unique/foreign key violada entre a checagem do serviço e a escrita
            return PersistenceError(
                f"{contexto}: registro duplicado ou referência inválida.", ErrorKind.CONFLICT
            )
        return PersistenceError(f"{contexto}: {exc}")
