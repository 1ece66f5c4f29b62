import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Engine + fábrica de sessões com ciclo de vida explícito.

    Criado pelo ``create_app``, aberto no startup e fechado no shutdown.
    Nada de cliente global de módulo: quem precisa de sessão recebe esta
    instância (ou pega pelo ``app.state.db``).
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database não foi aberto")
        return self._engine

    def open(self) -> None:
        if self._engine is not None:
            return

        kwargs = {"echo": self.echo}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            # sqlite em memória: uma conexão só, senão cada sessão vê um banco vazio
            if ":memory:" in self.url or self.url in ("sqlite://", "sqlite+pysqlite://"):
                kwargs["poolclass"] = StaticPool

        self._engine = create_engine(self.url, **kwargs)
        self._session_factory = sessionmaker(
            bind=self._engine, autocommit=False, autoflush=False, expire_on_commit=False
        )
        logger.info("Database aberto (%s)", self._engine.url.render_as_string(hide_password=True))

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database fechado")

    def create_all(self) -> None:
        import app.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database não foi aberto")
        return self._session_factory()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
