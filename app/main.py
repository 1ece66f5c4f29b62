import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from app.api.errors import ERROR_RESPONSES, register_exception_handlers
from app.api.routes.auth import router as auth_router
from app.api.routes.autores import router as autores_router
from app.api.routes.avaliadores import router as avaliadores_router
from app.api.routes.premios import router as premios_router
from app.api.routes.projetos import router as projetos_router
from app.api.routes.users import root_router as users_root_router
from app.api.routes.users import router as users_router
from app.core.config import Settings, get_settings
from app.db.session import Database
from app.repositories import UserRepository
from app.services import UserService

logger = logging.getLogger(__name__)


def _ensure_bootstrap_user(db: Database, settings: Settings) -> None:
    email = (settings.BOOTSTRAP_ADMIN_EMAIL or "").strip()
    if not email or not settings.BOOTSTRAP_ADMIN_PASSWORD:
        return

    session = db.session()
    try:
        UserService(UserRepository(session)).ensure_admin(email, settings.BOOTSTRAP_ADMIN_PASSWORD)
    finally:
        session.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    db = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Iniciando %s %s", settings.PROJECT_NAME, settings.VERSION)
        db.open()
        if settings.DB_CREATE_ALL:
            db.create_all()
        _ensure_bootstrap_user(db, settings)

        yield

        logger.info("Encerrando a aplicação")
        db.close()

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db

    register_exception_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok"}

    prefix = settings.API_PREFIX
    app.include_router(auth_router, prefix=prefix, responses=ERROR_RESPONSES)
    app.include_router(users_router, prefix=prefix, responses=ERROR_RESPONSES)
    app.include_router(autores_router, prefix=prefix, responses=ERROR_RESPONSES)
    app.include_router(avaliadores_router, prefix=prefix, responses=ERROR_RESPONSES)
    app.include_router(premios_router, prefix=prefix, responses=ERROR_RESPONSES)
    app.include_router(projetos_router, prefix=prefix, responses=ERROR_RESPONSES)
    # por último: GET /{id} casa com qualquer segmento numérico
    app.include_router(users_root_router, prefix=prefix, responses=ERROR_RESPONSES)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:create_app", factory=True, host="0.0.0.0", port=8000, log_level="info")
