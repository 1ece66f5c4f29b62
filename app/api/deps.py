from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.errors import ApiError, AppError, ErrorKind
from app.core.security import verify
from app.db.session import get_db
from app.repositories import (
    AutorRepository,
    AvaliadorRepository,
    PremioRepository,
    ProjetoRepository,
    UserRepository,
)
from app.services import AutorService, AvaliadorService, PremioService, ProjetoService, UserService

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
):
    settings = request.app.state.settings
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise ApiError(AppError(ErrorKind.UNAUTHORIZED, "Token não fornecido"))

    if not settings.JWT_SECRET:
        raise ApiError(AppError(ErrorKind.INTERNAL, "Configuração do servidor inválida"))

    payload = verify(credentials.credentials, settings.JWT_SECRET, settings.JWT_ALGORITHM)
    if not payload:
        raise ApiError(AppError(ErrorKind.FORBIDDEN, "Token inválido"))

    return payload


def get_autor_service(db: Session = Depends(get_db)) -> AutorService:
    return AutorService(AutorRepository(db))


def get_avaliador_service(db: Session = Depends(get_db)) -> AvaliadorService:
    return AvaliadorService(AvaliadorRepository(db))


def get_premio_service(db: Session = Depends(get_db)) -> PremioService:
    return PremioService(PremioRepository(db))


def get_projeto_service(db: Session = Depends(get_db)) -> ProjetoService:
    return ProjetoService(
        ProjetoRepository(db),
        AutorRepository(db),
        PremioRepository(db),
        AvaliadorRepository(db),
    )


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))
