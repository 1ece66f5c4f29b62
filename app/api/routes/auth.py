import logging

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_user_service
from app.core.errors import ApiError, AppError, ErrorKind, unwrap
from app.core.security import sign
from app.schemas import LoginIn, LoginOut
from app.services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, request: Request, service: UserService = Depends(get_user_service)):
    settings = request.app.state.settings
    if not settings.JWT_SECRET:
        logger.error("JWT_SECRET não configurado")
        raise ApiError(AppError(ErrorKind.INTERNAL, "Configuração do servidor inválida"))

    user = unwrap(service.login(payload.email, payload.senha))

    token = sign(
        {"id": user.id, "email": user.email},
        secret=settings.JWT_SECRET,
        ttl_seconds=60 * 60 * settings.ACCESS_TOKEN_EXPIRE_HOURS,
        algorithm=settings.JWT_ALGORITHM,
    )
    return LoginOut(token=token)
