import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import ApiError
from app.schemas import ErrorOut

logger = logging.getLogger(__name__)

# documenta no OpenAPI o corpo de erro comum a todas as rotas
ERROR_RESPONSES = {
    code: {"model": ErrorOut} for code in (400, 401, 403, 404, 500)
}


def _erro(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _mensagem_validacao(exc: RequestValidationError) -> str:
    partes = []
    for err in exc.errors():
        campo = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        partes.append(f"{campo}: {err.get('msg')}" if campo else str(err.get("msg")))
    return "; ".join(partes) or "Dados inválidos"


def register_exception_handlers(app: FastAPI) -> None:
    """Toda resposta de erro sai como ``{"error": "<mensagem>"}``."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return _erro(exc.status_code, exc.error.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _erro(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _erro(400, _mensagem_validacao(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Erro não tratado em %s %s", request.method, request.url.path)
        return _erro(500, "Erro interno do servidor")
