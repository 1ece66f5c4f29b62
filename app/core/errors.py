"""Erros de domínio e resultados explícitos dos serviços.

Os serviços não levantam exceção para falhas esperadas: devolvem ``Ok`` ou
``Err``. O ``ErrorKind`` carrega a classe da falha, e é dele (nunca do texto
da mensagem) que a camada HTTP tira o status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    INTERNAL = "internal"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


# conflito sai como 400, igual ao comportamento original da API
HTTP_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 400,
    ErrorKind.VALIDATION: 400,
    ErrorKind.INTERNAL: 500,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
}


@dataclass(frozen=True, slots=True)
class AppError:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    error: AppError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def not_found(message: str) -> Err:
    return Err(AppError(ErrorKind.NOT_FOUND, message))


def conflict(message: str) -> Err:
    return Err(AppError(ErrorKind.CONFLICT, message))


def invalid(message: str) -> Err:
    return Err(AppError(ErrorKind.VALIDATION, message))


class PersistenceError(Exception):
    """Falha do banco, já com o contexto da operação do repositório."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INTERNAL):
        super().__init__(message)
        self.message = message
        self.kind = kind

    def to_err(self) -> Err:
        return Err(AppError(self.kind, self.message))


class ApiError(Exception):
    """Levantada pela camada HTTP para responder ``{"error": ...}``."""

    def __init__(self, error: AppError):
        super().__init__(error.message)
        self.error = error

    @property
    def status_code(self) -> int:
        return self.error.status_code


def unwrap(result: Result[T]) -> T:
    if isinstance(result, Err):
        raise ApiError(result.error)
    return result.value
