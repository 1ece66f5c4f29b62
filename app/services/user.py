import logging

from app.core.errors import AppError, Err, ErrorKind, Ok, PersistenceError, Result, conflict, not_found
from app.core.security import hash_password, verify_password
from app.models import Role, User
from app.repositories.interfaces import UserRepositoryProtocol
from app.schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repository: UserRepositoryProtocol):
        self.user_repository = user_repository

    def create(self, dto: UserCreate) -> Result[User]:
        try:
            if self.user_repository.find_by_email(dto.email):
                return conflict("Usuário já existe com esse e-mail")

            data = dto.model_dump()
            data["senha"] = hash_password(dto.senha)
            # cadastro público: admin só pelo bootstrap
            data["role"] = Role.USER
            return Ok(self.user_repository.create(data))
        except PersistenceError as exc:
            logger.error("Erro ao criar usuário: %s", exc.message)
            return exc.to_err()

    def login(self, email: str, senha: str) -> Result[User]:
        try:
            user = self.user_repository.find_by_email(email)
        except PersistenceError as exc:
            return exc.to_err()

        # mesma resposta para email desconhecido e senha errada
        if user is None or not verify_password(senha, user.senha):
            logger.warning("Login recusado para %s", email)
            return Err(AppError(ErrorKind.UNAUTHORIZED, "Credenciais inválidas"))
        return Ok(user)

    def get_by_id(self, id: int) -> Result[User]:
        try:
            user = self.user_repository.find_by_id(id)
        except PersistenceError as exc:
            return exc.to_err()
        if user is None:
            return not_found("Usuário não encontrado")
        return Ok(user)

    def update(self, id: int, dto: UserUpdate) -> Result[User]:
        data = dto.model_dump(exclude_unset=True, exclude_none=True)
        try:
            user = self.user_repository.find_by_id(id)
            if user is None:
                return not_found("Usuário não encontrado")

            if "email" in data and data["email"] != user.email:
                if self.user_repository.find_by_email(data["email"]):
                    return conflict("Usuário já existe com esse e-mail")
            if "senha" in data:
                data["senha"] = hash_password(data["senha"])

            return Ok(self.user_repository.update(id, data))
        except PersistenceError as exc:
            logger.error("Erro ao atualizar usuário: %s", exc.message)
            return exc.to_err()

    def ensure_admin(self, email: str, senha: str) -> User:
        """Garante o usuário admin de bootstrap (startup). Não mexe em um já existente."""
        user = self.user_repository.find_by_email(email)
        if user is not None:
            logger.info("[BOOTSTRAP] User OK: %s", email)
            return user

        user = self.user_repository.create(
            {"nome": "Administrador", "email": email, "senha": hash_password(senha), "role": Role.ADMIN}
        )
        logger.info("[BOOTSTRAP] User criado: %s", email)
        return user
