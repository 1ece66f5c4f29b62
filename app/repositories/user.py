from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import ErrorKind, PersistenceError
from app.models import User
from app.repositories.base import SqlRepository


class UserRepository(SqlRepository):
    def create(self, data: Dict[str, Any]) -> User:
        try:
            user = User(**data)
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao criar usuário", exc)

    def find_by_id(self, id: int) -> Optional[User]:
        try:
            return self.db.get(User, id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar usuário", exc)

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar usuário por email", exc)

    def update(self, id: int, data: Dict[str, Any]) -> User:
        try:
            user = self.db.get(User, id)
            if user is None:
                raise PersistenceError("Usuário não encontrado", ErrorKind.NOT_FOUND)
            for campo, valor in data.items():
                setattr(user, campo, valor)
            self.db.commit()
            self.db.refresh(user)
            return user
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao atualizar usuário", exc)
