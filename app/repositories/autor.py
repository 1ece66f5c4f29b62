from typing import Any, Dict, List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import ErrorKind, PersistenceError
from app.models import Autor, Projeto, projeto_autores
from app.repositories.base import SqlRepository


class AutorRepository(SqlRepository):
    def create(self, data: Dict[str, Any]) -> Autor:
        try:
            autor = Autor(**data, status=True)
            self.db.add(autor)
            self.db.commit()
            self.db.refresh(autor)
            return autor
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao criar autor", exc)

    def find_by_id(self, id: int) -> Optional[Autor]:
        try:
            return self.db.get(Autor, id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar autor por ID", exc)

    def find_by_cpf(self, cpf: str) -> Optional[Autor]:
        try:
            return self.db.execute(select(Autor).where(Autor.cpf == cpf)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar autor por CPF", exc)

    def find_by_email(self, email: str) -> Optional[Autor]:
        try:
            return self.db.execute(select(Autor).where(Autor.email == email)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar autor por email", exc)

    def find_all(self) -> List[Autor]:
        try:
            q = select(Autor).where(Autor.status.is_(True)).order_by(Autor.id)
            return list(self.db.execute(q).scalars().all())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar todos os autores", exc)

    def update(self, id: int, data: Dict[str, Any]) -> Autor:
        try:
            autor = self.db.get(Autor, id)
            if autor is None:
                raise PersistenceError(f"Autor com ID {id} não encontrado.", ErrorKind.NOT_FOUND)

            for campo, valor in data.items():
                setattr(autor, campo, valor)

            self.db.commit()
            self.db.refresh(autor)
            return autor
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao atualizar autor", exc)

    def delete(self, id: int) -> Autor:
        try:
            autor = self.db.get(Autor, id)
            if autor is None:
                raise PersistenceError(f"Autor com ID {id} não encontrado.", ErrorKind.NOT_FOUND)

            # inativa os projetos do autor e o próprio autor no mesmo commit
            projetos_do_autor = select(projeto_autores.c.projeto_id).where(
                projeto_autores.c.autor_id == id
            )
            self.db.execute(
                update(Projeto)
                .where(Projeto.id.in_(projetos_do_autor))
                .values(status=False)
                .execution_options(synchronize_session="fetch")
            )
            autor.status = False

            self.db.commit()
            self.db.refresh(autor)
            return autor
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao deletar autor", exc)

    def get_projetos(self, autor_id: int) -> List[Projeto]:
        try:
            q = (
                select(Projeto)
                .where(Projeto.status.is_(True))
                .where(Projeto.autores.any((Autor.id == autor_id) & Autor.status.is_(True)))
                .order_by(Projeto.id)
            )
            return list(self.db.execute(q).scalars().all())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projetos do autor", exc)

    def count_projetos(self, autor_id: int) -> int:
        try:
            q = (
                select(func.count(Projeto.id))
                .where(Projeto.status.is_(True))
                .where(Projeto.autores.any((Autor.id == autor_id) & Autor.status.is_(True)))
            )
            return int(self.db.execute(q).scalar_one())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao contar projetos do autor", exc)

    def media_notas(self, autor_id: int) -> Optional[float]:
        try:
            q = select(func.avg(Projeto.nota)).where(Projeto.autores.any(Autor.id == autor_id))
            media = self.db.execute(q).scalar_one()
            return float(media) if media is not None else None
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao calcular média dos projetos do autor", exc)
