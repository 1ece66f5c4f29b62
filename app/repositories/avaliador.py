from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import ErrorKind, PersistenceError
from app.models import Avaliador, Projeto
from app.repositories.base import SqlRepository


class AvaliadorRepository(SqlRepository):
    def create(self, data: Dict[str, Any]) -> Avaliador:
        try:
            avaliador = Avaliador(**data, status=True)
            self.db.add(avaliador)
            self.db.commit()
            self.db.refresh(avaliador)
            return avaliador
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao criar avaliador", exc)

    def find_by_id(self, id: int) -> Optional[Avaliador]:
        try:
            return self.db.get(Avaliador, id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar avaliador", exc)

    def find_by_cpf(self, cpf: str) -> Optional[Avaliador]:
        try:
            return self.db.execute(
                select(Avaliador).where(Avaliador.cpf == cpf)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar avaliador", exc)

    def find_by_email(self, email: str) -> Optional[Avaliador]:
        try:
            return self.db.execute(
                select(Avaliador).where(Avaliador.email == email)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar avaliador", exc)

    def find_all(self) -> List[Avaliador]:
        try:
            q = select(Avaliador).where(Avaliador.status.is_(True)).order_by(Avaliador.id)
            return list(self.db.execute(q).scalars().all())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar avaliadores", exc)

    def update(self, id: int, data: Dict[str, Any]) -> Avaliador:
        try:
            avaliador = self.db.get(Avaliador, id)
            if avaliador is None:
                raise PersistenceError(
                    f"Avaliador com ID {id} não encontrado.", ErrorKind.NOT_FOUND
                )
            for campo, valor in data.items():
                setattr(avaliador, campo, valor)
            self.db.commit()
            self.db.refresh(avaliador)
            return avaliador
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao atualizar avaliador", exc)

    def delete(self, id: int) -> Avaliador:
        # projetos do avaliador continuam como estão
        try:
            avaliador = self.db.get(Avaliador, id)
            if avaliador is None:
                raise PersistenceError(
                    f"Avaliador com ID {id} não encontrado.", ErrorKind.NOT_FOUND
                )
            avaliador.status = False
            self.db.commit()
            self.db.refresh(avaliador)
            return avaliador
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao deletar avaliador", exc)

    def get_projetos(self, avaliador_id: int) -> List[Projeto]:
        try:
            q = (
                select(Projeto)
                .where(Projeto.avaliador_id == avaliador_id, Projeto.status.is_(True))
                .order_by(Projeto.id)
            )
            return list(self.db.execute(q).scalars().all())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projetos do avaliador", exc)

    def count_projetos(self, avaliador_id: int) -> int:
        try:
            q = select(func.count(Projeto.id)).where(
                Projeto.avaliador_id == avaliador_id, Projeto.status.is_(True)
            )
            return int(self.db.execute(q).scalar_one())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao contar projetos do avaliador", exc)

    def media_notas(self, avaliador_id: int) -> Optional[float]:
        try:
            q = select(func.avg(Projeto.nota)).where(Projeto.avaliador_id == avaliador_id)
            media = self.db.execute(q).scalar_one()
            return float(media) if media is not None else None
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar média dos projetos do avaliador", exc)
