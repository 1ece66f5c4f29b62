from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import ErrorKind, PersistenceError
from app.models import Premio, Projeto
from app.repositories.base import SqlRepository


class PremioRepository(SqlRepository):
    def create(self, data: Dict[str, Any]) -> Premio:
        try:
            premio = Premio(**data, status=True)
            self.db.add(premio)
            self.db.commit()
            self.db.refresh(premio)
            return premio
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao criar prémio", exc)

    def find_by_id(self, id: int) -> Optional[Premio]:
        try:
            return self.db.get(Premio, id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar prémio por ID", exc)

    def find_by_nome_and_ano(self, nome: str, ano_edicao: int) -> Optional[Premio]:
        # ativos e inativos: o par nome/ano não pode se repetir
        try:
            q = select(Premio).where(Premio.nome == nome, Premio.ano_edicao == ano_edicao)
            return self.db.execute(q).scalars().first()
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar prémio por nome e ano", exc)

    def find_all(self, apenas_ativos: bool = True) -> List[Premio]:
        try:
            q = select(Premio)
            if apenas_ativos:
                q = q.where(Premio.status.is_(True))
            q = q.order_by(Premio.id)
            return list(self.db.execute(q).scalars().all())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar todos os prémios", exc)

    def find_by_ano(self, ano_edicao: int) -> List[Premio]:
        try:
            q = (
                select(Premio)
                .where(Premio.ano_edicao == ano_edicao, Premio.status.is_(True))
                .order_by(Premio.nome)
            )
            return list(self.db.execute(q).scalars().all())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar prémios por ano de edição", exc)

    def update(self, id: int, data: Dict[str, Any]) -> Premio:
        try:
            premio = self.db.get(Premio, id)
            if premio is None:
                raise PersistenceError(f"Prémio com ID {id} não encontrado.", ErrorKind.NOT_FOUND)
            for campo, valor in data.items():
                setattr(premio, campo, valor)
            self.db.commit()
            self.db.refresh(premio)
            return premio
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao atualizar prémio", exc)

    def delete(self, id: int) -> Premio:
        """Inativa o prémio. Projetos vinculados não são tocados aqui."""
        try:
            premio = self.db.get(Premio, id)
            if premio is None:
                raise PersistenceError(f"Prémio com ID {id} não encontrado.", ErrorKind.NOT_FOUND)
            premio.status = False
            self.db.commit()
            self.db.refresh(premio)
            return premio
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao deletar prémio", exc)

    def get_projetos(self, premio_id: int) -> List[Projeto]:
        try:
            q = (
                select(Projeto)
                .join(Premio, Projeto.premio_id == Premio.id)
                .where(
                    Projeto.premio_id == premio_id,
                    Projeto.status.is_(True),
                    Premio.status.is_(True),
                )
                .order_by(Projeto.id)
            )
            return list(self.db.execute(q).scalars().all())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projetos do prémio", exc)

    def count_projetos(self, premio_id: int) -> int:
        try:
            q = (
                select(func.count(Projeto.id))
                .select_from(Projeto)
                .join(Premio, Projeto.premio_id == Premio.id)
                .where(
                    Projeto.premio_id == premio_id,
                    Projeto.status.is_(True),
                    Premio.status.is_(True),
                )
            )
            return int(self.db.execute(q).scalar_one())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao contar projetos do prémio", exc)
