from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import ErrorKind, PersistenceError
from app.models import AreaTematica, Autor, Projeto, SituacaoProjeto
from app.models.projeto import PARECER_PADRAO
from app.repositories.base import SqlRepository


class ProjetoRepository(SqlRepository):
    """Projetos sempre voltam com autores, prémio e avaliador carregados."""

    def _recarregar(self, id: int) -> Projeto:
        q = select(Projeto).where(Projeto.id == id).execution_options(populate_existing=True)
        return self.db.execute(q).scalar_one()

    def _get_or_fail(self, id: int) -> Projeto:
        projeto = self.db.get(Projeto, id)
        if projeto is None:
            raise PersistenceError(f"Projeto com ID {id} não encontrado.", ErrorKind.NOT_FOUND)
        return projeto

    def _carregar_autores(self, autor_ids: Sequence[int]) -> List[Autor]:
        ids = list(dict.fromkeys(autor_ids))
        autores = list(
            self.db.execute(select(Autor).where(Autor.id.in_(ids)).order_by(Autor.id)).scalars().all()
        )
        if len(autores) != len(ids):
            raise PersistenceError(
                "Um ou mais autores não foram encontrados com os IDs fornecidos.",
                ErrorKind.NOT_FOUND,
            )
        return autores

    def _listar(self, *filtros, apenas_ativos: bool = True) -> List[Projeto]:
        q = select(Projeto).where(*filtros)
        if apenas_ativos:
            q = q.where(Projeto.status.is_(True))
        q = q.order_by(Projeto.id)
        return list(self.db.execute(q).scalars().all())

    def create(self, data: Dict[str, Any], autor_ids: Sequence[int]) -> Projeto:
        # linha do projeto + vínculos com autores no mesmo commit
        try:
            projeto = Projeto(
                **data,
                nota=0,
                parecer_descritivo=PARECER_PADRAO,
                status=True,
            )
            if projeto.situacao is None:
                projeto.situacao = SituacaoProjeto.SUBMETIDO
            projeto.autores = self._carregar_autores(autor_ids)

            self.db.add(projeto)
            self.db.commit()
            return self._recarregar(projeto.id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao criar projeto", exc)
        except PersistenceError:
            self.db.rollback()
            raise

    def find_by_id(self, id: int) -> Optional[Projeto]:
        try:
            return self.db.get(Projeto, id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projeto por ID", exc)

    def find_by_titulo_and_premio(self, titulo: str, premio_id: int) -> Optional[Projeto]:
        try:
            q = select(Projeto).where(Projeto.titulo == titulo, Projeto.premio_id == premio_id)
            return self.db.execute(q).scalars().first()
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projeto por título e prêmio", exc)

    def find_all(self, apenas_ativos: bool = True) -> List[Projeto]:
        try:
            return self._listar(apenas_ativos=apenas_ativos)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar todos os projetos", exc)

    def update(
        self, id: int, data: Dict[str, Any], autor_ids: Optional[Sequence[int]] = None
    ) -> Projeto:
        try:
            projeto = self._get_or_fail(id)
            for campo, valor in data.items():
                setattr(projeto, campo, valor)
            if autor_ids is not None:
                projeto.autores = self._carregar_autores(autor_ids)

            self.db.commit()
            return self._recarregar(id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao atualizar projeto", exc)
        except PersistenceError:
            self.db.rollback()
            raise

    def delete(self, id: int) -> Projeto:
        try:
            projeto = self._get_or_fail(id)
            projeto.status = False
            self.db.commit()
            return self._recarregar(id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao deletar projeto", exc)

    def evaluate(
        self, id: int, nota: float, parecer_descritivo: str, situacao: SituacaoProjeto
    ) -> Projeto:
        # só os três campos da avaliação
        try:
            projeto = self._get_or_fail(id)
            projeto.nota = nota
            projeto.parecer_descritivo = parecer_descritivo
            projeto.situacao = situacao
            self.db.commit()
            return self._recarregar(id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao avaliar projeto", exc)

    def find_by_avaliador(self, avaliador_id: int, apenas_ativos: bool = True) -> List[Projeto]:
        try:
            return self._listar(Projeto.avaliador_id == avaliador_id, apenas_ativos=apenas_ativos)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projetos por avaliador", exc)

    def find_by_premio(self, premio_id: int, apenas_ativos: bool = True) -> List[Projeto]:
        try:
            return self._listar(Projeto.premio_id == premio_id, apenas_ativos=apenas_ativos)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projetos por prêmio", exc)

    def find_by_area_tematica(
        self, area_tematica: AreaTematica, apenas_ativos: bool = True
    ) -> List[Projeto]:
        try:
            return self._listar(Projeto.area_tematica == area_tematica, apenas_ativos=apenas_ativos)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projetos por área temática", exc)

    def find_by_situacao(
        self, situacao: SituacaoProjeto, apenas_ativos: bool = True
    ) -> List[Projeto]:
        try:
            return self._listar(Projeto.situacao == situacao, apenas_ativos=apenas_ativos)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projetos por situação", exc)

    def find_by_autor(self, autor_id: int, apenas_ativos: bool = True) -> List[Projeto]:
        try:
            return self._listar(Projeto.autores.any(Autor.id == autor_id), apenas_ativos=apenas_ativos)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao buscar projetos por autor", exc)

    def count_by_situacao_and_premio(self, premio_id: int, situacao: SituacaoProjeto) -> int:
        try:
            q = select(func.count(Projeto.id)).where(
                Projeto.premio_id == premio_id,
                Projeto.situacao == situacao,
                Projeto.status.is_(True),
            )
            return int(self.db.execute(q).scalar_one())
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao contar projetos por situação e prêmio", exc)

    def add_autor(self, projeto_id: int, autor_id: int) -> Projeto:
        try:
            projeto = self._get_or_fail(projeto_id)
            autor = self.db.get(Autor, autor_id)
            if autor is None:
                raise PersistenceError(
                    f"Erro ao adicionar autor: Autor com ID {autor_id} não encontrado.",
                    ErrorKind.NOT_FOUND,
                )
            if autor not in projeto.autores:
                projeto.autores.append(autor)
            self.db.commit()
            return self._recarregar(projeto_id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao adicionar autor ao projeto", exc)

    def remove_autor(self, projeto_id: int, autor_id: int) -> Projeto:
        try:
            projeto = self._get_or_fail(projeto_id)
            projeto.autores = [a for a in projeto.autores if a.id != autor_id]
            self.db.commit()
            return self._recarregar(projeto_id)
        except SQLAlchemyError as exc:
            raise self._falha("Erro ao remover autor do projeto", exc)
