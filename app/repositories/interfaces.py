"""Contratos dos repositórios usados pelos serviços.

Os serviços dependem só destes protocolos; a implementação SQLAlchemy fica em
``app.repositories.<entidade>`` e os testes usam fakes em memória.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Sequence

from app.models import (
    AreaTematica,
    Autor,
    Avaliador,
    Premio,
    Projeto,
    SituacaoProjeto,
    User,
)


class AutorRepositoryProtocol(Protocol):
    def create(self, data: Dict[str, Any]) -> Autor: ...

    def find_by_id(self, id: int) -> Optional[Autor]: ...

    def find_by_cpf(self, cpf: str) -> Optional[Autor]: ...

    def find_by_email(self, email: str) -> Optional[Autor]: ...

    def find_all(self) -> List[Autor]: ...

    def update(self, id: int, data: Dict[str, Any]) -> Autor: ...

    def delete(self, id: int) -> Autor:
        """Inativa o autor e todos os projetos ligados a ele, numa transação só."""
        ...

    def get_projetos(self, autor_id: int) -> List[Projeto]: ...

    def count_projetos(self, autor_id: int) -> int: ...

    def media_notas(self, autor_id: int) -> Optional[float]: ...


class AvaliadorRepositoryProtocol(Protocol):
    def create(self, data: Dict[str, Any]) -> Avaliador: ...

    def find_by_id(self, id: int) -> Optional[Avaliador]: ...

    def find_by_cpf(self, cpf: str) -> Optional[Avaliador]: ...

    def find_by_email(self, email: str) -> Optional[Avaliador]: ...

    def find_all(self) -> List[Avaliador]: ...

    def update(self, id: int, data: Dict[str, Any]) -> Avaliador: ...

    def delete(self, id: int) -> Avaliador: ...

    def get_projetos(self, avaliador_id: int) -> List[Projeto]: ...

    def count_projetos(self, avaliador_id: int) -> int: ...

    def media_notas(self, avaliador_id: int) -> Optional[float]: ...


class PremioRepositoryProtocol(Protocol):
    def create(self, data: Dict[str, Any]) -> Premio: ...

    def find_by_id(self, id: int) -> Optional[Premio]: ...

    def find_by_nome_and_ano(self, nome: str, ano_edicao: int) -> Optional[Premio]: ...

    def find_all(self, apenas_ativos: bool = True) -> List[Premio]: ...

    def find_by_ano(self, ano_edicao: int) -> List[Premio]: ...

    def update(self, id: int, data: Dict[str, Any]) -> Premio: ...

    def delete(self, id: int) -> Premio: ...

    def get_projetos(self, premio_id: int) -> List[Projeto]: ...

    def count_projetos(self, premio_id: int) -> int:
        """Projetos ativos de um prémio ativo."""
        ...


class ProjetoRepositoryProtocol(Protocol):
    def create(self, data: Dict[str, Any], autor_ids: Sequence[int]) -> Projeto: ...

    def find_by_id(self, id: int) -> Optional[Projeto]: ...

    def find_by_titulo_and_premio(self, titulo: str, premio_id: int) -> Optional[Projeto]: ...

    def find_all(self, apenas_ativos: bool = True) -> List[Projeto]: ...

    def update(
        self, id: int, data: Dict[str, Any], autor_ids: Optional[Sequence[int]] = None
    ) -> Projeto:
        """Aplica só os campos recebidos; ``autor_ids`` substitui a lista inteira."""
        ...

    def delete(self, id: int) -> Projeto: ...

    def evaluate(
        self, id: int, nota: float, parecer_descritivo: str, situacao: SituacaoProjeto
    ) -> Projeto: ...

    def find_by_avaliador(self, avaliador_id: int, apenas_ativos: bool = True) -> List[Projeto]: ...

    def find_by_premio(self, premio_id: int, apenas_ativos: bool = True) -> List[Projeto]: ...

    def find_by_area_tematica(
        self, area_tematica: AreaTematica, apenas_ativos: bool = True
    ) -> List[Projeto]: ...

    def find_by_situacao(
        self, situacao: SituacaoProjeto, apenas_ativos: bool = True
    ) -> List[Projeto]: ...

    def find_by_autor(self, autor_id: int, apenas_ativos: bool = True) -> List[Projeto]: ...

    def count_by_situacao_and_premio(self, premio_id: int, situacao: SituacaoProjeto) -> int: ...

    def add_autor(self, projeto_id: int, autor_id: int) -> Projeto: ...

    def remove_autor(self, projeto_id: int, autor_id: int) -> Projeto: ...


class UserRepositoryProtocol(Protocol):
    def create(self, data: Dict[str, Any]) -> User: ...

    def find_by_id(self, id: int) -> Optional[User]: ...

    def find_by_email(self, email: str) -> Optional[User]: ...

    def update(self, id: int, data: Dict[str, Any]) -> User: ...
