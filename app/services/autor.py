import logging
from typing import List, Optional

from app.core.errors import Ok, PersistenceError, Result, conflict, not_found
from app.models import Autor, Projeto
from app.repositories.interfaces import AutorRepositoryProtocol
from app.schemas import AutorCreate, AutorUpdate

logger = logging.getLogger(__name__)

NAO_ENCONTRADO = "Autor não encontrado ou inativo."


class AutorService:
    def __init__(self, autor_repository: AutorRepositoryProtocol):
        self.autor_repository = autor_repository

    def _ativo(self, id: int) -> Optional[Autor]:
        autor = self.autor_repository.find_by_id(id)
        if autor is None or not autor.status:
            return None
        return autor

    def create(self, dto: AutorCreate) -> Result[Autor]:
        """Cria o autor se CPF e email ainda não estiverem em uso (ativos ou não)."""
        try:
            if self.autor_repository.find_by_cpf(dto.cpf):
                return conflict("Autor com este CPF já existe.")
            if self.autor_repository.find_by_email(dto.email):
                return conflict("Autor com este Email já existe.")

            return Ok(self.autor_repository.create(dto.model_dump()))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao criar autor: %s", exc.message)
            return exc.to_err()

    def get_by_id(self, id: int) -> Result[Autor]:
        try:
            autor = self._ativo(id)
            if autor is None:
                return not_found(NAO_ENCONTRADO)
            return Ok(autor)
        except PersistenceError as exc:
            return exc.to_err()

    def list(self) -> Result[List[Autor]]:
        try:
            return Ok(self.autor_repository.find_all())
        except PersistenceError as exc:
            logger.error("Erro no serviço ao listar autores: %s", exc.message)
            return exc.to_err()

    def update(self, id: int, dto: AutorUpdate) -> Result[Autor]:
        data = dto.model_dump(exclude_unset=True, exclude_none=True)
        try:
            atual = self._ativo(id)
            if atual is None:
                return not_found(NAO_ENCONTRADO)

            # só confere unicidade do que mudou
            if "cpf" in data and data["cpf"] != atual.cpf:
                outro = self.autor_repository.find_by_cpf(data["cpf"])
                if outro is not None and outro.id != id:
                    return conflict("CPF já cadastrado para outro autor.")
            if "email" in data and data["email"] != atual.email:
                outro = self.autor_repository.find_by_email(data["email"])
                if outro is not None and outro.id != id:
                    return conflict("Email já cadastrado para outro autor.")

            return Ok(self.autor_repository.update(id, data))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao atualizar autor: %s", exc.message)
            return exc.to_err()

    def delete(self, id: int) -> Result[str]:
        try:
            if self._ativo(id) is None:
                return not_found("Autor não encontrado ou já está inativo.")

            self.autor_repository.delete(id)
            logger.info("Autor %s inativado junto com seus projetos", id)
            return Ok("Autor inativado com sucesso.")
        except PersistenceError as exc:
            logger.error("Erro no serviço ao deletar autor: %s", exc.message)
            return exc.to_err()

    def get_projetos(self, autor_id: int) -> Result[List[Projeto]]:
        try:
            if self._ativo(autor_id) is None:
                return not_found(NAO_ENCONTRADO)
            return Ok(self.autor_repository.get_projetos(autor_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao buscar projetos do autor: %s", exc.message)
            return exc.to_err()

    def count_projetos(self, autor_id: int) -> Result[int]:
        try:
            if self._ativo(autor_id) is None:
                return not_found(NAO_ENCONTRADO)
            return Ok(self.autor_repository.count_projetos(autor_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao contar projetos do autor: %s", exc.message)
            return exc.to_err()

    def media_notas(self, autor_id: int) -> Result[Optional[float]]:
        # média de todos os projetos ligados, inclusive inativos
        try:
            if self.autor_repository.find_by_id(autor_id) is None:
                return not_found("Autor não encontrado.")
            return Ok(self.autor_repository.media_notas(autor_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao calcular média do autor: %s", exc.message)
            return exc.to_err()
