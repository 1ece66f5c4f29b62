import logging
from typing import List, Optional

from app.core.errors import Ok, PersistenceError, Result, conflict, not_found
from app.models import Avaliador, Projeto
from app.repositories.interfaces import AvaliadorRepositoryProtocol
from app.schemas import AvaliadorCreate, AvaliadorUpdate

logger = logging.getLogger(__name__)

NAO_ENCONTRADO = "Avaliador não encontrado ou inativo."


class AvaliadorService:
    def __init__(self, avaliador_repository: AvaliadorRepositoryProtocol):
        self.avaliador_repository = avaliador_repository

    def _ativo(self, id: int) -> Optional[Avaliador]:
        avaliador = self.avaliador_repository.find_by_id(id)
        if avaliador is None or not avaliador.status:
            return None
        return avaliador

    def create(self, dto: AvaliadorCreate) -> Result[Avaliador]:
        try:
            if self.avaliador_repository.find_by_cpf(dto.cpf):
                return conflict("Avaliador com esse CPF já existe.")
            if self.avaliador_repository.find_by_email(dto.email):
                return conflict("Avaliador com esse Email já existe.")

            return Ok(self.avaliador_repository.create(dto.model_dump()))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao criar avaliador: %s", exc.message)
            return exc.to_err()

    def get_by_id(self, id: int) -> Result[Avaliador]:
        try:
            avaliador = self._ativo(id)
            if avaliador is None:
                return not_found(NAO_ENCONTRADO)
            return Ok(avaliador)
        except PersistenceError as exc:
            return exc.to_err()

    def list(self) -> Result[List[Avaliador]]:
        try:
            return Ok(self.avaliador_repository.find_all())
        except PersistenceError as exc:
            logger.error("Erro no serviço ao listar avaliadores: %s", exc.message)
            return exc.to_err()

    def update(self, id: int, dto: AvaliadorUpdate) -> Result[Avaliador]:
        data = dto.model_dump(exclude_unset=True, exclude_none=True)
        try:
            atual = self._ativo(id)
            if atual is None:
                return not_found(NAO_ENCONTRADO)

            if "cpf" in data and data["cpf"] != atual.cpf:
                outro = self.avaliador_repository.find_by_cpf(data["cpf"])
                if outro is not None and outro.id != id:
                    return conflict("CPF já cadastrado para outro avaliador.")
            if "email" in data and data["email"] != atual.email:
                outro = self.avaliador_repository.find_by_email(data["email"])
                if outro is not None and outro.id != id:
                    return conflict("Email já cadastrado para outro avaliador.")

            return Ok(self.avaliador_repository.update(id, data))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao atualizar avaliador: %s", exc.message)
            return exc.to_err()

    def delete(self, id: int) -> Result[str]:
        """Inativa só o avaliador; os projetos dele seguem como estão."""
        try:
            if self._ativo(id) is None:
                return not_found("Avaliador não encontrado ou já inativo.")

            self.avaliador_repository.delete(id)
            return Ok("Avaliador inativado com sucesso.")
        except PersistenceError as exc:
            logger.error("Erro no serviço ao deletar avaliador: %s", exc.message)
            return exc.to_err()

    def get_projetos(self, avaliador_id: int) -> Result[List[Projeto]]:
        try:
            if self.avaliador_repository.find_by_id(avaliador_id) is None:
                return not_found("Avaliador não encontrado.")
            return Ok(self.avaliador_repository.get_projetos(avaliador_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao buscar projetos do avaliador: %s", exc.message)
            return exc.to_err()

    def count_projetos(self, avaliador_id: int) -> Result[int]:
        try:
            if self.avaliador_repository.find_by_id(avaliador_id) is None:
                return not_found("Avaliador não encontrado.")
            return Ok(self.avaliador_repository.count_projetos(avaliador_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao contar projetos do avaliador: %s", exc.message)
            return exc.to_err()

    def media_notas(self, avaliador_id: int) -> Result[Optional[float]]:
        try:
            if self.avaliador_repository.find_by_id(avaliador_id) is None:
                return not_found("Avaliador não encontrado.")
            return Ok(self.avaliador_repository.media_notas(avaliador_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao calcular média do avaliador: %s", exc.message)
            return exc.to_err()
