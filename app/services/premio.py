import logging
from typing import List, Optional

from app.core.errors import Ok, PersistenceError, Result, conflict, invalid, not_found
from app.models import Premio, Projeto
from app.repositories.interfaces import PremioRepositoryProtocol
from app.schemas import PremioCreate, PremioUpdate

logger = logging.getLogger(__name__)

NAO_ENCONTRADO = "Prémio não encontrado ou inativo."
DATAS_INVALIDAS = "A data de fim deve ser posterior à data de início."


class PremioService:
    def __init__(self, premio_repository: PremioRepositoryProtocol):
        self.premio_repository = premio_repository

    def _ativo(self, id: int) -> Optional[Premio]:
        premio = self.premio_repository.find_by_id(id)
        if premio is None or not premio.status:
            return None
        return premio

    def create(self, dto: PremioCreate) -> Result[Premio]:
        """Cria o prémio.

        O par nome/ano de edição não pode repetir nem entre prémios inativos,
        e a data de fim tem que ser estritamente posterior à de início.
        """
        try:
            if self.premio_repository.find_by_nome_and_ano(dto.nome, dto.ano_edicao):
                return conflict(f'Prémio "{dto.nome}" já existe para o ano de {dto.ano_edicao}.')
            if dto.data_fim <= dto.data_inicio:
                return invalid(DATAS_INVALIDAS)

            return Ok(self.premio_repository.create(dto.model_dump()))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao criar prémio: %s", exc.message)
            return exc.to_err()

    def get_by_id(self, id: int) -> Result[Premio]:
        try:
            premio = self._ativo(id)
            if premio is None:
                return not_found(NAO_ENCONTRADO)
            return Ok(premio)
        except PersistenceError as exc:
            return exc.to_err()

    def list(self, apenas_ativos: bool = True) -> Result[List[Premio]]:
        try:
            return Ok(self.premio_repository.find_all(apenas_ativos))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao listar prémios: %s", exc.message)
            return exc.to_err()

    def update(self, id: int, dto: PremioUpdate) -> Result[Premio]:
        data = dto.model_dump(exclude_unset=True, exclude_none=True)
        try:
            atual = self._ativo(id)
            if atual is None:
                return not_found(NAO_ENCONTRADO)

            # datas não enviadas valem o que já está gravado
            data_inicio = data.get("data_inicio", atual.data_inicio)
            data_fim = data.get("data_fim", atual.data_fim)
            if data_fim <= data_inicio:
                return invalid(DATAS_INVALIDAS)

            nome = data.get("nome", atual.nome)
            ano_edicao = data.get("ano_edicao", atual.ano_edicao)
            if (nome, ano_edicao) != (atual.nome, atual.ano_edicao):
                outro = self.premio_repository.find_by_nome_and_ano(nome, ano_edicao)
                if outro is not None and outro.id != id:
                    return conflict(f'Prémio "{nome}" já existe para o ano de {ano_edicao}.')

            return Ok(self.premio_repository.update(id, data))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao atualizar prémio: %s", exc.message)
            return exc.to_err()

    def delete(self, id: int) -> Result[str]:
        try:
            if self._ativo(id) is None:
                return not_found("Prémio não encontrado ou já está inativo.")

            vinculados = self.premio_repository.count_projetos(id)
            if vinculados > 0:
                logger.warning("Prémio %s tem %s projetos ativos, inativação recusada", id, vinculados)
                return conflict(
                    f"Não é possível inativar o prémio. Existem {vinculados} projetos ativos "
                    "vinculados a ele. Considere inativar ou desvincular os projetos primeiro."
                )

            self.premio_repository.delete(id)
            return Ok("Prémio inativado com sucesso.")
        except PersistenceError as exc:
            logger.error("Erro no serviço ao deletar prémio: %s", exc.message)
            return exc.to_err()

    def get_projetos(self, premio_id: int) -> Result[List[Projeto]]:
        try:
            if self._ativo(premio_id) is None:
                return not_found(NAO_ENCONTRADO)
            return Ok(self.premio_repository.get_projetos(premio_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao buscar projetos do prémio: %s", exc.message)
            return exc.to_err()

    def count_projetos(self, premio_id: int) -> Result[int]:
        try:
            if self._ativo(premio_id) is None:
                return not_found(NAO_ENCONTRADO)
            return Ok(self.premio_repository.count_projetos(premio_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao contar projetos do prémio: %s", exc.message)
            return exc.to_err()

    def list_by_ano(self, ano_edicao: int) -> Result[List[Premio]]:
        if ano_edicao <= 0:
            return invalid("Ano de edição inválido.")
        try:
            return Ok(self.premio_repository.find_by_ano(ano_edicao))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao buscar prémios por ano: %s", exc.message)
            return exc.to_err()
