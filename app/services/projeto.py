"""Regras de negócio de projetos.

Além do CRUD, concentra o fluxo de avaliação e a política de transições de
``situacao``: o update genérico só anda pela tabela ``TRANSICOES_SITUACAO``
e os resultados de avaliação só são gravados por ``evaluate``.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from app.core.errors import Ok, PersistenceError, Result, conflict, invalid, not_found
from app.models import AreaTematica, Projeto, SituacaoProjeto
from app.models.enums import (
    SITUACOES_AVALIACAO,
    SITUACOES_PRE_AVALIACAO,
    SITUACOES_TERMINAIS,
    TRANSICOES_SITUACAO,
)
from app.repositories.interfaces import (
    AutorRepositoryProtocol,
    AvaliadorRepositoryProtocol,
    PremioRepositoryProtocol,
    ProjetoRepositoryProtocol,
)
from app.schemas import ProjetoAvaliacao, ProjetoCreate, ProjetoUpdate

logger = logging.getLogger(__name__)

NOTA_MINIMA = 0
NOTA_MAXIMA = 10

SEM_AUTORES = "O projeto deve ter pelo menos um autor."
NOTA_INVALIDA = f"Nota da avaliação deve estar entre {NOTA_MINIMA} e {NOTA_MAXIMA}."

# situações aceitas na criação; o resto só por transição
SITUACOES_INICIAIS = (SituacaoProjeto.SUBMETIDO, SituacaoProjeto.EM_AVALIACAO)


def _nota_valida(nota: float) -> bool:
    return NOTA_MINIMA <= nota <= NOTA_MAXIMA


class ProjetoService:
    def __init__(
        self,
        projeto_repository: ProjetoRepositoryProtocol,
        autor_repository: AutorRepositoryProtocol,
        premio_repository: PremioRepositoryProtocol,
        avaliador_repository: AvaliadorRepositoryProtocol,
    ):
        self.projeto_repository = projeto_repository
        self.autor_repository = autor_repository
        self.premio_repository = premio_repository
        self.avaliador_repository = avaliador_repository

    # --- checagens compartilhadas -------------------------------------------

    def _projeto_ativo(self, id: int) -> Result[Projeto]:
        projeto = self.projeto_repository.find_by_id(id)
        if projeto is None:
            return not_found("Projeto não encontrado.")
        if not projeto.status:
            return not_found("Projeto encontrado, mas está inativo.")
        return Ok(projeto)

    def _premio_ativo(self, premio_id: int) -> bool:
        premio = self.premio_repository.find_by_id(premio_id)
        return premio is not None and premio.status

    def _avaliador_ativo(self, avaliador_id: int) -> bool:
        avaliador = self.avaliador_repository.find_by_id(avaliador_id)
        return avaliador is not None and avaliador.status

    def _autores_invalidos(self, autor_ids: Sequence[int]) -> Optional[int]:
        """Primeiro id que não aponta para um autor ativo, ou None."""
        for autor_id in autor_ids:
            autor = self.autor_repository.find_by_id(autor_id)
            if autor is None or not autor.status:
                return autor_id
        return None

    # --- CRUD ------------------------------------------------------------------

    def create(self, dto: ProjetoCreate) -> Result[Projeto]:
        try:
            if not self._premio_ativo(dto.premio_id):
                return not_found("Prêmio não encontrado, inativo ou inválido.")

            autor_ids = list(dict.fromkeys(dto.autor_ids))
            if not autor_ids:
                return invalid(SEM_AUTORES)
            faltando = self._autores_invalidos(autor_ids)
            if faltando is not None:
                return not_found(f"Autor com ID {faltando} não encontrado, inativo ou inválido.")

            if dto.avaliador_id is not None and not self._avaliador_ativo(dto.avaliador_id):
                return not_found("Avaliador não encontrado ou inativo.")

            situacao = dto.situacao or SituacaoProjeto.SUBMETIDO
            if situacao not in SITUACOES_INICIAIS:
                return invalid(
                    f'Situação "{situacao.value}" inválida para um projeto novo. '
                    f"Use {SituacaoProjeto.SUBMETIDO.value} ou {SituacaoProjeto.EM_AVALIACAO.value}."
                )

            if self.projeto_repository.find_by_titulo_and_premio(dto.titulo, dto.premio_id):
                return conflict(f'Projeto com título "{dto.titulo}" já existe para este prêmio.')

            data = dto.model_dump(exclude={"autor_ids", "situacao"})
            data["situacao"] = situacao
            return Ok(self.projeto_repository.create(data, autor_ids))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao criar projeto: %s", exc.message)
            return exc.to_err()

    def get_by_id(self, id: int) -> Result[Projeto]:
        try:
            return self._projeto_ativo(id)
        except PersistenceError as exc:
            return exc.to_err()

    def list(self, apenas_ativos: bool = True) -> Result[List[Projeto]]:
        try:
            return Ok(self.projeto_repository.find_all(apenas_ativos))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao listar projetos: %s", exc.message)
            return exc.to_err()

    def update(self, id: int, dto: ProjetoUpdate) -> Result[Projeto]:
        enviados = dto.model_dump(exclude_unset=True)
        autor_ids = enviados.pop("autor_ids", None)
        # avaliador_id=None desvincula; nos outros campos None é ignorado
        data: Dict[str, Any] = {
            campo: valor
            for campo, valor in enviados.items()
            if valor is not None or campo == "avaliador_id"
        }

        try:
            atual = self._projeto_ativo(id)
            if not atual.ok:
                return atual
            projeto = atual.value

            if "nota" in data and not _nota_valida(data["nota"]):
                return invalid(NOTA_INVALIDA)

            if "situacao" in data:
                nova = data["situacao"]
                if nova == projeto.situacao:
                    data.pop("situacao")
                elif nova not in TRANSICOES_SITUACAO[projeto.situacao]:
                    logger.warning(
                        "Projeto %s: transição %s -> %s recusada",
                        id,
                        projeto.situacao.value,
                        nova.value,
                    )
                    return invalid(
                        f'Transição de "{projeto.situacao.value}" para "{nova.value}" não permitida.'
                    )

            titulo = data.get("titulo", projeto.titulo)
            premio_id = data.get("premio_id", projeto.premio_id)
            if (titulo, premio_id) != (projeto.titulo, projeto.premio_id):
                outro = self.projeto_repository.find_by_titulo_and_premio(titulo, premio_id)
                if outro is not None and outro.id != id:
                    return conflict(
                        f'Já existe um projeto com o título "{titulo}" para o prêmio selecionado.'
                    )

            if premio_id != projeto.premio_id and not self._premio_ativo(premio_id):
                return not_found("Novo prêmio não encontrado ou inativo.")

            avaliador_id = data.get("avaliador_id")
            if (
                avaliador_id is not None
                and avaliador_id != projeto.avaliador_id
                and not self._avaliador_ativo(avaliador_id)
            ):
                return not_found("Novo avaliador não encontrado ou inativo.")

            if autor_ids is not None:
                autor_ids = list(dict.fromkeys(autor_ids))
                if not autor_ids:
                    return invalid(SEM_AUTORES)
                faltando = self._autores_invalidos(autor_ids)
                if faltando is not None:
                    return not_found(
                        f"Autor com ID {faltando} (para atualização) não encontrado ou inativo."
                    )

            return Ok(self.projeto_repository.update(id, data, autor_ids))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao atualizar projeto: %s", exc.message)
            return exc.to_err()

    def delete(self, id: int) -> Result[str]:
        try:
            projeto = self.projeto_repository.find_by_id(id)
            if projeto is None:
                return not_found("Projeto não encontrado.")
            if not projeto.status:
                return Ok("Projeto já estava inativo.")

            self.projeto_repository.delete(id)
            return Ok("Projeto inativado com sucesso.")
        except PersistenceError as exc:
            logger.error("Erro no serviço ao deletar projeto: %s", exc.message)
            return exc.to_err()

    # --- avaliação -------------------------------------------------------------

    def evaluate(self, id: int, dto: ProjetoAvaliacao) -> Result[Projeto]:
        """Grava nota, parecer e situação de resultado, e nada além disso.

        Projetos finalizados ou cancelados não são reavaliados. Avaliar um
        projeto que já saiu da fila de avaliação é permitido, com aviso no log.
        """
        try:
            atual = self._projeto_ativo(id)
            if not atual.ok:
                return atual
            projeto = atual.value

            if not _nota_valida(dto.nota):
                return invalid(NOTA_INVALIDA)

            if dto.situacao not in SITUACOES_AVALIACAO:
                validas = ", ".join(s.value for s in SITUACOES_AVALIACAO)
                return invalid(
                    f'Situação "{dto.situacao.value}" inválida para uma avaliação. '
                    f"Use uma das seguintes: {validas}."
                )

            if projeto.situacao in SITUACOES_TERMINAIS:
                return invalid(
                    f'Projeto na situação "{projeto.situacao.value}" não pode ser avaliado.'
                )

            if projeto.situacao not in SITUACOES_PRE_AVALIACAO:
                logger.warning(
                    "Projeto ID %s está sendo avaliado mas sua situação atual é %s",
                    id,
                    projeto.situacao.value,
                )

            return Ok(
                self.projeto_repository.evaluate(
                    id, dto.nota, dto.parecer_descritivo, dto.situacao
                )
            )
        except PersistenceError as exc:
            logger.error("Erro no serviço ao avaliar projeto: %s", exc.message)
            return exc.to_err()

    # --- filtros ---------------------------------------------------------------

    def list_by_avaliador(self, avaliador_id: int, apenas_ativos: bool = True) -> Result[List[Projeto]]:
        try:
            if self.avaliador_repository.find_by_id(avaliador_id) is None:
                return not_found("Avaliador não encontrado.")
            return Ok(self.projeto_repository.find_by_avaliador(avaliador_id, apenas_ativos))
        except PersistenceError as exc:
            logger.error("Erro ao buscar projetos por avaliador: %s", exc.message)
            return exc.to_err()

    def list_by_premio(self, premio_id: int, apenas_ativos: bool = True) -> Result[List[Projeto]]:
        try:
            if self.premio_repository.find_by_id(premio_id) is None:
                return not_found("Prêmio não encontrado.")
            return Ok(self.projeto_repository.find_by_premio(premio_id, apenas_ativos))
        except PersistenceError as exc:
            logger.error("Erro ao buscar projetos por prêmio: %s", exc.message)
            return exc.to_err()

    def list_by_area_tematica(
        self, area_tematica: AreaTematica, apenas_ativos: bool = True
    ) -> Result[List[Projeto]]:
        try:
            return Ok(self.projeto_repository.find_by_area_tematica(area_tematica, apenas_ativos))
        except PersistenceError as exc:
            logger.error("Erro ao buscar projetos por área temática: %s", exc.message)
            return exc.to_err()

    def list_by_situacao(
        self, situacao: SituacaoProjeto, apenas_ativos: bool = True
    ) -> Result[List[Projeto]]:
        try:
            return Ok(self.projeto_repository.find_by_situacao(situacao, apenas_ativos))
        except PersistenceError as exc:
            logger.error("Erro ao buscar projetos por situação: %s", exc.message)
            return exc.to_err()

    def list_by_autor(self, autor_id: int, apenas_ativos: bool = True) -> Result[List[Projeto]]:
        try:
            if self.autor_repository.find_by_id(autor_id) is None:
                return not_found("Autor não encontrado.")
            return Ok(self.projeto_repository.find_by_autor(autor_id, apenas_ativos))
        except PersistenceError as exc:
            logger.error("Erro ao buscar projetos por autor: %s", exc.message)
            return exc.to_err()

    def count_by_situacao_and_premio(self, premio_id: int, situacao: SituacaoProjeto) -> Result[int]:
        try:
            if self.premio_repository.find_by_id(premio_id) is None:
                return not_found("Prêmio não encontrado.")
            return Ok(self.projeto_repository.count_by_situacao_and_premio(premio_id, situacao))
        except PersistenceError as exc:
            logger.error("Erro ao contar projetos por situação e prêmio: %s", exc.message)
            return exc.to_err()

    # --- autores do projeto ----------------------------------------------------

    def add_autor(self, projeto_id: int, autor_id: int) -> Result[Projeto]:
        try:
            atual = self._projeto_ativo(projeto_id)
            if not atual.ok:
                return atual
            projeto = atual.value

            autor = self.autor_repository.find_by_id(autor_id)
            if autor is None or not autor.status:
                return not_found(f"Autor com ID {autor_id} não encontrado ou inativo.")
            if any(a.id == autor_id for a in projeto.autores):
                return conflict(f"Autor com ID {autor_id} já está associado a este projeto.")

            return Ok(self.projeto_repository.add_autor(projeto_id, autor_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao adicionar autor ao projeto: %s", exc.message)
            return exc.to_err()

    def remove_autor(self, projeto_id: int, autor_id: int) -> Result[Projeto]:
        try:
            atual = self._projeto_ativo(projeto_id)
            if not atual.ok:
                return atual
            projeto = atual.value

            if self.autor_repository.find_by_id(autor_id) is None:
                return not_found(f"Autor com ID {autor_id} não encontrado.")
            if not any(a.id == autor_id for a in projeto.autores):
                return conflict(f"Autor com ID {autor_id} não está associado a este projeto.")
            if len(projeto.autores) <= 1:
                return conflict(
                    "Não é possível remover o último autor do projeto. "
                    "Adicione outro autor primeiro ou delete o projeto."
                )

            return Ok(self.projeto_repository.remove_autor(projeto_id, autor_id))
        except PersistenceError as exc:
            logger.error("Erro no serviço ao remover autor do projeto: %s", exc.message)
            return exc.to_err()
