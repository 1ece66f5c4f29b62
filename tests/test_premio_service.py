from datetime import date

import pytest
from pydantic import ValidationError

from app.core.errors import ErrorKind
from app.schemas import PremioCreate, PremioUpdate


def _dto(nome="Prémio Y", ano=2025, inicio=date(2025, 1, 1), fim=date(2025, 6, 30)):
    return PremioCreate(nome=nome, ano_edicao=ano, data_inicio=inicio, data_fim=fim)


@pytest.mark.parametrize(
    "inicio, fim",
    [
        (date(2025, 5, 1), date(2025, 5, 1)),
        (date(2025, 5, 2), date(2025, 5, 1)),
    ],
)
def test_create_rejects_fim_not_after_inicio(premio_service, inicio, fim):
    result = premio_service.create(_dto(inicio=inicio, fim=fim))

    assert result.ok is False
    assert result.error.kind == ErrorKind.VALIDATION


def test_create_accepts_fim_after_inicio(premio_service):
    result = premio_service.create(_dto(inicio=date(2025, 5, 1), fim=date(2025, 5, 2)))

    assert result.ok is True
    assert result.value.status is True


def test_nome_and_ano_unique_even_when_inactive(premio_service):
    premio = premio_service.create(_dto()).value
    premio_service.delete(premio.id)

    result = premio_service.create(_dto())

    assert result.error.kind == ErrorKind.CONFLICT


def test_update_validates_dates_against_stored_values(premio_service, premio):
    result = premio_service.update(premio.id, PremioUpdate(data_fim=date(2023, 12, 31)))

    assert result.error.kind == ErrorKind.VALIDATION
    assert premio.data_fim == date(2024, 12, 31)


def test_update_conflicting_nome_and_ano(premio_service, premio):
    outro = premio_service.create(_dto(nome="Outro", ano=2024)).value

    result = premio_service.update(outro.id, PremioUpdate(nome=premio.nome))

    assert result.error.kind == ErrorKind.CONFLICT


def test_delete_with_active_projeto_is_refused(premio_service, premio, projeto):
    result = premio_service.delete(premio.id)

    assert result.ok is False
    assert result.error.kind == ErrorKind.CONFLICT
    assert premio.status is True


def test_delete_without_active_projetos(premio_service, projeto_service, premio, projeto):
    projeto_service.delete(projeto.id)

    result = premio_service.delete(premio.id)

    assert result.ok is True
    assert result.value == "Prémio inativado com sucesso."
    assert premio.status is False


def test_list_by_ano(premio_service, premio):
    assert [p.id for p in premio_service.list_by_ano(2024).value] == [premio.id]
    assert premio_service.list_by_ano(0).error.kind == ErrorKind.VALIDATION


def test_list_honours_apenas_ativos(premio_service, premio):
    premio_service.delete(premio.id)

    assert premio_service.list().value == []
    assert premio_service.list(apenas_ativos=False).value == [premio]


@pytest.mark.parametrize("ano", [0, -1])
def test_ano_edicao_must_be_positive(ano):
    with pytest.raises(ValidationError):
        _dto(ano=ano)

    with pytest.raises(ValidationError):
        PremioUpdate(ano_edicao=ano)
