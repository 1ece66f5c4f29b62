import pytest

from app.core.errors import ErrorKind
from app.models import AreaTematica, SituacaoProjeto
from app.models.projeto import PARECER_PADRAO
from app.schemas import (
    AutorCreate,
    AvaliadorCreate,
    ProjetoAvaliacao,
    ProjetoCreate,
    ProjetoUpdate,
)


def _create(service, premio_id, autor_ids, titulo="Novo", **extra):
    return service.create(
        ProjetoCreate(
            titulo=titulo,
            area_tematica=AreaTematica.TECNOLOGIA,
            resumo="Resumo",
            premio_id=premio_id,
            autor_ids=autor_ids,
            **extra,
        )
    )


def _avaliacao(nota=7, situacao=SituacaoProjeto.AVALIADO_APROVADO, parecer="Bom trabalho."):
    return ProjetoAvaliacao(nota=nota, parecer_descritivo=parecer, situacao=situacao)


# --- criação -------------------------------------------------------------------


def test_create_sets_defaults(projeto, autor, premio):
    assert projeto.situacao == SituacaoProjeto.SUBMETIDO
    assert projeto.nota == 0
    assert projeto.parecer_descritivo == PARECER_PADRAO
    assert projeto.status is True
    assert [a.id for a in projeto.autores] == [autor.id]
    assert projeto.premio_id == premio.id


def test_create_without_autores_fails(projeto_service, premio):
    result = _create(projeto_service, premio.id, [])

    assert result.ok is False
    assert result.error.kind == ErrorKind.VALIDATION


@pytest.mark.parametrize("inativo", [True, False])
def test_create_with_missing_or_inactive_autor_fails(
    projeto_service, autor_service, premio, autor, inativo
):
    if inativo:
        autor_service.delete(autor.id)
        autor_id = autor.id
    else:
        autor_id = 999

    result = _create(projeto_service, premio.id, [autor_id])

    assert result.error.kind == ErrorKind.NOT_FOUND


def test_create_duplicate_titulo_for_same_premio_fails(projeto_service, projeto, premio, autor):
    result = _create(projeto_service, premio.id, [autor.id], titulo=projeto.titulo)

    assert result.error.kind == ErrorKind.CONFLICT


def test_create_with_inactive_premio_fails(projeto_service, premio_service, premio, autor):
    premio_service.delete(premio.id)

    result = _create(projeto_service, premio.id, [autor.id])

    assert result.error.kind == ErrorKind.NOT_FOUND


def test_create_rejects_outcome_situacao(projeto_service, premio, autor):
    result = _create(
        projeto_service, premio.id, [autor.id], situacao=SituacaoProjeto.AVALIADO_APROVADO
    )

    assert result.error.kind == ErrorKind.VALIDATION


def test_create_deduplicates_autor_ids(projeto_service, premio, autor):
    result = _create(projeto_service, premio.id, [autor.id, autor.id])

    assert [a.id for a in result.value.autores] == [autor.id]


# --- leitura e remoção -----------------------------------------------------------


def test_get_by_id_of_inactive_projeto_is_not_found(projeto_service, projeto):
    projeto_service.delete(projeto.id)

    result = projeto_service.get_by_id(projeto.id)

    assert result.error.kind == ErrorKind.NOT_FOUND


def test_delete_of_inactive_projeto_returns_message(projeto_service, projeto):
    assert projeto_service.delete(projeto.id).value == "Projeto inativado com sucesso."
    assert projeto_service.delete(projeto.id).value == "Projeto já estava inativo."


def test_delete_missing_projeto(projeto_service):
    assert projeto_service.delete(42).error.kind == ErrorKind.NOT_FOUND


# --- avaliação -------------------------------------------------------------------


def test_evaluate_rejects_nota_out_of_range(projeto_service, projeto):
    result = projeto_service.evaluate(projeto.id, _avaliacao(nota=11))

    assert result.error.kind == ErrorKind.VALIDATION
    assert projeto.nota == 0


def test_evaluate_persists_only_evaluation_fields(projeto_service, projeto):
    titulo, area, resumo = projeto.titulo, projeto.area_tematica, projeto.resumo

    result = projeto_service.evaluate(projeto.id, _avaliacao(nota=7))

    avaliado = result.value
    assert avaliado.nota == 7
    assert avaliado.situacao == SituacaoProjeto.AVALIADO_APROVADO
    assert avaliado.parecer_descritivo == "Bom trabalho."
    assert (avaliado.titulo, avaliado.area_tematica, avaliado.resumo) == (titulo, area, resumo)


def test_evaluate_rejects_non_outcome_situacao(projeto_service, projeto):
    result = projeto_service.evaluate(projeto.id, _avaliacao(situacao=SituacaoProjeto.FINALIZADO))

    assert result.error.kind == ErrorKind.VALIDATION


def test_reevaluation_is_allowed_and_logged(projeto_service, projeto, caplog):
    projeto_service.evaluate(projeto.id, _avaliacao(nota=5, situacao=SituacaoProjeto.AVALIADO_REPROVADO))

    with caplog.at_level("WARNING", logger="app.services.projeto"):
        result = projeto_service.evaluate(projeto.id, _avaliacao(nota=8))

    assert result.ok is True
    assert result.value.nota == 8
    assert "está sendo avaliado" in caplog.text


def test_evaluate_refuses_terminal_situacao(projeto_service, projeto):
    projeto_service.update(projeto.id, ProjetoUpdate(situacao=SituacaoProjeto.CANCELADO))

    result = projeto_service.evaluate(projeto.id, _avaliacao())

    assert result.error.kind == ErrorKind.VALIDATION


# --- update e transições ----------------------------------------------------------


def test_update_follows_transition_table(projeto_service, projeto):
    ok = projeto_service.update(projeto.id, ProjetoUpdate(situacao=SituacaoProjeto.EM_AVALIACAO))
    assert ok.value.situacao == SituacaoProjeto.EM_AVALIACAO

    recusado = projeto_service.update(
        projeto.id, ProjetoUpdate(situacao=SituacaoProjeto.AVALIADO_APROVADO)
    )
    assert recusado.error.kind == ErrorKind.VALIDATION
    assert projeto.situacao == SituacaoProjeto.EM_AVALIACAO


def test_update_to_same_situacao_is_noop(projeto_service, projeto):
    result = projeto_service.update(projeto.id, ProjetoUpdate(situacao=SituacaoProjeto.SUBMETIDO))

    assert result.ok is True
    assert result.value.situacao == SituacaoProjeto.SUBMETIDO


def test_update_validates_nota(projeto_service, projeto):
    assert projeto_service.update(projeto.id, ProjetoUpdate(nota=-1)).error.kind == ErrorKind.VALIDATION


def test_update_replaces_autores(projeto_service, projeto, outro_autor):
    result = projeto_service.update(projeto.id, ProjetoUpdate(autor_ids=[outro_autor.id]))

    assert [a.id for a in result.value.autores] == [outro_autor.id]


def test_update_with_empty_autores_fails(projeto_service, projeto):
    result = projeto_service.update(projeto.id, ProjetoUpdate(autor_ids=[]))

    assert result.error.kind == ErrorKind.VALIDATION


def test_update_titulo_conflict(projeto_service, projeto, premio, autor):
    outro = _create(projeto_service, premio.id, [autor.id], titulo="Outro").value

    result = projeto_service.update(outro.id, ProjetoUpdate(titulo=projeto.titulo))

    assert result.error.kind == ErrorKind.CONFLICT


def test_update_explicit_null_unassigns_avaliador(projeto_service, avaliador_service, projeto):
    avaliador = avaliador_service.create(
        AvaliadorCreate(nome="Carla", cpf="33333333333", email="carla@example.com")
    ).value
    projeto_service.update(projeto.id, ProjetoUpdate(avaliador_id=avaliador.id))
    assert projeto.avaliador_id == avaliador.id

    result = projeto_service.update(projeto.id, ProjetoUpdate(avaliador_id=None))

    assert result.value.avaliador_id is None


def test_update_with_inactive_avaliador_fails(projeto_service, projeto):
    result = projeto_service.update(projeto.id, ProjetoUpdate(avaliador_id=77))

    assert result.error.kind == ErrorKind.NOT_FOUND


# --- autores do projeto -------------------------------------------------------------


def test_remove_last_autor_fails(projeto_service, projeto, autor):
    result = projeto_service.remove_autor(projeto.id, autor.id)

    assert result.error.kind == ErrorKind.CONFLICT
    assert len(projeto.autores) == 1


def test_remove_non_last_autor_shrinks_list_by_one(projeto_service, projeto, autor, outro_autor):
    projeto_service.add_autor(projeto.id, outro_autor.id)
    antes = len(projeto.autores)

    result = projeto_service.remove_autor(projeto.id, autor.id)

    assert result.ok is True
    assert len(result.value.autores) == antes - 1
    assert [a.id for a in result.value.autores] == [outro_autor.id]


def test_add_autor_twice_conflicts(projeto_service, projeto, autor):
    assert projeto_service.add_autor(projeto.id, autor.id).error.kind == ErrorKind.CONFLICT


def test_add_inactive_autor_is_not_found(projeto_service, autor_service, projeto):
    inativo = autor_service.create(
        AutorCreate(nome="Inativo", cpf="55555555555", email="inativo@example.com")
    ).value
    autor_service.delete(inativo.id)

    assert projeto_service.add_autor(projeto.id, inativo.id).error.kind == ErrorKind.NOT_FOUND


def test_remove_autor_not_on_projeto_conflicts(projeto_service, projeto, outro_autor):
    result = projeto_service.remove_autor(projeto.id, outro_autor.id)

    assert result.error.kind == ErrorKind.CONFLICT


# --- filtros ---------------------------------------------------------------------------


def test_filters(projeto_service, projeto, premio, autor):
    assert projeto_service.list_by_premio(premio.id).value == [projeto]
    assert projeto_service.list_by_autor(autor.id).value == [projeto]
    assert projeto_service.list_by_area_tematica(AreaTematica.TECNOLOGIA).value == [projeto]
    assert projeto_service.list_by_area_tematica(AreaTematica.ARTES).value == []
    assert projeto_service.list_by_situacao(SituacaoProjeto.SUBMETIDO).value == [projeto]
    assert projeto_service.list_by_avaliador(123).error.kind == ErrorKind.NOT_FOUND
    assert (
        projeto_service.count_by_situacao_and_premio(premio.id, SituacaoProjeto.SUBMETIDO).value
        == 1
    )


def test_filters_skip_inactive_unless_asked(projeto_service, projeto, premio):
    projeto_service.delete(projeto.id)

    assert projeto_service.list_by_premio(premio.id).value == []
    assert projeto_service.list_by_premio(premio.id, apenas_ativos=False).value == [projeto]
