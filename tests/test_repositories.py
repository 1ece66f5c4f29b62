"""Repositórios SQLAlchemy contra um SQLite em memória."""

from datetime import date

import pytest

from app.core.errors import ErrorKind, PersistenceError
from app.db.session import Database
from app.models import AreaTematica, SituacaoProjeto
from app.repositories import AutorRepository, PremioRepository, ProjetoRepository


@pytest.fixture
def session():
    db = Database("sqlite://")
    db.open()
    db.create_all()
    s = db.session()
    try:
        yield s
    finally:
        s.close()
        db.close()


@pytest.fixture
def cenario(session):
    autores = AutorRepository(session)
    premios = PremioRepository(session)
    projetos = ProjetoRepository(session)

    ana = autores.create({"nome": "Ana", "cpf": "11111111111", "email": "ana@example.com"})
    bruno = autores.create({"nome": "Bruno", "cpf": "22222222222", "email": "bruno@example.com"})
    premio = premios.create(
        {
            "nome": "Prémio X",
            "ano_edicao": 2024,
            "data_inicio": date(2024, 1, 1),
            "data_fim": date(2024, 12, 31),
        }
    )
    projeto = projetos.create(
        {
            "titulo": "T",
            "area_tematica": AreaTematica.TECNOLOGIA,
            "resumo": "r",
            "premio_id": premio.id,
            "situacao": SituacaoProjeto.SUBMETIDO,
        },
        [ana.id, bruno.id],
    )
    return autores, premios, projetos, ana, bruno, premio, projeto


def test_create_loads_relations(cenario):
    _, _, _, ana, bruno, premio, projeto = cenario

    assert [a.id for a in projeto.autores] == [ana.id, bruno.id]
    assert projeto.premio.id == premio.id
    assert projeto.nota == 0
    assert projeto.parecer_descritivo == "Pendente de avaliação."


def test_autor_delete_inactivates_linked_projetos(cenario):
    autores, _, projetos, ana, _, _, projeto = cenario

    autores.delete(ana.id)

    assert projetos.find_all(apenas_ativos=True) == []
    recarregado = projetos.find_all(apenas_ativos=False)[0]
    assert recarregado.id == projeto.id
    assert recarregado.status is False


def test_duplicate_titulo_and_premio_hits_unique_constraint(cenario):
    _, _, projetos, ana, _, premio, _ = cenario

    with pytest.raises(PersistenceError) as exc_info:
        projetos.create(
            {
                "titulo": "T",
                "area_tematica": AreaTematica.SAUDE,
                "resumo": "r",
                "premio_id": premio.id,
                "situacao": SituacaoProjeto.SUBMETIDO,
            },
            [ana.id],
        )

    assert exc_info.value.kind == ErrorKind.CONFLICT


def test_create_with_unknown_autor_is_not_found(cenario):
    _, _, projetos, _, _, premio, _ = cenario

    with pytest.raises(PersistenceError) as exc_info:
        projetos.create(
            {
                "titulo": "Outro",
                "area_tematica": AreaTematica.SAUDE,
                "resumo": "r",
                "premio_id": premio.id,
                "situacao": SituacaoProjeto.SUBMETIDO,
            },
            [999],
        )

    assert exc_info.value.kind == ErrorKind.NOT_FOUND


def test_evaluate_and_counts(cenario):
    autores, premios, projetos, ana, _, premio, projeto = cenario

    avaliado = projetos.evaluate(projeto.id, 8.5, "Bom", SituacaoProjeto.AVALIADO_APROVADO)

    assert avaliado.nota == 8.5
    assert avaliado.situacao == SituacaoProjeto.AVALIADO_APROVADO
    assert projetos.count_by_situacao_and_premio(premio.id, SituacaoProjeto.AVALIADO_APROVADO) == 1
    assert premios.count_projetos(premio.id) == 1
    assert autores.count_projetos(ana.id) == 1
    assert autores.media_notas(ana.id) == 8.5


def test_remove_autor_keeps_the_other(cenario):
    _, _, projetos, ana, bruno, _, projeto = cenario

    atualizado = projetos.remove_autor(projeto.id, ana.id)

    assert [a.id for a in atualizado.autores] == [bruno.id]
    assert [p.id for p in projetos.find_by_autor(ana.id)] == []
