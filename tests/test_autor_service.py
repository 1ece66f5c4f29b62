from app.core.errors import ErrorKind
from app.models import AreaTematica
from app.schemas import AutorCreate, AutorUpdate, ProjetoCreate
from app.services import AutorService
from tests.fakes import FailingAutorRepository


def test_create_rejects_duplicate_cpf(autor_service, autor):
    result = autor_service.create(
        AutorCreate(nome="Outra", cpf=autor.cpf, email="outra@example.com")
    )

    assert result.ok is False
    assert result.error.kind == ErrorKind.CONFLICT
    assert "CPF" in result.error.message


def test_create_rejects_duplicate_email(autor_service, autor):
    result = autor_service.create(
        AutorCreate(nome="Outra", cpf="99999999999", email=autor.email)
    )

    assert result.ok is False
    assert result.error.kind == ErrorKind.CONFLICT
    assert "Email" in result.error.message


def test_get_by_id_hides_inactive_autor(autor_service, autor):
    autor_service.delete(autor.id)

    result = autor_service.get_by_id(autor.id)

    assert result.ok is False
    assert result.error.kind == ErrorKind.NOT_FOUND


def test_update_checks_uniqueness_only_for_changed_keys(autor_service, autor, outro_autor):
    mesmo_cpf = autor_service.update(autor.id, AutorUpdate(cpf=autor.cpf, nome="Ana S."))
    assert mesmo_cpf.ok is True
    assert mesmo_cpf.value.nome == "Ana S."

    conflito = autor_service.update(autor.id, AutorUpdate(email=outro_autor.email))
    assert conflito.ok is False
    assert conflito.error.kind == ErrorKind.CONFLICT


def test_delete_cascades_to_every_linked_projeto(
    autor_service, projeto_service, premio, autor, outro_autor
):
    criados = []
    for titulo, autores in (("A", [autor.id]), ("B", [autor.id, outro_autor.id])):
        criados.append(
            projeto_service.create(
                ProjetoCreate(
                    titulo=titulo,
                    area_tematica=AreaTematica.SAUDE,
                    resumo="r",
                    premio_id=premio.id,
                    autor_ids=autores,
                )
            ).value
        )
    so_do_outro = projeto_service.create(
        ProjetoCreate(
            titulo="C",
            area_tematica=AreaTematica.SAUDE,
            resumo="r",
            premio_id=premio.id,
            autor_ids=[outro_autor.id],
        )
    ).value

    result = autor_service.delete(autor.id)

    assert result.ok is True
    assert result.value == "Autor inativado com sucesso."
    assert all(p.status is False for p in criados)
    assert so_do_outro.status is True


def test_delete_twice_is_not_found(autor_service, autor):
    assert autor_service.delete(autor.id).ok is True

    again = autor_service.delete(autor.id)

    assert again.ok is False
    assert again.error.kind == ErrorKind.NOT_FOUND


def test_projetos_count_and_media(autor_service, projeto_service, projeto, autor):
    assert [p.id for p in autor_service.get_projetos(autor.id).value] == [projeto.id]
    assert autor_service.count_projetos(autor.id).value == 1
    assert autor_service.media_notas(autor.id).value == 0


def test_media_is_none_without_projetos(autor_service, autor):
    assert autor_service.media_notas(autor.id).value is None


def test_persistence_failure_becomes_internal_error(banco):
    service = AutorService(FailingAutorRepository(banco))

    result = service.create(AutorCreate(nome="Ana", cpf="11111111111", email="ana@example.com"))

    assert result.ok is False
    assert result.error.kind == ErrorKind.INTERNAL
    assert "conexão perdida" in result.error.message
