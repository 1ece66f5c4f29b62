"""Fixtures compartilhadas: serviços sobre fakes em memória e um app sobre SQLite."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.models import AreaTematica
from app.schemas import AutorCreate, PremioCreate, ProjetoCreate
from app.services import AutorService, AvaliadorService, PremioService, ProjetoService, UserService
from tests.fakes import (
    FakeAutorRepository,
    FakeAvaliadorRepository,
    FakeBanco,
    FakePremioRepository,
    FakeProjetoRepository,
    FakeUserRepository,
)


@pytest.fixture
def banco():
    return FakeBanco()


@pytest.fixture
def autor_repo(banco):
    return FakeAutorRepository(banco)


@pytest.fixture
def avaliador_repo(banco):
    return FakeAvaliadorRepository(banco)


@pytest.fixture
def premio_repo(banco):
    return FakePremioRepository(banco)


@pytest.fixture
def projeto_repo(banco):
    return FakeProjetoRepository(banco)


@pytest.fixture
def autor_service(autor_repo):
    return AutorService(autor_repo)


@pytest.fixture
def avaliador_service(avaliador_repo):
    return AvaliadorService(avaliador_repo)


@pytest.fixture
def premio_service(premio_repo):
    return PremioService(premio_repo)


@pytest.fixture
def projeto_service(projeto_repo, autor_repo, premio_repo, avaliador_repo):
    return ProjetoService(projeto_repo, autor_repo, premio_repo, avaliador_repo)


@pytest.fixture
def user_service(banco):
    return UserService(FakeUserRepository(banco))


@pytest.fixture
def premio(premio_service):
    return premio_service.create(
        PremioCreate(
            nome="Prémio X",
            ano_edicao=2024,
            data_inicio=date(2024, 1, 1),
            data_fim=date(2024, 12, 31),
        )
    ).value


@pytest.fixture
def autor(autor_service):
    return autor_service.create(
        AutorCreate(nome="Ana Souza", cpf="11111111111", email="ana@example.com")
    ).value


@pytest.fixture
def outro_autor(autor_service):
    return autor_service.create(
        AutorCreate(nome="Bruno Lima", cpf="22222222222", email="bruno@example.com")
    ).value


@pytest.fixture
def projeto(projeto_service, premio, autor):
    return projeto_service.create(
        ProjetoCreate(
            titulo="T",
            area_tematica=AreaTematica.TECNOLOGIA,
            resumo="Resumo do projeto",
            premio_id=premio.id,
            autor_ids=[autor.id],
        )
    ).value


# --- app HTTP ---------------------------------------------------------------------


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="segredo-de-teste",
        DB_CREATE_ALL=True,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    client.post("/users", json={"nome": "Teste", "email": "teste@example.com", "senha": "senha123"})
    resp = client.post("/login", json={"email": "teste@example.com", "senha": "senha123"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}
