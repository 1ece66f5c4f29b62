from tests.fakes.fake_repositories import (
    FakeAutorRepository,
    FakeAvaliadorRepository,
    FakeBanco,
    FakePremioRepository,
    FakeProjetoRepository,
    FakeUserRepository,
    FailingAutorRepository,
)

__all__ = [
    "FakeAutorRepository",
    "FakeAvaliadorRepository",
    "FakeBanco",
    "FakePremioRepository",
    "FakeProjetoRepository",
    "FakeUserRepository",
    "FailingAutorRepository",
]
