from app.core.errors import ErrorKind
from app.core.security import verify_password
from app.models import Role
from app.schemas import UserCreate, UserUpdate


def _registrar(service, email="maria@example.com", senha="segredo1"):
    return service.create(UserCreate(nome="Maria", email=email, senha=senha)).value


def test_create_hashes_password(user_service):
    user = _registrar(user_service)

    assert user.senha != "segredo1"
    assert verify_password("segredo1", user.senha)
    assert user.role == Role.USER


def test_create_duplicate_email_conflicts(user_service):
    _registrar(user_service)

    result = user_service.create(UserCreate(nome="Outra", email="maria@example.com", senha="abcdef"))

    assert result.error.kind == ErrorKind.CONFLICT


def test_login(user_service):
    user = _registrar(user_service)

    assert user_service.login("maria@example.com", "segredo1").value.id == user.id
    assert user_service.login("maria@example.com", "errada").error.kind == ErrorKind.UNAUTHORIZED
    assert user_service.login("ninguem@example.com", "x").error.kind == ErrorKind.UNAUTHORIZED


def test_update_rehashes_new_password(user_service):
    user = _registrar(user_service)

    result = user_service.update(user.id, UserUpdate(senha="novasenha"))

    assert result.ok is True
    assert verify_password("novasenha", result.value.senha)
    assert not verify_password("segredo1", result.value.senha)


def test_get_missing_user(user_service):
    assert user_service.get_by_id(404).error.kind == ErrorKind.NOT_FOUND


def test_ensure_admin_is_idempotent(user_service):
    primeiro = user_service.ensure_admin("admin@example.com", "admin123")
    segundo = user_service.ensure_admin("admin@example.com", "outra")

    assert primeiro.id == segundo.id
    assert primeiro.role == Role.ADMIN


def test_create_always_registers_plain_user(user_service):
    dto = UserCreate.model_validate(
        {"nome": "Eva", "email": "eva@example.com", "senha": "segredo1", "role": "ADMIN"}
    )

    user = user_service.create(dto).value

    assert user.role == Role.USER
