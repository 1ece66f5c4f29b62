from app.core.security import hash_password, sign, verify, verify_password


def test_token_roundtrip():
    token = sign({"id": 1, "email": "a@example.com"}, secret="s")

    payload = verify(token, "s")

    assert payload["id"] == 1
    assert payload["email"] == "a@example.com"
    assert "exp" in payload


def test_token_with_wrong_secret_is_rejected():
    assert verify(sign({"id": 1}, secret="s"), "outro") is None


def test_expired_token_is_rejected():
    assert verify(sign({"id": 1}, secret="s", ttl_seconds=-10), "s") is None


def test_garbage_token_is_rejected():
    assert verify("nao-e-um-jwt", "s") is None


def test_password_hash():
    hashed = hash_password("segredo")

    assert hashed != "segredo"
    assert verify_password("segredo", hashed)
    assert not verify_password("outro", hashed)
