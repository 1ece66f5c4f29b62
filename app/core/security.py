from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def sign(
    payload: Dict[str, Any],
    secret: str,
    ttl_seconds: int = 60 * 60 * 24,
    algorithm: str = "HS256",
) -> str:
    now = datetime.now(timezone.utc)
    body = {
        "iat": now,
        "exp": now + timedelta(seconds=int(ttl_seconds)),
        **payload,
    }
    return jwt.encode(body, secret, algorithm=algorithm)


def verify(token: str, secret: str, algorithm: str = "HS256") -> Optional[Dict[str, Any]]:
    # assinatura inválida ou token expirado -> None
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        return None
