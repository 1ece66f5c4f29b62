from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, Integer, String, func

from app.db.base import Base
from app.models.enums import Role


def _agora() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "usuarios"
    id = Column(Integer, primary_key=True)
    nome = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    senha = Column(String(255), nullable=False)  # hash bcrypt, nunca o texto puro
    role = Column(Enum(Role, native_enum=False, length=10), nullable=False, default=Role.USER)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_agora, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_agora,
        server_default=func.now(),
        onupdate=_agora,
    )
