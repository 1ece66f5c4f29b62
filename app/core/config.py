from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str
    # sem segredo o login responde 500, as rotas protegidas também
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    PROJECT_NAME: str = "Prémios API"
    VERSION: str = "0.1.0"
    API_PREFIX: str = ""

    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False
    # em produção o schema vem do alembic
    DB_CREATE_ALL: bool = False

    # usuário admin criado no startup, se os dois vierem preenchidos
    BOOTSTRAP_ADMIN_EMAIL: Optional[str] = None
    BOOTSTRAP_ADMIN_PASSWORD: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
