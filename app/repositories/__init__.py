from app.repositories.autor import AutorRepository
from app.repositories.avaliador import AvaliadorRepository
from app.repositories.premio import PremioRepository
from app.repositories.projeto import ProjetoRepository
from app.repositories.user import UserRepository

__all__ = [
    "AutorRepository",
    "AvaliadorRepository",
    "PremioRepository",
    "ProjetoRepository",
    "UserRepository",
]
