from app.services.autor import AutorService
from app.services.avaliador import AvaliadorService
from app.services.premio import PremioService
from app.services.projeto import ProjetoService
from app.services.user import UserService

__all__ = [
    "AutorService",
    "AvaliadorService",
    "PremioService",
    "ProjetoService",
    "UserService",
]
