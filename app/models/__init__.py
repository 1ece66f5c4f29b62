# registra todos os models no metadata do Base (create_all / alembic)
from app.models.enums import AreaTematica, Role, SituacaoProjeto
from app.models.user import User
from app.models.autor import Autor
from app.models.avaliador import Avaliador
from app.models.premio import Premio
from app.models.projeto import Projeto, projeto_autores

__all__ = [
    "AreaTematica",
    "Role",
    "SituacaoProjeto",
    "User",
    "Autor",
    "Avaliador",
    "Premio",
    "Projeto",
    "projeto_autores",
]
