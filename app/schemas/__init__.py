from app.schemas.auth import LoginIn, LoginOut
from app.schemas.autor import AutorCreate, AutorOut, AutorUpdate
from app.schemas.avaliador import AvaliadorCreate, AvaliadorOut, AvaliadorUpdate
from app.schemas.common import CountOut, ErrorOut, MediaOut, MessageOut
from app.schemas.premio import PremioCreate, PremioOut, PremioUpdate
from app.schemas.projeto import (
    AutorIdIn,
    ProjetoAvaliacao,
    ProjetoCreate,
    ProjetoOut,
    ProjetoUpdate,
)
from app.schemas.user import UserCreate, UserOut, UserUpdate
