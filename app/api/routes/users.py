from fastapi import APIRouter, Depends, status

from app.api.deps import get_current_user, get_user_service
from app.core.errors import unwrap
from app.schemas import UserCreate, UserOut, UserUpdate
from app.services import UserService

router = APIRouter(prefix="/users", tags=["users"])

# GET /{id} na raiz; registrado por último no app para não engolir outras rotas
root_router = APIRouter(tags=["users"])


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    return unwrap(service.create(payload))


@router.get("/{user_id}", response_model=UserOut)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
    current_user=Depends(get_current_user),
):
    return unwrap(service.get_by_id(user_id))


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: int,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
    current_user=Depends(get_current_user),
):
    return unwrap(service.update(user_id, payload))


@root_router.get("/{user_id:int}", response_model=UserOut)
def get_user_root(
    user_id: int,
    service: UserService = Depends(get_user_service),
    current_user=Depends(get_current_user),
):
    return unwrap(service.get_by_id(user_id))
