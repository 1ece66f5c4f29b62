from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_current_user, get_premio_service
from app.core.errors import unwrap
from app.schemas import CountOut, MessageOut, PremioCreate, PremioOut, PremioUpdate, ProjetoOut
from app.services import PremioService

router = APIRouter(prefix="/premios", tags=["premios"], dependencies=[Depends(get_current_user)])


@router.post("", response_model=PremioOut, status_code=status.HTTP_201_CREATED)
def create_premio(payload: PremioCreate, service: PremioService = Depends(get_premio_service)):
    return unwrap(service.create(payload))


@router.get("", response_model=list[PremioOut])
def list_premios(
    ativos: bool = Query(default=True),
    service: PremioService = Depends(get_premio_service),
):
    return unwrap(service.list(apenas_ativos=ativos))


@router.get("/ano/{ano}", response_model=list[PremioOut])
def list_premios_por_ano(ano: int, service: PremioService = Depends(get_premio_service)):
    return unwrap(service.list_by_ano(ano))


@router.get("/{premio_id}", response_model=PremioOut)
def get_premio(premio_id: int, service: PremioService = Depends(get_premio_service)):
    return unwrap(service.get_by_id(premio_id))


@router.put("/{premio_id}", response_model=PremioOut)
def update_premio(
    premio_id: int,
    payload: PremioUpdate,
    service: PremioService = Depends(get_premio_service),
):
    return unwrap(service.update(premio_id, payload))


@router.delete("/{premio_id}", response_model=MessageOut)
def delete_premio(premio_id: int, service: PremioService = Depends(get_premio_service)):
    return MessageOut(message=unwrap(service.delete(premio_id)))


@router.get("/{premio_id}/projetos", response_model=list[ProjetoOut])
def list_projetos_do_premio(premio_id: int, service: PremioService = Depends(get_premio_service)):
    return unwrap(service.get_projetos(premio_id))


@router.get("/{premio_id}/projetos/count", response_model=CountOut)
def count_projetos_do_premio(premio_id: int, service: PremioService = Depends(get_premio_service)):
    return CountOut(count=unwrap(service.count_projetos(premio_id)))
