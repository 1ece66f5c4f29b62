from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_avaliador_service, get_current_user
from app.core.errors import unwrap
from app.schemas import (
    AvaliadorCreate,
    AvaliadorOut,
    AvaliadorUpdate,
    CountOut,
    MediaOut,
    ProjetoOut,
)
from app.services import AvaliadorService

router = APIRouter(
    prefix="/avaliadores", tags=["avaliadores"], dependencies=[Depends(get_current_user)]
)


@router.post("", response_model=AvaliadorOut, status_code=status.HTTP_201_CREATED)
def create_avaliador(
    payload: AvaliadorCreate, service: AvaliadorService = Depends(get_avaliador_service)
):
    return unwrap(service.create(payload))


@router.get("", response_model=list[AvaliadorOut])
def list_avaliadores(service: AvaliadorService = Depends(get_avaliador_service)):
    return unwrap(service.list())


@router.get("/{avaliador_id}", response_model=AvaliadorOut)
def get_avaliador(avaliador_id: int, service: AvaliadorService = Depends(get_avaliador_service)):
    return unwrap(service.get_by_id(avaliador_id))


@router.put("/{avaliador_id}", response_model=AvaliadorOut)
def update_avaliador(
    avaliador_id: int,
    payload: AvaliadorUpdate,
    service: AvaliadorService = Depends(get_avaliador_service),
):
    return unwrap(service.update(avaliador_id, payload))


@router.delete("/{avaliador_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_avaliador(avaliador_id: int, service: AvaliadorService = Depends(get_avaliador_service)):
    unwrap(service.delete(avaliador_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{avaliador_id}/projetos", response_model=list[ProjetoOut])
def list_projetos_do_avaliador(
    avaliador_id: int, service: AvaliadorService = Depends(get_avaliador_service)
):
    return unwrap(service.get_projetos(avaliador_id))


@router.get("/{avaliador_id}/projetos/count", response_model=CountOut)
def count_projetos_do_avaliador(
    avaliador_id: int, service: AvaliadorService = Depends(get_avaliador_service)
):
    return CountOut(count=unwrap(service.count_projetos(avaliador_id)))


@router.get("/{avaliador_id}/projetos/media", response_model=MediaOut)
def media_notas_do_avaliador(
    avaliador_id: int, service: AvaliadorService = Depends(get_avaliador_service)
):
    return MediaOut(media=unwrap(service.media_notas(avaliador_id)))
