from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_autor_service, get_current_user
from app.core.errors import unwrap
from app.schemas import AutorCreate, AutorOut, AutorUpdate, CountOut, MediaOut, ProjetoOut
from app.services import AutorService

router = APIRouter(prefix="/autores", tags=["autores"], dependencies=[Depends(get_current_user)])


@router.post("", response_model=AutorOut, status_code=status.HTTP_201_CREATED)
def create_autor(payload: AutorCreate, service: AutorService = Depends(get_autor_service)):
    return unwrap(service.create(payload))


@router.get("", response_model=list[AutorOut])
def list_autores(service: AutorService = Depends(get_autor_service)):
    return unwrap(service.list())


@router.get("/{autor_id}", response_model=AutorOut)
def get_autor(autor_id: int, service: AutorService = Depends(get_autor_service)):
    return unwrap(service.get_by_id(autor_id))


@router.put("/{autor_id}", response_model=AutorOut)
def update_autor(
    autor_id: int,
    payload: AutorUpdate,
    service: AutorService = Depends(get_autor_service),
):
    return unwrap(service.update(autor_id, payload))


@router.delete("/{autor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_autor(autor_id: int, service: AutorService = Depends(get_autor_service)):
    unwrap(service.delete(autor_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{autor_id}/projetos", response_model=list[ProjetoOut])
def list_projetos_do_autor(autor_id: int, service: AutorService = Depends(get_autor_service)):
    return unwrap(service.get_projetos(autor_id))


@router.get("/{autor_id}/projetos/count", response_model=CountOut)
def count_projetos_do_autor(autor_id: int, service: AutorService = Depends(get_autor_service)):
    return CountOut(count=unwrap(service.count_projetos(autor_id)))


# POST mantido por compatibilidade com clientes antigos
@router.get("/{autor_id}/projetos/media", response_model=MediaOut)
@router.post("/{autor_id}/projetos/media", response_model=MediaOut)
def media_notas_do_autor(autor_id: int, service: AutorService = Depends(get_autor_service)):
    return MediaOut(media=unwrap(service.media_notas(autor_id)))
