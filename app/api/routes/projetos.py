from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_current_user, get_projeto_service
from app.core.errors import unwrap
from app.models import AreaTematica, SituacaoProjeto
from app.schemas import (
    AutorIdIn,
    CountOut,
    MessageOut,
    ProjetoAvaliacao,
    ProjetoCreate,
    ProjetoOut,
    ProjetoUpdate,
)
from app.services import ProjetoService

router = APIRouter(prefix="/projetos", tags=["projetos"], dependencies=[Depends(get_current_user)])


@router.post("", response_model=ProjetoOut, status_code=status.HTTP_201_CREATED)
def create_projeto(payload: ProjetoCreate, service: ProjetoService = Depends(get_projeto_service)):
    return unwrap(service.create(payload))


@router.get("", response_model=list[ProjetoOut])
def list_projetos(
    ativos: bool = Query(default=True),
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.list(apenas_ativos=ativos))


@router.get("/filtro/area/{area}", response_model=list[ProjetoOut])
def filtrar_por_area(
    area: AreaTematica,
    ativos: bool = Query(default=True),
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.list_by_area_tematica(area, ativos))


@router.get("/filtro/situacao/{situacao}", response_model=list[ProjetoOut])
def filtrar_por_situacao(
    situacao: SituacaoProjeto,
    ativos: bool = Query(default=True),
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.list_by_situacao(situacao, ativos))


@router.get("/filtro/autor/{autor_id}", response_model=list[ProjetoOut])
def filtrar_por_autor(
    autor_id: int,
    ativos: bool = Query(default=True),
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.list_by_autor(autor_id, ativos))


@router.get("/filtro/premio/{premio_id}", response_model=list[ProjetoOut])
def filtrar_por_premio(
    premio_id: int,
    ativos: bool = Query(default=True),
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.list_by_premio(premio_id, ativos))


@router.get("/filtro/avaliador/{avaliador_id}", response_model=list[ProjetoOut])
def filtrar_por_avaliador(
    avaliador_id: int,
    ativos: bool = Query(default=True),
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.list_by_avaliador(avaliador_id, ativos))


@router.get("/contagem/premio/{premio_id}/situacao/{situacao}", response_model=CountOut)
def contar_por_situacao_e_premio(
    premio_id: int,
    situacao: SituacaoProjeto,
    service: ProjetoService = Depends(get_projeto_service),
):
    return CountOut(count=unwrap(service.count_by_situacao_and_premio(premio_id, situacao)))


@router.get("/{projeto_id}", response_model=ProjetoOut)
def get_projeto(projeto_id: int, service: ProjetoService = Depends(get_projeto_service)):
    return unwrap(service.get_by_id(projeto_id))


@router.put("/{projeto_id}", response_model=ProjetoOut)
def update_projeto(
    projeto_id: int,
    payload: ProjetoUpdate,
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.update(projeto_id, payload))


@router.delete("/{projeto_id}", response_model=MessageOut)
def delete_projeto(projeto_id: int, service: ProjetoService = Depends(get_projeto_service)):
    return MessageOut(message=unwrap(service.delete(projeto_id)))


@router.patch("/{projeto_id}/avaliar", response_model=ProjetoOut)
def avaliar_projeto(
    projeto_id: int,
    payload: ProjetoAvaliacao,
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.evaluate(projeto_id, payload))


@router.post("/{projeto_id}/autores", response_model=ProjetoOut)
def adicionar_autor(
    projeto_id: int,
    payload: AutorIdIn,
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.add_autor(projeto_id, payload.autor_id))


@router.delete("/{projeto_id}/autores/{autor_id}", response_model=ProjetoOut)
def remover_autor(
    projeto_id: int,
    autor_id: int,
    service: ProjetoService = Depends(get_projeto_service),
):
    return unwrap(service.remove_autor(projeto_id, autor_id))
