from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import AreaTematica, SituacaoProjeto
from app.schemas.autor import AutorOut
from app.schemas.avaliador import AvaliadorOut
from app.schemas.premio import PremioOut


class ProjetoCreate(BaseModel):
    titulo: str = Field(..., min_length=1, max_length=255)
    area_tematica: AreaTematica = Field(..., alias="areaTematica")
    resumo: str = Field(..., min_length=1)
    premio_id: int = Field(..., alias="premioId")
    avaliador_id: Optional[int] = Field(default=None, alias="avaliadorId")
    autor_ids: List[int] = Field(..., alias="autorIds")
    situacao: Optional[SituacaoProjeto] = None

    model_config = ConfigDict(populate_by_name=True)


class ProjetoUpdate(BaseModel):
    titulo: Optional[str] = Field(default=None, min_length=1, max_length=255)
    area_tematica: Optional[AreaTematica] = Field(default=None, alias="areaTematica")
    resumo: Optional[str] = Field(default=None, min_length=1)
    premio_id: Optional[int] = Field(default=None, alias="premioId")
    # null explícito desvincula o avaliador
    avaliador_id: Optional[int] = Field(default=None, alias="avaliadorId")
    autor_ids: Optional[List[int]] = Field(default=None, alias="autorIds")
    situacao: Optional[SituacaoProjeto] = None
    nota: Optional[float] = None
    parecer_descritivo: Optional[str] = Field(default=None, alias="parecerDescritivo")
    status: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True)


class ProjetoAvaliacao(BaseModel):
    nota: float
    parecer_descritivo: str = Field(..., alias="parecerDescritivo")
    situacao: SituacaoProjeto

    model_config = ConfigDict(populate_by_name=True)


class AutorIdIn(BaseModel):
    autor_id: int = Field(..., alias="autorId")

    model_config = ConfigDict(populate_by_name=True)


class ProjetoOut(BaseModel):
    id: int
    titulo: str
    area_tematica: AreaTematica = Field(alias="areaTematica")
    resumo: str
    situacao: SituacaoProjeto
    nota: float
    parecer_descritivo: Optional[str] = Field(default=None, alias="parecerDescritivo")
    premio_id: int = Field(alias="premioId")
    avaliador_id: Optional[int] = Field(default=None, alias="avaliadorId")
    status: bool
    data_cadastro: datetime = Field(alias="dataCadastro")

    autores: List[AutorOut] = []
    premio: Optional[PremioOut] = None
    avaliador: Optional[AvaliadorOut] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
