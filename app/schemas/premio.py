from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# campos em camelCase no JSON (anoEdicao, dataInicio, dataFim)


class PremioCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=200)
    ano_edicao: int = Field(..., gt=0, alias="anoEdicao")
    data_inicio: date = Field(..., alias="dataInicio")
    data_fim: date = Field(..., alias="dataFim")

    model_config = ConfigDict(populate_by_name=True)


class PremioUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=200)
    ano_edicao: Optional[int] = Field(default=None, gt=0, alias="anoEdicao")
    data_inicio: Optional[date] = Field(default=None, alias="dataInicio")
    data_fim: Optional[date] = Field(default=None, alias="dataFim")

    model_config = ConfigDict(populate_by_name=True)


class PremioOut(BaseModel):
    id: int
    nome: str
    ano_edicao: int = Field(alias="anoEdicao")
    data_inicio: date = Field(alias="dataInicio")
    data_fim: date = Field(alias="dataFim")
    status: bool

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
