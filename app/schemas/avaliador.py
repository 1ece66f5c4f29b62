from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class AvaliadorBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=120)
    cpf: str = Field(..., min_length=11, max_length=14)
    email: EmailStr


class AvaliadorCreate(AvaliadorBase):
    pass


class AvaliadorUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=120)
    cpf: Optional[str] = Field(default=None, min_length=11, max_length=14)
    email: Optional[EmailStr] = None


class AvaliadorOut(AvaliadorBase):
    id: int
    status: bool

    model_config = ConfigDict(from_attributes=True)
