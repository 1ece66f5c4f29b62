from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

from app.models.enums import Role


class UserBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=120)
    email: EmailStr


class UserCreate(UserBase):
    senha: str = Field(
        ..., min_length=6, max_length=72, validation_alias=AliasChoices("senha", "password")
    )


class UserUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=120)
    email: Optional[EmailStr] = None
    senha: Optional[str] = Field(
        default=None, min_length=6, max_length=72, validation_alias=AliasChoices("senha", "password")
    )


class UserOut(UserBase):
    id: int
    role: Role
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
