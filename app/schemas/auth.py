from pydantic import AliasChoices, BaseModel, EmailStr, Field


class LoginIn(BaseModel):
    email: EmailStr
    # aceita "senha" ou "password" no corpo
    senha: str = Field(..., min_length=1, validation_alias=AliasChoices("senha", "password"))


class LoginOut(BaseModel):
    token: str
    token_type: str = "bearer"
