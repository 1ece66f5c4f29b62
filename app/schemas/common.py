from typing import Optional

from pydantic import BaseModel


class MessageOut(BaseModel):
    message: str


class CountOut(BaseModel):
    count: int


class MediaOut(BaseModel):
    media: Optional[float] = None


class ErrorOut(BaseModel):
    error: str
