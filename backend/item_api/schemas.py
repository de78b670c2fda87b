from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemPayload(BaseModel):
    """Body accepted by create and replace; a client-sent id is dropped."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    price: float = Field(default=0.0, allow_inf_nan=False)


class Item(BaseModel):
    id: int
    name: str
    price: float


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str
