from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.animal import WEIGHT_MAX, WEIGHT_MIN


class AnimalBase(BaseModel):
    name: str
    weight: int = Field(strict=True, ge=WEIGHT_MIN, le=WEIGHT_MAX)
    diet: str


class AnimalCreate(AnimalBase):
    # Optional client-chosen id; generated by the database when omitted
    id: UUID | None = None


class AnimalUpdate(AnimalBase):
    # Clients may send the whole record back; the path id wins
    model_config = ConfigDict(extra="ignore")


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    weight: int
    diet: str


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    total: int
