from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RecommendRequest(BaseModel):
    # Validated field by field in ``preferences.normalize_preferences``
    preferences: dict[str, Any] | None = None


class VehicleSpecsOut(BaseModel):
    drive: str
    seats: str
    warranty: str


class RecommendationItem(BaseModel):
    id: str
    name: str
    image: str | None = None
    basePrice: int
    range: str
    acceleration: str
    topSpeed: str
    score: int = Field(..., ge=0)
    reasons: list[str] = Field(default_factory=list, max_length=3)
    details: list[str] = Field(default_factory=list)
    specs: VehicleSpecsOut


class RecommendationResponse(BaseModel):
    success: bool = True
    recommendations: list[RecommendationItem]


class VehicleOut(BaseModel):
    id: str
    name: str
    basePrice: int
    range: str
    acceleration: str
    topSpeed: str
    bodyType: str
    seats: str
    towing: int | None
    fsd: bool


class HistoryEntry(BaseModel):
    id: int
    preferences: dict[str, Any]
    recommendations: list[dict[str, Any]]
    createdAt: str


class HistoryResponse(BaseModel):
    success: bool = True
    history: list[HistoryEntry]
