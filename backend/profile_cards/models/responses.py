"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    fonts_registered: int = 0


class GenerateImagesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    animal_image: str = Field(..., alias="animalImage", description="PNG data URI")
    brain_image: str = Field(..., alias="brainImage", description="PNG data URI")


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
