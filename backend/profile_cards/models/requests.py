"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnimalData(BaseModel):
    """Animal archetype percentages, in label order."""

    model_config = ConfigDict(extra="forbid")

    lobo: int
    aguia: int
    tubarao: int
    gato: int


class BrainData(BaseModel):
    """Brain profile percentages, in label order."""

    model_config = ConfigDict(extra="forbid")

    pensante: int
    atuante: int
    razao: int
    emocao: int


class GenerateImagesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    animal_data: AnimalData | None = Field(default=None, alias="animalData")
    brain_data: BrainData | None = Field(default=None, alias="brainData")
