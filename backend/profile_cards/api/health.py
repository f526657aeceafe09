"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from profile_cards.engine.fonts import get_font_registry
from profile_cards.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        fonts_registered=get_font_registry().count,
    )
