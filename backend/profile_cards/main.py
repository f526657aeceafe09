"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from profile_cards.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.profile_cards_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Profile Cards",
        description="Animal archetype and brain profile images annotated with percentages",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Fonts must be in place before the first render
    _register_fonts()

    from profile_cards.api.errors import install_exception_handlers
    from profile_cards.api.router import api_router

    install_exception_handlers(app)
    app.include_router(api_router)

    return app


def _register_fonts() -> None:
    """Register the label font once per process. Failure only degrades legibility."""
    from profile_cards.engine.fonts import register_font

    register_font(settings.font_path, settings.font_family)


app = create_app()
