"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    profile_cards_env: str = "development"
    profile_cards_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Label font, registered once at startup
    font_path: str = "fonts/Arial_Bold.ttf"
    font_family: str = "Arial Bold"

    # Base images: local path or http(s) URL, loaded fresh per render
    animal_base_image: str = "https://i.postimg.cc/6QDYdjPb/Design-sem-nome-17.png"
    brain_base_image: str = "https://i.postimg.cc/LXMYjwtX/Inserir-um-t-tulo-6.png"
    base_image_timeout: float = 10.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
