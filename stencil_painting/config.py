"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    stencil_log_level: str = "info"

    # Compositing
    stencil_alpha_averaging: bool = False
    # Segment count above which compositing logs a memory warning
    stencil_segment_warning_threshold: int = 1_000_000

    # Folder walking
    stencil_image_extensions: list[str] = [
        ".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff", ".webp",
    ]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
