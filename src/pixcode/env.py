from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Typed application settings built from environment variables."""

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(8000, ge=1, le=65535)
    api_debug: bool = False
    api_workers: int = Field(1, ge=1)
    api_cors_origins: list[str] = ["*"]

    # Application settings
    app_name: str = "PixCode"
    app_version: str = "1.0.0"

    # QR rendering
    qr_box_size: int = Field(10, ge=1)
    qr_border: int = Field(2, ge=0)

    @field_validator("api_cors_origins")
    @classmethod
    def validate_api_cors_origins(cls, v: list[str]) -> list[str]:
        origins = [origin.strip() for origin in v if origin.strip()]
        if not origins:
            raise ValueError("At least one CORS origin is required")
        return origins


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    return Settings(
        api_host=os.environ.get("PIX_API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("PIX_API_PORT", "8000")),
        api_debug=os.environ.get("PIX_API_DEBUG", "false").lower() == "true",
        api_workers=int(os.environ.get("PIX_API_WORKERS", "1")),
        api_cors_origins=os.environ.get("PIX_API_CORS_ORIGINS", "*").split(","),
        app_name=os.environ.get("PIX_APP_NAME", "PixCode"),
        app_version=os.environ.get("PIX_APP_VERSION", "1.0.0"),
        qr_box_size=int(os.environ.get("PIX_QR_BOX_SIZE", "10")),
        qr_border=int(os.environ.get("PIX_QR_BORDER", "2")),
    )
