from __future__ import annotations

import uvicorn

from .env import get_settings


def main() -> None:
    """Main entry point for the Pix API."""

    settings = get_settings()

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"API will be available at: http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation: http://{settings.api_host}:{settings.api_port}/docs")

    # Uvicorn does not support multiple workers together with reload.
    reload = settings.api_debug
    workers = 1 if reload else settings.api_workers

    uvicorn.run(
        "pixcode.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
        workers=workers,
        log_level="info",
    )


if __name__ == "__main__":
    main()
