"""FastAPI dependencies for the Pix API."""

from __future__ import annotations

from fastapi import Depends

from ..application.use_cases.pix import PixService
from ..domain.shared.qr_renderer_protocol import QRRendererProtocol
from ..env import Settings, get_settings
from ..infrastructure.qr_renderer import QRCodeRenderer


def get_qr_renderer(settings: Settings = Depends(get_settings)) -> QRRendererProtocol:
    """Get QR renderer."""
    return QRCodeRenderer(box_size=settings.qr_box_size, border=settings.qr_border)


def get_pix_service(
    qr_renderer: QRRendererProtocol = Depends(get_qr_renderer),
) -> PixService:
    """Get Pix service."""
    return PixService(qr_renderer)
