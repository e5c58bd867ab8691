"""QR renderer backed by the `qrcode` library."""

from __future__ import annotations

import asyncio
from io import BytesIO

import qrcode
from qrcode.constants import ERROR_CORRECT_M


class QRCodeRenderer:
    """Render payload strings as black-on-white PNG QR codes."""

    def __init__(
        self,
        box_size: int = 10,
        border: int = 2,
        error_correction: int = ERROR_CORRECT_M,
    ) -> None:
        self.box_size = box_size
        self.border = border
        self.error_correction = error_correction

    async def render_png(self, data: str) -> bytes:
        """Render `data` off the event loop; image generation is CPU-bound."""
        return await asyncio.to_thread(self._render_png_sync, data)

    def _render_png_sync(self, data: str) -> bytes:
        qr = qrcode.QRCode(
            version=None,
            error_correction=self.error_correction,
            box_size=self.box_size,
            border=self.border,
        )
        qr.add_data(data)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white")

        buf = BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()
