"""Protocol interface for QR image renderers.

The payload codec only produces text. Turning that text into a scannable
image is delegated to a renderer, so services can be tested with a fake one.
"""

from __future__ import annotations

from typing import Protocol


class QRRendererProtocol(Protocol):
    """Contract for anything that turns a payload string into a PNG image."""

    async def render_png(self, data: str) -> bytes:
        """Render `data` as a QR code.

        Args:
            data: Exact text to encode in the QR symbol

        Returns:
            PNG image bytes
        """
        ...
