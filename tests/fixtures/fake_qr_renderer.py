"""In-memory QR renderer that records what it was asked to render."""

from __future__ import annotations


class FakeQRRenderer:
    """QR renderer stand-in returning fixed bytes."""

    def __init__(self, png: bytes = b"\x89PNG\r\n\x1a\nfake") -> None:
        self.png = png
        self.rendered: list[str] = []

    async def render_png(self, data: str) -> bytes:
        self.rendered.append(data)
        return self.png
