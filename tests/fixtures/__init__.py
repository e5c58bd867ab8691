"""Test fixtures for in-memory implementations."""

from .fake_qr_renderer import FakeQRRenderer

__all__ = ["FakeQRRenderer"]
