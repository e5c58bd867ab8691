from .qr_renderer_protocol import QRRendererProtocol

__all__ = ["QRRendererProtocol"]
