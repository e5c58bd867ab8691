"""Use cases for generating Pix payloads and checking Pix keys."""

from __future__ import annotations

import base64
import logging
from decimal import Decimal

from ...codec.amounts import format_amount
from ...codec.keys import detect_key_type, validate_key
from ...codec.payload import assemble
from ...domain.entities import KEY_TYPE_LABELS, PayloadRequest, PixConfig
from ...domain.shared.qr_renderer_protocol import QRRendererProtocol
from ..dtos import (
    FormattedAmountResponseDTO,
    GeneratePixDTO,
    KeyTypeDetectionResponseDTO,
    KeyValidationResponseDTO,
    PixConfigDTO,
    PixConfigResponseDTO,
    PixPayloadResponseDTO,
    PixQRCodeResponseDTO,
    ValidateKeyDTO,
)

logger = logging.getLogger(__name__)

PREVIEW_AMOUNT = Decimal("1.00")
PREVIEW_DESCRIPTION = "TESTE QR CODE"


def png_to_data_url(png: bytes) -> str:
    """Wrap PNG bytes in a base64 `data:` URL."""
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")


class PixService:
    """Service layer for Pix payload generation and key checks."""

    def __init__(self, qr_renderer: QRRendererProtocol):
        self.qr_renderer = qr_renderer

    async def generate_payload(self, dto: GeneratePixDTO) -> PixPayloadResponseDTO:
        """Assemble the copy-paste payload for a charge."""
        request = PayloadRequest(**dto.model_dump())
        payload = assemble(request)
        logger.debug("Assembled Pix payload for %s key", request.key_type.value)
        return PixPayloadResponseDTO(payload=payload)

    async def generate_qr_code(self, dto: GeneratePixDTO) -> PixQRCodeResponseDTO:
        """Assemble the payload and render it as a QR code image."""
        result = await self.generate_payload(dto)
        png = await self.qr_renderer.render_png(result.payload)
        return PixQRCodeResponseDTO(
            payload=result.payload, qr_code_data_url=png_to_data_url(png)
        )

    async def validate_key(self, dto: ValidateKeyDTO) -> KeyValidationResponseDTO:
        result = validate_key(dto.key, dto.key_type)
        return KeyValidationResponseDTO(valid=result.valid, error=result.error)

    async def detect_key_type(self, key: str) -> KeyTypeDetectionResponseDTO:
        key_type = detect_key_type(key)
        if key_type is None:
            return KeyTypeDetectionResponseDTO()
        return KeyTypeDetectionResponseDTO(
            key_type=key_type, label=KEY_TYPE_LABELS[key_type]
        )

    async def format_amount(self, cents: int) -> FormattedAmountResponseDTO:
        return FormattedAmountResponseDTO(cents=cents, formatted=format_amount(cents))

    async def build_config(self, dto: PixConfigDTO) -> PixConfigResponseDTO:
        """Validate a payee configuration before the caller stores it.

        Disabled configurations may be incomplete. Enabling one requires the
        key, receiver name and city, and a key that fits its declared type.
        Name and city are stored upper-cased.

        Raises:
            ValueError: If an enabled configuration is incomplete or its key
                is malformed.
        """
        config = PixConfig(
            pix_key=dto.pix_key,
            key_type=dto.key_type,
            receiver_name=dto.receiver_name.upper(),
            receiver_city=dto.receiver_city.upper(),
            enabled=dto.enabled,
        )
        if config.enabled:
            self._ensure_usable(config)

        return PixConfigResponseDTO(
            pix_key=config.pix_key,
            key_type=config.key_type,
            key_type_label=KEY_TYPE_LABELS[config.key_type],
            receiver_name=config.receiver_name,
            receiver_city=config.receiver_city,
            enabled=config.enabled,
        )

    async def preview_qr_code(self, dto: PixConfigDTO) -> PixQRCodeResponseDTO:
        """Render a R$ 1,00 test charge so the payee can scan-check a config.

        Raises:
            ValueError: If the configuration is incomplete or its key is
                malformed, whether or not it is enabled.
        """
        config = PixConfig(**dto.model_dump())
        self._ensure_usable(config)
        return await self.generate_qr_code(
            GeneratePixDTO(
                pix_key=config.pix_key,
                key_type=config.key_type,
                receiver_name=config.receiver_name,
                receiver_city=config.receiver_city,
                amount=PREVIEW_AMOUNT,
                description=PREVIEW_DESCRIPTION,
            )
        )

    @staticmethod
    def _ensure_usable(config: PixConfig) -> None:
        if not config.is_complete():
            raise ValueError("Pix key, receiver name and receiver city are required")
        validation = validate_key(config.pix_key, config.key_type)
        if not validation.valid:
            raise ValueError(validation.error or "Invalid Pix key")
