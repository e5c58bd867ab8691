"""Pix API routes."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Query, status
from prometheus_client import Counter, Histogram

from ...application.dtos import (
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
from ...application.use_cases.pix import PixService
from ..dependencies import get_pix_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pix", tags=["pix"])


pix_generation_requests_total = Counter(
    "pix_generation_requests_total",
    "Total Pix payload/QR generation requests processed",
    ["operation", "status"],
)

pix_generation_duration_seconds = Histogram(
    "pix_generation_duration_seconds",
    "Wall time to process a Pix payload/QR generation request",
    ["operation", "status"],
)


def _observe(operation: str, outcome: str, start_time: float) -> None:
    pix_generation_requests_total.labels(operation=operation, status=outcome).inc()
    elapsed = time.perf_counter() - start_time
    pix_generation_duration_seconds.labels(
        operation=operation, status=outcome
    ).observe(elapsed)


@router.post(
    "/payloads",
    response_model=PixPayloadResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def generate_payload(
    request_data: GeneratePixDTO,
    pix_service: PixService = Depends(get_pix_service),
) -> PixPayloadResponseDTO:
    """Generate a "Pix Copia e Cola" payload."""
    start_time = time.perf_counter()
    try:
        result = await pix_service.generate_payload(request_data)
        _observe("payload", "success", start_time)
        return result
    except ValueError as e:
        _observe("payload", "client_error", start_time)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        _observe("payload", "server_error", start_time)
        logger.exception("Failed to generate Pix payload")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate payload: {str(e)}",
        )


@router.post(
    "/qr-codes",
    response_model=PixQRCodeResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def generate_qr_code(
    request_data: GeneratePixDTO,
    pix_service: PixService = Depends(get_pix_service),
) -> PixQRCodeResponseDTO:
    """Generate a Pix payload together with its QR code image."""
    start_time = time.perf_counter()
    try:
        result = await pix_service.generate_qr_code(request_data)
        _observe("qr_code", "success", start_time)
        return result
    except ValueError as e:
        _observe("qr_code", "client_error", start_time)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        _observe("qr_code", "server_error", start_time)
        logger.exception("Failed to generate Pix QR code")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate QR code: {str(e)}",
        )


@router.post("/keys/validation", response_model=KeyValidationResponseDTO)
async def validate_key(
    request_data: ValidateKeyDTO,
    pix_service: PixService = Depends(get_pix_service),
) -> KeyValidationResponseDTO:
    """Check a key against its declared type; invalid keys are not an HTTP error."""
    return await pix_service.validate_key(request_data)


@router.get("/keys/detection", response_model=KeyTypeDetectionResponseDTO)
async def detect_key_type(
    key: str = Query(..., description="Pix key as typed by the user"),
    pix_service: PixService = Depends(get_pix_service),
) -> KeyTypeDetectionResponseDTO:
    """Guess the type of a Pix key."""
    return await pix_service.detect_key_type(key)


@router.get("/amounts/format", response_model=FormattedAmountResponseDTO)
async def format_amount(
    cents: int = Query(..., description="Amount in centavos"),
    pix_service: PixService = Depends(get_pix_service),
) -> FormattedAmountResponseDTO:
    """Format an amount in centavos for display."""
    return await pix_service.format_amount(cents)


@router.post("/configs", response_model=PixConfigResponseDTO)
async def build_config(
    config_data: PixConfigDTO,
    pix_service: PixService = Depends(get_pix_service),
) -> PixConfigResponseDTO:
    """Validate a payee Pix configuration before it is stored."""
    try:
        return await pix_service.build_config(config_data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/configs/preview",
    response_model=PixQRCodeResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def preview_config(
    config_data: PixConfigDTO,
    pix_service: PixService = Depends(get_pix_service),
) -> PixQRCodeResponseDTO:
    """Render a R$ 1,00 test QR code for a payee configuration."""
    start_time = time.perf_counter()
    try:
        result = await pix_service.preview_qr_code(config_data)
        _observe("preview", "success", start_time)
        return result
    except ValueError as e:
        _observe("preview", "client_error", start_time)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        _observe("preview", "server_error", start_time)
        logger.exception("Failed to render Pix preview QR code")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to render preview: {str(e)}",
        )
