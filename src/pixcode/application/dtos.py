"""Data Transfer Objects for the Pix application layer."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.entities import AMOUNT_MAX_DIGITS, PaymentKeyType


class GeneratePixDTO(BaseModel):
    """DTO for generating a Pix payload or QR code."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "pix_key": "doctor@clinic.com",
                "key_type": "email",
                "receiver_name": "Dr. João Silva",
                "receiver_city": "São Paulo",
                "amount": "150.50",
                "description": "Consulta",
            }
        }
    )

    pix_key: str = Field(..., min_length=1, description="Receiver's Pix key")
    key_type: PaymentKeyType
    receiver_name: str = Field(..., min_length=1)
    receiver_city: str = Field(..., min_length=1)
    amount: Optional[Decimal] = Field(
        None,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=2,
        description="Amount in BRL; omit for open amount",
    )
    transaction_id: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class PixPayloadResponseDTO(BaseModel):
    """DTO for returning a "Pix Copia e Cola" payload."""

    payload: str


class PixQRCodeResponseDTO(BaseModel):
    """DTO for returning a rendered QR code and its payload."""

    payload: str
    qr_code_data_url: str


class ValidateKeyDTO(BaseModel):
    """DTO for checking a Pix key against a declared type."""

    key: str
    key_type: PaymentKeyType


class KeyValidationResponseDTO(BaseModel):
    """DTO for returning a key validation outcome."""

    valid: bool
    error: Optional[str] = None


class KeyTypeDetectionResponseDTO(BaseModel):
    """DTO for returning the detected type of a key, if any."""

    key_type: Optional[PaymentKeyType] = None
    label: Optional[str] = None


class FormattedAmountResponseDTO(BaseModel):
    """DTO for returning a display-formatted amount."""

    cents: int
    formatted: str


class PixConfigDTO(BaseModel):
    """DTO for saving a payee Pix configuration."""

    pix_key: str = ""
    key_type: PaymentKeyType = PaymentKeyType.CPF
    receiver_name: str = ""
    receiver_city: str = ""
    enabled: bool = False


class PixConfigResponseDTO(BaseModel):
    """DTO for returning a validated payee Pix configuration."""

    pix_key: str
    key_type: PaymentKeyType
    key_type_label: str
    receiver_name: str
    receiver_city: str
    enabled: bool
