"""Pix domain entities: key types, payload requests and payee configuration."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentKeyType(str, Enum):
    """Pix key types accepted by the instant-payment network."""

    CPF = "cpf"
    CNPJ = "cnpj"
    EMAIL = "email"
    PHONE = "phone"
    RANDOM = "random"


# Tag 54 holds at most 13 characters: 12 digits and the decimal point.
AMOUNT_MAX_DIGITS = 12

KEY_TYPE_LABELS: dict[PaymentKeyType, str] = {
    PaymentKeyType.CPF: "CPF",
    PaymentKeyType.CNPJ: "CNPJ",
    PaymentKeyType.EMAIL: "E-mail",
    PaymentKeyType.PHONE: "Telefone",
    PaymentKeyType.RANDOM: "Chave Aleatória",
}


class PayloadRequest(BaseModel):
    """Input for assembling a BR Code payload.

    Free-text fields are stored as given; the assembler sanitizes and
    truncates them. The Pix key is embedded verbatim.
    """

    model_config = ConfigDict(frozen=True)

    pix_key: str
    key_type: PaymentKeyType
    receiver_name: str
    receiver_city: str
    amount: Optional[Decimal] = Field(
        None, ge=0, max_digits=AMOUNT_MAX_DIGITS, decimal_places=2
    )
    transaction_id: Optional[str] = None
    description: Optional[str] = None


class KeyValidationResult(BaseModel):
    """Outcome of a syntactic Pix key check."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    error: Optional[str] = None


class PixConfig(BaseModel):
    """Payee Pix configuration."""

    pix_key: str = ""
    key_type: PaymentKeyType = PaymentKeyType.CPF
    receiver_name: str = ""
    receiver_city: str = ""
    enabled: bool = False

    def is_complete(self) -> bool:
        """Return True when key, name and city are all filled in."""
        return bool(self.pix_key and self.receiver_name and self.receiver_city)
