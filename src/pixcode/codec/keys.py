"""Syntactic Pix key validation and key-type detection.

Both functions are meant for real-time feedback while a user types a key.
Neither raises on bad input: validation reports a result object and
detection returns None when nothing matches.
"""

from __future__ import annotations

import re
from typing import Final, Optional

from ..domain.entities import KeyValidationResult, PaymentKeyType

PHONE_COUNTRY_CODE: Final[str] = "55"
CPF_DIGITS: Final[int] = 11
CNPJ_DIGITS: Final[int] = 14
PHONE_MIN_DIGITS: Final[int] = 10
PHONE_MAX_DIGITS: Final[int] = 11

ERROR_CPF: Final[str] = "must have 11 digits"
ERROR_CNPJ: Final[str] = "must have 14 digits"
ERROR_EMAIL: Final[str] = "invalid email"
ERROR_PHONE: Final[str] = "must include area code + number"
ERROR_RANDOM: Final[str] = "invalid random key"

_UUID_PATTERN = re.compile(
    "[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_WITH_PREFIX_PATTERN = re.compile(r"\+55[0-9]{10,11}")
_NON_DIGITS = re.compile("[^0-9]")


def only_digits(key: str) -> str:
    """Drop formatting punctuation, keeping ASCII digits only."""
    return _NON_DIGITS.sub("", key)


def _national_phone_digits(key: str) -> str:
    stripped = key.strip()
    digits = only_digits(stripped)
    if stripped.startswith("+" + PHONE_COUNTRY_CODE):
        return digits[len(PHONE_COUNTRY_CODE) :]
    return digits


def _is_phone_length(digits: str) -> bool:
    return PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS


def validate_key(key: str, key_type: PaymentKeyType) -> KeyValidationResult:
    """Check that `key` has the shape its declared type requires.

    CPF and CNPJ ignore punctuation and count digits. Phones may carry the
    +55 country prefix and need 10 or 11 national digits (area code plus
    number). Random keys are canonical 8-4-4-4-12 UUIDs.
    """
    if key_type is PaymentKeyType.CPF:
        if len(only_digits(key)) != CPF_DIGITS:
            return KeyValidationResult(valid=False, error=ERROR_CPF)
    elif key_type is PaymentKeyType.CNPJ:
        if len(only_digits(key)) != CNPJ_DIGITS:
            return KeyValidationResult(valid=False, error=ERROR_CNPJ)
    elif key_type is PaymentKeyType.EMAIL:
        if not _EMAIL_PATTERN.fullmatch(key):
            return KeyValidationResult(valid=False, error=ERROR_EMAIL)
    elif key_type is PaymentKeyType.PHONE:
        if not _is_phone_length(_national_phone_digits(key)):
            return KeyValidationResult(valid=False, error=ERROR_PHONE)
    elif key_type is PaymentKeyType.RANDOM:
        if not _UUID_PATTERN.fullmatch(key):
            return KeyValidationResult(valid=False, error=ERROR_RANDOM)
    return KeyValidationResult(valid=True)


def detect_key_type(key: str) -> Optional[PaymentKeyType]:
    """Guess the type of `key`; first match wins.

    Order: UUID, e-mail, phone (+55 prefix or 10-11 digits), CPF (11 digits),
    CNPJ (14 digits). An unformatted 11-digit CPF is therefore reported as a
    phone; callers that know better must pass the type explicitly.
    """
    clean = key.strip()
    if _UUID_PATTERN.fullmatch(clean):
        return PaymentKeyType.RANDOM
    if _EMAIL_PATTERN.fullmatch(clean):
        return PaymentKeyType.EMAIL

    digits = only_digits(clean)
    if _PHONE_WITH_PREFIX_PATTERN.fullmatch(clean) or _is_phone_length(digits):
        return PaymentKeyType.PHONE
    if len(digits) == CPF_DIGITS:
        return PaymentKeyType.CPF
    if len(digits) == CNPJ_DIGITS:
        return PaymentKeyType.CNPJ
    return None
