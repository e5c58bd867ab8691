"""BR Code (EMV merchant-presented mode) payload assembly for Pix.

Field order is fixed by the network; scanners reject payloads whose
fields are reordered. The final field is a CRC16 over every preceding
byte, including the CRC field's own tag and length.
"""

from __future__ import annotations

from typing import Final, Optional

from ..domain.entities import PayloadRequest
from ..domain.errors import PayloadAssemblyError
from .amounts import format_wire_amount
from .crc16 import crc16
from .sanitizer import sanitize
from .tlv import MAX_VALUE_LENGTH, FieldSpec, byte_length, encode_fields


class Tag:
    """EMV tags used in a Pix payload."""

    PAYLOAD_FORMAT: Final[str] = "00"
    MERCHANT_ACCOUNT_INFO: Final[str] = "26"
    MERCHANT_CATEGORY: Final[str] = "52"
    TRANSACTION_CURRENCY: Final[str] = "53"
    TRANSACTION_AMOUNT: Final[str] = "54"
    COUNTRY_CODE: Final[str] = "58"
    MERCHANT_NAME: Final[str] = "59"
    MERCHANT_CITY: Final[str] = "60"
    ADDITIONAL_DATA: Final[str] = "62"
    CRC16: Final[str] = "63"

    # Sub-fields of MERCHANT_ACCOUNT_INFO
    ACCOUNT_GUI: Final[str] = "00"
    ACCOUNT_KEY: Final[str] = "01"
    ACCOUNT_DESCRIPTION: Final[str] = "02"

    # Sub-field of ADDITIONAL_DATA
    TRANSACTION_ID: Final[str] = "05"


PAYLOAD_FORMAT_INDICATOR: Final[str] = "01"
PIX_GUI: Final[str] = "br.gov.bcb.pix"
MERCHANT_CATEGORY_CODE: Final[str] = "0000"
CURRENCY_BRL: Final[str] = "986"
COUNTRY_BR: Final[str] = "BR"
DYNAMIC_TRANSACTION_ID: Final[str] = "***"
CRC16_LENGTH: Final[int] = 4

NAME_MAX_LENGTH: Final[int] = 25
CITY_MAX_LENGTH: Final[int] = 15
TRANSACTION_ID_MAX_LENGTH: Final[int] = 25
DESCRIPTION_MAX_LENGTH: Final[int] = 72

_FIELD_HEADER_LENGTH: Final[int] = 4


def merchant_account_fields(
    pix_key: str, description: Optional[str] = None
) -> tuple[FieldSpec, ...]:
    """Sub-fields of the merchant account template (tag 26).

    The key goes in verbatim. The description is sanitized and cut to
    whatever room the 99-byte template leaves, never beyond 72 characters;
    it is left out, rather than sent as an empty `0200`, when nothing
    printable remains.
    """
    fields = [
        FieldSpec(Tag.ACCOUNT_GUI, PIX_GUI),
        FieldSpec(Tag.ACCOUNT_KEY, pix_key),
    ]
    if description:
        used = sum(_FIELD_HEADER_LENGTH + byte_length(f.value) for f in fields)
        room = MAX_VALUE_LENGTH - used - _FIELD_HEADER_LENGTH
        text = sanitize(description, max(0, min(DESCRIPTION_MAX_LENGTH, room)))
        if text:
            fields.append(FieldSpec(Tag.ACCOUNT_DESCRIPTION, text))
    return tuple(fields)


def transaction_reference(transaction_id: Optional[str]) -> str:
    """Sanitized reference, or the wildcard asking the payer's bank to assign one.

    A reference that sanitizes to nothing also gets the wildcard rather than
    an empty `0500` sub-field.
    """
    reference = sanitize(transaction_id or "", TRANSACTION_ID_MAX_LENGTH)
    return reference or DYNAMIC_TRANSACTION_ID


def build_fields(request: PayloadRequest) -> list[FieldSpec]:
    """Ordered field descriptors for `request`, without the CRC field."""
    fields = [
        FieldSpec(Tag.PAYLOAD_FORMAT, PAYLOAD_FORMAT_INDICATOR),
        FieldSpec(
            Tag.MERCHANT_ACCOUNT_INFO,
            merchant_account_fields(request.pix_key, request.description),
        ),
        FieldSpec(Tag.MERCHANT_CATEGORY, MERCHANT_CATEGORY_CODE),
        FieldSpec(Tag.TRANSACTION_CURRENCY, CURRENCY_BRL),
    ]
    # No amount field means the payer types the amount in their app.
    if request.amount is not None and request.amount > 0:
        fields.append(
            FieldSpec(Tag.TRANSACTION_AMOUNT, format_wire_amount(request.amount))
        )
    fields.extend(
        [
            FieldSpec(Tag.COUNTRY_CODE, COUNTRY_BR),
            FieldSpec(
                Tag.MERCHANT_NAME, sanitize(request.receiver_name, NAME_MAX_LENGTH)
            ),
            FieldSpec(
                Tag.MERCHANT_CITY, sanitize(request.receiver_city, CITY_MAX_LENGTH)
            ),
            FieldSpec(
                Tag.ADDITIONAL_DATA,
                (
                    FieldSpec(
                        Tag.TRANSACTION_ID,
                        transaction_reference(request.transaction_id),
                    ),
                ),
            ),
        ]
    )
    return fields


def crc_field_prefix() -> str:
    """Tag and length of the CRC field; both are covered by the checksum."""
    return f"{Tag.CRC16}{CRC16_LENGTH:02d}"


def assemble(request: PayloadRequest) -> str:
    """Build the complete "Pix Copia e Cola" payload for `request`.

    Identical requests always yield identical payloads.

    Raises:
        PayloadAssemblyError: If the Pix key is empty.
        FieldOverflowError: If the key is too long for the account template.
    """
    if not request.pix_key or not request.pix_key.strip():
        raise PayloadAssemblyError("Pix key is required to build a payload")

    unsigned = encode_fields(build_fields(request)) + crc_field_prefix()
    return unsigned + crc16(unsigned)
