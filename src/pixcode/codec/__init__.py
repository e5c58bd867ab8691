"""Pix BR Code payload codec."""

from .amounts import cents_to_amount, format_amount
from .crc16 import crc16
from .keys import detect_key_type, validate_key
from .payload import assemble
from .sanitizer import sanitize
from .tlv import FieldSpec, encode_field, encode_fields

__all__ = [
    "FieldSpec",
    "assemble",
    "cents_to_amount",
    "crc16",
    "detect_key_type",
    "encode_field",
    "encode_fields",
    "format_amount",
    "sanitize",
    "validate_key",
]
