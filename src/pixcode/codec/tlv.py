"""EMV tag-length-value encoding."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Iterable, Union

from ..domain.errors import FieldOverflowError

MAX_VALUE_LENGTH: Final[int] = 99

_TAG_PATTERN = re.compile("[0-9]{2}")


@dataclass(frozen=True)
class FieldSpec:
    """A tagged field whose value is text or an ordered group of sub-fields."""

    tag: str
    value: Union[str, tuple["FieldSpec", ...]]

    @property
    def is_nested(self) -> bool:
        return isinstance(self.value, tuple)


def byte_length(value: str) -> int:
    """Length of `value` on the wire (UTF-8 bytes)."""
    return len(value.encode("utf-8"))


def encode_field(tag: str, value: str) -> str:
    """Build `tag + LL + value` where LL is the zero-padded byte length.

    Raises:
        ValueError: If `tag` is not two ASCII digits.
        FieldOverflowError: If `value` is longer than 99 bytes.
    """
    if not _TAG_PATTERN.fullmatch(tag):
        raise ValueError(f"Field tag must be two digits, got {tag!r}")
    length = byte_length(value)
    if length > MAX_VALUE_LENGTH:
        raise FieldOverflowError(
            f"Field {tag} value is {length} bytes, limit is {MAX_VALUE_LENGTH}"
        )
    return f"{tag}{length:02d}{value}"


def encode_fields(specs: Iterable[FieldSpec]) -> str:
    """Encode fields in the given order, recursing into nested groups."""
    return "".join(_encode_spec(spec) for spec in specs)


def _encode_spec(spec: FieldSpec) -> str:
    if spec.is_nested:
        return encode_field(spec.tag, encode_fields(spec.value))
    return encode_field(spec.tag, spec.value)
