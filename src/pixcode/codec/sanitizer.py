"""Text sanitization for BR Code free-text fields."""

from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NOT_ALPHANUMERIC_OR_SPACE = re.compile("[^A-Za-z0-9 ]")


def sanitize(text: str, max_length: int) -> str:
    """Normalize `text` into the restricted alphabet scanners accept.

    Accents are stripped ("São" -> "Sao"), anything other than ASCII letters,
    digits and spaces is dropped, the result is cut to `max_length` bytes and
    upper-cased. Applying it twice gives the same result as applying it once.

    Raises:
        ValueError: If `max_length` is negative.
    """
    if max_length < 0:
        raise ValueError("max_length must be >= 0")
    decomposed = unicodedata.normalize("NFD", text or "")
    without_marks = _COMBINING_MARKS.sub("", decomposed)
    # Only ASCII survives this step, so character count equals byte count.
    ascii_only = _NOT_ALPHANUMERIC_OR_SPACE.sub("", without_marks)
    return ascii_only[:max_length].upper()
