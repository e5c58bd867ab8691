"""Domain-specific exceptions."""

from __future__ import annotations


class PixError(Exception):
    """Base class for Pix payload errors."""


class PayloadAssemblyError(PixError, ValueError):
    """Raised when a payload request breaks the assembler's contract."""


class FieldOverflowError(PixError, ValueError):
    """Raised when a field value does not fit its two-digit length prefix."""
