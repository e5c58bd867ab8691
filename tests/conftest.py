"""Shared pytest fixtures for Pix payload tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pixcode.domain.entities import PaymentKeyType, PayloadRequest
from tests.fixtures import FakeQRRenderer


@pytest.fixture
def base_request() -> PayloadRequest:
    """E-mail keyed request with accented name and city and no amount."""
    return PayloadRequest(
        pix_key="doctor@clinic.com",
        key_type=PaymentKeyType.EMAIL,
        receiver_name="Dr. João Silva",
        receiver_city="São Paulo",
    )


@pytest.fixture
def charged_request(base_request: PayloadRequest) -> PayloadRequest:
    """Same as `base_request` with a R$ 150,50 amount."""
    return base_request.model_copy(update={"amount": Decimal("150.50")})


@pytest.fixture
def fake_renderer() -> FakeQRRenderer:
    return FakeQRRenderer()
