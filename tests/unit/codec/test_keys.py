"""Unit tests for Pix key validation and detection (pure functions)."""

import pytest

from pixcode.codec.keys import (
    ERROR_CNPJ,
    ERROR_CPF,
    ERROR_EMAIL,
    ERROR_PHONE,
    ERROR_RANDOM,
    detect_key_type,
    only_digits,
    validate_key,
)
from pixcode.domain.entities import PaymentKeyType

UUID_KEY = "a1b2c3d4-e5f6-7890-abcd-ef1234567890"


class TestValidateKey:
    """Test validate_key function."""

    def test_cpf_valid(self) -> None:
        result = validate_key("12345678901", PaymentKeyType.CPF)
        assert result.valid is True
        assert result.error is None

    def test_cpf_with_formatting(self) -> None:
        assert validate_key("123.456.789-01", PaymentKeyType.CPF).valid

    def test_cpf_too_short(self) -> None:
        result = validate_key("1234567890", PaymentKeyType.CPF)
        assert result.valid is False
        assert result.error == "must have 11 digits"
        assert result.error == ERROR_CPF

    def test_cpf_too_long(self) -> None:
        assert not validate_key("123456789012", PaymentKeyType.CPF).valid

    def test_cnpj_valid(self) -> None:
        assert validate_key("12345678901234", PaymentKeyType.CNPJ).valid

    def test_cnpj_with_formatting(self) -> None:
        assert validate_key("12.345.678/0001-34", PaymentKeyType.CNPJ).valid

    def test_cnpj_too_short(self) -> None:
        result = validate_key("1234567890123", PaymentKeyType.CNPJ)
        assert result.valid is False
        assert result.error == ERROR_CNPJ

    def test_email_valid(self) -> None:
        assert validate_key("user@example.com", PaymentKeyType.EMAIL).valid

    @pytest.mark.parametrize(
        "key", ["not-an-email", "user@", "user@example", "us er@example.com", ""]
    )
    def test_email_invalid(self, key: str) -> None:
        result = validate_key(key, PaymentKeyType.EMAIL)
        assert result.valid is False
        assert result.error == ERROR_EMAIL

    @pytest.mark.parametrize(
        "key",
        [
            "11999998888",
            "1133334444",
            "(11) 99999-8888",
            "+5511999998888",
            "+55 (11) 3333-4444",
        ],
    )
    def test_phone_valid(self, key: str) -> None:
        assert validate_key(key, PaymentKeyType.PHONE).valid

    @pytest.mark.parametrize("key", ["+5511999", "999998888", "119999988887", ""])
    def test_phone_invalid(self, key: str) -> None:
        result = validate_key(key, PaymentKeyType.PHONE)
        assert result.valid is False
        assert result.error == ERROR_PHONE

    def test_random_valid(self) -> None:
        assert validate_key(UUID_KEY, PaymentKeyType.RANDOM).valid

    def test_random_uppercase_valid(self) -> None:
        assert validate_key(UUID_KEY.upper(), PaymentKeyType.RANDOM).valid

    @pytest.mark.parametrize(
        "key", ["not-a-valid-uuid", UUID_KEY.replace("-", ""), UUID_KEY + "0"]
    )
    def test_random_invalid(self, key: str) -> None:
        result = validate_key(key, PaymentKeyType.RANDOM)
        assert result.valid is False
        assert result.error == ERROR_RANDOM

    def test_never_raises_on_garbage(self) -> None:
        for key_type in PaymentKeyType:
            result = validate_key("\x00\n🚀", key_type)
            assert result.valid is False


class TestDetectKeyType:
    """Test detect_key_type function."""

    def test_email(self) -> None:
        assert detect_key_type("user@example.com") is PaymentKeyType.EMAIL

    def test_random(self) -> None:
        assert detect_key_type(UUID_KEY) is PaymentKeyType.RANDOM

    def test_unknown_format(self) -> None:
        assert detect_key_type("unknown-format-123") is None

    def test_empty(self) -> None:
        assert detect_key_type("") is None

    def test_trims_whitespace(self) -> None:
        assert detect_key_type("  user@example.com  ") is PaymentKeyType.EMAIL

    def test_phone_with_country_code(self) -> None:
        assert detect_key_type("+5511999998888") is PaymentKeyType.PHONE

    def test_phone_without_country_code(self) -> None:
        assert detect_key_type("11999998888") is PaymentKeyType.PHONE

    def test_ten_digit_landline(self) -> None:
        assert detect_key_type("1133334444") is PaymentKeyType.PHONE

    def test_bare_cpf_is_reported_as_phone(self) -> None:
        """Phone is checked before CPF, so 11 digits always read as a phone."""
        assert detect_key_type("12345678901") is PaymentKeyType.PHONE

    def test_formatted_cpf_is_reported_as_phone(self) -> None:
        assert detect_key_type("123.456.789-01") is PaymentKeyType.PHONE

    def test_cnpj(self) -> None:
        assert detect_key_type("12345678901234") is PaymentKeyType.CNPJ

    def test_formatted_cnpj(self) -> None:
        assert detect_key_type("12.345.678/0001-34") is PaymentKeyType.CNPJ

    def test_uuid_wins_over_digit_rules(self) -> None:
        """A UUID made only of digits is still a random key."""
        key = "12345678-1234-1234-1234-123456789012"
        assert detect_key_type(key) is PaymentKeyType.RANDOM


class TestOnlyDigits:
    """Test only_digits helper."""

    def test_strips_punctuation(self) -> None:
        assert only_digits("12.345.678/0001-34") == "12345678000134"

    def test_ignores_non_ascii_digits(self) -> None:
        assert only_digits("١٢٣") == ""
