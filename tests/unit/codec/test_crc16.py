"""Unit tests for the CRC-16/CCITT-FALSE checksum."""

from pixcode.codec.crc16 import crc16

# Example payload from the Pix BR Code manual (static key, no amount).
MANUAL_PAYLOAD = (
    "00020126580014br.gov.bcb.pix0136123e4567-e12b-12d1-a456-426655440000"
    "5204000053039865802BR5913Fulano de Tal6008BRASILIA62070503***6304"
)


class TestCrc16:
    """Test crc16 function."""

    def test_standard_check_value(self) -> None:
        assert crc16(b"123456789") == "29B1"

    def test_empty_input_is_initial_register(self) -> None:
        assert crc16(b"") == "FFFF"

    def test_str_and_bytes_agree(self) -> None:
        assert crc16("123456789") == crc16(b"123456789")

    def test_manual_example(self) -> None:
        assert crc16(MANUAL_PAYLOAD) == "1D3D"

    def test_output_is_four_uppercase_hex_digits(self) -> None:
        for data in [b"\x00", b"A", b"pix", b"\xff" * 32]:
            result = crc16(data)
            assert len(result) == 4
            assert result == result.upper()
            int(result, 16)

    def test_sensitive_to_byte_order(self) -> None:
        assert crc16(b"AB") != crc16(b"BA")
