"""CRC-16/CCITT-FALSE checksum used by the BR Code CRC field."""

from __future__ import annotations

from typing import Final, Union

CRC16_POLY: Final[int] = 0x1021
CRC16_INIT: Final[int] = 0xFFFF


def crc16(data: Union[bytes, str]) -> str:
    """Compute CRC-16/CCITT-FALSE and render it as 4 uppercase hex digits.

    Parameters are fixed by the payment network: poly 0x1021, init 0xFFFF,
    MSB-first, no reflection, no final XOR. `str` input is UTF-8 encoded.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    crc = CRC16_INIT
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ CRC16_POLY
            else:
                crc <<= 1
            crc &= 0xFFFF
    return f"{crc:04X}"
