"""
Bounds-checked integer reads over raw image bytes.

Every read treats offsets outside the buffer as the byte value 0, so header
parsers never raise on truncated input. Multi-byte values are composed with
explicit shifts to stay independent of native endianness.
"""

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def byte_at(data: Buffer, offset: int) -> int:
    """Return the byte at offset, or 0 when out of range"""
    if 0 <= offset < len(data):
        return data[offset]
    return 0


def read_u16_be(data: Buffer, offset: int) -> int:
    return (byte_at(data, offset) << 8) | byte_at(data, offset + 1)


def read_u16_le(data: Buffer, offset: int) -> int:
    return byte_at(data, offset) | (byte_at(data, offset + 1) << 8)


def read_u24_le(data: Buffer, offset: int) -> int:
    return (
        byte_at(data, offset)
        | (byte_at(data, offset + 1) << 8)
        | (byte_at(data, offset + 2) << 16)
    )


def read_u32_be(data: Buffer, offset: int) -> int:
    return (
        (byte_at(data, offset) << 24)
        | (byte_at(data, offset + 1) << 16)
        | (byte_at(data, offset + 2) << 8)
        | byte_at(data, offset + 3)
    )


def read_tag(data: Buffer, offset: int) -> bytes:
    """
    Read a 4-byte ASCII tag (box type, chunk FourCC, brand).

    Args:
        data: Raw image bytes
        offset: Position of the first tag byte

    Returns:
        Exactly 4 bytes, zero-padded past the end of the buffer
    """
    return bytes(byte_at(data, offset + i) for i in range(4))


def matches(data: Buffer, offset: int, signature: bytes) -> bool:
    """Check whether signature appears at offset"""
    return all(
        byte_at(data, offset + i) == value for i, value in enumerate(signature)
    )
