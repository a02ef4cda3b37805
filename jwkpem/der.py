"""
Minimal DER builder: just enough ASN.1 to lay out a SubjectPublicKeyInfo.

Every builder returns a complete tag-length-value element as `bytes`, and
containers are made by concatenating finished children.
"""

from typing import Iterable

TAG_INTEGER = 0x02
TAG_BIT_STRING = 0x03
TAG_OBJECT_IDENTIFIER = 0x06
TAG_SEQUENCE = 0x30


def encode_length(length: int) -> bytes:
    """
    DER length octets.
    Short form below 128, otherwise 0x80 | <count> followed by the minimal
    big-endian representation of the length.
    """
    if length < 0:
        raise ValueError(f"DER length cannot be negative: {length}")
    if length < 0x80:
        return bytes([length])
    length_bytes = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([0x80 | len(length_bytes)]) + length_bytes


def build_tlv(tag: int, content: bytes) -> bytes:
    return bytes([tag]) + encode_length(len(content)) + content


def build_integer(data: bytes) -> bytes:
    """
    INTEGER from unsigned big-endian bytes.
    A 0x00 is prepended when the high bit is set so the value stays
    non-negative.
    """
    if not data:
        raise ValueError("Cannot encode an empty INTEGER")
    data = bytes(data)
    if data[0] & 0x80:
        data = b"\x00" + data
    return build_tlv(TAG_INTEGER, data)


def build_bit_string(data: bytes) -> bytes:
    # Leading 0x00: no unused bits, content is always whole bytes
    return build_tlv(TAG_BIT_STRING, b"\x00" + bytes(data))


def build_sequence(elements: Iterable[bytes]) -> bytes:
    return build_tlv(TAG_SEQUENCE, b"".join(bytes(el) for el in elements))


def raw_oid(oid_bytes: bytes) -> bytes:
    """Pass through an OBJECT IDENTIFIER that is already DER encoded."""
    oid_bytes = bytes(oid_bytes)
    if len(oid_bytes) < 2 or oid_bytes[0] != TAG_OBJECT_IDENTIFIER:
        raise ValueError("OID must be a pre-encoded OBJECT IDENTIFIER element")
    if oid_bytes[1] != len(oid_bytes) - 2:
        raise ValueError("OID length octet does not match its content")
    return oid_bytes
