import base64
import binascii
import re

from jwkpem.errors import DecodeError

_WHITESPACE = re.compile(r"\s")


def to_standard_base64(text: str) -> str:
    """
    Convert base64url text (as found in JWK members) to standard base64.
    Whitespace is dropped and `=` padding restored; the alphabet itself is
    not checked here, bad characters fail later in decode_to_bytes().
    """
    text = _WHITESPACE.sub("", text)
    text += "=" * ((4 - len(text) % 4) % 4)
    return text.replace("-", "+").replace("_", "/")


def decode_to_bytes(base64_text: str) -> bytes:
    """Strictly decode standard base64, raising DecodeError on bad input."""
    try:
        return base64.b64decode(base64_text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Invalid base64 encoding: {exc}") from exc


def encode_to_base64(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_base64url(text: str) -> bytes:
    return decode_to_bytes(to_standard_base64(text))


def encode_base64url(data: bytes) -> str:
    """Encode bytes as base64url without padding, per JWK spec."""
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")
