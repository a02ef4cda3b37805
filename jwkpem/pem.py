from typing import List

from jwkpem.b64 import encode_to_base64

PEM_LINE_WIDTH = 64
PEM_HEADER = "-----BEGIN PUBLIC KEY-----"
PEM_FOOTER = "-----END PUBLIC KEY-----"


def wrap_lines(text: str, width: int = PEM_LINE_WIDTH) -> List[str]:
    return [text[i:i + width] for i in range(0, len(text), width)]


def frame(der: bytes) -> str:
    """Wrap DER SubjectPublicKeyInfo bytes in a PEM PUBLIC KEY block."""
    lines = [PEM_HEADER, *wrap_lines(encode_to_base64(der)), PEM_FOOTER]
    return "\n".join(lines)
