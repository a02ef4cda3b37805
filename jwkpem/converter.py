import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from jwkpem.assemblers import PublicKey, assemble, parse_jwk
from jwkpem.errors import (
    ConversionError,
    InvalidJsonError,
    InvalidKeyError,
    JWKPemError,
)
from jwkpem.pem import frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionFailure:
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


@dataclass(frozen=True)
class ConversionResult:
    pem: Optional[str] = None
    error: Optional[ConversionFailure] = None
    key_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_input(json_text: Union[str, bytes]) -> Any:
    if isinstance(json_text, (bytes, bytearray)):
        try:
            json_text = json_text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidJsonError(f"Input is not UTF-8 text: {exc}") from exc
    if not json_text or not json_text.strip():
        raise InvalidJsonError("Please enter a JWK JSON")
    try:
        return json.loads(json_text)
    except (ValueError, RecursionError) as exc:
        raise InvalidJsonError(str(exc)) from exc


def select_key(data: Any) -> Mapping:
    """
    Pick the key to convert: the first entry of a JWKS `keys` list, or the
    parsed value itself when it is a single JWK.
    """
    if isinstance(data, dict) and "keys" in data:
        keys = data["keys"]
        if not isinstance(keys, list) or not keys:
            raise InvalidKeyError("JWKS contains no keys")
        data = keys[0]
    if not isinstance(data, dict):
        raise InvalidKeyError("Invalid JWK format - expected single key object")
    return data


def _build_pem(key: PublicKey) -> str:
    try:
        der = assemble(key)
    except JWKPemError:
        raise
    except Exception as exc:
        raise ConversionError(f"Failed to convert: {exc}") from exc
    logger.debug("Assembled %s SubjectPublicKeyInfo (%d DER bytes)", key.display_name, len(der))
    return frame(der)


def jwk_to_pem(jwk: Mapping) -> str:
    """
    Convert a single JWK mapping to PEM text.
    Raises a JWKPemError subclass on failure; unexpected errors raised while
    building the key are wrapped as ConversionError.
    """
    return _build_pem(parse_jwk(jwk))


def convert(json_text: Union[str, bytes]) -> ConversionResult:
    """
    Convert JWK or JWKS text to a PEM public key.

    Never raises: the outcome is a ConversionResult holding either the PEM
    text (plus a key type label such as "EC (P-256)") or a ConversionFailure
    describing the first error hit.
    """
    try:
        jwk = select_key(parse_input(json_text))
        key = parse_jwk(jwk)
        pem = _build_pem(key)
    except JWKPemError as exc:
        logger.debug("Conversion failed: %s: %s", exc.kind, exc.message)
        return ConversionResult(error=ConversionFailure(exc.kind, exc.message))
    return ConversionResult(pem=pem, key_type=key.display_name)
