"""
JWK key variants and the SubjectPublicKeyInfo layouts built from them.

parse_jwk() is the only place the `kty` tag is looked at: it turns a JWK
mapping into an RSAKey or ECKey with its required members present, and
assemble() hands the variant to the matching DER layout.
"""

from dataclasses import dataclass
from typing import Mapping, Union

from jwkpem.b64 import decode_base64url
from jwkpem.der import build_bit_string, build_integer, build_sequence, raw_oid
from jwkpem.errors import MissingParameterError, UnsupportedKeyTypeError
from jwkpem.registry import (
    EC_PUBLIC_KEY_OID,
    NULL_PARAMETER,
    RSA_ENCRYPTION_OID,
    curve_oid,
)

UNCOMPRESSED_POINT = 0x04


@dataclass(frozen=True)
class RSAKey:
    n: str
    e: str

    kty = "RSA"
    required = ("n", "e")

    @property
    def display_name(self) -> str:
        return "RSA"


@dataclass(frozen=True)
class ECKey:
    crv: str
    x: str
    y: str

    kty = "EC"
    required = ("x", "y", "crv")

    @property
    def display_name(self) -> str:
        return f"EC ({self.crv})"


PublicKey = Union[RSAKey, ECKey]

KEY_TYPES = {cls.kty: cls for cls in (RSAKey, ECKey)}


def _present(value) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def parse_jwk(jwk: Mapping) -> PublicKey:
    """
    Resolve a JWK mapping to its key variant.
    Raises UnsupportedKeyTypeError for any `kty` other than RSA/EC and
    MissingParameterError when a required member is absent, empty or only
    whitespace.
    """
    kty = jwk.get("kty")
    cls = KEY_TYPES.get(kty) if isinstance(kty, str) else None
    if cls is None:
        raise UnsupportedKeyTypeError(kty)

    missing = [name for name in cls.required if not _present(jwk.get(name))]
    if missing:
        raise MissingParameterError(kty, missing)

    return cls(**{name: jwk[name] for name in cls.required})


def assemble_rsa(key: RSAKey) -> bytes:
    n_bytes = decode_base64url(key.n)
    e_bytes = decode_base64url(key.e)

    # RSAPublicKey ::= SEQUENCE { modulus INTEGER, publicExponent INTEGER }
    rsa_public_key = build_sequence([build_integer(n_bytes), build_integer(e_bytes)])
    algorithm_id = build_sequence([raw_oid(RSA_ENCRYPTION_OID), NULL_PARAMETER])
    return build_sequence([algorithm_id, build_bit_string(rsa_public_key)])


def assemble_ec(key: ECKey) -> bytes:
    oid = curve_oid(key.crv)
    x = decode_base64url(key.x)
    y = decode_base64url(key.y)

    point = bytes([UNCOMPRESSED_POINT]) + x + y
    algorithm_id = build_sequence([raw_oid(EC_PUBLIC_KEY_OID), raw_oid(oid)])
    return build_sequence([algorithm_id, build_bit_string(point)])


_ASSEMBLERS = {
    RSAKey: assemble_rsa,
    ECKey: assemble_ec,
}


def assemble(key: PublicKey) -> bytes:
    """Build the DER SubjectPublicKeyInfo for a parsed key."""
    return _ASSEMBLERS[type(key)](key)
