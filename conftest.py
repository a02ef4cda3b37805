import sys
import os
import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa

ROOT = os.path.abspath(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from jwkpem.b64 import encode_base64url
from jwkpem.registry import COORDINATE_SIZES

CURVES = {
    "P-256": ec.SECP256R1(),
    "P-384": ec.SECP384R1(),
    "P-521": ec.SECP521R1(),
}


def _int_to_base64url(n: int, size: int = 0) -> str:
    """Convert integer to base64url without padding, per JWK spec."""
    byte_length = max(size, (n.bit_length() + 7) // 8, 1)
    return encode_base64url(n.to_bytes(byte_length, "big"))


def public_key_to_jwk(public_key, kid: str = "test") -> dict:
    """
    Convert an RSA or EC public key to a JWK dict (RFC 7517/7518).
    EC coordinates are left-padded to the curve's field size.
    """
    numbers = public_key.public_numbers()
    if isinstance(public_key, rsa.RSAPublicKey):
        return {
            "kty": "RSA",
            "use": "sig",
            "alg": "RS256",
            "kid": kid,
            "n": _int_to_base64url(numbers.n),
            "e": _int_to_base64url(numbers.e),
        }
    crv = {v.name: k for k, v in CURVES.items()}[public_key.curve.name]
    size = COORDINATE_SIZES[crv]
    return {
        "kty": "EC",
        "use": "sig",
        "kid": kid,
        "crv": crv,
        "x": _int_to_base64url(numbers.x, size),
        "y": _int_to_base64url(numbers.y, size),
    }


@pytest.fixture(scope="session")
def rsa_public_key():
    """One 2048-bit RSA key for the whole run; generation is slow."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048).public_key()


@pytest.fixture(scope="session")
def ec_public_keys():
    return {crv: ec.generate_private_key(curve).public_key() for crv, curve in CURVES.items()}


@pytest.fixture()
def rsa_jwk(rsa_public_key):
    return public_key_to_jwk(rsa_public_key, "rsa-1")


@pytest.fixture(params=sorted(CURVES))
def ec_jwk(request, ec_public_keys):
    return public_key_to_jwk(ec_public_keys[request.param], f"ec-{request.param}")
