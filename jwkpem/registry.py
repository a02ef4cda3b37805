from jwkpem.errors import UnsupportedCurveError

# rsaEncryption, 1.2.840.113549.1.1.1
RSA_ENCRYPTION_OID = bytes.fromhex("06092a864886f70d010101")
# id-ecPublicKey, 1.2.840.10045.2.1
EC_PUBLIC_KEY_OID = bytes.fromhex("06072a8648ce3d0201")
NULL_PARAMETER = bytes.fromhex("0500")

CURVE_OIDS = {
    "P-256": bytes.fromhex("06082a8648ce3d030107"),  # secp256r1
    "P-384": bytes.fromhex("06052b81040022"),  # secp384r1
    "P-521": bytes.fromhex("06052b81040023"),  # secp521r1
}

SUPPORTED_CURVES = tuple(CURVE_OIDS)

# Field element size in bytes; informational only, coordinates are not
# checked against it.
COORDINATE_SIZES = {
    "P-256": 32,
    "P-384": 48,
    "P-521": 66,
}


def curve_oid(name) -> bytes:
    try:
        return CURVE_OIDS[name]
    except (KeyError, TypeError):
        raise UnsupportedCurveError(name) from None
