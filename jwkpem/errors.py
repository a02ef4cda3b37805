class JWKPemError(Exception):
    """
    Base class for every failure a conversion can report.
    `kind` is the stable, machine-readable name front ends show to callers.
    """

    kind = "ConversionError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidJsonError(JWKPemError):
    kind = "InvalidJsonError"


class InvalidKeyError(JWKPemError):
    kind = "InvalidKeyError"


class UnsupportedKeyTypeError(JWKPemError):
    kind = "UnsupportedKeyTypeError"

    def __init__(self, kty):
        super().__init__(f"Unsupported key type: {kty}")
        self.kty = kty


class MissingParameterError(JWKPemError):
    kind = "MissingParameterError"

    def __init__(self, kty: str, missing):
        self.missing = tuple(missing)
        super().__init__(
            f"{kty} key missing required parameters ({', '.join(self.missing)})"
        )


class UnsupportedCurveError(JWKPemError):
    kind = "UnsupportedCurveError"

    def __init__(self, curve):
        super().__init__(f"Unsupported curve: {curve}")
        self.curve = curve


class DecodeError(JWKPemError):
    kind = "DecodeError"


class ConversionError(JWKPemError):
    """Wraps an unexpected failure raised while assembling a key."""

    kind = "ConversionError"
