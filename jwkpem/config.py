import os


HOST = os.environ.get("JWKPEM_HOST", "0.0.0.0")
PORT = int(os.environ.get("JWKPEM_PORT", "8080"))
LOG_LEVEL = os.environ.get("JWKPEM_LOG_LEVEL", "INFO").upper()

# JWKs are small; anything bigger is rejected by Flask with 413
MAX_CONTENT_LENGTH = int(os.environ.get("JWKPEM_MAX_CONTENT_LENGTH", str(64 * 1024)))

DOWNLOAD_MIMETYPE = "application/x-pem-file"


def flask_settings() -> dict:
    """Settings copied into app.config by create_app()."""
    return {
        "MAX_CONTENT_LENGTH": MAX_CONTENT_LENGTH,
        "DOWNLOAD_MIMETYPE": DOWNLOAD_MIMETYPE,
    }
