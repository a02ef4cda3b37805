import io
import logging
from datetime import date
from typing import Mapping, Optional

from flask import Flask, jsonify, request, send_file

from jwkpem import config
from jwkpem.converter import convert

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(config.flask_settings())
    if overrides:
        app.config.update(overrides)

    # ---- Helper shared by the JSON and download routes ----
    def _convert_body():
        result = convert(request.get_data())
        if not result.ok:
            logger.warning(
                "Rejected conversion request: %s: %s",
                result.error.kind,
                result.error.message,
            )
        return result

    def _error_response(result):
        return jsonify({"error": result.error.kind, "message": result.error.message}), 400

    @app.post("/convert")
    def convert_jwk():
        """
        POST /convert
        - Body is a JWK or JWKS document (first key only)
        - Returns {"pem": "<PEM>", "key_type": "RSA" | "EC (<crv>)"}
        - Returns 400 with {"error": <kind>, "message": ...} on failure
        """
        result = _convert_body()
        if not result.ok:
            return _error_response(result)
        logger.info("Converted %s key to PEM", result.key_type)
        return jsonify({"pem": result.pem, "key_type": result.key_type}), 200

    @app.post("/convert.pem")
    def download_pem():
        """Same as /convert, but answers with the PEM as a file attachment."""
        result = _convert_body()
        if not result.ok:
            return _error_response(result)
        filename = f"jwk_{date.today().isoformat()}.pem"
        logger.info("Serving %s key as %s", result.key_type, filename)
        return send_file(
            io.BytesIO((result.pem + "\n").encode("ascii")),
            mimetype=app.config["DOWNLOAD_MIMETYPE"],
            as_attachment=True,
            download_name=filename,
        )

    @app.get("/")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    app = create_app()
    app.run(host=config.HOST, port=config.PORT)
