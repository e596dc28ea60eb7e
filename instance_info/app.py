"""
Instance Info Node - Flask Application

A read-only REST endpoint that reports identity and network facts about
the EC2 instance it runs on. Every response is JSON, is never cached and
may be read from any origin.
"""
import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from instance_info import __version__
from instance_info.config import Config
from instance_info.imds import MetadataClient, TokenUnavailable
from instance_info.info import ErrorDocument, collect_instance_info

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def create_app(config_overrides=None, client_factory=None):
    """
    Create and configure the instance info Flask application.

    Args:
        config_overrides: Mapping applied on top of Config (optional)
        client_factory: Callable returning a metadata client for one request
            (optional, defaults to a MetadataClient built from the config)

    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # Keep fields in the order the document is built
    app.json.sort_keys = False

    CORS(app, origins="*", send_wildcard=True)

    app.metadata_client_factory = client_factory or (
        lambda: MetadataClient.from_config(app.config)
    )

    @app.after_request
    def disable_caching(response):
        """Stamp no-cache headers on every response, errors included."""
        for header, value in NO_CACHE_HEADERS.items():
            response.headers[header] = value
        return response

    @app.errorhandler(TokenUnavailable)
    def token_unavailable(e):
        body = ErrorDocument(error=e.error, message=e.message)
        return jsonify(body.model_dump()), app.config["TOKEN_FAILURE_STATUS"]

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({
            "error": e.name,
            "message": e.description,
        }), e.code

    # Endpoint 1: Instance description (method is not distinguished)
    @app.route("/", methods=ALL_METHODS)
    def instance_info():
        """
        Instance description endpoint.

        Returns:
            JSON response with instance id, addresses, placement, instance
            type, hostname, location and timezone, or the token failure
            document when the metadata service cannot be reached
        """
        client = app.metadata_client_factory()
        try:
            info = collect_instance_info(client)
        finally:
            client.close()

        return jsonify(info.model_dump()), 200

    # Endpoint 2: Health check
    @app.route("/health", methods=["GET"])
    def health():
        """Liveness probe; does not touch the metadata service."""
        return jsonify({
            "status": "ok",
            "service": "Instance Info Node",
            "version": __version__,
        }), 200

    logger.info("Instance info app created")
    return app
