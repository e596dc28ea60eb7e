#!/usr/bin/env python3
"""
Standalone runner for the Instance Info Node.

Usage:
    python -m instance_info.run

Environment variables:
    INSTANCE_INFO_HOST: Interface to bind to (default: 0.0.0.0)
    INSTANCE_INFO_PORT: Port to bind to (default: 8080)
    IMDS_ENDPOINT: Metadata service base URL (default: http://169.254.169.254)
    IMDS_TIMEOUT: Per-call metadata timeout in seconds (default: 2)
    IMDS_TOKEN_TTL: Requested session token lifetime in seconds (default: 21600)
    TOKEN_FAILURE_STATUS: HTTP status of the token failure document
        (default: 200; set 502 or 503 to surface the failure to probes)
    LOG_LEVEL: Logging level (default: INFO)
"""
import sys
import logging

from dotenv import load_dotenv

# Load environment variables from .env before the config is read
load_dotenv()

from instance_info.app import create_app  # noqa: E402
from instance_info.config import Config  # noqa: E402

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    """Attach a stdout handler to the root logger at LOG_LEVEL, once."""
    root = logging.getLogger()
    if root.hasHandlers():
        return  # avoid duplicate handlers in dev
    root.setLevel(level or Config.LOG_LEVEL)

    formatter = logging.Formatter(Config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def main():
    """Main entry point for the instance info node."""
    setup_logging()

    app = create_app()
    host = app.config["HOST"]
    port = app.config["PORT"]

    logger.info("Starting Instance Info Node...")
    logger.info(f"Binding to {host}:{port}, metadata service at {app.config['IMDS_ENDPOINT']}")

    app.run(host=host, port=port, debug=False)


if __name__ == '__main__':
    main()
