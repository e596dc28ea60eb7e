"""
WSGI entry point, e.g. ``gunicorn wsgi:app``.
"""
import logging

from instance_info.app import create_app
from instance_info.run import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = create_app()
logger.info(f"WSGI application ready, metadata service at {app.config['IMDS_ENDPOINT']}")
