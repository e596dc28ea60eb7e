"""
Shared fixtures wired to the fake IMDSv2 service in tests.fakes.
"""
import logging

import pytest

from instance_info.app import create_app
from instance_info.imds import MetadataClient
from tests.fakes import ENDPOINT, FakeIMDSSession


@pytest.fixture
def metadata_values():
    return {
        "instance-id": "i-0abc123def4567890",
        "public-ipv4": "54.12.34.56",
        "local-ipv4": "172.31.5.10",
        "placement/availability-zone": "us-east-1a",
        "placement/region": "us-east-1",
        "instance-type": "t3.micro",
    }


@pytest.fixture
def imds(metadata_values):
    return FakeIMDSSession(values=metadata_values)


@pytest.fixture
def metadata_client(imds):
    return MetadataClient(endpoint=ENDPOINT, timeout=2, session=imds)


@pytest.fixture
def app(imds):
    """Create a test Flask application wired to the fake metadata service."""
    test_app = create_app(
        config_overrides={"TESTING": True, "IMDS_ENDPOINT": ENDPOINT},
        client_factory=lambda: MetadataClient(endpoint=ENDPOINT, timeout=2, session=imds),
    )
    yield test_app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def hostname(mocker):
    mocker.patch("instance_info.info.socket.gethostname", return_value="ip-172-31-5-10")
    return "ip-172-31-5-10"


@pytest.fixture
def bare_root_logger():
    """Root logger with every handler detached; restored afterwards."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
