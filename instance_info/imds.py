"""
Client for the EC2 Instance Metadata Service, session-oriented (IMDSv2).

A token is requested once with PUT /latest/api/token and then presented on
every metadata query. Each call is bounded by its own timeout and nothing
is retried.
"""
import logging
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)

TOKEN_PATH = "/latest/api/token"
METADATA_PATH = "/latest/meta-data/"

TOKEN_TTL_HEADER = "X-aws-ec2-metadata-token-ttl-seconds"
TOKEN_HEADER = "X-aws-ec2-metadata-token"

# Response key -> metadata path, in document order.
METADATA_FIELDS = (
    ("instance_id", "instance-id"),
    ("public_ipv4", "public-ipv4"),
    ("private_ipv4", "local-ipv4"),
    ("availability_zone", "placement/availability-zone"),
    ("region", "placement/region"),
    ("instance_type", "instance-type"),
)


class MetadataServiceError(Exception):
    """Base error for metadata service failures."""


class TokenUnavailable(MetadataServiceError):
    """The metadata service did not hand out a session token."""

    error = "Unable to get IMDS token"
    message = "EC2 metadata service unavailable"


class MetadataClient:
    """
    Sequential IMDSv2 client backed by a requests session.

    Args:
        endpoint: Base URL of the metadata service
        timeout: Per-call timeout in seconds
        token_ttl: Lifetime requested for the session token, in seconds
        session: Optional requests session (mainly for tests)
    """

    def __init__(self, endpoint: str = "http://169.254.169.254",
                 timeout: float = 2, token_ttl: int = 21600,
                 session: Optional[requests.Session] = None):
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.token_ttl = token_ttl
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config) -> "MetadataClient":
        return cls(
            endpoint=config["IMDS_ENDPOINT"],
            timeout=config["IMDS_TIMEOUT"],
            token_ttl=config["IMDS_TOKEN_TTL"],
        )

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def get_token(self) -> str:
        """
        Request a session token.

        Raises:
            TokenUnavailable: on timeout, connection failure, non-2xx status
                or an empty token
        """
        url = self.endpoint + TOKEN_PATH
        try:
            response = self.session.put(
                url,
                headers={TOKEN_TTL_HEADER: str(self.token_ttl)},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Could not get IMDS token from {url}: {e}")
            raise TokenUnavailable() from e

        token = response.text
        if not token:
            logger.error(f"IMDS token endpoint {url} returned an empty token")
            raise TokenUnavailable()
        return token

    def get(self, path: str, token: str) -> str:
        """
        Fetch a single metadata value as plain text.

        Returns an empty string when the call fails for any reason.
        """
        url = self.endpoint + METADATA_PATH + path
        try:
            response = self.session.get(
                url,
                headers={TOKEN_HEADER: token},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Metadata fetch failed for {path}: {e}")
            return ""
        return response.text

    def fetch_fields(self, token: str) -> Dict[str, str]:
        """Fetch every entry of METADATA_FIELDS, one after another."""
        return {key: self.get(path, token) for key, path in METADATA_FIELDS}
