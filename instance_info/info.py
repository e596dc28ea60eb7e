"""
Assembly of the instance description document.
"""
import logging
import socket

from pydantic import BaseModel, ConfigDict

from instance_info.timezones import resolve_timezone

logger = logging.getLogger(__name__)


class InstanceInfo(BaseModel):
    """Flat description of the running instance. Field order is output order."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    instance_id: str = ""
    public_ipv4: str = ""
    private_ipv4: str = ""
    availability_zone: str = ""
    region: str = ""
    instance_type: str = ""
    hostname: str = ""
    location: str = ""
    timezone: str = "UTC"


class ErrorDocument(BaseModel):
    error: str
    message: str


def get_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as e:
        logger.warning(f"Could not resolve hostname: {e}")
        return ""


def collect_instance_info(client) -> InstanceInfo:
    """
    Build the InstanceInfo document for this instance.

    Args:
        client: MetadataClient (or compatible) used for all IMDS calls

    Raises:
        TokenUnavailable: if no session token could be obtained; no field
            fetch is attempted in that case
    """
    token = client.get_token()
    fields = client.fetch_fields(token)

    return InstanceInfo(
        **fields,
        hostname=get_hostname(),
        location=fields["availability_zone"],
        timezone=resolve_timezone(fields["region"]),
    )
