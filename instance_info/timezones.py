"""
Static mapping of AWS region codes to display timezones.
"""
from types import MappingProxyType

DEFAULT_TIMEZONE = "UTC"

REGION_TIMEZONES = MappingProxyType({
    "us-east-1": "America/New_York",
    "us-east-2": "America/New_York",
    "us-west-1": "America/Los_Angeles",
    "us-west-2": "America/Los_Angeles",
    "eu-west-1": "Europe/Dublin",
    "eu-west-2": "Europe/London",
    "eu-central-1": "Europe/Frankfurt",
    "ap-southeast-1": "Asia/Singapore",
    "ap-southeast-2": "Australia/Sydney",
    "ap-south-1": "Asia/Mumbai",
    "ap-northeast-1": "Asia/Tokyo",
    "ap-northeast-2": "Asia/Seoul",
    "sa-east-1": "America/Sao_Paulo",
    "ca-central-1": "America/Toronto",
})


def resolve_timezone(region: str) -> str:
    """Exact-match lookup of a region code, falling back to UTC."""
    return REGION_TIMEZONES.get(region or "", DEFAULT_TIMEZONE)
