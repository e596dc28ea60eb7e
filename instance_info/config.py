import os


class Config:
    """
    Configuration for the instance info node, read from the environment.
    """

    # --- Instance Metadata Service ---
    IMDS_ENDPOINT = os.environ.get("IMDS_ENDPOINT", "http://169.254.169.254")
    IMDS_TIMEOUT = float(os.environ.get("IMDS_TIMEOUT", 2))
    IMDS_TOKEN_TTL = int(os.environ.get("IMDS_TOKEN_TTL", 21600))

    # Status sent with the token failure document; 502 or 503 makes the
    # failure visible to load balancer probes.
    TOKEN_FAILURE_STATUS = int(os.environ.get("TOKEN_FAILURE_STATUS", 200))

    # --- Logging ---
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # --- Server ---
    HOST = os.environ.get("INSTANCE_INFO_HOST", "0.0.0.0")
    PORT = int(os.environ.get("INSTANCE_INFO_PORT", 8080))
