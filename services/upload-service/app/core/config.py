"""Upload-service configuration."""

from bodylimit.config import env, env_bool, env_int
from bodylimit.options import BodyLimitOptions
from bodylimit.units import parse_size

SERVICE_NAME = "upload-service"
SERVICE_PORT = env_int("SERVICE_PORT", 8010)

LOG_LEVEL = env("LOG_LEVEL", "INFO")
LOG_FORMAT = env("LOG_FORMAT", "json")
BODY_LIMIT_LOG_LEVEL = env("BODY_LIMIT_LOG_LEVEL")

BODY_LIMIT_OPTIONS = BodyLimitOptions.from_env(
    "BODY_LIMIT_",
    max_size=env("BODY_LIMIT_MAX_SIZE", "10m"),
)

INGEST_OPTIONS = BodyLimitOptions.from_env(
    "INGEST_",
    max_size=env("INGEST_MAX_SIZE", "1m"),
    deep_inspect=env_bool("INGEST_DEEP_INSPECT", True),
)

AVATAR_MAX_BYTES = parse_size(env("AVATAR_MAX_SIZE", "256k"))
