from bodylimit.logging import setup_logging
from app.core.config import BODY_LIMIT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL, SERVICE_NAME


def init_logging() -> None:
    setup_logging(SERVICE_NAME, LOG_LEVEL, LOG_FORMAT, library_level=BODY_LIMIT_LOG_LEVEL)
