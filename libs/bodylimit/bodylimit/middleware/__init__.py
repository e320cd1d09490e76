from bodylimit.middleware.body_limit import BodyLimitMiddleware, install_body_limit
from bodylimit.middleware.correlation import CorrelationMiddleware, get_correlation_id, set_correlation_id

__all__ = [
    "BodyLimitMiddleware",
    "install_body_limit",
    "CorrelationMiddleware",
    "get_correlation_id",
    "set_correlation_id",
]
