"""Request body-size enforcement for ASGI applications."""

from bodylimit.errors import BodyLimitError, ConfigurationInvalid, LengthRequired, LimitExceeded
from bodylimit.middleware import BodyLimitMiddleware, install_body_limit
from bodylimit.options import BodyLimitOptions
from bodylimit.request import RequestView

__all__ = [
    "BodyLimitError",
    "BodyLimitMiddleware",
    "BodyLimitOptions",
    "ConfigurationInvalid",
    "LengthRequired",
    "LimitExceeded",
    "RequestView",
    "install_body_limit",
]
