"""Async client SDK for the RozetkaPay payment gateway"""

from rozetkapay.client import RozetkaPayClient
from rozetkapay.config import DEVELOPMENT_BASE_URL, PRODUCTION_BASE_URL, RozetkaPayConfiguration
from rozetkapay.domain.exceptions import (
    ApiError,
    AuthorizationError,
    BadRequestError,
    ConfigurationError,
    NotFoundError,
    ParseError,
    RateLimitError,
    RozetkaPayError,
    TransportError,
)
from rozetkapay.infrastructure.observability.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    "RozetkaPayClient",
    "RozetkaPayConfiguration",
    "PRODUCTION_BASE_URL",
    "DEVELOPMENT_BASE_URL",
    "RozetkaPayError",
    "ConfigurationError",
    "TransportError",
    "ApiError",
    "BadRequestError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitError",
    "ParseError",
    "setup_logging",
]
