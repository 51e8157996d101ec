"""Placeholder HTTP services answering fixed identity and health routes."""

from .config import ServiceConfig, resolve_port
from .errors import StartupBindError, StubServiceError
from .service import StubService

__all__ = [
    "ServiceConfig",
    "StartupBindError",
    "StubService",
    "StubServiceError",
    "resolve_port",
]

__version__ = "1.0.0"
