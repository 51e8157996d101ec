import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LISTEN_HOST = '0.0.0.0'
MAX_PORT = 65535


def resolve_port(raw, default):
    """Return raw as a TCP port if it is a valid one, otherwise default"""
    if raw is None or not raw.strip():
        return default

    value = raw.strip()
    if not (value.isascii() and value.isdigit()):
        logger.warning(f"Ignoring PORT={raw!r}: not a positive integer, using {default}")
        return default

    port = int(value)
    if not 1 <= port <= MAX_PORT:
        logger.warning(f"Ignoring PORT={raw!r}: out of range, using {default}")
        return default

    return port


@dataclass(frozen=True)
class ServiceConfig:
    port: int
    host: str = LISTEN_HOST

    @classmethod
    def from_env(cls, default_port, environ=None):
        """Build the config from PORT, falling back to default_port"""
        if environ is None:
            environ = os.environ
        return cls(port=resolve_port(environ.get('PORT'), default_port))
