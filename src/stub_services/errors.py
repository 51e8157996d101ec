"""Errors raised by the stub services."""


class StubServiceError(Exception):
    """Base error for the stub services."""


class StartupBindError(StubServiceError):
    """The listener could not bind its address; the process cannot start."""

    def __init__(self, host, port, reason=None):
        self.host = host
        self.port = port
        self.reason = reason
        message = f"Could not bind {host}:{port}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
