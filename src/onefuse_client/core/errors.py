from typing import Optional


class OneFuseClientError(Exception):
    """Base error for client failures."""


class ConfigError(OneFuseClientError, ValueError):
    """Raised when the connection configuration is missing or invalid."""


class OneFuseTransportError(OneFuseClientError):
    """Connection, DNS, TLS or timeout failure before any HTTP status arrived."""


class OneFuseServerError(OneFuseClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: Optional[str],
        url: str,
        response_text: str,
    ):
        # str() is the raw response body.
        super().__init__(response_text)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.response_text = response_text


class OneFuseDecodeError(OneFuseClientError):
    """Response parsed (or failed to) without the fields the operation promises."""

    def __init__(self, message: str, *, status_code: int, response_text: str):
        super().__init__(f"{message} (status {status_code}): {response_text}")
        self.status_code = status_code
        self.response_text = response_text


class UnsupportedOperationError(OneFuseClientError, NotImplementedError):
    def __init__(self, resource_type: str, verb: str):
        super().__init__("Not implemented yet")
        self.resource_type = resource_type
        self.verb = verb


class DefaultWorkspaceNotFoundError(OneFuseClientError):
    """No workspace named Default exists on the remote system."""


__all__ = [
    "OneFuseClientError",
    "ConfigError",
    "OneFuseTransportError",
    "OneFuseServerError",
    "OneFuseDecodeError",
    "UnsupportedOperationError",
    "DefaultWorkspaceNotFoundError",
]
