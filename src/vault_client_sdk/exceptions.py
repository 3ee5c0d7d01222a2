"""
Exception classes for Vault Client SDK.
"""

from typing import List, Optional


class VaultClientError(Exception):
    """Base exception for Vault Client SDK."""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(VaultClientError):
    """Client settings are invalid."""
    pass


class BuildError(VaultClientError):
    """The HTTP transport or its TLS context could not be built."""

    def __init__(self, message: str, source: Optional[BaseException] = None):
        super().__init__(message, error_code="build_error")
        self.source = source


class RequestError(VaultClientError):
    """The request could not be completed."""

    def __init__(self, message: str, source: Optional[BaseException] = None):
        super().__init__(message, error_code="request_error")
        self.source = source


class APIError(RequestError):
    """The server answered with a non-success status."""

    def __init__(self, code: int, errors: Optional[List[str]] = None):
        self.code = code
        self.errors = errors or []
        detail = "; ".join(self.errors) if self.errors else "no error detail"
        super().__init__(f"HTTP {code}: {detail}")
        self.error_code = "api_error"


class ParseError(VaultClientError):
    """A request or response body could not be (de)serialized."""

    def __init__(self, message: str, source: Optional[BaseException] = None):
        super().__init__(message, error_code="parse_error")
        self.source = source


class ResponseEmptyError(VaultClientError):
    """The response envelope did not carry the expected payload."""
    pass


class ResponseWrapError(VaultClientError):
    """A wrapped call came back without wrapping information."""
    pass
