"""
Exception hierarchy for the LTA DataMall client.

Every failure raised by the client derives from LTAException so callers can
catch the whole family, while still telling configuration, transport, HTTP
status and payload decoding problems apart.
"""

from typing import Any, Optional


class LTAException(Exception):
    """Base exception for LTA DataMall client errors."""

    pass


class ConfigurationException(LTAException):
    """Exception for client misconfiguration (e.g. missing API key)."""

    pass


class NetworkException(LTAException):
    """Exception for network-related errors (connection, timeout, TLS)."""

    pass


class APIException(LTAException):
    """Exception for non-success HTTP responses from the API."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class AuthenticationException(APIException):
    """Exception for rejected API credentials."""

    pass


class DecodeException(LTAException):
    """
    Exception for payloads that do not match the expected wire shape.

    Attributes:
        field: Wire name of the offending field, when known
        value: Raw value that failed to decode, when known
        endpoint: URL of the request whose payload failed to decode
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        endpoint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value
        self.endpoint = endpoint

    def __str__(self) -> str:
        if self.endpoint:
            return f"{self.message} (endpoint: {self.endpoint})"
        return self.message


class UnknownVariantException(DecodeException):
    """Exception for a wire code with no counterpart in a closed enumeration."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        endpoint: Optional[str] = None,
        enum_name: Optional[str] = None,
    ):
        super().__init__(message, field=field, value=value, endpoint=endpoint)
        self.enum_name = enum_name
