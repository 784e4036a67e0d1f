"""
Error types raised while handling a Fake Store tool call
"""

from typing import Optional


class FakeStoreError(Exception):
    """Base class for every error that is reported back to the MCP host"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FakeStoreError):
    """A tool argument is missing or malformed. Raised before any network call."""


class UnknownToolError(FakeStoreError):
    """The requested tool name is not in the catalog"""


class ApiError(FakeStoreError):
    """Normalized failure of an upstream HTTP call"""

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.code = code

    def to_dict(self):
        return {"message": self.message, "status": self.status, "code": self.code}


class UpstreamError(ApiError):
    """Upstream answered with a non-2xx status or an unreadable body"""


class TransportError(ApiError):
    """The request never got a response (connect failure, timeout, ...)"""


class RateLimitError(ApiError):
    """The in-process request cap was reached"""

    def __init__(self, message: str):
        super().__init__(message, code="RATE_LIMITED")
