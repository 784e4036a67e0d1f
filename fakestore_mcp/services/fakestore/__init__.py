# Fake Store API access
from .api_client import FakeStoreClient
from .errors import (
    FakeStoreError,
    ValidationError,
    UnknownToolError,
    ApiError,
    UpstreamError,
    TransportError,
    RateLimitError
)
from .rate_limiter import RequestRateLimiter

__all__ = [
    'FakeStoreClient',
    'FakeStoreError',
    'ValidationError',
    'UnknownToolError',
    'ApiError',
    'UpstreamError',
    'TransportError',
    'RateLimitError',
    'RequestRateLimiter'
]
