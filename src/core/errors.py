"""Error types for the markets relay.

Fetch errors propagate to the HTTP layer and become the response. Chain call
failures are created and logged inside the rate enricher and never propagate.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Kinds of failure the relay distinguishes."""

    HTTP_ERROR = "HttpError"
    SCHEMA_MISMATCH = "SchemaMismatch"
    TRANSPORT_ERROR = "TransportError"
    CHAIN_CALL_FAILURE = "ChainCallFailure"


class RelayError(Exception):
    """Base class for all relay errors."""

    kind: ErrorKind


class FetchError(RelayError):
    """The Morpho GraphQL fetch failed as a whole."""

    def __init__(self, message: str, status: int = 500, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details

    def response_details(self) -> Any:
        """Diagnostic payload for the error response body."""
        return self.details

    def to_response_body(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.response_details()}


class HttpError(FetchError):
    """Non-2xx response from the GraphQL endpoint.

    Carries the parsed JSON body when the endpoint returned JSON, otherwise
    the raw body text.
    """

    kind = ErrorKind.HTTP_ERROR

    def __init__(self, status: int, details: Any = None, raw_body: Optional[str] = None):
        if raw_body is not None:
            message = f"HTTP error! status: {status}. Response not JSON: {raw_body}"
        else:
            message = f"HTTP error! status: {status}"
        super().__init__(message, status=status, details=details)
        self.raw_body = raw_body

    def response_details(self) -> Any:
        if self.details is not None:
            return self.details
        if self.raw_body is not None:
            return {"rawResponse": self.raw_body}
        return None


class SchemaMismatch(FetchError):
    """2xx response whose payload lacks `data.markets.items`."""

    kind = ErrorKind.SCHEMA_MISMATCH

    def __init__(self, details: Any):
        super().__init__(
            "GraphQL query successful but data not in expected structure",
            status=500,
            details=details,
        )


class TransportError(FetchError):
    """The request never produced a usable response (connection or JSON decode failure)."""

    kind = ErrorKind.TRANSPORT_ERROR

    def __init__(self, details: Any):
        super().__init__(
            "Failed to fetch or parse data from Morpho API.",
            status=500,
            details=details,
        )


class ChainCallFailure(RelayError):
    """A per-market on-chain rate read failed."""

    kind = ErrorKind.CHAIN_CALL_FAILURE

    def __init__(self, market_key: str, cause: BaseException):
        super().__init__(f"borrowRateView failed for market {market_key}: {cause}")
        self.market_key = market_key
        self.cause = cause
