"""
Exception hierarchy for venue-norm.

Only structural failures raise. Individual fields that are missing or
malformed degrade to None inside the normalizers instead.
"""
from typing import Any, Optional


class NormalizationError(Exception):
    """Base exception for all normalization errors."""

    def __init__(
        self,
        message: str,
        venue: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.venue = venue
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "venue": self.venue,
            "context": self.context,
        }

    def __str__(self) -> str:
        if self.venue:
            return f"{self.venue}: {self.message}"
        return self.message


class MissingResultError(NormalizationError):
    """
    A response that should carry a result container does not.

    Signals venue unavailability; callers must not treat it as an empty
    result.
    """

    def __init__(
        self,
        message: str,
        venue: Optional[str] = None,
        response: Any = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, venue, context)
        self.response = response

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["response"] = self.response
        return data


class MalformedSymbolError(NormalizationError):
    """A composite market id did not split into exactly two currencies."""

    def __init__(
        self,
        market_id: Any,
        separator: str,
        venue: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"cannot split market id {market_id!r} on {separator!r} into base and quote",
            venue,
            {"market_id": market_id, "separator": separator},
        )
        self.market_id = market_id
        self.separator = separator


class VenueError(NormalizationError):
    """The venue answered with success=false."""
