"""Pydantic models for the quote API."""

from quoter.models.quote import BoundModel, ImpactSeverity, QuoteRequest, QuoteResponse
from quoter.models.types import UINT256_MAX, Uint256, validate_uint256

__all__ = [
    "QuoteRequest",
    "QuoteResponse",
    "BoundModel",
    "ImpactSeverity",
    "Uint256",
    "UINT256_MAX",
    "validate_uint256",
]
