"""
Shared Models
=============

Pydantic models shared across the HEAT core and services.

Models:
- Claim models (Claim, MintTier, MintReceipt)
- Response models (ErrorResponse, HealthResponse)
"""

from heat.models.claim import Claim, MintReceipt, MintTier
from heat.models.common import (
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    # Claims
    "Claim",
    "MintReceipt",
    "MintTier",
    # Common
    "ErrorResponse",
    "HealthResponse",
]
