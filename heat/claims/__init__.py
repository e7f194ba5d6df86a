"""
Claims Module
=============

Burn-proof claim authorization.

Usage:
    from heat.claims import ClaimProcessor
    from heat.models import Claim

    receipt = await processor.submit_claim(Claim(...))
"""

from heat.claims.processor import ClaimProcessor

__all__ = ["ClaimProcessor"]
