"""
Fees Module
===========

Fee collection and the 8 / 2 / 90 burn / treasury / distribution split.

Usage:
    from heat.fees import FeeSplitter, compute_shares

    shares = compute_shares(1001)  # burn=80, treasury=20, distribution=901
"""

from heat.fees.splitter import FeeShares, FeeSplitter, compute_shares

__all__ = ["FeeShares", "FeeSplitter", "compute_shares"]
