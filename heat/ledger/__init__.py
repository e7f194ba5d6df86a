"""
Ledger Module
=============

Balance bookkeeping for HEAT.

- ``Ledger``: supply-invariant primitives (mint, burn, transfer_internal)
- ``HeatToken``: halt-gated, serialized standard token interface

Usage:
    from heat.ledger import HeatToken, Ledger
"""

from heat.ledger.ledger import Ledger
from heat.ledger.token import HeatToken

__all__ = ["Ledger", "HeatToken"]
