"""
HEAT Core Library
=================

Mint authorization for HEAT against Fuego (XFG) burn proofs.

Modules:
    - config: Configuration management with Pydantic Settings
    - logging: Structured logging with structlog
    - core: Transaction guard, access control, event stream, hashing
    - ledger: Balances, supply ceiling and the HEAT token interface
    - nullifiers: Replay protection (memory / Redis)
    - verifier: Proof verifier boundary (mock / on-chain)
    - claims: Claim processor
    - fees: Fee splitter
    - auth: JWT caller identity for the HTTP services

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "HEAT Team"

from heat.config import settings
from heat.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
