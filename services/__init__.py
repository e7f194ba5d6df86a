"""
HEAT Services
=============

HTTP services in front of the HEAT core.

Services:
- claims: claim submission, token, fee collection and admin API
"""

__all__ = [
    "claims",
]
