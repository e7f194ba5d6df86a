"""
Claims Service Routes
=====================

API route handlers for the claims service.
"""

from services.claims.routes import admin, claims, events, fees, token


__all__ = ["admin", "claims", "events", "fees", "token"]
