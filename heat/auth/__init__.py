"""
Authentication Module
=====================

JWT-based caller identity for the HEAT services.

Usage:
    from heat.auth import create_access_token, get_current_caller, require_role

    token = create_access_token({"sub": "0xabc..."})

    @app.post("/transfer")
    async def transfer(caller: Caller = Depends(get_current_caller)):
        ...
"""

from heat.auth.dependencies import (
    Caller,
    get_current_caller,
    oauth2_scheme,
    require_collector,
    require_owner,
    require_role,
    require_treasury,
)
from heat.auth.jwt import TokenData, create_access_token, decode_token

__all__ = [
    # JWT
    "create_access_token",
    "decode_token",
    "TokenData",
    # Dependencies
    "Caller",
    "get_current_caller",
    "require_role",
    "require_owner",
    "require_collector",
    "require_treasury",
    "oauth2_scheme",
]
