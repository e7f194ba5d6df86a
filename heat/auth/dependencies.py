"""
FastAPI Authentication Dependencies
===================================

Caller identity for mutating routes.

The bearer token names the caller's account; role checks are delegated to
the core's access table so the HTTP layer and the core can never disagree
about who holds a role.

Version: 0.1.0
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, Field

from heat.auth.jwt import decode_token
from heat.core.access import Role
from heat.core.accounts import normalize_account
from heat.errors import InvalidAccount
from heat.logging import get_logger
from heat.system import get_system


logger = get_logger(__name__)

# OAuth2 scheme for token extraction from Authorization header
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/auth/token",
    auto_error=False,
)


class Caller(BaseModel):
    """Authenticated caller."""

    address: str = Field(..., description="Caller account (checksum address)")


async def get_current_caller(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> Caller:
    """
    Extract and validate the caller from a JWT token.

    Raises:
        HTTPException: 401 if token is missing, invalid or names no account
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if token is None:
        logger.warning("auth_token_missing")
        raise credentials_exception

    token_data = decode_token(token, verify_type="access")

    if token_data is None:
        logger.warning("auth_token_invalid")
        raise credentials_exception

    try:
        address = normalize_account(token_data.sub)
    except InvalidAccount as e:
        logger.warning("auth_subject_not_an_account", sub=token_data.sub)
        raise credentials_exception from e

    logger.debug("caller_authenticated", caller=address)
    return Caller(address=address)


def require_role(role: Role) -> Callable[[Caller], Awaitable[Caller]]:
    """
    Create a dependency that requires the caller to hold a core role.

    Usage:
        @router.post("/collect")
        async def collect(caller: Caller = Depends(require_role(Role.COLLECTOR))):
            ...
    """

    async def role_checker(
        caller: Annotated[Caller, Depends(get_current_caller)],
    ) -> Caller:
        if not get_system().access.has_role(role, caller.address):
            logger.warning(
                "insufficient_role",
                caller=caller.address,
                required_role=role.value,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return caller

    return role_checker


# Common role dependencies
require_owner = require_role(Role.OWNER)
require_collector = require_role(Role.COLLECTOR)
require_treasury = require_role(Role.TREASURY)
