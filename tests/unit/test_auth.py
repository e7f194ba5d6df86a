"""
Unit tests for authentication module.
"""

from datetime import timedelta

import pytest
from fastapi import HTTPException
from web3 import Web3

from heat.auth import create_access_token, decode_token, get_current_caller, require_role
from heat.core.access import Role
from heat.system import HeatSystem, reset_system, set_system
from tests.helpers import ALICE, COLLECTOR


class TestJWTTokens:
    """Tests for JWT token functions."""

    def test_create_access_token(self) -> None:
        """Test access token creation."""
        token = create_access_token({"sub": ALICE})

        assert isinstance(token, str)
        assert len(token) > 50

    def test_decode_access_token(self) -> None:
        """Test access token decoding."""
        token = create_access_token({"sub": ALICE})

        decoded = decode_token(token, verify_type="access")

        assert decoded is not None
        assert decoded.sub == ALICE
        assert decoded.token_type == "access"

    def test_decode_invalid_token(self) -> None:
        """Test that garbage tokens decode to None."""
        assert decode_token("not.a.token") is None

    def test_decode_expired_token(self) -> None:
        """Test that expired tokens decode to None."""
        token = create_access_token({"sub": ALICE}, expires_delta=timedelta(seconds=-1))

        assert decode_token(token) is None

    def test_token_type_mismatch(self) -> None:
        """Test that the token type is enforced when asked."""
        token = create_access_token({"sub": ALICE})

        assert decode_token(token, verify_type="refresh") is None


class TestCallerDependencies:
    """Tests for the FastAPI caller dependencies."""

    @pytest.mark.asyncio
    async def test_caller_from_token(self) -> None:
        """Test that the caller is the checksum token subject."""
        caller = await get_current_caller(create_access_token({"sub": ALICE}))

        assert caller.address == Web3.to_checksum_address(ALICE)

    @pytest.mark.asyncio
    async def test_missing_token(self) -> None:
        """Test that a missing token is 401."""
        with pytest.raises(HTTPException) as exc_info:
            await get_current_caller(None)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_subject_must_be_account(self) -> None:
        """Test that a non-address subject is 401."""
        with pytest.raises(HTTPException) as exc_info:
            await get_current_caller(create_access_token({"sub": "user123"}))

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_require_role_checks_core_table(self, system: HeatSystem) -> None:
        """Test that role checks follow the core's holders."""
        set_system(system)
        try:
            checker = require_role(Role.COLLECTOR)

            collector = await get_current_caller(create_access_token({"sub": COLLECTOR}))
            assert await checker(collector) is collector

            alice = await get_current_caller(create_access_token({"sub": ALICE}))
            with pytest.raises(HTTPException) as exc_info:
                await checker(alice)
            assert exc_info.value.status_code == 403
        finally:
            reset_system()
