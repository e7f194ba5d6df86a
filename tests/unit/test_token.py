"""
Unit tests for the HEAT token interface.
"""

import pytest

from heat.config import ZERO_ADDRESS
from heat.core.events import EventType
from heat.errors import (
    InsufficientAllowance,
    InsufficientBalance,
    InvalidAccount,
    SystemHalted,
    Unauthorized,
)
from heat.system import HeatSystem
from tests.helpers import ALICE, BOB, CAROL, MINTER, OWNER


class TestHeatToken:
    """Tests for transfers, approvals, mint and burn."""

    def test_metadata(self, system: HeatSystem) -> None:
        """Test token metadata."""
        assert system.token.symbol == "HEAT"
        assert system.token.decimals == 18

    @pytest.mark.asyncio
    async def test_transfer(self, funded_system: HeatSystem) -> None:
        """Test transfer and its record."""
        token = funded_system.token

        assert await token.transfer(ALICE, BOB, 400) is True

        assert token.balance_of(ALICE) == 9_600
        assert token.balance_of(BOB) == 400
        assert funded_system.events.latest(EventType.TRANSFER).payload["amount"] == 400

    @pytest.mark.asyncio
    async def test_transfer_beyond_balance(self, funded_system: HeatSystem) -> None:
        """Test that overdrawn transfers fail."""
        with pytest.raises(InsufficientBalance):
            await funded_system.token.transfer(BOB, ALICE, 1)

    @pytest.mark.asyncio
    async def test_transfer_from_uses_allowance(self, funded_system: HeatSystem) -> None:
        """Test delegated transfers."""
        token = funded_system.token
        await token.approve(ALICE, BOB, 300)

        await token.transfer_from(BOB, ALICE, CAROL, 200)

        assert token.balance_of(CAROL) == 200
        assert token.allowance(ALICE, BOB) == 100

    @pytest.mark.asyncio
    async def test_transfer_from_without_allowance(self, funded_system: HeatSystem) -> None:
        """Test that delegated transfers need an allowance."""
        with pytest.raises(InsufficientAllowance):
            await funded_system.token.transfer_from(BOB, ALICE, CAROL, 1)

        assert funded_system.token.balance_of(ALICE) == 10_000

    @pytest.mark.asyncio
    async def test_transfer_from_zero_spender_changes_nothing(
        self, funded_system: HeatSystem
    ) -> None:
        """Test that a zero-address spender fails before any transfer is applied."""
        records_before = len(funded_system.events)

        with pytest.raises(InvalidAccount):
            await funded_system.token.transfer_from(ZERO_ADDRESS, ALICE, BOB, 0)

        assert len(funded_system.events) == records_before
        assert funded_system.events.latest(EventType.TRANSFER) is None

    @pytest.mark.asyncio
    async def test_mint_requires_minter(self, system: HeatSystem) -> None:
        """Test that only the minter may mint."""
        with pytest.raises(Unauthorized):
            await system.token.mint(ALICE, ALICE, 1)

        assert await system.token.mint(MINTER, ALICE, 5) == 5

    @pytest.mark.asyncio
    async def test_holder_burn(self, funded_system: HeatSystem) -> None:
        """Test that holders can burn their own balance."""
        assert await funded_system.token.burn(ALICE, 1_000) == 9_000
        assert funded_system.token.total_burned == 1_000

    @pytest.mark.asyncio
    async def test_halted_token(self, funded_system: HeatSystem) -> None:
        """Test that every mutating call is halt-gated."""
        token = funded_system.token
        await funded_system.access.halt(OWNER)

        with pytest.raises(SystemHalted):
            await token.transfer(ALICE, BOB, 1)
        with pytest.raises(SystemHalted):
            await token.approve(ALICE, BOB, 1)
        with pytest.raises(SystemHalted):
            await token.burn(ALICE, 1)
        with pytest.raises(SystemHalted):
            await token.mint(MINTER, ALICE, 1)
