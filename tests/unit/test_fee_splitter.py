"""
Unit tests for the fee splitter.
"""

import pytest

from heat.core.events import EventType
from heat.errors import (
    InsufficientAllowance,
    InsufficientBalance,
    InvalidAmount,
    SystemHalted,
    Unauthorized,
)
from heat.fees import compute_shares
from heat.system import HeatSystem
from tests.helpers import ALICE, BOB, COLLECTOR, OWNER, TREASURY


class TestComputeShares:
    """Tests for the 8 / 2 / 90 split."""

    def test_round_total(self) -> None:
        """Test an evenly divisible total."""
        shares = compute_shares(1000)

        assert (shares.burn, shares.treasury, shares.distribution) == (80, 20, 900)

    def test_remainder_goes_to_distribution(self) -> None:
        """Test that rounding dust lands in the distribution share."""
        shares = compute_shares(1001)

        assert (shares.burn, shares.treasury, shares.distribution) == (80, 20, 901)

    def test_small_totals(self) -> None:
        """Test totals too small for burn or treasury shares."""
        assert compute_shares(0).model_dump() == {"total": 0, "burn": 0, "treasury": 0, "distribution": 0}
        assert compute_shares(12).distribution == 12 - 0 - 0

    def test_shares_always_sum_to_total(self) -> None:
        """Test burn + treasury + distribution == total."""
        for total in [*range(0, 2_000), 10**18 + 7, 2**255 + 3]:
            shares = compute_shares(total)
            assert shares.burn + shares.treasury + shares.distribution == total
            assert shares.burn == total * 8 // 100
            assert shares.treasury == total * 2 // 100

    def test_negative_total_rejected(self) -> None:
        """Test that negative totals are rejected."""
        with pytest.raises(InvalidAmount):
            compute_shares(-1)


class TestCollect:
    """Tests for direct collection."""

    @pytest.mark.asyncio
    async def test_collect_applies_split(self, funded_system: HeatSystem) -> None:
        """Test that collect burns and pays the treasury."""
        system = funded_system

        shares = await system.fees.collect(COLLECTOR, ALICE, 1000)

        assert (shares.burn, shares.treasury, shares.distribution) == (80, 20, 900)
        assert system.token.balance_of(ALICE) == 10_000 - 80 - 20
        assert system.token.balance_of(TREASURY) == 20
        assert system.token.total_supply == 10_000 - 80
        assert system.token.total_burned == 80
        assert system.ledger.check_invariant()

    @pytest.mark.asyncio
    async def test_collect_updates_counters_and_record(self, funded_system: HeatSystem) -> None:
        """Test counters and the fees_collected record."""
        system = funded_system

        await system.fees.collect(COLLECTOR, ALICE, 1001)

        assert system.fees.total_collected_for_fees == 1001
        assert system.fees.total_burned_for_fees == 80
        assert system.fees.total_distributed_for_fees == 901

        record = system.events.latest(EventType.FEES_COLLECTED)
        assert record is not None
        assert record.payload["distribution"] == 901
        assert record.payload["spender"] is None

    @pytest.mark.asyncio
    async def test_collect_requires_collector(self, funded_system: HeatSystem) -> None:
        """Test that only the collector may collect."""
        with pytest.raises(Unauthorized):
            await funded_system.fees.collect(ALICE, ALICE, 100)

        assert funded_system.token.balance_of(ALICE) == 10_000

    @pytest.mark.asyncio
    async def test_collect_beyond_balance(self, funded_system: HeatSystem) -> None:
        """Test that an overdrawn collection changes nothing."""
        with pytest.raises(InsufficientBalance):
            await funded_system.fees.collect(COLLECTOR, ALICE, 10_001)

        assert funded_system.token.total_supply == 10_000
        assert funded_system.fees.total_collected_for_fees == 0

    @pytest.mark.asyncio
    async def test_collect_zero(self, funded_system: HeatSystem) -> None:
        """Test that a zero collection is accepted."""
        shares = await funded_system.fees.collect(COLLECTOR, ALICE, 0)

        assert shares.total == 0
        assert funded_system.token.total_supply == 10_000

    @pytest.mark.asyncio
    async def test_collect_while_halted(self, funded_system: HeatSystem) -> None:
        """Test that collection is halt-gated."""
        await funded_system.access.halt(OWNER)

        with pytest.raises(SystemHalted):
            await funded_system.fees.collect(COLLECTOR, ALICE, 100)


class TestCollectFrom:
    """Tests for allowance-based collection."""

    @pytest.mark.asyncio
    async def test_collect_from_consumes_allowance(self, funded_system: HeatSystem) -> None:
        """Test that the allowance is spent by the collected total."""
        system = funded_system
        await system.token.approve(ALICE, BOB, 1500)

        shares = await system.fees.collect_from(COLLECTOR, ALICE, BOB, 1000)

        assert shares.burn == 80
        assert system.token.allowance(ALICE, BOB) == 500
        assert system.token.balance_of(TREASURY) == 20

    @pytest.mark.asyncio
    async def test_collect_from_insufficient_allowance(self, funded_system: HeatSystem) -> None:
        """Test that a short allowance leaves everything untouched."""
        system = funded_system
        await system.token.approve(ALICE, BOB, 999)

        with pytest.raises(InsufficientAllowance):
            await system.fees.collect_from(COLLECTOR, ALICE, BOB, 1000)

        assert system.token.allowance(ALICE, BOB) == 999
        assert system.token.balance_of(ALICE) == 10_000

    @pytest.mark.asyncio
    async def test_collect_from_insufficient_balance_keeps_allowance(
        self, funded_system: HeatSystem
    ) -> None:
        """Test that a balance failure does not spend the allowance."""
        system = funded_system
        await system.token.approve(ALICE, BOB, 50_000)

        with pytest.raises(InsufficientBalance):
            await system.fees.collect_from(COLLECTOR, ALICE, BOB, 20_000)

        assert system.token.allowance(ALICE, BOB) == 50_000


class TestTreasuryBurn:
    """Tests for burns from the treasury balance."""

    @pytest.mark.asyncio
    async def test_treasury_burns_own_balance(self, funded_system: HeatSystem) -> None:
        """Test that the treasury can burn what it received."""
        system = funded_system
        await system.fees.collect(COLLECTOR, ALICE, 10_000)
        assert system.token.balance_of(TREASURY) == 200

        new_supply = await system.fees.burn_from_treasury(TREASURY, 150)

        assert new_supply == system.token.total_supply == 10_000 - 800 - 150
        assert system.token.balance_of(TREASURY) == 50
        assert system.fees.total_burned_by_treasury == 150
        assert system.events.latest(EventType.TREASURY_BURNED) is not None

    @pytest.mark.asyncio
    async def test_only_treasury_may_burn(self, funded_system: HeatSystem) -> None:
        """Test that other callers are Unauthorized."""
        with pytest.raises(Unauthorized):
            await funded_system.fees.burn_from_treasury(ALICE, 1)

    @pytest.mark.asyncio
    async def test_treasury_burn_beyond_balance(self, funded_system: HeatSystem) -> None:
        """Test that the treasury cannot burn more than it holds."""
        with pytest.raises(InsufficientBalance):
            await funded_system.fees.burn_from_treasury(TREASURY, 1)

        assert funded_system.fees.total_burned_by_treasury == 0
