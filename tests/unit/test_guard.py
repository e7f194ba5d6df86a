"""
Unit tests for the transaction guard.
"""

import asyncio

import pytest

from heat.core.guard import TransactionGuard
from heat.errors import ReentrantCall


class TestTransactionGuard:
    """Tests for serialization and re-entry rejection."""

    @pytest.mark.asyncio
    async def test_lock_held_during_transaction(self) -> None:
        """Test that the guard reports the running operation."""
        guard = TransactionGuard()

        async with guard.transaction("transfer"):
            assert guard.locked
            assert guard.current_operation == "transfer"

        assert not guard.locked
        assert guard.current_operation is None

    @pytest.mark.asyncio
    async def test_lock_released_on_error(self) -> None:
        """Test that a failing operation releases the lock."""
        guard = TransactionGuard()

        with pytest.raises(RuntimeError):
            async with guard.transaction("burn"):
                raise RuntimeError("boom")

        assert not guard.locked

        async with guard.transaction("burn"):
            pass

    @pytest.mark.asyncio
    async def test_nested_transaction_rejected(self) -> None:
        """Test that entering again from inside is ReentrantCall."""
        guard = TransactionGuard()

        async with guard.transaction("submit_claim"):
            with pytest.raises(ReentrantCall):
                async with guard.transaction("transfer"):
                    pass

    @pytest.mark.asyncio
    async def test_reentry_from_spawned_task_rejected(self) -> None:
        """Test that tasks started inside a transaction cannot re-enter."""
        guard = TransactionGuard()

        async def callback() -> None:
            async with guard.transaction("mint"):
                pass

        async with guard.transaction("submit_claim"):
            with pytest.raises(ReentrantCall):
                await asyncio.create_task(callback())

    @pytest.mark.asyncio
    async def test_spawned_task_enters_after_transaction_ends(self) -> None:
        """Test that a task outliving its transaction is an ordinary caller."""
        guard = TransactionGuard()
        release = asyncio.Event()

        async def later() -> str | None:
            await release.wait()
            async with guard.transaction("transfer"):
                return guard.current_operation

        async with guard.transaction("submit_claim"):
            task = asyncio.create_task(later())

        assert not guard.locked
        release.set()

        assert await task == "transfer"

    @pytest.mark.asyncio
    async def test_spawned_task_waits_for_next_transaction(self) -> None:
        """Test that a leftover task queues behind an unrelated transaction."""
        guard = TransactionGuard()
        order: list[str] = []

        async def later() -> None:
            async with guard.transaction("transfer"):
                order.append("transfer")

        async with guard.transaction("submit_claim"):
            task = asyncio.create_task(later())

        async with guard.transaction("burn"):
            await asyncio.sleep(0)
            order.append("burn")

        await task

        assert order == ["burn", "transfer"]

    @pytest.mark.asyncio
    async def test_independent_callers_are_serialized(self) -> None:
        """Test that concurrent transactions never overlap."""
        guard = TransactionGuard()
        active = 0
        peak = 0

        async def operation(name: str) -> None:
            nonlocal active, peak
            async with guard.transaction(name):
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0.01)
                active -= 1

        await asyncio.gather(*(operation(f"op-{i}") for i in range(5)))

        assert peak == 1
