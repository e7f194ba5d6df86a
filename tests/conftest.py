"""
Test Configuration
==================

Pytest fixtures for HEAT tests.
"""

import os
from collections.abc import AsyncGenerator, Callable
from itertools import count
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["CHAIN_VERIFIER_MODE"] = "mock"
os.environ["NULLIFIER_BACKEND"] = "memory"

from heat.constants import FUEGO_NETWORK_ID  # noqa: E402
from heat.core.access import Role  # noqa: E402
from heat.core.hashing import recipient_hash  # noqa: E402
from heat.models.claim import Claim  # noqa: E402
from heat.nullifiers.store import InMemoryNullifierStore  # noqa: E402
from heat.system import HeatSystem, reset_system, set_system  # noqa: E402
from heat.verifier.mock import MockProofVerifier  # noqa: E402
from tests.helpers import ALICE, COLLECTOR, MINTER, OWNER, PROOF, TREASURY, bearer  # noqa: E402


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def roles() -> dict[Role, str]:
    """Initial role holders."""
    return {
        Role.OWNER: OWNER,
        Role.MINTER: MINTER,
        Role.COLLECTOR: COLLECTOR,
        Role.TREASURY: TREASURY,
    }


@pytest.fixture
def verifier() -> MockProofVerifier:
    """Accepting mock verifier."""
    return MockProofVerifier(accept=True)


@pytest.fixture
def system(verifier: MockProofVerifier, roles: dict[Role, str]) -> HeatSystem:
    """Fresh core with an in-memory nullifier store."""
    return HeatSystem(
        verifier=verifier,
        nullifiers=InMemoryNullifierStore(),
        roles=roles,
        verifier_timeout_seconds=0.5,
    )


@pytest.fixture
def make_claim() -> Callable[..., Claim]:
    """
    Factory for well-formed claims.

    Each call uses a fresh nullifier unless one is given; any public input
    can be overridden.
    """
    nullifiers = count(1)

    def _make(
        recipient: str | None = ALICE,
        *,
        large: bool = False,
        nullifier: int | None = None,
        commitment: int = 0xC0FFEE,
        hashed_recipient: int | None = None,
        network_id: int = FUEGO_NETWORK_ID,
        secret: int = 0x5EC12E7,
        proof: bytes = PROOF,
        public_inputs: list[int] | None = None,
    ) -> Claim:
        if public_inputs is None:
            if hashed_recipient is None:
                hashed_recipient = recipient_hash(recipient) if recipient else 0
            public_inputs = [
                nullifier if nullifier is not None else next(nullifiers),
                commitment,
                hashed_recipient,
                network_id,
            ]
        return Claim(
            secret=secret,
            proof=proof,
            public_inputs=public_inputs,
            recipient=recipient,
            tier=large,
        )

    return _make


@pytest_asyncio.fixture
async def funded_system(system: HeatSystem) -> HeatSystem:
    """System where ALICE holds 10_000 base units."""
    await system.token.mint(MINTER, ALICE, 10_000)
    return system


@pytest_asyncio.fixture
async def claims_client(system: HeatSystem) -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the Claims Service backed by a fresh system."""
    from services.claims.main import app

    set_system(system)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    reset_system()


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, Any]]:
    """Build authentication headers for an account."""
    return bearer
