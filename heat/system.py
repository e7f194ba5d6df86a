"""
HEAT System
===========

Wires the ledger, nullifier store, proof verifier, claim processor and fee
splitter around one transaction guard, one access table and one event
stream.

Usage:
    from heat.system import get_system

    system = get_system()
    receipt = await system.claims.submit_claim(claim)
    shares = await system.fees.collect(collector, account, amount)

Version: 0.1.0
"""

from typing import Any

from heat.claims.processor import ClaimProcessor
from heat.config import NullifierBackend, Settings, get_settings
from heat.constants import MAX_SUPPLY
from heat.core.access import AccessControl, Role
from heat.core.events import EventStream
from heat.core.guard import TransactionGuard
from heat.fees.splitter import FeeSplitter
from heat.ledger.ledger import Ledger
from heat.ledger.token import HeatToken
from heat.logging import get_logger
from heat.nullifiers.store import InMemoryNullifierStore, NullifierStore
from heat.verifier.base import ProofVerifier, create_proof_verifier

logger = get_logger(__name__)


class HeatSystem:
    """All core components sharing one serialized state."""

    def __init__(
        self,
        verifier: ProofVerifier,
        nullifiers: NullifierStore,
        roles: dict[Role, str],
        verifier_timeout_seconds: float = 30.0,
        max_supply: int = MAX_SUPPLY,
    ) -> None:
        self.guard = TransactionGuard()
        self.events = EventStream()
        self.access = AccessControl(roles, self.guard, self.events)
        self.ledger = Ledger(max_supply=max_supply)
        self.token = HeatToken(self.ledger, self.access, self.guard, self.events)
        self.claims = ClaimProcessor(
            token=self.token,
            nullifiers=nullifiers,
            verifier=verifier,
            access=self.access,
            guard=self.guard,
            events=self.events,
            identity=self.access.holder(Role.MINTER),
            verifier_timeout_seconds=verifier_timeout_seconds,
        )
        self.fees = FeeSplitter(self.token, self.access, self.guard, self.events)

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "HeatSystem":
        """Build a system from application settings."""
        config = config or get_settings()

        if config.nullifiers.backend == NullifierBackend.REDIS:
            from heat.nullifiers.redis_store import RedisNullifierStore

            nullifiers: NullifierStore = RedisNullifierStore(key_prefix=config.nullifiers.key_prefix)
        else:
            nullifiers = InMemoryNullifierStore()

        roles = {
            Role.OWNER: config.roles.owner,
            Role.MINTER: config.roles.minter,
            Role.COLLECTOR: config.roles.collector,
            Role.TREASURY: config.roles.treasury,
        }

        system = cls(
            verifier=create_proof_verifier(config),
            nullifiers=nullifiers,
            roles=roles,
            verifier_timeout_seconds=config.chain.verifier_timeout_seconds,
        )
        logger.info(
            "heat_system_initialized",
            verifier_mode=config.chain.verifier_mode.value,
            nullifier_backend=config.nullifiers.backend.value,
        )
        return system

    async def stats(self) -> dict[str, Any]:
        """Full read-only query surface."""
        return {
            **await self.claims.stats(),
            **self.fees.stats(),
            "max_supply": self.ledger.max_supply,
            "remaining_mintable": self.ledger.remaining_mintable,
            "system_state": self.access.state.value,
            "roles": {role.value: holder for role, holder in self.access.holders().items()},
        }

    async def health_check(self) -> dict[str, dict[str, Any]]:
        """Health of the core and its external collaborators."""
        return {
            "ledger": {
                "status": "healthy" if self.ledger.check_invariant() else "unhealthy",
                "total_supply": self.ledger.total_supply,
            },
            "events": {
                "status": "healthy" if self.events.verify_chain() else "unhealthy",
                "records": len(self.events),
            },
            "nullifiers": await self.claims.nullifiers.health_check(),
            "verifier": await self.claims.verifier.health_check(),
        }


# Global system instance
_system: HeatSystem | None = None


def get_system() -> HeatSystem:
    """
    Get the process-wide system instance.

    Returns:
        HeatSystem built from settings on first use
    """
    global _system

    if _system is None:
        _system = HeatSystem.from_settings()

    return _system


def set_system(system: HeatSystem) -> None:
    """
    Set a custom system instance.

    Args:
        system: HeatSystem instance
    """
    global _system
    _system = system
    logger.info("heat_system_set")


def reset_system() -> None:
    """Reset the system to be re-initialized."""
    global _system
    _system = None
