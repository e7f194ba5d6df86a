"""
Access Control
==============

Capability table keyed by role name, plus the process-wide system state.

Each role has exactly one holder. Only the owner can reassign a role or
halt/resume the system; every change is a single write followed by a
before/after record on the event stream.

Role and state changes are administrative: they stay available while the
system is halted, otherwise a halted system could never be resumed.

Version: 0.1.0
"""

from enum import Enum

from heat.core.accounts import normalize_account
from heat.core.events import EventStream, EventType
from heat.core.guard import TransactionGuard
from heat.errors import InvalidAccount, SystemHalted, Unauthorized
from heat.logging import get_logger

logger = get_logger(__name__)


class Role(str, Enum):
    """Privileged roles."""

    OWNER = "owner"
    MINTER = "minter"
    COLLECTOR = "collector"
    TREASURY = "treasury"


class SystemState(str, Enum):
    """Process-wide operating state."""

    ACTIVE = "active"
    HALTED = "halted"


class AccessControl:
    """
    Role holders and system state.

    Usage:
        access = AccessControl({Role.OWNER: owner, ...}, guard, events)
        access.require(Role.COLLECTOR, caller)
        access.ensure_active()
    """

    def __init__(
        self,
        holders: dict[Role, str],
        guard: TransactionGuard,
        events: EventStream,
    ) -> None:
        missing = set(Role) - set(holders)
        if missing:
            raise ValueError(f"No holder configured for roles: {sorted(r.value for r in missing)}")

        self._holders: dict[Role, str] = {
            role: normalize_account(account) for role, account in holders.items()
        }
        self._state = SystemState.ACTIVE
        self._guard = guard
        self._events = events

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def state(self) -> SystemState:
        return self._state

    @property
    def is_halted(self) -> bool:
        return self._state == SystemState.HALTED

    def holder(self, role: Role) -> str:
        """Current holder of a role."""
        return self._holders[role]

    def holders(self) -> dict[Role, str]:
        """Snapshot of all role holders."""
        return dict(self._holders)

    def has_role(self, role: Role, account: str) -> bool:
        try:
            return self._holders[role] == normalize_account(account)
        except InvalidAccount:
            return False

    # =========================================================================
    # Checks used by entry points
    # =========================================================================

    def require(self, role: Role, caller: str) -> str:
        """
        Ensure ``caller`` holds ``role``.

        Returns:
            The caller in checksum form.

        Raises:
            Unauthorized: if the caller does not hold the role.
        """
        if not self.has_role(role, caller):
            logger.warning("unauthorized_caller", role=role.value, caller=caller)
            raise Unauthorized(
                f"Caller is not the {role.value}",
                role=role.value,
                caller=caller,
            )
        return self._holders[role]

    def ensure_active(self) -> None:
        """Raise SystemHalted unless the system is active."""
        if self._state == SystemState.HALTED:
            raise SystemHalted("System is halted")

    # =========================================================================
    # Administrative changes
    # =========================================================================

    async def set_role(self, caller: str, role: Role, new_holder: str) -> str:
        """
        Reassign a role (owner only).

        Returns:
            The previous holder.
        """
        async with self._guard.transaction("set_role"):
            self.require(Role.OWNER, caller)
            new_holder = normalize_account(new_holder)

            old_holder = self._holders[role]
            self._holders[role] = new_holder

            self._events.emit(
                EventType.ROLE_CHANGED,
                role=role.value,
                old=old_holder,
                new=new_holder,
            )
            return old_holder

    async def halt(self, caller: str) -> None:
        """Halt all mutating operations (owner only)."""
        await self._set_state(caller, SystemState.HALTED)

    async def resume(self, caller: str) -> None:
        """Resume normal operation (owner only)."""
        await self._set_state(caller, SystemState.ACTIVE)

    async def _set_state(self, caller: str, new_state: SystemState) -> None:
        async with self._guard.transaction(f"set_state:{new_state.value}"):
            self.require(Role.OWNER, caller)
            if self._state == new_state:
                return

            old_state = self._state
            self._state = new_state
            self._events.emit(
                EventType.SYSTEM_STATE_CHANGED,
                old=old_state.value,
                new=new_state.value,
                caller=self._holders[Role.OWNER],
            )
