"""
Error Taxonomy
==============

Every rejection raised by the HEAT core derives from ``HeatError`` and
carries a stable ``code``. Failures are scoped to the operation that raised
them; the core never retries and never recovers silently.

Categories:
- input shape: caller can fix the request, no state changed
- authorization: proof/claim rejected (a nullifier may already be consumed)
- accounting: balance, allowance or ceiling violated, no partial mutation
- access: caller lacks the required role
- system state: halted system or re-entrant call

Version: 0.1.0
"""

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Broad classes of core failures."""

    INPUT = "input"
    AUTHORIZATION = "authorization"
    ACCOUNTING = "accounting"
    ACCESS = "access"
    SYSTEM = "system"


class HeatError(Exception):
    """Base class for all HEAT core errors."""

    code: str = "heat_error"
    category: ErrorCategory = ErrorCategory.SYSTEM

    def __init__(self, message: str | None = None, **details: Any) -> None:
        super().__init__(message or self.code)
        self.message = message or self.code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API error bodies."""
        return {
            "error": self.message,
            "error_code": self.code,
            "category": self.category.value,
            "details": self.details or None,
        }


# =============================================================================
# Input shape
# =============================================================================


class InputError(HeatError):
    category = ErrorCategory.INPUT


class InvalidRecipient(InputError):
    code = "invalid_recipient"


class InvalidAccount(InputError):
    code = "invalid_account"


class InvalidPublicInputs(InputError):
    code = "invalid_public_inputs"


class InvalidAmount(InputError):
    code = "invalid_amount"


class ZeroAmount(InputError):
    code = "zero_amount"


# =============================================================================
# Authorization
# =============================================================================


class AuthorizationError(HeatError):
    category = ErrorCategory.AUTHORIZATION


class NullifierReused(AuthorizationError):
    code = "nullifier_reused"


class RecipientMismatch(AuthorizationError):
    code = "recipient_mismatch"


class WrongNetwork(AuthorizationError):
    code = "wrong_network"


class InvalidProof(AuthorizationError):
    code = "invalid_proof"


# =============================================================================
# Accounting
# =============================================================================


class AccountingError(HeatError):
    category = ErrorCategory.ACCOUNTING


class InsufficientBalance(AccountingError):
    code = "insufficient_balance"


class InsufficientAllowance(AccountingError):
    code = "insufficient_allowance"


class SupplyCeilingExceeded(AccountingError):
    code = "supply_ceiling_exceeded"


# =============================================================================
# Access and system state
# =============================================================================


class Unauthorized(HeatError):
    code = "unauthorized"
    category = ErrorCategory.ACCESS


class SystemHalted(HeatError):
    code = "system_halted"
    category = ErrorCategory.SYSTEM


class ReentrantCall(HeatError):
    code = "reentrant_call"
    category = ErrorCategory.SYSTEM


# =============================================================================
# Verifier boundary
# =============================================================================


class VerifierError(Exception):
    """
    Raised by proof verifier implementations when the call itself fails.

    Never escapes the claim processor: it is reported as ``InvalidProof``.
    """
