"""
Claim Processor
===============

Entry point for minting HEAT against source-chain burn proofs.

A claim passes these gates in order; the first failure aborts the claim:

1. recipient is a non-zero account            -> InvalidRecipient
2. exactly four public inputs                 -> InvalidPublicInputs
3. nullifier newly marked in the store        -> NullifierReused
4. recipient hash matches the recipient       -> RecipientMismatch
5. network id is the Fuego network            -> WrongNetwork
6. verifier accepts the proof                 -> InvalidProof

The nullifier is marked at gate 3, before the binding checks, the proof
verification and the mint. Any later failure leaves it consumed: a burn
proof can be claimed at most once, even when that one attempt fails.

The verifier is untrusted. An exception, a timeout or a non-boolean answer
counts as a rejected proof.

Version: 0.1.0
"""

import asyncio
from typing import Any

from heat.constants import FUEGO_NETWORK_ID, PUBLIC_INPUT_COUNT
from heat.core.access import AccessControl, Role
from heat.core.accounts import is_zero_account, normalize_account
from heat.core.events import EventStream, EventType
from heat.core.guard import TransactionGuard
from heat.core.hashing import claim_hash, recipient_hash
from heat.errors import (
    InvalidAccount,
    InvalidProof,
    InvalidPublicInputs,
    InvalidRecipient,
    NullifierReused,
    RecipientMismatch,
    WrongNetwork,
)
from heat.ledger.token import HeatToken
from heat.logging import get_logger
from heat.models.claim import Claim, MintReceipt, MintTier
from heat.nullifiers.store import NullifierStatus, NullifierStore, nullifier_key
from heat.verifier.base import ProofVerifier

logger = get_logger(__name__)


class ClaimProcessor:
    """
    Authorizes mints from burn proofs.

    Usage:
        processor = ClaimProcessor(token, store, verifier, access, guard, events,
                                   identity=minter_address)
        receipt = await processor.submit_claim(claim)
    """

    def __init__(
        self,
        token: HeatToken,
        nullifiers: NullifierStore,
        verifier: ProofVerifier,
        access: AccessControl,
        guard: TransactionGuard,
        events: EventStream,
        identity: str,
        verifier_timeout_seconds: float = 30.0,
    ) -> None:
        self._token = token
        self._nullifiers = nullifiers
        self._verifier = verifier
        self._access = access
        self._guard = guard
        self._events = events
        self._identity = normalize_account(identity)
        self._verifier_timeout = verifier_timeout_seconds

        self._total_claims = 0
        self._total_minted = 0
        self._total_proofs_verified = 0

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def identity(self) -> str:
        """Account the processor mints as."""
        return self._identity

    @property
    def verifier(self) -> ProofVerifier:
        return self._verifier

    @property
    def nullifiers(self) -> NullifierStore:
        return self._nullifiers

    @property
    def total_claims(self) -> int:
        return self._total_claims

    @property
    def total_minted(self) -> int:
        return self._total_minted

    @property
    def total_proofs_verified(self) -> int:
        return self._total_proofs_verified

    async def is_nullifier_used(self, nullifier: int) -> bool:
        return await self._nullifiers.is_used(nullifier)

    @staticmethod
    def mint_amount_for(large: bool) -> int:
        return MintTier.from_flag(large).mint_amount

    @staticmethod
    def burn_amount_for(large: bool) -> int:
        return MintTier.from_flag(large).burn_amount

    async def stats(self) -> dict[str, Any]:
        """Aggregate claim counters."""
        return {
            "total_claims": self._total_claims,
            "total_minted": self._total_minted,
            "total_proofs_verified": self._total_proofs_verified,
            "nullifiers_consumed": await self._nullifiers.count(),
            "total_supply": self._token.total_supply,
        }

    # =========================================================================
    # Claim submission
    # =========================================================================

    async def submit_claim(self, claim: Claim) -> MintReceipt:
        """
        Validate a claim and mint the tier amount to its recipient.

        Returns:
            MintReceipt for the authorized mint

        Raises:
            SystemHalted, Unauthorized: before any gate is evaluated
            InvalidRecipient, InvalidPublicInputs: shape gates
            NullifierReused, RecipientMismatch, WrongNetwork, InvalidProof:
                authorization gates
            SupplyCeilingExceeded: the mint itself failed
        """
        async with self._guard.transaction("submit_claim"):
            self._access.ensure_active()
            # Fail before consuming anything if this processor cannot mint
            self._access.require(Role.MINTER, self._identity)

            recipient = self._check_recipient(claim.recipient)

            if len(claim.public_inputs) != PUBLIC_INPUT_COUNT:
                raise InvalidPublicInputs(
                    f"Expected {PUBLIC_INPUT_COUNT} public inputs, got {len(claim.public_inputs)}",
                    count=len(claim.public_inputs),
                )

            nullifier = nullifier_key(claim.nullifier)
            status = await self._nullifiers.check_and_mark(claim.nullifier)
            if status == NullifierStatus.ALREADY_USED:
                logger.warning("nullifier_reused", nullifier=nullifier)
                raise NullifierReused("Nullifier already used", nullifier=nullifier)

            if claim.recipient_hash != recipient_hash(recipient):
                logger.warning("recipient_mismatch", nullifier=nullifier, recipient=recipient)
                raise RecipientMismatch(
                    "Recipient hash does not match recipient",
                    recipient=recipient,
                    nullifier=nullifier,
                )

            if claim.network_id != FUEGO_NETWORK_ID:
                logger.warning("wrong_network", nullifier=nullifier, network_id=claim.network_id)
                raise WrongNetwork(
                    "Proof is not bound to the Fuego network",
                    network_id=str(claim.network_id),
                    nullifier=nullifier,
                )

            if not await self._verify(claim):
                raise InvalidProof("Proof rejected by verifier", nullifier=nullifier)

            tier = claim.mint_tier
            mint_amount = tier.mint_amount
            total_supply = self._token.apply_mint(self._identity, recipient, mint_amount)

            self._total_claims += 1
            self._total_minted += mint_amount
            self._total_proofs_verified += 1

            hashed = claim_hash(claim.secret, claim.commitment)
            record = self._events.emit(
                EventType.CLAIM_AUTHORIZED,
                claim_hash=hashed,
                recipient=recipient,
                mint_amount=mint_amount,
                nullifier=nullifier,
                tier=tier.value,
            )

            return MintReceipt(
                claim_hash=hashed,
                recipient=recipient,
                tier=tier,
                mint_amount=mint_amount,
                burn_amount=tier.burn_amount,
                nullifier=nullifier,
                total_supply=total_supply,
                event_sequence=record.sequence,
                timestamp=record.timestamp,
            )

    @staticmethod
    def _check_recipient(recipient: str | None) -> str:
        if is_zero_account(recipient):
            raise InvalidRecipient("Recipient is required")
        try:
            return normalize_account(recipient)
        except InvalidAccount as e:
            raise InvalidRecipient(str(e), recipient=recipient) from e

    async def _verify(self, claim: Claim) -> bool:
        """Ask the verifier; every failure mode is a rejection."""
        try:
            result = await asyncio.wait_for(
                self._verifier.verify(claim.proof, list(claim.public_inputs)),
                timeout=self._verifier_timeout,
            )
        except Exception as e:
            logger.warning(
                "proof_verifier_failed",
                proof=claim.proof,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        if not isinstance(result, bool):
            logger.warning("proof_verifier_malformed_result", result_type=type(result).__name__)
            return False
        return result
