"""
Claim Models
============

Pydantic models for burn-proof claims and their receipts.

A ``Claim`` is transient: it is built from a request, checked by the claim
processor and discarded. Shape and binding checks (input count, recipient
hash, network id) are performed by the processor in a fixed order, not by
model validation, so that every rejection maps to its own error.

Version: 0.1.0
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from heat.constants import (
    COMMITMENT_INDEX,
    LARGE_BURN_AMOUNT,
    LARGE_MINT_AMOUNT,
    NETWORK_ID_INDEX,
    NULLIFIER_INDEX,
    RECIPIENT_HASH_INDEX,
    STANDARD_BURN_AMOUNT,
    STANDARD_MINT_AMOUNT,
    UINT256_LIMIT,
)


def _parse_uint256(value: Any) -> Any:
    """Accept 0x-prefixed hex strings for bytes32 values."""
    if isinstance(value, str) and value.lower().startswith("0x"):
        return int(value, 16)
    return value


class MintTier(str, Enum):
    """The two admissible (burn amount, mint amount) pairings."""

    STANDARD = "standard"
    LARGE = "large"

    @classmethod
    def from_flag(cls, large: bool) -> "MintTier":
        return cls.LARGE if large else cls.STANDARD

    @property
    def burn_amount(self) -> int:
        """XFG atomic units burned on the source chain."""
        return LARGE_BURN_AMOUNT if self is MintTier.LARGE else STANDARD_BURN_AMOUNT

    @property
    def mint_amount(self) -> int:
        """HEAT base units minted for the burn."""
        return LARGE_MINT_AMOUNT if self is MintTier.LARGE else STANDARD_MINT_AMOUNT


class Claim(BaseModel):
    """Request to mint HEAT against a source-chain burn proof."""

    secret: int = Field(..., ge=0, lt=UINT256_LIMIT, description="Burn secret (bytes32)")
    proof: bytes = Field(..., description="Serialized STARK proof")
    public_inputs: list[int] = Field(
        ...,
        description="nullifier, commitment, recipient hash, network id",
    )
    recipient: str | None = Field(default=None, description="Destination account")
    tier: bool = Field(default=False, description="False for standard, True for large")

    @field_validator("secret", mode="before")
    @classmethod
    def parse_secret(cls, v: Any) -> Any:
        return _parse_uint256(v)

    @field_validator("public_inputs", mode="before")
    @classmethod
    def parse_public_inputs(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return [_parse_uint256(item) for item in v]
        return v

    @field_validator("public_inputs")
    @classmethod
    def inputs_are_bytes32(cls, v: list[int]) -> list[int]:
        for item in v:
            if not 0 <= item < UINT256_LIMIT:
                raise ValueError("Public inputs must be bytes32 values")
        return v

    @field_validator("proof", mode="before")
    @classmethod
    def parse_proof(cls, v: Any) -> Any:
        if isinstance(v, str):
            return bytes.fromhex(v[2:] if v.lower().startswith("0x") else v)
        return v

    @property
    def mint_tier(self) -> MintTier:
        return MintTier.from_flag(self.tier)

    @property
    def nullifier(self) -> int:
        return self.public_inputs[NULLIFIER_INDEX]

    @property
    def commitment(self) -> int:
        return self.public_inputs[COMMITMENT_INDEX]

    @property
    def recipient_hash(self) -> int:
        return self.public_inputs[RECIPIENT_HASH_INDEX]

    @property
    def network_id(self) -> int:
        return self.public_inputs[NETWORK_ID_INDEX]


class MintReceipt(BaseModel):
    """Result of a successful claim."""

    claim_hash: str = Field(..., description="keccak256(secret, commitment)")
    recipient: str
    tier: MintTier
    mint_amount: int = Field(..., gt=0)
    burn_amount: int = Field(..., gt=0)
    nullifier: str = Field(..., description="Consumed nullifier (bytes32 hex)")
    total_supply: int = Field(..., ge=0)
    event_sequence: int = Field(..., ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
