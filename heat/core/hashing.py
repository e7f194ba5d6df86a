"""
Claim Hashing
=============

Keccak-256 commitments shared with the proof circuit and the settlement
contract, computed with Solidity ``abi.encodePacked`` semantics.
"""

from web3 import Web3

from heat.constants import UINT256_LIMIT


def to_bytes32(value: int) -> bytes:
    """Encode a uint256 as a big-endian bytes32."""
    if not 0 <= value < UINT256_LIMIT:
        raise ValueError(f"Value does not fit in bytes32: {value}")
    return value.to_bytes(32, "big")


def recipient_hash(recipient: str) -> int:
    """``keccak256(abi.encodePacked(address recipient))`` as an integer."""
    digest = Web3.solidity_keccak(["address"], [Web3.to_checksum_address(recipient)])
    return int.from_bytes(digest, "big")


def claim_hash(secret: int, commitment: int) -> str:
    """``keccak256(abi.encodePacked(bytes32 secret, bytes32 commitment))`` as 0x hex."""
    digest = Web3.solidity_keccak(
        ["bytes32", "bytes32"],
        [to_bytes32(secret), to_bytes32(commitment)],
    )
    return Web3.to_hex(digest)
