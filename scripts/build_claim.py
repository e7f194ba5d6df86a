#!/usr/bin/env python3
"""
Development Claim Builder
=========================

Prints a well-formed claim JSON for the claims service running with the
mock verifier (``CHAIN_MOCK_ACCEPT=true``). The nullifier and commitment
are derived from the secret so that the same secret always yields the same
(replayable) claim.

Usage:
    python scripts/build_claim.py --recipient 0x... [--large] [--secret 0x...]
    python scripts/build_claim.py --recipient 0x... | \\
        curl -X POST -H 'Content-Type: application/json' -d @- \\
        http://localhost:8010/api/v1/claims
"""

import argparse
import json
import secrets
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from web3 import Web3

from heat.constants import FUEGO_NETWORK_ID
from heat.core.accounts import normalize_account
from heat.core.hashing import recipient_hash, to_bytes32
from heat.errors import InvalidAccount
from heat.models.claim import MintTier


def derive(secret: int, label: str) -> int:
    """keccak256(secret || label) as an integer."""
    digest = Web3.solidity_keccak(["bytes32", "string"], [to_bytes32(secret), label])
    return int.from_bytes(digest, "big")


def build_claim(recipient: str, large: bool, secret: int, proof: bytes) -> dict:
    """Assemble a claim body with its four public inputs bound to the recipient."""
    public_inputs = [
        derive(secret, "nullifier"),
        derive(secret, "commitment"),
        recipient_hash(recipient),
        FUEGO_NETWORK_ID,
    ]
    return {
        "secret": Web3.to_hex(to_bytes32(secret)),
        "proof": Web3.to_hex(proof),
        "public_inputs": [Web3.to_hex(to_bytes32(v)) for v in public_inputs],
        "recipient": recipient,
        "tier": large,
    }


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a development HEAT claim",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--recipient",
        "-r",
        required=True,
        help="Destination account for the minted HEAT",
    )
    parser.add_argument(
        "--large",
        action="store_true",
        help="Claim the large tier instead of the standard tier",
    )
    parser.add_argument(
        "--secret",
        "-s",
        type=lambda v: int(v, 0),
        help="Burn secret (0x hex or decimal); random if omitted",
    )
    parser.add_argument(
        "--proof",
        default="0x" + "ab" * 32,
        help="Proof bytes as 0x hex (ignored by the mock verifier)",
    )

    return parser.parse_args()


def main() -> int:
    args = parse_args()

    try:
        recipient = normalize_account(args.recipient)
    except InvalidAccount as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    secret = args.secret if args.secret is not None else secrets.randbits(256)
    proof = bytes.fromhex(args.proof.removeprefix("0x"))

    claim = build_claim(recipient, args.large, secret, proof)
    tier = MintTier.from_flag(args.large)
    print(
        f"# tier={tier.value} burn={tier.burn_amount} mint={tier.mint_amount}",
        file=sys.stderr,
    )
    print(json.dumps(claim, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
