"""
Test Helpers
============

Shared accounts and request helpers for HEAT tests.
"""

OWNER = "0x" + "a1" * 20
MINTER = "0x" + "a2" * 20
COLLECTOR = "0x" + "a3" * 20
TREASURY = "0x" + "a4" * 20
ALICE = "0x" + "11" * 20
BOB = "0x" + "22" * 20
CAROL = "0x" + "33" * 20

PROOF = bytes.fromhex("ab" * 32)


def bearer(account: str) -> dict[str, str]:
    """Authorization header for ``account``."""
    from heat.auth import create_access_token

    token = create_access_token({"sub": account})
    return {"Authorization": f"Bearer {token}"}
