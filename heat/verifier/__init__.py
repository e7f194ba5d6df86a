"""
Proof Verifier Module
=====================

Interface to the external burn-proof verifier.

Supports:
- Mock (development/testing)
- On-chain verifier contract via web3

Usage:
    from heat.verifier import create_proof_verifier

    verifier = create_proof_verifier(settings)
    accepted = await verifier.verify(proof, public_inputs)
"""

from heat.verifier.base import ProofVerifier, create_proof_verifier
from heat.verifier.mock import MockProofVerifier
from heat.verifier.onchain import VERIFIER_ABI, Web3ProofVerifier

__all__ = [
    "ProofVerifier",
    "create_proof_verifier",
    "MockProofVerifier",
    "Web3ProofVerifier",
    "VERIFIER_ABI",
]
