"""
Proof Verifier Interface
========================

Boundary to the opaque burn-proof verifier.

Implementations return ``True``/``False`` for a well-formed answer and
raise ``VerifierError`` when the call itself fails. The claim processor
treats both a ``False`` answer and any failure as a rejected proof.

Version: 0.1.0
"""

from abc import ABC, abstractmethod
from typing import Any

from heat.config import Settings, VerifierMode
from heat.logging import get_logger

logger = get_logger(__name__)


class ProofVerifier(ABC):
    """
    Abstract base class for proof verifiers.

    Implements the Strategy pattern for different verifier modes.
    """

    @property
    @abstractmethod
    def mode(self) -> VerifierMode:
        """Get the verifier mode."""
        ...

    @abstractmethod
    async def verify(self, proof: bytes, public_inputs: list[int]) -> bool:
        """
        Verify a burn proof against its public inputs.

        Args:
            proof: Serialized STARK proof
            public_inputs: nullifier, commitment, recipient hash, network id

        Returns:
            True if the proof is accepted

        Raises:
            VerifierError: if the verifier could not be queried
        """
        ...

    async def health_check(self) -> dict[str, Any]:
        """Check verifier health."""
        return {"status": "healthy", "mode": self.mode.value}


def create_proof_verifier(config: Settings) -> ProofVerifier:
    """
    Build the verifier selected by configuration.

    Args:
        config: Application settings

    Returns:
        ProofVerifier instance based on ``config.chain.verifier_mode``

    Raises:
        ValueError: for an unknown mode, or the mock verifier in production
    """
    mode = config.chain.verifier_mode

    if mode == VerifierMode.MOCK and config.is_production:
        raise ValueError("Mock proof verifier cannot be used in production")

    if mode == VerifierMode.MOCK:
        from heat.verifier.mock import MockProofVerifier

        verifier: ProofVerifier = MockProofVerifier(accept=config.chain.mock_accept)
    elif mode == VerifierMode.ONCHAIN:
        from heat.verifier.onchain import Web3ProofVerifier

        verifier = Web3ProofVerifier(
            rpc_url=config.chain.rpc_url,
            contract_address=config.chain.verifier_contract_address,
        )
    else:
        raise ValueError(f"Unknown verifier mode: {mode}")

    logger.info("proof_verifier_initialized", mode=mode.value)
    return verifier
