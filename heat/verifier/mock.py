"""
Mock Proof Verifier
===================

In-memory verifier for development and testing.

Rejects every proof unless ``accept`` is set, with per-proof overrides and
an optional injected failure. Only the most recent calls are kept.

Version: 0.1.0
"""

from collections import deque

from heat.config import VerifierMode
from heat.errors import VerifierError
from heat.logging import get_logger
from heat.verifier.base import ProofVerifier

logger = get_logger(__name__)


class MockProofVerifier(ProofVerifier):
    """
    Scriptable proof verifier.

    Records the last ``history`` calls so tests can assert on what was
    verified.
    """

    def __init__(self, accept: bool = False, history: int = 1000) -> None:
        self.accept = accept
        self.failure: Exception | None = None
        self.calls: deque[tuple[bytes, list[int]]] = deque(maxlen=history)
        self._rejected: set[bytes] = set()
        self._accepted: set[bytes] = set()

    @property
    def mode(self) -> VerifierMode:
        return VerifierMode.MOCK

    def reject(self, proof: bytes) -> None:
        """Always reject this proof."""
        self._accepted.discard(proof)
        self._rejected.add(proof)

    def allow(self, proof: bytes) -> None:
        """Always accept this proof."""
        self._rejected.discard(proof)
        self._accepted.add(proof)

    def fail_with(self, error: Exception | None) -> None:
        """Make every following call raise ``error`` (None to stop)."""
        self.failure = error

    async def verify(self, proof: bytes, public_inputs: list[int]) -> bool:
        self.calls.append((proof, list(public_inputs)))

        if self.failure is not None:
            raise VerifierError(str(self.failure)) from self.failure

        if proof in self._rejected:
            result = False
        elif proof in self._accepted:
            result = True
        else:
            result = self.accept

        logger.debug("mock_proof_verified", valid=result, proof_size=len(proof))
        return result

    async def health_check(self) -> dict[str, object]:
        return {
            "status": "healthy",
            "mode": self.mode.value,
            "calls": len(self.calls),
        }

    def clear_all(self) -> None:
        """Reset recorded calls and overrides (for testing)."""
        self.calls.clear()
        self._rejected.clear()
        self._accepted.clear()
        self.failure = None
