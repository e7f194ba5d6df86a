"""
On-chain Proof Verifier
=======================

Queries the deployed STARK verifier contract with an ``eth_call`` of
``verifyProof(bytes proof, bytes32[4] publicInputs) returns (bool)``.

The web3 call is blocking, so it runs in a worker thread. Any transport,
ABI or decoding failure surfaces as ``VerifierError``.

Version: 0.1.0
"""

import asyncio
import time
from typing import Any

from web3 import Web3

from heat.config import VerifierMode
from heat.core.hashing import to_bytes32
from heat.errors import VerifierError
from heat.logging import get_logger
from heat.verifier.base import ProofVerifier

logger = get_logger(__name__)


VERIFIER_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "verifyProof",
        "stateMutability": "view",
        "inputs": [
            {"name": "proof", "type": "bytes"},
            {"name": "publicInputs", "type": "bytes32[4]"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    }
]


class Web3ProofVerifier(ProofVerifier):
    """
    Verifier backed by a contract on the settlement chain.

    Usage:
        verifier = Web3ProofVerifier(rpc_url, "0xVerifier...")
        accepted = await verifier.verify(proof, public_inputs)
    """

    def __init__(
        self,
        rpc_url: str,
        contract_address: str,
        web3: Web3 | None = None,
    ) -> None:
        if web3 is None:
            if not rpc_url:
                raise ValueError("CHAIN_RPC_URL is required for onchain verification")
            web3 = Web3(Web3.HTTPProvider(rpc_url))
        if not Web3.is_address(contract_address):
            raise ValueError(f"Invalid verifier contract address: {contract_address!r}")

        self._web3 = web3
        self._contract = web3.eth.contract(
            address=Web3.to_checksum_address(contract_address),
            abi=VERIFIER_ABI,
        )

    @property
    def mode(self) -> VerifierMode:
        return VerifierMode.ONCHAIN

    def _call(self, proof: bytes, public_inputs: list[int]) -> Any:
        encoded = [to_bytes32(value) for value in public_inputs]
        return self._contract.functions.verifyProof(proof, encoded).call()

    async def verify(self, proof: bytes, public_inputs: list[int]) -> bool:
        start_time = time.time()
        try:
            result = await asyncio.to_thread(self._call, proof, public_inputs)
        except Exception as e:
            logger.warning("onchain_verifier_call_failed", error=str(e))
            raise VerifierError(f"Verifier call failed: {e}") from e

        if not isinstance(result, bool):
            raise VerifierError(f"Malformed verifier result: {result!r}")

        logger.info(
            "onchain_proof_verified",
            valid=result,
            verification_time_ms=int((time.time() - start_time) * 1000),
        )
        return result

    async def health_check(self) -> dict[str, Any]:
        try:
            block_number = await asyncio.to_thread(lambda: self._web3.eth.block_number)
        except Exception as e:
            logger.error("onchain_verifier_unhealthy", error=str(e))
            return {"status": "unhealthy", "mode": self.mode.value, "error": str(e)}
        return {
            "status": "healthy",
            "mode": self.mode.value,
            "block_number": block_number,
        }
