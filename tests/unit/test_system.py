"""
Unit tests for claim models and system wiring.
"""

from collections.abc import Callable

import pytest
from pydantic import ValidationError

from heat.config import Environment, NullifierBackend, Settings, VerifierMode
from heat.config.settings import ChainSettings
from heat.constants import FUEGO_NETWORK_ID
from heat.core.access import Role
from heat.errors import InvalidProof
from heat.models.claim import Claim, MintTier
from heat.nullifiers import InMemoryNullifierStore, RedisNullifierStore
from heat.system import HeatSystem
from heat.verifier import MockProofVerifier, Web3ProofVerifier
from tests.helpers import ALICE


class TestClaimModel:
    """Tests for claim parsing."""

    def test_hex_fields_parsed(self) -> None:
        """Test that hex strings are accepted for bytes32 fields and the proof."""
        claim = Claim(
            secret="0x0a",
            proof="0xdead",
            public_inputs=["0x01", 2, "0x03", hex(FUEGO_NETWORK_ID)],
            recipient=None,
        )

        assert claim.secret == 10
        assert claim.proof == b"\xde\xad"
        assert claim.nullifier == 1
        assert claim.commitment == 2
        assert claim.recipient_hash == 3
        assert claim.network_id == FUEGO_NETWORK_ID
        assert claim.mint_tier == MintTier.STANDARD

    def test_oversized_input_rejected(self) -> None:
        """Test that public inputs must fit in bytes32."""
        with pytest.raises(ValidationError):
            Claim(secret=1, proof=b"", public_inputs=[2**256, 0, 0, 0])

    def test_tier_flag(self) -> None:
        """Test the tier flag mapping."""
        assert MintTier.from_flag(True) == MintTier.LARGE
        assert MintTier.from_flag(False) == MintTier.STANDARD


class TestHeatSystem:
    """Tests for building the system from settings."""

    def test_from_settings_memory(self) -> None:
        """Test the default wiring."""
        config = Settings()
        config.nullifiers.backend = NullifierBackend.MEMORY

        system = HeatSystem.from_settings(config)

        assert isinstance(system.claims.nullifiers, InMemoryNullifierStore)
        assert isinstance(system.claims.verifier, MockProofVerifier)
        assert system.claims.identity == system.access.holder(Role.MINTER)

    def test_from_settings_redis(self) -> None:
        """Test that the Redis backend is selected by configuration."""
        config = Settings()
        config.nullifiers.backend = NullifierBackend.REDIS

        system = HeatSystem.from_settings(config)

        assert isinstance(system.claims.nullifiers, RedisNullifierStore)

    def test_components_share_state(self) -> None:
        """Test that every component uses one guard and one event stream."""
        system = HeatSystem.from_settings(Settings())

        assert system.token.ledger is system.ledger
        assert len(system.events) == 0
        assert system.ledger.check_invariant()


class TestProductionVerifier:
    """Tests that forged proofs never mint with default settings."""

    def test_production_refuses_mock_verifier(self) -> None:
        """Test that production settings cannot select the mock verifier."""
        with pytest.raises(ValidationError):
            Settings(environment=Environment.PRODUCTION)

    def test_production_with_onchain_verifier(self) -> None:
        """Test that production settings build the on-chain verifier."""
        config = Settings(
            environment=Environment.PRODUCTION,
            chain=ChainSettings(
                verifier_mode=VerifierMode.ONCHAIN,
                rpc_url="http://localhost:8545",
                verifier_contract_address="0x" + "fe" * 20,
            ),
        )

        system = HeatSystem.from_settings(config)

        assert isinstance(system.claims.verifier, Web3ProofVerifier)

    @pytest.mark.asyncio
    async def test_default_mock_rejects_forged_proof(
        self, make_claim: Callable[..., Claim]
    ) -> None:
        """Test that the default mock verifier does not authorize mints."""
        system = HeatSystem.from_settings(Settings())

        with pytest.raises(InvalidProof):
            await system.claims.submit_claim(make_claim(ALICE, proof=b"not a proof"))

        assert system.token.total_supply == 0
        assert system.token.balance_of(ALICE) == 0
