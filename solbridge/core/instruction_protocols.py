"""Boundary Protocols: contract between the service layer and the instruction library.

Invariants:
    - Core and services NEVER import solana/spl builders directly, only this Protocol
    - Every method receives already-validated Pubkey values
    - Builders signal refusal by raising InstructionBuildError

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance
      (ADR: tests exercise validation and shaping without the SDK)
    - Sync methods: instruction building is CPU-only, no IO to await
"""

from typing import Protocol

from solders.instruction import Instruction
from solders.pubkey import Pubkey


class InstructionBuildError(Exception):
    """The instruction library refused otherwise well-formed input."""


class InstructionBuilder(Protocol):
    """Narrow view of the SPL token / system program instruction builders."""

    def initialize_mint(
        self,
        mint: Pubkey,
        mint_authority: Pubkey,
        decimals: int,
        freeze_authority: Pubkey | None = None,
    ) -> Instruction: ...

    def mint_to(
        self, mint: Pubkey, destination: Pubkey, authority: Pubkey, amount: int,
    ) -> Instruction: ...

    def token_transfer(
        self, source: Pubkey, destination: Pubkey, owner: Pubkey, amount: int,
    ) -> Instruction: ...

    def associated_token_address(self, owner: Pubkey, mint: Pubkey) -> Pubkey: ...

    def system_transfer(
        self, from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int,
    ) -> Instruction: ...
