"""SPL Instruction Builder: InstructionBuilder backed by solders and spl.token.

Invariants:
    - Only builds instructions: no RPC client, no transactions, no network IO
    - Any exception from the library surfaces as InstructionBuildError
    - Token instructions always target the canonical SPL Token program

Design Decisions:
    - Exceptions re-raised, not returned: service layer converts them to CryptoError
      with an operation-specific message (ADR: error wording owned by the caller)
    - No multisig signers: single-authority instructions only, matching the API surface
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from solders.instruction import Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams as SystemTransferParams
from solders.system_program import transfer as system_transfer
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import (
    InitializeMintParams,
    MintToParams,
    TransferParams,
    get_associated_token_address,
    initialize_mint,
    mint_to,
    transfer,
)

from solbridge.core.instruction_protocols import InstructionBuildError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _guarded(operation: str, build: Callable[[], T]) -> T:
    """Run a library builder, mapping its failures to InstructionBuildError."""
    try:
        return build()
    except Exception as e:
        logger.warning(f"{operation} rejected by instruction library: {e}")
        raise InstructionBuildError(str(e) or type(e).__name__) from e


class SplInstructionBuilder:
    """Production InstructionBuilder."""

    def initialize_mint(
        self,
        mint: Pubkey,
        mint_authority: Pubkey,
        decimals: int,
        freeze_authority: Pubkey | None = None,
    ) -> Instruction:
        return _guarded("initialize_mint", lambda: initialize_mint(
            InitializeMintParams(
                decimals=decimals,
                program_id=TOKEN_PROGRAM_ID,
                mint=mint,
                mint_authority=mint_authority,
                freeze_authority=freeze_authority,
            ),
        ))

    def mint_to(
        self, mint: Pubkey, destination: Pubkey, authority: Pubkey, amount: int,
    ) -> Instruction:
        return _guarded("mint_to", lambda: mint_to(
            MintToParams(
                program_id=TOKEN_PROGRAM_ID,
                mint=mint,
                dest=destination,
                mint_authority=authority,
                amount=amount,
            ),
        ))

    def token_transfer(
        self, source: Pubkey, destination: Pubkey, owner: Pubkey, amount: int,
    ) -> Instruction:
        return _guarded("transfer", lambda: transfer(
            TransferParams(
                program_id=TOKEN_PROGRAM_ID,
                source=source,
                dest=destination,
                owner=owner,
                amount=amount,
            ),
        ))

    def associated_token_address(self, owner: Pubkey, mint: Pubkey) -> Pubkey:
        return _guarded(
            "get_associated_token_address",
            lambda: get_associated_token_address(owner, mint),
        )

    def system_transfer(
        self, from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int,
    ) -> Instruction:
        return _guarded("system_transfer", lambda: system_transfer(
            SystemTransferParams(
                from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=lamports,
            ),
        ))
