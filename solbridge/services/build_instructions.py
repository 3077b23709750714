"""Instruction Service: validate request fields, delegate to the builder, shape the result.

Invariants:
    - Every address is validated (in request field order) before the builder is called
    - Transfers of zero are refused; minting zero is passed through to the library
    - Builder refusals become CryptoError naming the instruction that failed
    - No encoding logic beyond base64 of the builder's opaque data

Design Decisions:
    - Builder injected as a parameter: routes supply it via FastAPI Depends,
      tests pass a fake (ADR: impureim sandwich, SDK at the edge)
"""

import logging

from solders.instruction import Instruction

from solbridge.core.errors import CryptoError
from solbridge.core.instruction_protocols import (
    InstructionBuilder, InstructionBuildError,
)
from solbridge.core.shape_instruction import shape_instruction
from solbridge.core.domain_types import ShapedInstruction
from solbridge.core.validation import validate_positive_amount, validate_pubkey

logger = logging.getLogger(__name__)


def _crypto_error(what: str, exc: InstructionBuildError) -> CryptoError:
    return CryptoError(f"Failed to create {what} instruction: {exc}")


def build_create_token(
    builder: InstructionBuilder, mint_authority: str, mint: str, decimals: int,
) -> ShapedInstruction:
    """InitializeMint for `mint`, no freeze authority."""
    authority_key = validate_pubkey(mint_authority)
    mint_key = validate_pubkey(mint)
    try:
        instruction = builder.initialize_mint(mint_key, authority_key, decimals)
    except InstructionBuildError as e:
        raise _crypto_error("mint", e) from e
    return shape_instruction(instruction)


def build_mint_token(
    builder: InstructionBuilder,
    mint: str,
    destination: str,
    authority: str,
    amount: int,
) -> ShapedInstruction:
    """MintTo `amount` base units into `destination`."""
    mint_key = validate_pubkey(mint)
    destination_key = validate_pubkey(destination)
    authority_key = validate_pubkey(authority)
    try:
        instruction = builder.mint_to(
            mint_key, destination_key, authority_key, amount,
        )
    except InstructionBuildError as e:
        raise _crypto_error("mint", e) from e
    return shape_instruction(instruction)


def build_send_sol(
    builder: InstructionBuilder, from_: str, to: str, lamports: int,
) -> ShapedInstruction:
    """System program transfer of `lamports` from `from_` to `to`."""
    from_key = validate_pubkey(from_)
    to_key = validate_pubkey(to)
    validate_positive_amount(lamports)
    try:
        instruction = builder.system_transfer(from_key, to_key, lamports)
    except InstructionBuildError as e:
        raise _crypto_error("transfer", e) from e
    return shape_instruction(instruction)


def build_send_token(
    builder: InstructionBuilder,
    destination: str,
    mint: str,
    owner: str,
    amount: int,
) -> ShapedInstruction:
    """SPL transfer between the owner's and destination's associated token accounts."""
    destination_key = validate_pubkey(destination)
    mint_key = validate_pubkey(mint)
    owner_key = validate_pubkey(owner)
    validate_positive_amount(amount)
    try:
        source_ata = builder.associated_token_address(owner_key, mint_key)
        destination_ata = builder.associated_token_address(destination_key, mint_key)
        instruction: Instruction = builder.token_transfer(
            source_ata, destination_ata, owner_key, amount,
        )
    except InstructionBuildError as e:
        raise _crypto_error("transfer", e) from e
    logger.debug(
        f"Token transfer {source_ata} -> {destination_ata}",
        extra={"endpoint": "send_token"},
    )
    return shape_instruction(instruction)
