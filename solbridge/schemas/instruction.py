"""Instruction Schemas: shared field types and instruction response shapes.

Invariants:
    - Integer fields are strict JSON integers (no strings, floats, booleans)
    - Amount is an unsigned 64-bit integer; decimals is non-negative (u8 range is
      left to the instruction library, which reports it as a cryptographic error)
    - Address fields are plain strings here; base58 validation happens in core/validation

Design Decisions:
    - Address format checked in core, not in a pydantic validator: the error must
      read "Invalid input: Invalid public key: <value>", not a pydantic field error
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from solbridge.core.domain_types import ShapedInstruction, U64_MAX

U64 = Annotated[int, Field(strict=True, ge=0, le=U64_MAX)]
Decimals = Annotated[int, Field(strict=True, ge=0)]
Address = Annotated[str, Field(strict=True)]


class RequestModel(BaseModel):
    """Base for request bodies: accepts field names and their aliases."""
    model_config = ConfigDict(populate_by_name=True)


class AccountMetaResponse(BaseModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class SignerAccountResponse(BaseModel):
    pubkey: str
    is_signer: bool


class InstructionResponse(BaseModel):
    """Token create/mint instruction with full account metadata."""
    program_id: str
    accounts: list[AccountMetaResponse]
    instruction_data: str

    @classmethod
    def from_shaped(cls, shaped: ShapedInstruction) -> "InstructionResponse":
        return cls(
            program_id=shaped.program_id,
            accounts=[
                AccountMetaResponse(
                    pubkey=a.pubkey,
                    is_signer=a.is_signer,
                    is_writable=a.is_writable,
                )
                for a in shaped.accounts
            ],
            instruction_data=shaped.instruction_data,
        )
