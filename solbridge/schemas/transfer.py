"""Transfer Schemas: native SOL and SPL token transfer requests and responses.

Invariants:
    - /send/sol lists accounts as plain key strings
    - /send/token lists accounts with signer flag only
    - Zero amounts pass schema validation and are refused by core/validation
"""

from pydantic import BaseModel, Field

from solbridge.core.domain_types import ShapedInstruction
from solbridge.schemas.instruction import (
    Address, RequestModel, SignerAccountResponse, U64,
)


class SendSolRequest(RequestModel):
    from_: Address = Field(alias="from")
    to: Address
    lamports: U64


class SendTokenRequest(RequestModel):
    destination: Address
    mint: Address
    owner: Address
    amount: U64


class SendSolResponse(BaseModel):
    program_id: str
    accounts: list[str]
    instruction_data: str

    @classmethod
    def from_shaped(cls, shaped: ShapedInstruction) -> "SendSolResponse":
        return cls(
            program_id=shaped.program_id,
            accounts=[a.pubkey for a in shaped.accounts],
            instruction_data=shaped.instruction_data,
        )


class SendTokenResponse(BaseModel):
    program_id: str
    accounts: list[SignerAccountResponse]
    instruction_data: str

    @classmethod
    def from_shaped(cls, shaped: ShapedInstruction) -> "SendTokenResponse":
        return cls(
            program_id=shaped.program_id,
            accounts=[
                SignerAccountResponse(pubkey=a.pubkey, is_signer=a.is_signer)
                for a in shaped.accounts
            ],
            instruction_data=shaped.instruction_data,
        )
