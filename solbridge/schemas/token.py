"""Token Schemas: request bodies for mint creation and minting."""

from pydantic import AliasChoices, Field

from solbridge.schemas.instruction import Address, Decimals, RequestModel, U64


class CreateTokenRequest(RequestModel):
    mint_authority: Address = Field(
        validation_alias=AliasChoices("mint_authority", "mintAuthority"),
    )
    mint: Address
    decimals: Decimals


class MintTokenRequest(RequestModel):
    mint: Address
    destination: Address
    authority: Address
    amount: U64
