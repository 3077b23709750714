"""Token Routes: SPL token mint creation and minting instructions.

Invariants:
    - Addresses validated by the service before the builder runs
    - Responses carry full account metadata (pubkey, is_signer, is_writable)

Design Decisions:
    - Thin routes: validation, delegation and shaping live in services/build_instructions
"""

from fastapi import APIRouter, Depends

from solbridge.api.dependencies import get_instruction_builder
from solbridge.core.instruction_protocols import InstructionBuilder
from solbridge.schemas.envelope import ApiResponse, ErrorResponse
from solbridge.schemas.instruction import InstructionResponse
from solbridge.schemas.token import CreateTokenRequest, MintTokenRequest
from solbridge.services.build_instructions import (
    build_create_token, build_mint_token,
)

router = APIRouter(
    prefix="/token", tags=["token"], responses={400: {"model": ErrorResponse}},
)


@router.post("/create", response_model=ApiResponse[InstructionResponse])
async def create_token(
    body: CreateTokenRequest,
    builder: InstructionBuilder = Depends(get_instruction_builder),
):
    """InitializeMint instruction for a new token mint."""
    shaped = build_create_token(
        builder, body.mint_authority, body.mint, body.decimals,
    )
    return ApiResponse[InstructionResponse].ok(
        InstructionResponse.from_shaped(shaped),
    )


@router.post("/mint", response_model=ApiResponse[InstructionResponse])
async def mint_token(
    body: MintTokenRequest,
    builder: InstructionBuilder = Depends(get_instruction_builder),
):
    """MintTo instruction crediting `destination`."""
    shaped = build_mint_token(
        builder, body.mint, body.destination, body.authority, body.amount,
    )
    return ApiResponse[InstructionResponse].ok(
        InstructionResponse.from_shaped(shaped),
    )
