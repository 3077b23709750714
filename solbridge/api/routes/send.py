"""Send Routes: native SOL and SPL token transfer instructions.

Invariants:
    - Zero amounts refused with 400 before the builder runs
    - /send/token moves tokens between associated token accounts derived from the mint
"""

from fastapi import APIRouter, Depends

from solbridge.api.dependencies import get_instruction_builder
from solbridge.core.instruction_protocols import InstructionBuilder
from solbridge.schemas.envelope import ApiResponse, ErrorResponse
from solbridge.schemas.transfer import (
    SendSolRequest, SendSolResponse, SendTokenRequest, SendTokenResponse,
)
from solbridge.services.build_instructions import build_send_sol, build_send_token

router = APIRouter(
    prefix="/send", tags=["send"], responses={400: {"model": ErrorResponse}},
)


@router.post("/sol", response_model=ApiResponse[SendSolResponse])
async def send_sol(
    body: SendSolRequest,
    builder: InstructionBuilder = Depends(get_instruction_builder),
):
    shaped = build_send_sol(builder, body.from_, body.to, body.lamports)
    return ApiResponse[SendSolResponse].ok(SendSolResponse.from_shaped(shaped))


@router.post("/token", response_model=ApiResponse[SendTokenResponse])
async def send_token(
    body: SendTokenRequest,
    builder: InstructionBuilder = Depends(get_instruction_builder),
):
    shaped = build_send_token(
        builder, body.destination, body.mint, body.owner, body.amount,
    )
    return ApiResponse[SendTokenResponse].ok(
        SendTokenResponse.from_shaped(shaped),
    )
