"""Message Routes: Ed25519 sign and verify.

Invariants:
    - /message/verify returns 200 with valid=false for a wrong signature;
      only undecodable input produces a 400
    - The submitted message is echoed back byte-for-byte
"""

import logging

from fastapi import APIRouter

from solbridge.core.keys import parse_secret_key
from solbridge.core.signing import sign_message, verify_message
from solbridge.schemas.envelope import ApiResponse, ErrorResponse
from solbridge.schemas.message import (
    SignMessageRequest, SignMessageResponse,
    VerifyMessageRequest, VerifyMessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/message", tags=["message"], responses={400: {"model": ErrorResponse}},
)


@router.post("/sign", response_model=ApiResponse[SignMessageResponse])
async def sign(body: SignMessageRequest):
    """Sign `message` with the supplied 64-byte secret."""
    keypair = parse_secret_key(body.secret)
    signed = sign_message(keypair, body.message)
    return ApiResponse[SignMessageResponse].ok(
        SignMessageResponse(
            signature=signed.signature,
            public_key=signed.public_key,
            message=signed.message,
        ),
    )


@router.post("/verify", response_model=ApiResponse[VerifyMessageResponse])
async def verify(body: VerifyMessageRequest):
    """Check a base64 signature over `message` against `pubkey`."""
    valid = verify_message(body.pubkey, body.signature, body.message)
    logger.debug(
        f"Signature verification result: {valid}",
        extra={"endpoint": "message_verify"},
    )
    return ApiResponse[VerifyMessageResponse].ok(
        VerifyMessageResponse(
            valid=valid, message=body.message, pubkey=body.pubkey,
        ),
    )
