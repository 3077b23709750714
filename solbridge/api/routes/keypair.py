"""Keypair Route: POST /keypair generates a fresh Ed25519 keypair.

Invariants:
    - No request body; every call returns a new keypair
    - The generated secret is returned once and never logged
"""

import logging

from fastapi import APIRouter

from solbridge.core.keys import generate_keypair
from solbridge.schemas.envelope import ApiResponse
from solbridge.schemas.keypair import KeypairResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["keypair"])


@router.post("/keypair", response_model=ApiResponse[KeypairResponse])
async def create_keypair():
    """Generate a keypair: base58 pubkey and 64-byte base58 secret."""
    generated = generate_keypair()
    logger.debug("Keypair generated", extra={"endpoint": "keypair"})
    return ApiResponse[KeypairResponse].ok(
        KeypairResponse(pubkey=generated.pubkey, secret=generated.secret),
    )
