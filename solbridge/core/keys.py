"""Keypair Module: Ed25519 keypair generation and 64-byte secret key parsing.

Invariants:
    - generate_keypair() draws fresh OS entropy on every call, never reuses a key
    - A parsed secret is exactly 64 bytes: 32-byte seed then its derived public key
    - Keypairs live for one request and are never persisted or logged

Design Decisions:
    - solders.Keypair as the Ed25519 primitive: same key type the instruction
      library consumes, so no conversion at the service boundary
    - Public-half check done explicitly against Keypair.from_seed: strictness does
      not depend on which solders release is installed
"""

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from solbridge.core.codec import b58decode_strict, b58encode
from solbridge.core.domain_types import (
    GeneratedKeypair, SECRET_KEY_LENGTH, SEED_LENGTH,
)
from solbridge.core.errors import InvalidInputError


def generate_keypair() -> GeneratedKeypair:
    """Generate a new random keypair in external (base58) form."""
    keypair = Keypair()
    return GeneratedKeypair(
        pubkey=b58encode(bytes(keypair.pubkey())),
        secret=b58encode(bytes(keypair)),
    )


def parse_secret_key(value: str) -> Keypair:
    """Decode a base58 64-byte secret into a signing keypair.

    Raises InvalidInputError for non-base58 input, a decoded length other than
    64, or a public half that does not match the seed.
    """
    try:
        raw = b58decode_strict(value)
    except ValueError:
        raise InvalidInputError("Invalid base58 secret key") from None

    if len(raw) != SECRET_KEY_LENGTH:
        raise InvalidInputError(
            f"Secret key must be {SECRET_KEY_LENGTH} bytes, got {len(raw)}",
        )

    try:
        keypair = Keypair.from_bytes(raw)
    except ValueError as e:
        raise InvalidInputError(f"Invalid secret key format: {e}") from e

    derived = Keypair.from_seed(raw[:SEED_LENGTH]).pubkey()
    if derived != Pubkey.from_bytes(raw[SEED_LENGTH:]):
        raise InvalidInputError(
            "Invalid secret key format: public key does not match secret seed",
        )
    return keypair
