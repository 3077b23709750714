"""Domain Types: byte-length constants and value types shared across the codebase.

Invariants:
    - Public keys are 32 bytes, secret keys 64 bytes (seed + public), signatures 64 bytes
    - Amounts are unsigned 64-bit integers, decimals unsigned 8-bit
    - Value dataclasses are frozen: nothing is mutated after creation

Design Decisions:
    - NewType for encoded strings: zero runtime cost, type-checker catches
      base58/base64 mix-ups (ADR: codec boundaries are the usual bug source)
    - Frozen dataclasses over dicts: fields named once, serialized by schemas
"""

from dataclasses import dataclass
from typing import NewType


# ─── Lengths ─────────────────────────────────────────────────────

PUBKEY_LENGTH = 32
SEED_LENGTH = 32
SECRET_KEY_LENGTH = 64
SIGNATURE_LENGTH = 64

U64_MAX = 2**64 - 1


# ─── Encoded Strings ─────────────────────────────────────────────

Base58Str = NewType("Base58Str", str)
Base64Str = NewType("Base64Str", str)


# ─── Values ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class GeneratedKeypair:
    """Freshly generated keypair in its external representation."""
    pubkey: Base58Str
    secret: Base58Str


@dataclass(frozen=True)
class SignedMessage:
    """Ed25519 signature over a UTF-8 message, plus the signer."""
    signature: Base64Str
    public_key: Base58Str
    message: str


@dataclass(frozen=True)
class AccountView:
    """One account reference of an instruction, keys as base58."""
    pubkey: Base58Str
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True)
class ShapedInstruction:
    """Instruction flattened into JSON-friendly values."""
    program_id: Base58Str
    accounts: tuple[AccountView, ...]
    instruction_data: Base64Str
