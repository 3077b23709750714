"""Validation Layer: externally supplied addresses and amounts → typed values.

Invariants:
    - validate_pubkey accepts only strict base58 that decodes to exactly 32 bytes
    - Error message names the offending string
    - Runs before any instruction library call: unvalidated strings never cross
      the collaborator boundary

Design Decisions:
    - One validator per field type, called uniformly by every endpoint
      (ADR: error construction is never duplicated per handler)
"""

from solders.pubkey import Pubkey

from solbridge.core.codec import b58decode_strict, require_length
from solbridge.core.domain_types import PUBKEY_LENGTH
from solbridge.core.errors import InvalidInputError


def validate_pubkey(value: str) -> Pubkey:
    """Parse a base58 address or raise InvalidInputError naming it."""
    try:
        raw = require_length(b58decode_strict(value), PUBKEY_LENGTH)
    except ValueError:
        raise InvalidInputError(f"Invalid public key: {value}") from None
    return Pubkey.from_bytes(raw)


def validate_positive_amount(amount: int) -> int:
    """Transfers of zero are refused."""
    if amount == 0:
        raise InvalidInputError("Amount must be greater than 0")
    return amount
