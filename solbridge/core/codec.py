"""Codec Utilities: strict base58 / base64 conversion and fixed-length byte checks.

Invariants:
    - b58decode_strict rejects any character outside the Bitcoin alphabet,
      whitespace included (base58.b58decode alone strips trailing whitespace)
    - b64decode_strict accepts only the standard padded alphabet
    - Decoders raise ValueError; callers map it to a domain error with their own wording

Design Decisions:
    - Pure functions returning bytes/str, no domain errors here: the same decode
      failure means "Invalid public key" in one place and "Invalid base58 secret key"
      in another (ADR: message ownership stays with the caller)
"""

import base64
import binascii

import base58

from solbridge.core.domain_types import Base58Str, Base64Str

_B58_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def b58encode(data: bytes) -> Base58Str:
    return Base58Str(base58.b58encode(data).decode("ascii"))


def b58decode_strict(value: str) -> bytes:
    """Decode base58, refusing characters the alphabet does not contain."""
    if not set(value) <= _B58_ALPHABET:
        raise ValueError("invalid base58 character")
    return base58.b58decode(value)


def b64encode(data: bytes) -> Base64Str:
    return Base64Str(base64.b64encode(data).decode("ascii"))


def b64decode_strict(value: str) -> bytes:
    """Decode standard padded base64; anything else raises ValueError."""
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64: {e}") from e


def require_length(data: bytes, expected: int) -> bytes:
    """Return data unchanged if it is exactly `expected` bytes long."""
    if len(data) != expected:
        raise ValueError(f"expected {expected} bytes, got {len(data)}")
    return data
