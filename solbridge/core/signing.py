"""Signing Module: Ed25519 message signing and signature verification.

Invariants:
    - Signature covers the raw UTF-8 bytes of the message, no pre-hashing
    - Messages that cannot be UTF-8 encoded (lone surrogates) raise InvalidInputError
    - sign_message is deterministic for identical (key, message)
    - verify_message answers validity as a bool; only structurally malformed
      input (bad pubkey, bad base64, signature length != 64) raises

Design Decisions:
    - "valid: false" is an answer, not a failure (ADR: callers ask the question
      and expect a reply, so a wrong signature must not become a 400)
"""

from solders.keypair import Keypair
from solders.signature import Signature

from solbridge.core.codec import b58encode, b64decode_strict, b64encode
from solbridge.core.domain_types import SIGNATURE_LENGTH, SignedMessage
from solbridge.core.errors import InvalidInputError
from solbridge.core.validation import validate_pubkey


def encode_message(message: str) -> bytes:
    """UTF-8 bytes of message; lone surrogates from JSON escapes are refused."""
    try:
        return message.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidInputError("Message must be valid UTF-8") from None


def sign_message(keypair: Keypair, message: str) -> SignedMessage:
    """Sign the UTF-8 encoding of message with keypair."""
    signature = keypair.sign_message(encode_message(message))
    return SignedMessage(
        signature=b64encode(bytes(signature)),
        public_key=b58encode(bytes(keypair.pubkey())),
        message=message,
    )


def decode_signature(value: str) -> Signature:
    """Decode a base64 signature, requiring exactly 64 bytes."""
    try:
        raw = b64decode_strict(value)
    except ValueError:
        raise InvalidInputError("Invalid base64 signature") from None
    if len(raw) != SIGNATURE_LENGTH:
        raise InvalidInputError("Invalid signature format")
    return Signature.from_bytes(raw)


def verify_message(pubkey: str, signature: str, message: str) -> bool:
    """Check signature over message against pubkey.

    Raises InvalidInputError only when an input cannot be decoded.
    """
    key = validate_pubkey(pubkey)
    sig = decode_signature(signature)
    return sig.verify(key, encode_message(message))
