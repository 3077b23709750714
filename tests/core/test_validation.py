"""Validation Layer: address and amount validators.

Tests:
    - valid addresses parse to the same Pubkey and round-trip as strings
    - non-base58 and wrong-length strings raise InvalidInputError naming the input
    - zero amounts raise, positive amounts pass through
"""

import pytest
from solders.pubkey import Pubkey

from solbridge.core.codec import b58encode
from solbridge.core.errors import InvalidInputError
from solbridge.core.validation import validate_positive_amount, validate_pubkey


def test_valid_address_round_trips():
    key = Pubkey.new_unique()
    parsed = validate_pubkey(str(key))
    assert parsed == key
    assert str(parsed) == str(key)


def test_system_program_address_is_valid():
    assert bytes(validate_pubkey("11111111111111111111111111111111")) == bytes(32)


@pytest.mark.parametrize("bad", [
    "",
    "not-a-key",
    "0" * 44,
    "11111111111111111111111111111111 ",
    b58encode(bytes(31)),
    b58encode(bytes([5]) * 33),
])
def test_invalid_address_raises_naming_input(bad):
    with pytest.raises(InvalidInputError) as info:
        validate_pubkey(bad)
    assert info.value.message == f"Invalid input: Invalid public key: {bad}"


def test_zero_amount_rejected():
    with pytest.raises(InvalidInputError, match="Amount must be greater than 0"):
        validate_positive_amount(0)


@pytest.mark.parametrize("amount", [1, 2**64 - 1])
def test_positive_amount_passes(amount):
    assert validate_positive_amount(amount) == amount
