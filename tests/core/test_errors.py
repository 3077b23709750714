"""Error Hierarchy: codes, categories, prefixes and the failure envelope."""

from solbridge.core.errors import (
    CryptoError, ErrorCategory, InvalidInputError, MissingFieldsError,
    SolbridgeError,
)


def test_invalid_input_error_shape():
    err = InvalidInputError("Invalid public key: abc")
    assert isinstance(err, SolbridgeError)
    assert err.code == "INVALID_INPUT"
    assert err.category == ErrorCategory.VALIDATION
    assert err.http_status == 400
    assert err.to_response() == {
        "success": False,
        "error": "Invalid input: Invalid public key: abc",
    }


def test_crypto_error_shape():
    err = CryptoError("Failed to create mint instruction: boom")
    assert err.code == "CRYPTO_ERROR"
    assert err.category == ErrorCategory.CRYPTOGRAPHIC
    assert err.http_status == 400
    assert err.message == "Cryptographic error: Failed to create mint instruction: boom"


def test_missing_fields_error_keeps_field_names():
    err = MissingFieldsError(["mint", "decimals"])
    assert err.fields == ["mint", "decimals"]
    assert err.to_response()["error"] == "Missing required fields"


def test_every_category_is_raised_by_some_error():
    raised = {
        InvalidInputError("x").category,
        CryptoError("x").category,
        MissingFieldsError().category,
    }
    assert raised == set(ErrorCategory)
