"""Error Hierarchy: typed, categorized exceptions for every SolBridge failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - Domain errors are request-scoped: none is retried, none is fatal to the process
    - to_response() produces the uniform failure envelope {"success": false, "error": str}
    - Messages never carry secret key material

Design Decisions:
    - Single hierarchy with SolbridgeError base: one FastAPI handler catches all
      (ADR: uniform error shape, one propagation strategy)
    - Message prefix lives in the subclass ("Invalid input: ...") so callers pass
      only the detail
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    CRYPTOGRAPHIC = "cryptographic"


class SolbridgeError(Exception):
    """Base exception for all SolBridge errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        return {"success": False, "error": self.message}


# ─── Domain Errors (400) ────────────────────────────────────────

class InvalidInputError(SolbridgeError):
    """Malformed address, bad base58/base64, wrong byte length, zero amount."""
    def __init__(self, detail: str):
        super().__init__(
            f"Invalid input: {detail}", "INVALID_INPUT",
            ErrorCategory.VALIDATION, 400,
        )
        self.detail = detail


class CryptoError(SolbridgeError):
    """Instruction library rejected otherwise well-formed input."""
    def __init__(self, detail: str):
        super().__init__(
            f"Cryptographic error: {detail}", "CRYPTO_ERROR",
            ErrorCategory.CRYPTOGRAPHIC, 400,
        )
        self.detail = detail


class MissingFieldsError(SolbridgeError):
    """Request body lacks one or more required fields."""
    def __init__(self, fields: list[str] | None = None):
        super().__init__(
            "Missing required fields", "MISSING_FIELDS",
            ErrorCategory.VALIDATION, 400,
        )
        self.fields = fields or []
