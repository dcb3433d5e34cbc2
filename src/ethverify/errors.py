"""
Error types for ethverify.

Each error carries a stable ``code`` so callers (and audit trails) can branch
on the failure kind without parsing messages. All errors are ``ValueError``
subclasses: they signal malformed input, never a merely non-matching signature.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes."""

    INVALID_SIGNATURE_LENGTH = "INVALID_SIGNATURE_LENGTH"
    ALREADY_MEMBER = "ALREADY_MEMBER"
    INVALID_ACCOUNT_IDENTIFIER = "INVALID_ACCOUNT_IDENTIFIER"


class EthVerifyError(ValueError):
    """Base class for all ethverify input errors."""

    code: ErrorCode

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": str(self)}


class InvalidSignatureLength(EthVerifyError):
    """Raw signature is not exactly 65 bytes."""

    code = ErrorCode.INVALID_SIGNATURE_LENGTH

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"signature must be 65 bytes, got {length}")


class AlreadyMember(EthVerifyError):
    """Account is already registered."""

    code = ErrorCode.ALREADY_MEMBER

    def __init__(self, account: bytes) -> None:
        self.account = account
        super().__init__(f"account 0x{account.hex()} is already a member")


class InvalidAccountIdentifier(EthVerifyError):
    code = ErrorCode.INVALID_ACCOUNT_IDENTIFIER


__all__: tuple[str, ...] = (
    "AlreadyMember",
    "ErrorCode",
    "EthVerifyError",
    "InvalidAccountIdentifier",
    "InvalidSignatureLength",
)
