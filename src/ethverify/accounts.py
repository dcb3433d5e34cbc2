"""
Account identifiers: 20-byte values derived from secp256k1 public keys.

Accepted inputs are raw 20-byte values or 40-hex-digit strings (with or
without ``0x``, any case). Internally accounts are always ``bytes``.
"""

from __future__ import annotations

from .errors import InvalidAccountIdentifier
from .hashes import keccak256

ACCOUNT_LENGTH = 20


def to_account(value: bytes | bytearray | str) -> bytes:
    """
    Normalize an account identifier to 20 raw bytes.

    Args:
        value: 20-byte value, or hex string ("0x" prefix optional).

    Returns:
        20-byte account identifier.
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ACCOUNT_LENGTH:
            raise InvalidAccountIdentifier(
                f"account must be {ACCOUNT_LENGTH} bytes, got {len(value)}"
            )
        return bytes(value)
    if isinstance(value, str):
        text = value[2:] if value[:2] in ("0x", "0X") else value
        if len(text) != 2 * ACCOUNT_LENGTH:
            raise InvalidAccountIdentifier(
                f"account must be {2 * ACCOUNT_LENGTH} hex chars, got {len(text)}"
            )
        try:
            return bytes.fromhex(text)
        except ValueError:
            raise InvalidAccountIdentifier(f"account is not hex: {value!r}") from None
    raise InvalidAccountIdentifier(
        f"account must be bytes or str, not {type(value).__name__}"
    )


def to_hex_address(account: bytes | bytearray | str) -> str:
    """Lowercase "0x" + 40 hex form."""
    return "0x" + to_account(account).hex()


def to_checksum_address(account: bytes | bytearray | str) -> str:
    """
    EIP-55 mixed-case checksum form.

    A hex letter is uppercased when the matching nibble of
    keccak256(lowercase hex) is >= 8.
    """
    lower = to_account(account).hex()
    digest = keccak256(lower.encode("ascii")).hex()
    return "0x" + "".join(
        ch.upper() if int(digest[i], 16) >= 8 else ch for i, ch in enumerate(lower)
    )


__all__: tuple[str, ...] = (
    "ACCOUNT_LENGTH",
    "to_account",
    "to_checksum_address",
    "to_hex_address",
)
