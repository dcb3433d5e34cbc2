"""
Keccak-256 (Ethereum flavour, multirate padding, 256-bit output).

Backed by eth_hash; this is the legacy Keccak padding, not NIST SHA3-256.
"""

from __future__ import annotations

from eth_hash.auto import keccak as _keccak


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 hash (256-bit output, multirate padding).

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return _keccak(bytes(data))


def hash_message(message: bytes) -> bytes:
    """
    Digest of an arbitrary message: keccak256 over the raw bytes, no length prefix.

    Args:
        message: Message bytes (bytes, bytearray or memoryview; may be empty).

    Returns:
        32-byte digest.
    """
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"message must be bytes-like, not {type(message).__name__}; encode it first"
        )
    return keccak256(bytes(message))


__all__: tuple[str, ...] = ("hash_message", "keccak256")
