"""
EIP-191 personal-message domain separation ("\x19Ethereum Signed Message:\n32").

The 32-byte digest is prefixed with a fixed tag and re-hashed, so a signature
made for this context cannot be replayed as a raw transaction or typed-data
signature.
"""

from __future__ import annotations

from ..hashes import hash_message, keccak256

ETH_SIGNED_MESSAGE_PREFIX = b"\x19Ethereum Signed Message:\n32"


def eth_signed_hash(digest: bytes) -> bytes:
    """
    Domain-separated hash of a 32-byte digest: keccak256(prefix || digest).

    Args:
        digest: 32-byte message digest.

    Returns:
        32-byte digest that wallets actually sign.
    """
    if len(digest) != 32:
        raise ValueError("digest must be 32 bytes")
    return keccak256(ETH_SIGNED_MESSAGE_PREFIX + bytes(digest))


def eth_signed_message_hash(message: bytes) -> bytes:
    """keccak256 the message, then apply the signed-message prefix."""
    return eth_signed_hash(hash_message(message))


__all__: tuple[str, ...] = (
    "ETH_SIGNED_MESSAGE_PREFIX",
    "eth_signed_hash",
    "eth_signed_message_hash",
)
