"""Signing schemas: EIP-191 signed-message hashing, raw signature codec."""

from .codec import (SIGNATURE_LENGTH, SignatureComponents, join_signature,
                    signature_from_hex, split_signature)
from .eip191 import (ETH_SIGNED_MESSAGE_PREFIX, eth_signed_hash,
                     eth_signed_message_hash)

__all__: tuple[str, ...] = (
    "ETH_SIGNED_MESSAGE_PREFIX",
    "SIGNATURE_LENGTH",
    "SignatureComponents",
    "eth_signed_hash",
    "eth_signed_message_hash",
    "join_signature",
    "signature_from_hex",
    "split_signature",
)
