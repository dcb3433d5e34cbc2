"""Elliptic-curve crypto: secp256k1 (Ethereum) public key recovery."""

from .secp256k1 import (SECP256K1_N, ZERO_ADDRESS, pubkey_to_address,
                        recover_address, recover_signer_from_hash)

__all__: tuple[str, ...] = (
    "SECP256K1_N",
    "ZERO_ADDRESS",
    "pubkey_to_address",
    "recover_address",
    "recover_signer_from_hash",
)
