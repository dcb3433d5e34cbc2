"""
secp256k1 (Ethereum curve): public key recovery and address derivation.

Curve arithmetic is delegated to eth_keys; this module only validates the
scalar ranges and maps every recovery failure to ZERO_ADDRESS.
"""

from __future__ import annotations

import structlog
from eth_keys import keys
from eth_keys.exceptions import BadSignature
from eth_keys.exceptions import ValidationError as KeysValidationError
from eth_utils import ValidationError

from ..hashes import keccak256
from ..signing import split_signature

SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

ZERO_ADDRESS = bytes(20)

_RECOVERY_FAILURES = (BadSignature, KeysValidationError, ValidationError, ValueError)

logger = structlog.get_logger(__name__)


def pubkey_to_address(pubkey: bytes) -> bytes:
    """
    Ethereum address (20 bytes) of an uncompressed public key.

    Args:
        pubkey: 64-byte x || y, or 65-byte 0x04 || x || y.

    Returns:
        keccak256(x || y)[12:32].
    """
    if len(pubkey) == 65:
        if pubkey[0] != 0x04:
            raise ValueError("65-byte pubkey must start with 0x04")
        pubkey = pubkey[1:]
    elif len(pubkey) != 64:
        raise ValueError("pubkey must be 64 or 65 bytes")
    return keccak256(bytes(pubkey))[12:]


def recover_address(domain_digest: bytes, r: int, s: int, v: int) -> bytes:
    """
    Recover the signer address from a 32-byte digest and (r, s, v).

    Invalid signatures do not raise: v outside {27, 28}, r or s outside
    [1, n), or no recoverable curve point all yield ZERO_ADDRESS.

    Args:
        domain_digest: 32-byte digest that was signed.
        r, s: Signature scalars.
        v: 27 or 28.

    Returns:
        20-byte signer address, or ZERO_ADDRESS.
    """
    if len(domain_digest) != 32:
        raise ValueError("domain_digest must be 32 bytes")
    if v not in (27, 28):
        logger.debug("signature_rejected", reason="bad_v", v=v)
        return ZERO_ADDRESS
    if not (0 < r < SECP256K1_N and 0 < s < SECP256K1_N):
        logger.debug("signature_rejected", reason="scalar_out_of_range")
        return ZERO_ADDRESS
    try:
        signature = keys.Signature(vrs=(v - 27, r, s))
        public_key = signature.recover_public_key_from_msg_hash(bytes(domain_digest))
    except _RECOVERY_FAILURES as exc:
        logger.debug("signature_rejected", reason="no_recovery_point", error=str(exc))
        return ZERO_ADDRESS
    return pubkey_to_address(public_key.to_bytes())


def recover_signer_from_hash(domain_digest: bytes, sig: bytes) -> bytes:
    """
    Split a 65-byte signature and recover its signer from a digest.

    Raises:
        InvalidSignatureLength: len(sig) != 65.
    """
    r, s, v = split_signature(sig)
    return recover_address(domain_digest, r, s, v)


__all__: tuple[str, ...] = (
    "SECP256K1_N",
    "ZERO_ADDRESS",
    "pubkey_to_address",
    "recover_address",
    "recover_signer_from_hash",
)
