"""
Signature verification: did account X sign this message?

hash_message -> eth_signed_hash -> split_signature -> recover_address -> compare.
Only InvalidSignatureLength escapes; every other failure is a plain False.
"""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

import structlog

from .accounts import to_account
from .curves import ZERO_ADDRESS, recover_address, recover_signer_from_hash
from .errors import InvalidAccountIdentifier
from .hashes import hash_message
from .signing import eth_signed_hash, split_signature

if TYPE_CHECKING:
    from .registry import MembershipRegistry

logger = structlog.get_logger(__name__)


def recover(domain_digest: bytes, sig: bytes) -> bytes:
    """
    Signer address of a 65-byte signature over a domain-separated digest.

    Returns ZERO_ADDRESS for signatures that do not recover.

    Raises:
        InvalidSignatureLength: len(sig) != 65.
    """
    return recover_signer_from_hash(domain_digest, sig)


def recover_signer(message: bytes, sig: bytes) -> bytes:
    """Address that signed `message` as an EIP-191 personal message, or ZERO_ADDRESS."""
    r, s, v = split_signature(sig)
    return recover_address(eth_signed_hash(hash_message(message)), r, s, v)


def verify(claimed_signer: bytes | str, message: bytes, sig: bytes) -> bool:
    """
    Check that `sig` is claimed_signer's signature of `message`.

    Args:
        claimed_signer: 20-byte account or hex address.
        message: Message bytes that were signed (hashed, then prefixed).
        sig: 65-byte r || s || v signature.

    Returns:
        True iff the recovered signer equals claimed_signer.

    Raises:
        InvalidSignatureLength: len(sig) != 65.
    """
    digest = hash_message(message)
    domain_digest = eth_signed_hash(digest)
    r, s, v = split_signature(sig)
    recovered = recover_address(domain_digest, r, s, v)
    try:
        claimed = to_account(claimed_signer)
    except InvalidAccountIdentifier:
        logger.warning("claimed_signer_invalid", claimed_signer=repr(claimed_signer))
        return False
    if recovered == ZERO_ADDRESS:
        return False
    matched = hmac.compare_digest(recovered, claimed)
    logger.debug(
        "signature_verified",
        claimed=claimed.hex(),
        recovered=recovered.hex(),
        matched=matched,
    )
    return matched


class SignatureVerifier:
    """
    Verification service bound to a logger.

    Stateless apart from the logger; safe to share between threads.
    """

    def __init__(self, logger_name: str = "ethverify") -> None:
        self._log = structlog.get_logger(logger_name).bind(component="verifier")

    def recover(self, domain_digest: bytes, sig: bytes) -> bytes:
        return recover(domain_digest, sig)

    def recover_signer(self, message: bytes, sig: bytes) -> bytes:
        return recover_signer(message, sig)

    def verify(self, claimed_signer: bytes | str, message: bytes, sig: bytes) -> bool:
        result = verify(claimed_signer, message, sig)
        self._log.debug("verify", result=result)
        return result

    def verify_member(
        self,
        registry: MembershipRegistry,
        message: bytes,
        sig: bytes,
        claimed_signer: bytes | str,
    ) -> bool:
        """
        True iff claimed_signer signed `message` and is a registry member.

        The membership query always runs so that it shows up in the audit log.
        A malformed claimed_signer raises InvalidAccountIdentifier from the
        registry.
        """
        signed = self.verify(claimed_signer, message, sig)
        trusted = registry.is_member(claimed_signer)
        self._log.info("verify_member", signed=signed, trusted=trusted)
        return signed and trusted


__all__: tuple[str, ...] = (
    "SignatureVerifier",
    "recover",
    "recover_signer",
    "verify",
)
