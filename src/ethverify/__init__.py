"""
Ethereum-style signed-message verification: keccak256, EIP-191 prefix,
65-byte signature codec, secp256k1 signer recovery, and an audited allow-list
of trusted signers. Verification only; no key generation or signing.
"""

from .__about__ import __version__
from .accounts import to_account, to_checksum_address, to_hex_address
from .curves import (SECP256K1_N, ZERO_ADDRESS, pubkey_to_address,
                     recover_address, recover_signer_from_hash)
from .errors import (AlreadyMember, ErrorCode, EthVerifyError,
                     InvalidAccountIdentifier, InvalidSignatureLength)
from .hashes import hash_message, keccak256
from .observability import configure_logging
from .registry import (AuditLog, InMemoryAuditLog, IsMemberCheck, MemberAdded,
                       MembershipRegistry)
from .signing import (ETH_SIGNED_MESSAGE_PREFIX, SignatureComponents,
                      eth_signed_hash, eth_signed_message_hash, join_signature,
                      signature_from_hex, split_signature)
from .verify import SignatureVerifier, recover, recover_signer, verify

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "hash_message",
    "keccak256",
    # Signing: EIP-191 prefix and signature codec
    "ETH_SIGNED_MESSAGE_PREFIX",
    "SignatureComponents",
    "eth_signed_hash",
    "eth_signed_message_hash",
    "join_signature",
    "signature_from_hex",
    "split_signature",
    # Curves: secp256k1 recovery
    "SECP256K1_N",
    "ZERO_ADDRESS",
    "pubkey_to_address",
    "recover_address",
    "recover_signer_from_hash",
    # Verification
    "SignatureVerifier",
    "recover",
    "recover_signer",
    "verify",
    # Accounts
    "to_account",
    "to_checksum_address",
    "to_hex_address",
    # Membership registry
    "AuditLog",
    "InMemoryAuditLog",
    "IsMemberCheck",
    "MemberAdded",
    "MembershipRegistry",
    # Errors
    "AlreadyMember",
    "ErrorCode",
    "EthVerifyError",
    "InvalidAccountIdentifier",
    "InvalidSignatureLength",
    # Logging
    "configure_logging",
)
