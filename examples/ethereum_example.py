#!/usr/bin/env python3
"""Example: verify an Ethereum personal_sign signature and check an oracle allow-list."""

from eth_keys import keys

from ethverify import (InMemoryAuditLog, MembershipRegistry, SignatureVerifier,
                       configure_logging, eth_signed_message_hash,
                       to_checksum_address)

configure_logging(level="INFO")

# Signing happens off-line (wallet, HSM); eth_keys stands in for it here.
privkey = keys.PrivateKey(bytes(31) + bytes([1]))
oracle = privkey.public_key.to_canonical_address()
print("Oracle address:", to_checksum_address(oracle))

message = b"ETH/USD=3150.25"
signature = privkey.sign_msg_hash(eth_signed_message_hash(message)).to_bytes()
print("Signature:", "0x" + signature.hex())

audit_log = InMemoryAuditLog()
registry = MembershipRegistry(audit_log=audit_log)
registry.add_member(oracle)

verifier = SignatureVerifier()
print("Signed by oracle:", verifier.verify(oracle, message, signature))
print("Tampered message:", verifier.verify(oracle, message + b"0", signature))
print("Trusted oracle:", verifier.verify_member(registry, message, signature, oracle))

for record in audit_log.records:
    print("Audit:", record.to_dict())
