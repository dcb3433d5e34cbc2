"""
65-byte recoverable signatures: r (32, big-endian) || s (32, big-endian) || v (1).
"""

from __future__ import annotations

from typing import NamedTuple

from ..errors import InvalidSignatureLength

SIGNATURE_LENGTH = 65

_MAX_SCALAR = 1 << 256


class SignatureComponents(NamedTuple):
    r: int
    s: int
    v: int

    @property
    def recovery_id(self) -> int:
        """Recovery id (0/1 for a well-formed signature)."""
        return self.v - 27


def split_signature(sig: bytes) -> SignatureComponents:
    """
    Split a raw signature into (r, s, v).

    v values below 27 (raw recovery bit 0/1) are shifted to the legacy 27/28
    convention; any other v is passed through untouched and rejected later,
    at recovery time.

    Args:
        sig: 65-byte signature.

    Returns:
        SignatureComponents(r, s, v).

    Raises:
        InvalidSignatureLength: len(sig) != 65.
    """
    if len(sig) != SIGNATURE_LENGTH:
        raise InvalidSignatureLength(len(sig))
    r = int.from_bytes(sig[0:32], "big")
    s = int.from_bytes(sig[32:64], "big")
    v = sig[64]
    if v < 27:
        v += 27
    return SignatureComponents(r, s, v)


def join_signature(r: int, s: int, v: int) -> bytes:
    """Encode (r, s, v) back into the 65-byte wire form."""
    if not (0 <= r < _MAX_SCALAR and 0 <= s < _MAX_SCALAR):
        raise ValueError("r and s must fit in 32 bytes")
    if not 0 <= v <= 0xFF:
        raise ValueError("v must fit in one byte")
    return r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([v])


def signature_from_hex(value: str) -> bytes:
    """Decode a hex signature ("0x" prefix optional). Length is not checked here."""
    text = value[2:] if value[:2] in ("0x", "0X") else value
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise ValueError(f"signature is not hex: {value!r}") from None


__all__: tuple[str, ...] = (
    "SIGNATURE_LENGTH",
    "SignatureComponents",
    "join_signature",
    "signature_from_hex",
    "split_signature",
)
