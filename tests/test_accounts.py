"""Account identifier parsing, EIP-55 checksums and error codes."""

import pytest

from ethverify import (
    ErrorCode,
    EthVerifyError,
    InvalidAccountIdentifier,
    InvalidSignatureLength,
    to_account,
    to_checksum_address,
    to_hex_address,
)

# Test vectors from EIP-55.
EIP55_VECTORS = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]


@pytest.mark.parametrize("address", EIP55_VECTORS)
def test_checksum_address(address: str) -> None:
    assert to_checksum_address(address.lower()) == address
    assert to_checksum_address(to_account(address)) == address


def test_to_account_forms() -> None:
    raw = bytes(range(20))
    assert to_account(raw) == raw
    assert to_account(bytearray(raw)) == raw
    assert to_account(raw.hex()) == raw
    assert to_account("0x" + raw.hex()) == raw
    assert to_account("0X" + raw.hex().upper()) == raw
    assert to_hex_address(raw) == "0x" + raw.hex()


@pytest.mark.parametrize(
    "value",
    [bytes(19), bytes(21), "0x" + "00" * 19, "0x" + "zz" * 20, 123, None],
)
def test_to_account_rejects(value: object) -> None:
    with pytest.raises(InvalidAccountIdentifier) as excinfo:
        to_account(value)  # type: ignore[arg-type]
    assert excinfo.value.code is ErrorCode.INVALID_ACCOUNT_IDENTIFIER


def test_errors_are_value_errors() -> None:
    err = InvalidSignatureLength(64)
    assert isinstance(err, EthVerifyError)
    assert isinstance(err, ValueError)
    assert err.to_dict() == {
        "code": "INVALID_SIGNATURE_LENGTH",
        "message": "signature must be 65 bytes, got 64",
    }
