"""Tests for x25519_key_agreement.verification.fingerprint."""
from __future__ import annotations

import base58
import pytest

from x25519_key_agreement.codec import encode_fingerprint
from x25519_key_agreement.verification import (
    FingerprintErrorKind,
    FingerprintVerificationResult,
    verify_fingerprint,
)

_PUBLIC_KEY = bytes(range(1, 33))
_FINGERPRINT = encode_fingerprint(_PUBLIC_KEY)


class TestVerifyFingerprint:
    def test_matching_fingerprint_is_valid(self) -> None:
        result = verify_fingerprint(_PUBLIC_KEY, _FINGERPRINT)
        assert result.valid is True
        assert result.error is None
        assert bool(result) is True

    def test_missing_z_prefix(self) -> None:
        result = verify_fingerprint(_PUBLIC_KEY, _FINGERPRINT[1:])
        assert result.valid is False
        assert result.error is FingerprintErrorKind.NOT_MULTIBASE_ENCODED

    @pytest.mark.parametrize("value", [None, 42, b"z6LS", ["z6LS"]])
    def test_non_string_is_not_multibase(self, value: object) -> None:
        result = verify_fingerprint(_PUBLIC_KEY, value)
        assert result.error is FingerprintErrorKind.NOT_MULTIBASE_ENCODED

    def test_invalid_base58_is_decode_failure(self) -> None:
        result = verify_fingerprint(_PUBLIC_KEY, "z0OIl")
        assert result.valid is False
        assert result.error is FingerprintErrorKind.DECODE_FAILED

    def test_ed25519_header_is_decode_failure(self) -> None:
        ed_fingerprint = "z" + base58.b58encode(b"\xed\x01" + _PUBLIC_KEY).decode()
        result = verify_fingerprint(_PUBLIC_KEY, ed_fingerprint)
        assert result.error is FingerprintErrorKind.DECODE_FAILED
        assert "Unsupported Fingerprint Type" in result.message

    def test_other_key_is_mismatch(self) -> None:
        other = encode_fingerprint(bytes(32))
        result = verify_fingerprint(_PUBLIC_KEY, other)
        assert result.valid is False
        assert result.error is FingerprintErrorKind.FINGERPRINT_MISMATCH

    @pytest.mark.parametrize("index", range(34))
    def test_any_modified_payload_byte_fails(self, index: int) -> None:
        """Changing any byte of the decoded payload invalidates the fingerprint."""
        payload = bytearray(base58.b58decode(_FINGERPRINT[1:]))
        payload[index] ^= 0x01
        tampered = "z" + base58.b58encode(bytes(payload)).decode()
        assert verify_fingerprint(_PUBLIC_KEY, tampered).valid is False

    def test_empty_string(self) -> None:
        result = verify_fingerprint(_PUBLIC_KEY, "")
        assert result.error is FingerprintErrorKind.NOT_MULTIBASE_ENCODED


class TestFingerprintVerificationResult:
    def test_to_dict_valid(self) -> None:
        assert FingerprintVerificationResult(valid=True).to_dict() == {"valid": True}

    def test_to_dict_invalid(self) -> None:
        result = FingerprintVerificationResult(
            valid=False,
            error=FingerprintErrorKind.FINGERPRINT_MISMATCH,
            message="nope",
        )
        assert result.to_dict() == {
            "valid": False,
            "error": "fingerprint_mismatch",
            "message": "nope",
        }

    def test_falsy_when_invalid(self) -> None:
        assert not FingerprintVerificationResult(valid=False)
