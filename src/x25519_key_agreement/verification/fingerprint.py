"""Fingerprint verification — does a claimed fingerprint match a public key?

Unlike the rest of the package, verification never raises. Every failure
mode is reported on the returned :class:`FingerprintVerificationResult`, so
fingerprints can be checked in bulk without exception handling.

Verification flow
-----------------
1. The fingerprint must start with ``z`` (``NOT_MULTIBASE_ENCODED``).
2. It must decode as base58btc with the ``0xec 0x01`` X25519 header
   (``DECODE_FAILED``).
3. The decoded 32 bytes must equal the public key (``FINGERPRINT_MISMATCH``).
"""
from __future__ import annotations

import hmac
from dataclasses import dataclass
from enum import Enum

from x25519_key_agreement.codec.base58btc import MULTIBASE_BASE58BTC_PREFIX
from x25519_key_agreement.codec.fingerprint import decode_fingerprint
from x25519_key_agreement.errors import KeyAgreementError


class FingerprintErrorKind(str, Enum):
    """Why a fingerprint failed verification."""

    NOT_MULTIBASE_ENCODED = "not_multibase_encoded"
    DECODE_FAILED = "decode_failed"
    FINGERPRINT_MISMATCH = "fingerprint_mismatch"


@dataclass(frozen=True)
class FingerprintVerificationResult:
    """The outcome of a fingerprint check.

    Parameters
    ----------
    valid:
        ``True`` only if the fingerprint encodes exactly the given public key.
    error:
        The failure kind, or ``None`` when valid.
    message:
        Human-readable detail for the failure; empty when valid.
    """

    valid: bool
    error: FingerprintErrorKind | None = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        data: dict[str, object] = {"valid": self.valid}
        if self.error is not None:
            data["error"] = self.error.value
            data["message"] = self.message
        return data


def verify_fingerprint(public_key: bytes, fingerprint: object) -> FingerprintVerificationResult:
    """Check whether *fingerprint* was generated from *public_key*.

    Parameters
    ----------
    public_key:
        The 32-byte raw X25519 public key.
    fingerprint:
        The claimed fingerprint. Non-string values are reported as
        ``NOT_MULTIBASE_ENCODED``.

    Returns
    -------
    FingerprintVerificationResult
    """
    if not isinstance(fingerprint, str) or not fingerprint.startswith(
        MULTIBASE_BASE58BTC_PREFIX
    ):
        return FingerprintVerificationResult(
            valid=False,
            error=FingerprintErrorKind.NOT_MULTIBASE_ENCODED,
            message="`fingerprint` must be a multibase encoded string.",
        )

    try:
        decoded = decode_fingerprint(fingerprint)
    except KeyAgreementError as exc:
        return FingerprintVerificationResult(
            valid=False,
            error=FingerprintErrorKind.DECODE_FAILED,
            message=str(exc),
        )

    if not hmac.compare_digest(decoded, bytes(public_key)):
        return FingerprintVerificationResult(
            valid=False,
            error=FingerprintErrorKind.FINGERPRINT_MISMATCH,
            message="The fingerprint does not match the public key.",
        )

    return FingerprintVerificationResult(valid=True)


__all__ = [
    "FingerprintErrorKind",
    "FingerprintVerificationResult",
    "verify_fingerprint",
]
