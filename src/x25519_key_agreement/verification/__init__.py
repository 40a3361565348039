"""x25519_key_agreement.verification — non-raising fingerprint checks."""
from __future__ import annotations

from x25519_key_agreement.verification.fingerprint import (
    FingerprintErrorKind,
    FingerprintVerificationResult,
    verify_fingerprint,
)

__all__ = [
    "FingerprintErrorKind",
    "FingerprintVerificationResult",
    "verify_fingerprint",
]
