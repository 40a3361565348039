"""x25519_key_agreement.suite — suite tag dispatch for key agreement keys."""
from __future__ import annotations

from x25519_key_agreement.suite.registry import (
    KeyAgreementSuite,
    SuiteRegistry,
    X25519KeyAgreementSuite,
    default_registry,
)

__all__ = [
    "KeyAgreementSuite",
    "SuiteRegistry",
    "X25519KeyAgreementSuite",
    "default_registry",
]
