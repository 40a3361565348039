"""x25519_key_agreement.crypto — injectable X25519 backends and ECDH.

Submodules
----------
backends
    KeyAgreementBackend protocol plus the ``cryptography`` and PyNaCl
    implementations.
secret
    derive_secret: raw X25519 shared-secret computation.
"""
from __future__ import annotations

from x25519_key_agreement.crypto.backends import (
    DEFAULT_BACKEND_NAME,
    CryptographyBackend,
    KeyAgreementBackend,
    NaclBackend,
    RawKeyPair,
    available_backends,
    get_backend,
)
from x25519_key_agreement.crypto.secret import derive_secret

__all__ = [
    "CryptographyBackend",
    "DEFAULT_BACKEND_NAME",
    "KeyAgreementBackend",
    "NaclBackend",
    "RawKeyPair",
    "available_backends",
    "derive_secret",
    "get_backend",
]
