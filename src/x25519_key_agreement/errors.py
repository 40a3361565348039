"""Exception hierarchy for x25519-key-agreement.

Every structural or format failure raised by this package derives from
:class:`KeyAgreementError`, so callers can catch the whole family at once
or a single, inspectable kind.

The one exception to "raise immediately" is fingerprint verification:
:func:`~x25519_key_agreement.verification.verify_fingerprint` reports its
failures through a result object instead of raising.
"""
from __future__ import annotations


class KeyAgreementError(Exception):
    """Base class for all errors raised by x25519-key-agreement."""


class MissingPublicKeyError(KeyAgreementError):
    """Raised when a key pair is constructed without public key material."""


class MissingPrivateKeyError(KeyAgreementError):
    """Raised when an operation needs private key material that is absent."""


class InvalidKeyLengthError(KeyAgreementError):
    """Raised when decoded key material does not have the expected length."""


class InvalidEdPublicKeyError(KeyAgreementError):
    """Raised when an Ed25519 public key cannot be converted to X25519."""


class InvalidEdPrivateKeyError(KeyAgreementError):
    """Raised when an Ed25519 private key cannot be converted to X25519."""


class MultibaseHeaderMismatchError(KeyAgreementError):
    """Raised when a multibase key does not carry the expected multicodec header."""


class UnsupportedFingerprintTypeError(KeyAgreementError):
    """Raised when a fingerprint is not a base58btc X25519 multicodec value."""


class InvalidKeyRecordError(KeyAgreementError):
    """Raised when a key record has fields of the wrong shape or type."""


class ExportRequiresSelectionError(KeyAgreementError):
    """Raised when export is called with neither public nor private key selected."""


class Base58DecodeError(KeyAgreementError):
    """Raised when a string is not valid base58btc."""


class UnsupportedSuiteError(KeyAgreementError):
    """Raised when a record or lookup names a suite that is not available."""


class SuiteAlreadyRegisteredError(KeyAgreementError):
    """Raised when a suite tag is registered twice without ``replace=True``."""


class UnknownBackendError(KeyAgreementError):
    """Raised when a key agreement backend name cannot be resolved."""


__all__ = [
    "Base58DecodeError",
    "ExportRequiresSelectionError",
    "InvalidEdPrivateKeyError",
    "InvalidEdPublicKeyError",
    "InvalidKeyLengthError",
    "InvalidKeyRecordError",
    "KeyAgreementError",
    "MissingPrivateKeyError",
    "MissingPublicKeyError",
    "MultibaseHeaderMismatchError",
    "SuiteAlreadyRegisteredError",
    "UnknownBackendError",
    "UnsupportedFingerprintTypeError",
    "UnsupportedSuiteError",
]
