"""x25519-key-agreement — X25519 key agreement keys for Linked Data documents.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import x25519_key_agreement
>>> x25519_key_agreement.__version__
'0.1.0'

Quick start
-----------
::

    from x25519_key_agreement import (
        X25519KeyAgreementKey2019,
        Ed25519VerificationKey2018,
    )

    alice = X25519KeyAgreementKey2019.generate(controller="did:example:alice")
    bob = X25519KeyAgreementKey2019.from_ed25519_verification_key_2018(
        Ed25519VerificationKey2018(
            public_key_base58="...",
            private_key_base58="...",
            controller="did:example:bob",
        )
    )

    secret = alice.derive_secret(bob)      # raw ECDH output; run it through a KDF
    record = alice.export(public_key=True)
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------
from x25519_key_agreement.errors import (
    Base58DecodeError,
    ExportRequiresSelectionError,
    InvalidEdPrivateKeyError,
    InvalidEdPublicKeyError,
    InvalidKeyLengthError,
    InvalidKeyRecordError,
    KeyAgreementError,
    MissingPrivateKeyError,
    MissingPublicKeyError,
    MultibaseHeaderMismatchError,
    SuiteAlreadyRegisteredError,
    UnknownBackendError,
    UnsupportedFingerprintTypeError,
    UnsupportedSuiteError,
)

# ------------------------------------------------------------------
# Codec
# ------------------------------------------------------------------
from x25519_key_agreement.codec import (
    decode_fingerprint,
    decode_legacy_fingerprint,
    encode_fingerprint,
)

# ------------------------------------------------------------------
# Backends and derivation
# ------------------------------------------------------------------
from x25519_key_agreement.crypto import (
    CryptographyBackend,
    KeyAgreementBackend,
    NaclBackend,
    RawKeyPair,
    derive_secret,
    get_backend,
)

# ------------------------------------------------------------------
# Keys
# ------------------------------------------------------------------
from x25519_key_agreement.keys import (
    SUITE_CONTEXT,
    SUITE_ID,
    Ed25519VerificationKey2018,
    Ed25519VerificationKey2020,
    KeyAgreementKeyRecord,
    X25519KeyAgreementKey2019,
    convert_private_key,
    convert_public_key,
)

# ------------------------------------------------------------------
# Verification and suite dispatch
# ------------------------------------------------------------------
from x25519_key_agreement.verification import (
    FingerprintErrorKind,
    FingerprintVerificationResult,
    verify_fingerprint,
)
from x25519_key_agreement.suite import (
    KeyAgreementSuite,
    SuiteRegistry,
    X25519KeyAgreementSuite,
    default_registry,
)

__all__ = [
    # version
    "__version__",
    # errors
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
    # codec
    "decode_fingerprint",
    "decode_legacy_fingerprint",
    "encode_fingerprint",
    # crypto
    "CryptographyBackend",
    "KeyAgreementBackend",
    "NaclBackend",
    "RawKeyPair",
    "derive_secret",
    "get_backend",
    # keys
    "Ed25519VerificationKey2018",
    "Ed25519VerificationKey2020",
    "KeyAgreementKeyRecord",
    "SUITE_CONTEXT",
    "SUITE_ID",
    "X25519KeyAgreementKey2019",
    "convert_private_key",
    "convert_public_key",
    # verification
    "FingerprintErrorKind",
    "FingerprintVerificationResult",
    "verify_fingerprint",
    # suite
    "KeyAgreementSuite",
    "SuiteRegistry",
    "X25519KeyAgreementSuite",
    "default_registry",
]
