"""x25519_key_agreement.keys — the key pair model and Ed25519 conversion.

Submodules
----------
key_pair
    X25519KeyAgreementKey2019: construction, conversion, fingerprint, export.
converter
    Ed25519 -> X25519 public/private key mapping (base58 and multibase sources).
ed25519
    Ed25519VerificationKey2018 / Ed25519VerificationKey2020 source keys.
record
    KeyAgreementKeyRecord pydantic model and the suite constants.
"""
from __future__ import annotations

from x25519_key_agreement.keys.converter import (
    ED25519_PRIVATE_MULTICODEC_PREFIX,
    ED25519_PUBLIC_MULTICODEC_PREFIX,
    convert_from_ed_private_key_base58,
    convert_from_ed_private_key_multibase,
    convert_from_ed_public_key_base58,
    convert_from_ed_public_key_multibase,
    convert_private_key,
    convert_public_key,
)
from x25519_key_agreement.keys.ed25519 import (
    Ed25519VerificationKey2018,
    Ed25519VerificationKey2020,
)
from x25519_key_agreement.keys.key_pair import X25519KeyAgreementKey2019
from x25519_key_agreement.keys.record import SUITE_CONTEXT, SUITE_ID, KeyAgreementKeyRecord

__all__ = [
    # converter
    "ED25519_PRIVATE_MULTICODEC_PREFIX",
    "ED25519_PUBLIC_MULTICODEC_PREFIX",
    "convert_from_ed_private_key_base58",
    "convert_from_ed_private_key_multibase",
    "convert_from_ed_public_key_base58",
    "convert_from_ed_public_key_multibase",
    "convert_private_key",
    "convert_public_key",
    # ed25519
    "Ed25519VerificationKey2018",
    "Ed25519VerificationKey2020",
    # key_pair
    "X25519KeyAgreementKey2019",
    # record
    "KeyAgreementKeyRecord",
    "SUITE_CONTEXT",
    "SUITE_ID",
]
