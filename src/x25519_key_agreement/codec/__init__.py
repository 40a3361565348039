"""x25519_key_agreement.codec — base58btc and multicodec fingerprint codecs.

Submodules
----------
base58btc
    Base58btc and ``z``-prefixed multibase helpers.
fingerprint
    X25519 public key fingerprints (``z`` + base58btc(``0xec 0x01`` + key)).
"""
from __future__ import annotations

from x25519_key_agreement.codec.base58btc import (
    MULTIBASE_BASE58BTC_PREFIX,
    decode_base58,
    decode_multibase,
    encode_base58,
    encode_multibase,
)
from x25519_key_agreement.codec.fingerprint import (
    LEGACY_X25519_MULTICODEC_PREFIX,
    X25519_KEY_LENGTH,
    X25519_MULTICODEC_PREFIX,
    decode_fingerprint,
    decode_legacy_fingerprint,
    encode_fingerprint,
)

__all__ = [
    # base58btc
    "MULTIBASE_BASE58BTC_PREFIX",
    "decode_base58",
    "decode_multibase",
    "encode_base58",
    "encode_multibase",
    # fingerprint
    "LEGACY_X25519_MULTICODEC_PREFIX",
    "X25519_KEY_LENGTH",
    "X25519_MULTICODEC_PREFIX",
    "decode_fingerprint",
    "decode_legacy_fingerprint",
    "encode_fingerprint",
]
