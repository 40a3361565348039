"""X25519 public key fingerprints.

Fingerprint encoding
--------------------
1. Take the 32-byte raw X25519 public key.
2. Prepend the X25519 multicodec prefix: ``0xec 0x01`` (varint of ``0xec``).
3. Encode the 34-byte result with base58btc.
4. Prefix the encoded string with ``z`` (the multibase indicator for base58btc).

The result looks like ``z6LS...`` and is used as the fragment of a key id
(``<controller>#<fingerprint>``).

Older documents used a single, non-varint ``0xec`` byte as the header. That
form is only accepted through :func:`decode_legacy_fingerprint`.
"""
from __future__ import annotations

from x25519_key_agreement.codec.base58btc import (
    MULTIBASE_BASE58BTC_PREFIX,
    decode_base58,
    encode_base58,
)
from x25519_key_agreement.errors import InvalidKeyLengthError, UnsupportedFingerprintTypeError

# ---------------------------------------------------------------------------
# Multicodec prefixes for X25519 public keys
# ---------------------------------------------------------------------------

X25519_MULTICODEC_PREFIX: bytes = b"\xec\x01"
LEGACY_X25519_MULTICODEC_PREFIX: bytes = b"\xec"

X25519_KEY_LENGTH: int = 32


def encode_fingerprint(public_key: bytes) -> str:
    """Encode a raw X25519 public key as a multibase fingerprint.

    Parameters
    ----------
    public_key:
        The 32-byte raw X25519 public key.

    Returns
    -------
    str
        ``z`` followed by base58btc(``0xec 0x01`` + public key).

    Raises
    ------
    InvalidKeyLengthError
        If *public_key* is not exactly 32 bytes.
    """
    if len(public_key) != X25519_KEY_LENGTH:
        raise InvalidKeyLengthError(
            f"X25519 public key must be {X25519_KEY_LENGTH} bytes, got {len(public_key)}."
        )
    return MULTIBASE_BASE58BTC_PREFIX + encode_base58(X25519_MULTICODEC_PREFIX + bytes(public_key))


def decode_fingerprint(fingerprint: str) -> bytes:
    """Decode a multibase fingerprint back to the raw X25519 public key.

    Parameters
    ----------
    fingerprint:
        A ``z<base58btc>`` string as produced by :func:`encode_fingerprint`.

    Returns
    -------
    bytes
        The 32-byte raw public key.

    Raises
    ------
    UnsupportedFingerprintTypeError
        If the ``z`` prefix is missing, the multicodec header is not
        ``0xec 0x01``, or the payload is not a 32-byte key.
    Base58DecodeError
        If the remainder is not valid base58btc.
    """
    return _decode_with_prefix(fingerprint, X25519_MULTICODEC_PREFIX)


def decode_legacy_fingerprint(fingerprint: str) -> bytes:
    """Decode a fingerprint that uses the historical 1-byte ``0xec`` header."""
    return _decode_with_prefix(fingerprint, LEGACY_X25519_MULTICODEC_PREFIX)


def _decode_with_prefix(fingerprint: str, prefix: bytes) -> bytes:
    if not isinstance(fingerprint, str) or not fingerprint.startswith(
        MULTIBASE_BASE58BTC_PREFIX
    ):
        raise UnsupportedFingerprintTypeError(
            f"Fingerprint must be a multibase (base58btc, 'z') encoded string: {fingerprint!r}"
        )
    decoded = decode_base58(fingerprint[len(MULTIBASE_BASE58BTC_PREFIX):])
    if decoded[: len(prefix)] != prefix:
        raise UnsupportedFingerprintTypeError(f"Unsupported Fingerprint Type: {fingerprint}")
    public_key = decoded[len(prefix):]
    if len(public_key) != X25519_KEY_LENGTH:
        raise UnsupportedFingerprintTypeError(
            f"Fingerprint {fingerprint!r} carries a {len(public_key)}-byte key; "
            f"expected {X25519_KEY_LENGTH} bytes."
        )
    return public_key


__all__ = [
    "LEGACY_X25519_MULTICODEC_PREFIX",
    "X25519_KEY_LENGTH",
    "X25519_MULTICODEC_PREFIX",
    "decode_fingerprint",
    "decode_legacy_fingerprint",
    "encode_fingerprint",
]
