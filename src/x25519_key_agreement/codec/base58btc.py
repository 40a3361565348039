"""Base58btc helpers shared by every key and fingerprint codec.

Thin wrappers over the ``base58`` package (bitcoin alphabet) that return
``str`` instead of ``bytes`` and translate decode failures into
:class:`~x25519_key_agreement.errors.Base58DecodeError`.
"""
from __future__ import annotations

import base58

from x25519_key_agreement.errors import Base58DecodeError

# Multibase prefix for base58btc
MULTIBASE_BASE58BTC_PREFIX: str = "z"


def encode_base58(data: bytes) -> str:
    """Encode *data* to a base58btc string."""
    return base58.b58encode(bytes(data)).decode("ascii")


def decode_base58(encoded: str) -> bytes:
    """Decode a base58btc string back to bytes.

    Parameters
    ----------
    encoded:
        A base58btc string (no multibase prefix).

    Returns
    -------
    bytes
        The decoded byte sequence.

    Raises
    ------
    Base58DecodeError
        If *encoded* is not a string or contains a character outside the
        base58btc alphabet.
    """
    if not isinstance(encoded, str):
        raise Base58DecodeError(
            f"Expected a base58btc string, got {type(encoded).__name__}."
        )
    try:
        return base58.b58decode(encoded)
    except ValueError as exc:
        raise Base58DecodeError(f"Invalid base58btc string {encoded!r}: {exc}") from exc


def decode_multibase(encoded: str) -> bytes:
    """Decode a ``z``-prefixed multibase string.

    Raises
    ------
    Base58DecodeError
        If the prefix is not ``z`` or the remainder is not valid base58btc.
    """
    if not isinstance(encoded, str) or not encoded.startswith(MULTIBASE_BASE58BTC_PREFIX):
        raise Base58DecodeError(
            f"Expected a base58btc multibase string starting with "
            f"{MULTIBASE_BASE58BTC_PREFIX!r}, got {encoded!r}."
        )
    return decode_base58(encoded[len(MULTIBASE_BASE58BTC_PREFIX):])


def encode_multibase(data: bytes) -> str:
    """Encode *data* as a ``z``-prefixed base58btc multibase string."""
    return MULTIBASE_BASE58BTC_PREFIX + encode_base58(data)


__all__ = [
    "MULTIBASE_BASE58BTC_PREFIX",
    "decode_base58",
    "decode_multibase",
    "encode_base58",
    "encode_multibase",
]
