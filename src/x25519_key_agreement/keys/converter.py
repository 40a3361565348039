"""Ed25519 -> X25519 key conversion.

Ed25519 signing keys and X25519 agreement keys live on birationally
equivalent forms of the same curve, so an Ed25519 key pair can be mapped to
an X25519 key pair:

- Public keys: the Edwards point ``(x, y)`` maps to the Montgomery
  ``u = (1 + y) / (1 - y)``. Inputs that do not decode to a valid point are
  rejected.
- Private keys: the 32-byte seed is hashed with SHA-512 and the first half
  clamped exactly as Ed25519 does before signing. For a 64-byte Ed25519
  secret key only the leading seed is used.

The mapping only goes one way. X25519 keys produced here cannot be turned
back into Ed25519 signing keys.

The conversion itself is performed by libsodium through PyNaCl. This
module adds the two source encodings Ed25519 keys are found in:

legacy base58
    ``publicKeyBase58`` / ``privateKeyBase58`` (Ed25519VerificationKey2018).
multibase
    ``publicKeyMultibase`` / ``privateKeyMultibase``
    (Ed25519VerificationKey2020): ``z`` + base58btc(multicodec header + key),
    where the header is ``0xed 0x01`` for public keys and ``0x80 0x26`` for
    private keys.
"""
from __future__ import annotations

import logging

import nacl.exceptions
from nacl.signing import SigningKey, VerifyKey

from x25519_key_agreement.codec.base58btc import (
    MULTIBASE_BASE58BTC_PREFIX,
    decode_base58,
    encode_base58,
)
from x25519_key_agreement.errors import (
    InvalidEdPrivateKeyError,
    InvalidEdPublicKeyError,
    MultibaseHeaderMismatchError,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Multicodec prefixes for Ed25519 keys (varint-encoded 0xed and 0x1300)
# ---------------------------------------------------------------------------

ED25519_PUBLIC_MULTICODEC_PREFIX: bytes = b"\xed\x01"
ED25519_PRIVATE_MULTICODEC_PREFIX: bytes = b"\x80\x26"

_ED25519_PUBLIC_KEY_LENGTH = 32
_ED25519_SEED_LENGTH = 32
_ED25519_SECRET_KEY_LENGTH = 64


# ---------------------------------------------------------------------------
# Raw byte conversion
# ---------------------------------------------------------------------------


def convert_public_key(ed_public_key: bytes) -> bytes:
    """Map a raw Ed25519 public key to the matching X25519 public key.

    Parameters
    ----------
    ed_public_key:
        The 32-byte raw Ed25519 public key.

    Returns
    -------
    bytes
        The 32-byte raw X25519 public key.

    Raises
    ------
    InvalidEdPublicKeyError
        If the input is not 32 bytes or is not a valid Ed25519 point.
    """
    if len(ed_public_key) != _ED25519_PUBLIC_KEY_LENGTH:
        raise InvalidEdPublicKeyError(
            "Error converting to X25519; Invalid Ed25519 public key: expected "
            f"{_ED25519_PUBLIC_KEY_LENGTH} bytes, got {len(ed_public_key)}."
        )
    try:
        converted = VerifyKey(bytes(ed_public_key)).to_curve25519_public_key()
    except nacl.exceptions.CryptoError as exc:
        raise InvalidEdPublicKeyError(
            "Error converting to X25519; Invalid Ed25519 public key."
        ) from exc
    return bytes(converted)


def convert_private_key(ed_private_key: bytes) -> bytes:
    """Map a raw Ed25519 private key to the matching X25519 private key.

    Parameters
    ----------
    ed_private_key:
        Either the 32-byte Ed25519 seed or the 64-byte secret key
        (seed followed by public key). Only the seed is used.

    Returns
    -------
    bytes
        The 32-byte clamped X25519 private scalar.

    Raises
    ------
    InvalidEdPrivateKeyError
        If the input is neither 32 nor 64 bytes long.
    """
    if len(ed_private_key) not in (_ED25519_SEED_LENGTH, _ED25519_SECRET_KEY_LENGTH):
        raise InvalidEdPrivateKeyError(
            "Error converting to X25519; Invalid Ed25519 private key: expected "
            f"{_ED25519_SEED_LENGTH} or {_ED25519_SECRET_KEY_LENGTH} bytes, "
            f"got {len(ed_private_key)}."
        )
    seed = bytes(ed_private_key[:_ED25519_SEED_LENGTH])
    try:
        converted = SigningKey(seed).to_curve25519_private_key()
    except nacl.exceptions.CryptoError as exc:
        raise InvalidEdPrivateKeyError(
            "Error converting to X25519; Invalid Ed25519 private key."
        ) from exc
    return bytes(converted)


# ---------------------------------------------------------------------------
# Legacy base58 source keys (Ed25519VerificationKey2018)
# ---------------------------------------------------------------------------


def convert_from_ed_public_key_base58(public_key_base58: str) -> str:
    """Convert a base58 Ed25519 public key to a base58 X25519 public key.

    Raises
    ------
    Base58DecodeError
        If *public_key_base58* is not valid base58btc.
    InvalidEdPublicKeyError
        If the decoded key cannot be converted.
    """
    return encode_base58(convert_public_key(decode_base58(public_key_base58)))


def convert_from_ed_private_key_base58(private_key_base58: str) -> str:
    """Convert a base58 Ed25519 private key to a base58 X25519 private key."""
    return encode_base58(convert_private_key(decode_base58(private_key_base58)))


# ---------------------------------------------------------------------------
# Multibase source keys (Ed25519VerificationKey2020)
# ---------------------------------------------------------------------------


def decode_ed_public_key_multibase(public_key_multibase: str) -> bytes:
    """Strip and validate the multicodec header of an Ed25519 public key.

    Raises
    ------
    MultibaseHeaderMismatchError
        If the key has no ``z`` prefix or the header is not ``0xed 0x01``.
    Base58DecodeError
        If the remainder is not valid base58btc.
    """
    return _strip_multicodec_header(
        public_key_multibase, ED25519_PUBLIC_MULTICODEC_PREFIX, "public"
    )


def decode_ed_private_key_multibase(private_key_multibase: str) -> bytes:
    """Strip and validate the multicodec header of an Ed25519 private key.

    Raises
    ------
    MultibaseHeaderMismatchError
        If the key has no ``z`` prefix or the header is not ``0x80 0x26``.
    Base58DecodeError
        If the remainder is not valid base58btc.
    """
    return _strip_multicodec_header(
        private_key_multibase, ED25519_PRIVATE_MULTICODEC_PREFIX, "private"
    )


def convert_from_ed_public_key_multibase(public_key_multibase: str) -> str:
    """Convert a multibase Ed25519 public key to a base58 X25519 public key."""
    return encode_base58(convert_public_key(decode_ed_public_key_multibase(public_key_multibase)))


def convert_from_ed_private_key_multibase(private_key_multibase: str) -> str:
    """Convert a multibase Ed25519 private key to a base58 X25519 private key."""
    return encode_base58(
        convert_private_key(decode_ed_private_key_multibase(private_key_multibase))
    )


def _strip_multicodec_header(encoded: str, prefix: bytes, kind: str) -> bytes:
    if not isinstance(encoded, str) or not encoded.startswith(MULTIBASE_BASE58BTC_PREFIX):
        raise MultibaseHeaderMismatchError(
            f"Ed25519 {kind} key is not a base58btc multibase value: {encoded!r}"
        )
    decoded = decode_base58(encoded[len(MULTIBASE_BASE58BTC_PREFIX):])
    if decoded[: len(prefix)] != prefix:
        raise MultibaseHeaderMismatchError(
            f"Ed25519 {kind} key has multicodec header 0x{decoded[:len(prefix)].hex()}; "
            f"expected 0x{prefix.hex()}."
        )
    logger.debug("Stripped Ed25519 %s multicodec header 0x%s", kind, prefix.hex())
    return decoded[len(prefix):]


__all__ = [
    "ED25519_PRIVATE_MULTICODEC_PREFIX",
    "ED25519_PUBLIC_MULTICODEC_PREFIX",
    "convert_from_ed_private_key_base58",
    "convert_from_ed_private_key_multibase",
    "convert_from_ed_public_key_base58",
    "convert_from_ed_public_key_multibase",
    "convert_private_key",
    "convert_public_key",
    "decode_ed_private_key_multibase",
    "decode_ed_public_key_multibase",
]
