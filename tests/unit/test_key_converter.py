"""Tests for x25519_key_agreement.keys.converter — Ed25519 -> X25519 mapping."""
from __future__ import annotations

import base58
import pytest
from nacl.signing import SigningKey

from x25519_key_agreement.keys.converter import (
    convert_from_ed_private_key_base58,
    convert_from_ed_private_key_multibase,
    convert_from_ed_public_key_base58,
    convert_from_ed_public_key_multibase,
    convert_private_key,
    convert_public_key,
    decode_ed_private_key_multibase,
    decode_ed_public_key_multibase,
)
from x25519_key_agreement.crypto.backends import CryptographyBackend
from x25519_key_agreement.errors import (
    Base58DecodeError,
    InvalidEdPrivateKeyError,
    InvalidEdPublicKeyError,
    MultibaseHeaderMismatchError,
)

# Reference Ed25519 key pair and its X25519 conversion
ED_PRIVATE_KEY_BASE58 = (
    "4F71TAGqQYe7KE9p4HUzoVV9arQwKP4gPtvi89EPNGuwA1qLE4RRxitA2rEcdEszERj3pN1DWKARBZQ2BACLbW1V"
)
ED_PUBLIC_KEY_BASE58 = "HLi1h9SzENZyEv7ifPNtu8xyJNzCFFeaC6X9rsZKFgv3"
ED_PRIVATE_KEY_MULTIBASE = (
    "zrv3t12G3RczbuREj5Hew2ybTv8oYE3DK3CzFTyJzarQWUoejYZbrrDvJWQXn47Tcw5DsmgcPMD6KwFzuQDcXuBbYcP"
)
ED_PUBLIC_KEY_MULTIBASE = "z6Mkvny4HPhRZv4SMQxRLxLjkEWy7xG3f8tvt7S5h9XLAuhR"
X_PUBLIC_KEY_BASE58 = "9K6xjwBdjKC4W3r41ZP5WUxp8XXm8gT9GvR1G5Eocs1Z"
X_PRIVATE_KEY_BASE58 = "H9ruaVs9LnRUwxNMLTjDkEbWW1P3bcBuiu7GxoBbEpdV"


# ---------------------------------------------------------------------------
# Raw byte conversion
# ---------------------------------------------------------------------------


class TestConvertRawKeys:
    """Tests for convert_public_key / convert_private_key."""

    def test_public_key_known_vector(self) -> None:
        converted = convert_public_key(base58.b58decode(ED_PUBLIC_KEY_BASE58))
        assert base58.b58encode(converted).decode() == X_PUBLIC_KEY_BASE58

    def test_private_key_known_vector_64_bytes(self) -> None:
        """A 64-byte Ed25519 secret key converts using its leading seed."""
        ed_secret = base58.b58decode(ED_PRIVATE_KEY_BASE58)
        assert len(ed_secret) == 64
        converted = convert_private_key(ed_secret)
        assert base58.b58encode(converted).decode() == X_PRIVATE_KEY_BASE58

    def test_private_key_seed_only_matches_full_secret(self) -> None:
        """The 32-byte seed alone gives the same result as the 64-byte key."""
        ed_secret = base58.b58decode(ED_PRIVATE_KEY_BASE58)
        assert convert_private_key(ed_secret[:32]) == convert_private_key(ed_secret)

    def test_private_key_is_clamped(self) -> None:
        converted = convert_private_key(bytes(range(32)))
        assert converted[0] & 0b111 == 0
        assert converted[31] & 0x80 == 0
        assert converted[31] & 0x40 == 0x40

    def test_converted_pair_is_consistent(self) -> None:
        """The converted private key's public key equals the converted public key."""
        signing_key = SigningKey.generate()
        x_private = convert_private_key(bytes(signing_key))
        x_public = convert_public_key(bytes(signing_key.verify_key))
        backend = CryptographyBackend()
        peer = backend.generate_keypair()
        assert backend.scalar_mult(x_private, peer.public_key) == backend.scalar_mult(
            peer.private_key, x_public
        )

    def test_conversion_is_deterministic(self) -> None:
        ed_public = base58.b58decode(ED_PUBLIC_KEY_BASE58)
        ed_private = base58.b58decode(ED_PRIVATE_KEY_BASE58)
        assert convert_public_key(ed_public) == convert_public_key(ed_public)
        assert convert_private_key(ed_private) == convert_private_key(ed_private)

    def test_public_key_wrong_length_raises(self) -> None:
        with pytest.raises(InvalidEdPublicKeyError):
            convert_public_key(b"\x01" * 31)

    def test_public_key_small_order_point_raises(self) -> None:
        """The Edwards identity point is not a usable public key."""
        identity_point = b"\x01" + bytes(31)
        with pytest.raises(InvalidEdPublicKeyError):
            convert_public_key(identity_point)

    @pytest.mark.parametrize("length", [0, 16, 33, 63, 65])
    def test_private_key_wrong_length_raises(self, length: int) -> None:
        with pytest.raises(InvalidEdPrivateKeyError):
            convert_private_key(b"\x01" * length)


# ---------------------------------------------------------------------------
# Legacy base58 sources
# ---------------------------------------------------------------------------


class TestConvertBase58:
    """Tests for the Ed25519VerificationKey2018 (base58) helpers."""

    def test_public_known_vector(self) -> None:
        assert convert_from_ed_public_key_base58(ED_PUBLIC_KEY_BASE58) == X_PUBLIC_KEY_BASE58

    def test_private_known_vector(self) -> None:
        assert convert_from_ed_private_key_base58(ED_PRIVATE_KEY_BASE58) == X_PRIVATE_KEY_BASE58

    def test_public_invalid_base58_raises(self) -> None:
        with pytest.raises(Base58DecodeError):
            convert_from_ed_public_key_base58("0OIl")

    def test_private_invalid_base58_raises(self) -> None:
        with pytest.raises(Base58DecodeError):
            convert_from_ed_private_key_base58("0OIl")


# ---------------------------------------------------------------------------
# Multibase sources
# ---------------------------------------------------------------------------


class TestConvertMultibase:
    """Tests for the Ed25519VerificationKey2020 (multibase) helpers."""

    def test_public_header_stripped(self) -> None:
        public_key = decode_ed_public_key_multibase(ED_PUBLIC_KEY_MULTIBASE)
        assert public_key == base58.b58decode(ED_PUBLIC_KEY_BASE58)

    def test_private_header_stripped(self) -> None:
        private_key = decode_ed_private_key_multibase(ED_PRIVATE_KEY_MULTIBASE)
        assert len(private_key) == 64

    def test_public_known_vector(self) -> None:
        assert (
            convert_from_ed_public_key_multibase(ED_PUBLIC_KEY_MULTIBASE) == X_PUBLIC_KEY_BASE58
        )

    def test_private_known_vector(self) -> None:
        assert (
            convert_from_ed_private_key_multibase(ED_PRIVATE_KEY_MULTIBASE)
            == X_PRIVATE_KEY_BASE58
        )

    def test_public_key_with_private_header_raises(self) -> None:
        with pytest.raises(MultibaseHeaderMismatchError):
            decode_ed_public_key_multibase(ED_PRIVATE_KEY_MULTIBASE)

    def test_private_key_with_public_header_raises(self) -> None:
        with pytest.raises(MultibaseHeaderMismatchError):
            decode_ed_private_key_multibase(ED_PUBLIC_KEY_MULTIBASE)

    def test_missing_z_prefix_raises(self) -> None:
        with pytest.raises(MultibaseHeaderMismatchError):
            decode_ed_public_key_multibase(ED_PUBLIC_KEY_MULTIBASE[1:])

    def test_invalid_base58_after_prefix_raises(self) -> None:
        """A z-prefixed value that is not base58btc is a decode failure, not a header one."""
        with pytest.raises(Base58DecodeError):
            convert_from_ed_public_key_multibase("z0OIl")
        with pytest.raises(Base58DecodeError):
            decode_ed_private_key_multibase("z0OIl")

    def test_x25519_header_raises(self) -> None:
        x_fingerprint = "z" + base58.b58encode(b"\xec\x01" + bytes(32)).decode()
        with pytest.raises(MultibaseHeaderMismatchError):
            convert_from_ed_public_key_multibase(x_fingerprint)
