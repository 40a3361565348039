"""Ed25519 source keys accepted for conversion to X25519.

These are plain, immutable views of an Ed25519 verification key as it
appears in a DID document or key record. They carry the encoded key
material only; signing and verification are out of scope here.

Two encodings exist, each with its own class and its own conversion path
on :class:`~x25519_key_agreement.keys.key_pair.X25519KeyAgreementKey2019`:

:class:`Ed25519VerificationKey2018`
    Legacy ``publicKeyBase58`` / ``privateKeyBase58`` fields.
:class:`Ed25519VerificationKey2020`
    ``publicKeyMultibase`` / ``privateKeyMultibase`` fields with multicodec
    headers.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from x25519_key_agreement.errors import MissingPublicKeyError


@dataclass(frozen=True)
class Ed25519VerificationKey2018:
    """An Ed25519 key in the legacy base58 encoding.

    Parameters
    ----------
    public_key_base58:
        Base58btc encoding of the 32-byte public key.
    private_key_base58:
        Base58btc encoding of the 64-byte secret key (or 32-byte seed).
        ``None`` for public-only keys.
    controller:
        The DID that controls this key, if known.
    id:
        The key id, if known.
    """

    public_key_base58: str
    private_key_base58: str | None = None
    controller: str | None = None
    id: str | None = None

    type = "Ed25519VerificationKey2018"

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Ed25519VerificationKey2018:
        """Build from a JSON key record with camelCase field names."""
        public_key_base58 = data.get("publicKeyBase58")
        if not public_key_base58:
            raise MissingPublicKeyError('The "publicKeyBase58" property is required.')
        return cls(
            public_key_base58=str(public_key_base58),
            private_key_base58=_optional_str(data.get("privateKeyBase58")),
            controller=_optional_str(data.get("controller")),
            id=_optional_str(data.get("id")),
        )


@dataclass(frozen=True)
class Ed25519VerificationKey2020:
    """An Ed25519 key in the multibase/multicodec encoding.

    Parameters
    ----------
    public_key_multibase:
        ``z`` + base58btc(``0xed 0x01`` + 32-byte public key).
    private_key_multibase:
        ``z`` + base58btc(``0x80 0x26`` + 64-byte secret key), or ``None``.
    controller:
        The DID that controls this key, if known.
    id:
        The key id, if known.
    """

    public_key_multibase: str
    private_key_multibase: str | None = None
    controller: str | None = None
    id: str | None = None

    type = "Ed25519VerificationKey2020"

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Ed25519VerificationKey2020:
        """Build from a JSON key record with camelCase field names."""
        public_key_multibase = data.get("publicKeyMultibase")
        if not public_key_multibase:
            raise MissingPublicKeyError('The "publicKeyMultibase" property is required.')
        return cls(
            public_key_multibase=str(public_key_multibase),
            private_key_multibase=_optional_str(data.get("privateKeyMultibase")),
            controller=_optional_str(data.get("controller")),
            id=_optional_str(data.get("id")),
        )


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)


__all__ = ["Ed25519VerificationKey2018", "Ed25519VerificationKey2020"]
