"""Key agreement backends — X25519 key generation and scalar multiplication.

The rest of the package never talks to a curve library directly. It asks a
:class:`KeyAgreementBackend` for two things:

- ``generate_keypair()``: a fresh random 32-byte public/private pair.
- ``scalar_mult(private_key, public_key)``: the raw X25519 output.

Two implementations ship with the package:

:class:`CryptographyBackend`
    The default; uses ``cryptography``'s X25519 primitives (OpenSSL).
:class:`NaclBackend`
    Uses PyNaCl's libsodium bindings.

Both operate on raw 32-byte keys, so key material can be stored or sent
without depending on either library's key types. Callers choose a backend
explicitly; nothing here inspects the platform.
"""
from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable

import nacl.bindings
from cryptography.hazmat.primitives.asymmetric.x25519 import (
    X25519PrivateKey,
    X25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from x25519_key_agreement.errors import UnknownBackendError


class RawKeyPair(NamedTuple):
    """A raw X25519 key pair (32 bytes each)."""

    public_key: bytes
    private_key: bytes


@runtime_checkable
class KeyAgreementBackend(Protocol):
    """Capability interface for X25519 generation and scalar multiplication."""

    name: str

    def generate_keypair(self) -> RawKeyPair:
        """Return a fresh random X25519 key pair."""
        ...

    def scalar_mult(self, private_key: bytes, public_key: bytes) -> bytes:
        """Return ``X25519(private_key, public_key)`` as 32 raw bytes."""
        ...


class CryptographyBackend:
    """X25519 backend built on the ``cryptography`` package.

    Example
    -------
    ::

        backend = CryptographyBackend()
        alice, bob = backend.generate_keypair(), backend.generate_keypair()
        secret = backend.scalar_mult(alice.private_key, bob.public_key)
        assert secret == backend.scalar_mult(bob.private_key, alice.public_key)
    """

    name = "cryptography"

    def generate_keypair(self) -> RawKeyPair:
        """Generate a new X25519 keypair.

        Returns
        -------
        RawKeyPair
            ``(public_key, private_key)``, both 32-byte raw representations.
        """
        private_key = X25519PrivateKey.generate()
        private_bytes = private_key.private_bytes(
            Encoding.Raw, PrivateFormat.Raw, NoEncryption()
        )
        public_bytes = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        return RawKeyPair(public_key=public_bytes, private_key=private_bytes)

    def scalar_mult(self, private_key: bytes, public_key: bytes) -> bytes:
        """Compute the X25519 shared secret.

        Raises
        ------
        ValueError
            Propagated from ``cryptography`` when a key is not 32 bytes or
            the peer key is a low-order point (all-zero output).
        """
        local = X25519PrivateKey.from_private_bytes(private_key)
        remote = X25519PublicKey.from_public_bytes(public_key)
        return local.exchange(remote)


class NaclBackend:
    """X25519 backend built on PyNaCl (libsodium)."""

    name = "nacl"

    def generate_keypair(self) -> RawKeyPair:
        public_bytes, private_bytes = nacl.bindings.crypto_box_keypair()
        return RawKeyPair(public_key=public_bytes, private_key=private_bytes)

    def scalar_mult(self, private_key: bytes, public_key: bytes) -> bytes:
        # libsodium rejects an all-zero result with nacl.exceptions.RuntimeError
        return nacl.bindings.crypto_scalarmult(private_key, public_key)


_BACKENDS: dict[str, type[CryptographyBackend] | type[NaclBackend]] = {
    CryptographyBackend.name: CryptographyBackend,
    NaclBackend.name: NaclBackend,
}

DEFAULT_BACKEND_NAME: str = CryptographyBackend.name


def get_backend(name: str = DEFAULT_BACKEND_NAME) -> KeyAgreementBackend:
    """Return a backend instance by name (``"cryptography"`` or ``"nacl"``).

    Raises
    ------
    UnknownBackendError
        If *name* does not match a known backend.
    """
    try:
        backend_class = _BACKENDS[name]
    except KeyError:
        raise UnknownBackendError(
            f"Unknown key agreement backend {name!r}. "
            f"Available: {', '.join(sorted(_BACKENDS))}."
        ) from None
    return backend_class()


def available_backends() -> list[str]:
    """Return the sorted names accepted by :func:`get_backend`."""
    return sorted(_BACKENDS)


__all__ = [
    "CryptographyBackend",
    "DEFAULT_BACKEND_NAME",
    "KeyAgreementBackend",
    "NaclBackend",
    "RawKeyPair",
    "available_backends",
    "get_backend",
]
