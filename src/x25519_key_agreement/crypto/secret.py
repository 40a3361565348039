"""Shared-secret derivation (X25519 ECDH).

The value returned by :func:`derive_secret` is the raw X25519 output. It is
**not** a symmetric key. Pass it through a key derivation function (for
example HKDF, with context-specific ``info``) before using it to encrypt
anything. This module does not enforce that; it is the caller's contract.

No extra point validation is done here. If the backend rejects a degenerate
or low-order peer key, its exception reaches the caller unchanged.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from x25519_key_agreement.crypto.backends import KeyAgreementBackend, get_backend
from x25519_key_agreement.errors import MissingPrivateKeyError

if TYPE_CHECKING:
    from x25519_key_agreement.keys.key_pair import X25519KeyAgreementKey2019

logger = logging.getLogger(__name__)


def derive_secret(
    local: X25519KeyAgreementKey2019,
    remote: X25519KeyAgreementKey2019,
    backend: KeyAgreementBackend | None = None,
) -> bytes:
    """Compute ``X25519(local.private_key, remote.public_key)``.

    Parameters
    ----------
    local:
        Key pair holding the local private key.
    remote:
        Key pair holding the remote party's public key; private material,
        if present, is ignored.
    backend:
        Scalar multiplication provider. Defaults to the ``cryptography``
        backend.

    Returns
    -------
    bytes
        The 32-byte raw shared secret. Feed it to a KDF before use.

    Raises
    ------
    MissingPrivateKeyError
        If *local* has no private key.
    """
    if local.private_key is None:
        raise MissingPrivateKeyError(
            f"Key {local.id or local.fingerprint()!r} has no private key; "
            "cannot derive a shared secret."
        )
    provider = backend if backend is not None else get_backend()
    secret = provider.scalar_mult(local.private_key, remote.public_key)
    logger.debug(
        "Derived shared secret via %s backend for remote key %s",
        provider.name,
        remote.fingerprint(),
    )
    return secret


__all__ = ["derive_secret"]
