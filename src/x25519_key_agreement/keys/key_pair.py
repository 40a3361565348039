"""X25519KeyAgreementKey2019 — an X25519 key agreement key pair.

A key pair always carries a 32-byte public key and optionally a 32-byte
private key. Public-only key pairs are what you encrypt to; key pairs with
private material can derive shared secrets.

Key pairs are created in one of four ways:

- :meth:`X25519KeyAgreementKey2019.generate`: fresh random keys from a backend.
- :meth:`X25519KeyAgreementKey2019.from_ed25519_verification_key_2018` /
  :meth:`X25519KeyAgreementKey2019.from_ed25519_verification_key_2020`:
  deterministic conversion of an existing Ed25519 key.
- :meth:`X25519KeyAgreementKey2019.from_record`: reconstruction from a
  persisted record.
- :meth:`X25519KeyAgreementKey2019.from_fingerprint`: public-only key from
  a fingerprint.

If a ``controller`` is given and no ``id``, the id is set to
``<controller>#<fingerprint>``. The fingerprint only ever depends on the
public key.

Example
-------
::

    alice = X25519KeyAgreementKey2019.generate(controller="did:example:alice")
    bob = X25519KeyAgreementKey2019.generate(controller="did:example:bob")
    bob_public = X25519KeyAgreementKey2019.from_record(bob.export(public_key=True))

    secret = alice.derive_secret(bob_public)   # raw ECDH output, feed to a KDF
    assert alice.verify_fingerprint(alice.fingerprint()).valid
"""
from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import ValidationError

from x25519_key_agreement.codec.base58btc import decode_base58, encode_base58
from x25519_key_agreement.codec.fingerprint import (
    X25519_KEY_LENGTH,
    decode_fingerprint,
    encode_fingerprint,
)
from x25519_key_agreement.crypto.backends import KeyAgreementBackend, get_backend
from x25519_key_agreement.crypto.secret import derive_secret
from x25519_key_agreement.errors import (
    ExportRequiresSelectionError,
    InvalidKeyLengthError,
    InvalidKeyRecordError,
    MissingPublicKeyError,
    UnsupportedSuiteError,
)
from x25519_key_agreement.keys.converter import (
    convert_from_ed_private_key_base58,
    convert_from_ed_private_key_multibase,
    convert_from_ed_public_key_base58,
    convert_from_ed_public_key_multibase,
)
from x25519_key_agreement.keys.ed25519 import (
    Ed25519VerificationKey2018,
    Ed25519VerificationKey2020,
)
from x25519_key_agreement.keys.record import SUITE_CONTEXT, SUITE_ID, KeyAgreementKeyRecord
from x25519_key_agreement.verification.fingerprint import (
    FingerprintVerificationResult,
    verify_fingerprint,
)

logger = logging.getLogger(__name__)


class X25519KeyAgreementKey2019:
    """An X25519 (Curve25519) Diffie-Hellman key pair.

    Parameters
    ----------
    public_key_base58:
        Base58btc encoding of the 32-byte public key. Required.
    private_key_base58:
        Base58btc encoding of the 32-byte private key, or ``None``.
    controller:
        The DID that controls this key.
    id:
        The key id. Derived from ``controller`` when omitted.
    revoked:
        Revocation timestamp; carried through export untouched.

    Raises
    ------
    MissingPublicKeyError
        If ``public_key_base58`` is empty or ``None``.
    Base58DecodeError
        If either key is not valid base58btc.
    InvalidKeyLengthError
        If a decoded key is not 32 bytes.
    """

    suite: ClassVar[str] = SUITE_ID
    SUITE_CONTEXT: ClassVar[str] = SUITE_CONTEXT

    def __init__(
        self,
        public_key_base58: str | None = None,
        private_key_base58: str | None = None,
        *,
        controller: str | None = None,
        id: str | None = None,
        revoked: str | None = None,
    ) -> None:
        if not public_key_base58:
            raise MissingPublicKeyError('The "publicKeyBase58" property is required.')
        self.type: str = SUITE_ID
        self._public_key = _decode_key(public_key_base58, "public")
        self._private_key = (
            _decode_key(private_key_base58, "private") if private_key_base58 else None
        )
        self._controller = controller
        self.id = id
        self.revoked = revoked
        if controller and not self.id:
            self.id = f"{controller}#{self.fingerprint()}"

    # ------------------------------------------------------------------
    # Controller and key material (read-only)
    # ------------------------------------------------------------------

    @property
    def controller(self) -> str | None:
        """The DID that controls this key; fixed at construction."""
        return self._controller

    @property
    def public_key(self) -> bytes:
        """The 32-byte raw public key."""
        return self._public_key

    @property
    def private_key(self) -> bytes | None:
        """The 32-byte raw private key, or ``None`` for public-only keys."""
        return self._private_key

    @property
    def public_key_base58(self) -> str:
        return encode_base58(self._public_key)

    @property
    def private_key_base58(self) -> str | None:
        if self._private_key is None:
            return None
        return encode_base58(self._private_key)

    @property
    def has_private_key(self) -> bool:
        return self._private_key is not None

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    @classmethod
    def generate(
        cls,
        *,
        controller: str | None = None,
        id: str | None = None,
        backend: KeyAgreementBackend | None = None,
    ) -> X25519KeyAgreementKey2019:
        """Generate a new random X25519 key pair.

        Parameters
        ----------
        controller:
            Optional controller DID; also used to derive the id.
        id:
            Optional explicit key id.
        backend:
            Key generation provider. Defaults to the ``cryptography`` backend.

        Returns
        -------
        X25519KeyAgreementKey2019
            A key pair with both public and private material.
        """
        provider = backend if backend is not None else get_backend()
        raw = provider.generate_keypair()
        key_pair = cls(
            public_key_base58=encode_base58(raw.public_key),
            private_key_base58=encode_base58(raw.private_key),
            controller=controller,
            id=id,
        )
        logger.debug(
            "Generated %s key %s via %s backend", SUITE_ID, key_pair.fingerprint(), provider.name
        )
        return key_pair

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> X25519KeyAgreementKey2019:
        """Reconstruct a key pair from a persisted record.

        Parameters
        ----------
        record:
            A mapping with ``publicKeyBase58`` and optionally
            ``privateKeyBase58``, ``id``, ``controller``, ``revoked`` and
            ``type``. Other fields are ignored.

        Raises
        ------
        UnsupportedSuiteError
            If the record's ``type`` is not ``X25519KeyAgreementKey2019``.
        MissingPublicKeyError
            If ``publicKeyBase58`` is absent.
        InvalidKeyRecordError
            If a field has the wrong type (e.g. a non-string key).
        """
        try:
            parsed = KeyAgreementKeyRecord.model_validate(record)
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise InvalidKeyRecordError(f"Invalid {SUITE_ID} record: {details}") from exc
        if parsed.type != SUITE_ID:
            raise UnsupportedSuiteError(
                f"Record type {parsed.type!r} is not {SUITE_ID!r}."
            )
        return cls(
            public_key_base58=parsed.public_key_base58,
            private_key_base58=parsed.private_key_base58,
            controller=parsed.controller,
            id=parsed.id,
            revoked=parsed.revoked,
        )

    @classmethod
    def from_fingerprint(cls, fingerprint: str) -> X25519KeyAgreementKey2019:
        """Create a public-only key pair from a fingerprint.

        Raises
        ------
        UnsupportedFingerprintTypeError
            If the fingerprint is not ``z``-prefixed or not an X25519 key.
        """
        public_key = decode_fingerprint(fingerprint)
        return cls(public_key_base58=encode_base58(public_key))

    # ------------------------------------------------------------------
    # Conversion from Ed25519
    # ------------------------------------------------------------------

    @classmethod
    def from_ed25519_verification_key_2018(
        cls, key_pair: Ed25519VerificationKey2018
    ) -> X25519KeyAgreementKey2019:
        """Convert an Ed25519VerificationKey2018 (base58 fields) to X25519.

        The controller is carried over; the id is re-derived from the new
        public key. The private key is converted only if present.
        """
        private_key_base58 = None
        if key_pair.private_key_base58:
            private_key_base58 = convert_from_ed_private_key_base58(key_pair.private_key_base58)
        x_key = cls(
            public_key_base58=convert_from_ed_public_key_base58(key_pair.public_key_base58),
            private_key_base58=private_key_base58,
            controller=key_pair.controller,
        )
        logger.debug("Converted Ed25519VerificationKey2018 to %s", x_key.fingerprint())
        return x_key

    @classmethod
    def from_ed25519_verification_key_2020(
        cls, key_pair: Ed25519VerificationKey2020
    ) -> X25519KeyAgreementKey2019:
        """Convert an Ed25519VerificationKey2020 (multibase fields) to X25519.

        Raises
        ------
        MultibaseHeaderMismatchError
            If a key does not carry the expected Ed25519 multicodec header.
        """
        private_key_base58 = None
        if key_pair.private_key_multibase:
            private_key_base58 = convert_from_ed_private_key_multibase(
                key_pair.private_key_multibase
            )
        x_key = cls(
            public_key_base58=convert_from_ed_public_key_multibase(key_pair.public_key_multibase),
            private_key_base58=private_key_base58,
            controller=key_pair.controller,
        )
        logger.debug("Converted Ed25519VerificationKey2020 to %s", x_key.fingerprint())
        return x_key

    @classmethod
    def from_ed_key_pair(cls, key_pair: Ed25519VerificationKey2018) -> X25519KeyAgreementKey2019:
        """Deprecated alias of :meth:`from_ed25519_verification_key_2018`."""
        warnings.warn(
            "from_ed_key_pair() is deprecated; use from_ed25519_verification_key_2018() "
            "or from_ed25519_verification_key_2020() for the Ed25519 suite in use.",
            DeprecationWarning,
            stacklevel=2,
        )
        return cls.from_ed25519_verification_key_2018(key_pair)

    # ------------------------------------------------------------------
    # Fingerprints
    # ------------------------------------------------------------------

    @staticmethod
    def fingerprint_from_public_key(public_key_base58: str) -> str:
        """Return the multibase fingerprint for a base58 public key."""
        return encode_fingerprint(decode_base58(public_key_base58))

    def fingerprint(self) -> str:
        """Return this key's multibase fingerprint (``z6LS...``)."""
        return encode_fingerprint(self._public_key)

    def verify_fingerprint(self, fingerprint: object) -> FingerprintVerificationResult:
        """Test whether *fingerprint* was generated from this key's public key.

        Never raises; see :func:`~x25519_key_agreement.verification.verify_fingerprint`.
        """
        return verify_fingerprint(self._public_key, fingerprint)

    # ------------------------------------------------------------------
    # Key agreement
    # ------------------------------------------------------------------

    def derive_secret(
        self,
        remote: X25519KeyAgreementKey2019,
        backend: KeyAgreementBackend | None = None,
    ) -> bytes:
        """Derive the raw shared secret with *remote*'s public key.

        The result must go through a key derivation function before it is
        used as a symmetric key.
        """
        return derive_secret(self, remote, backend=backend)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def export(
        self,
        *,
        public_key: bool = False,
        private_key: bool = False,
        include_context: bool = False,
    ) -> dict[str, object]:
        """Export the key pair as a record.

        Parameters
        ----------
        public_key:
            Include ``publicKeyBase58``.
        private_key:
            Include ``privateKeyBase58`` (if this key has one).
        include_context:
            Include ``"@context"`` set to the suite context URL.

        Returns
        -------
        dict[str, object]
            ``id``, ``type``, ``controller``, the selected key fields and
            ``revoked``; absent optional values are omitted.

        Raises
        ------
        ExportRequiresSelectionError
            If neither *public_key* nor *private_key* is set.
        """
        if not (public_key or private_key):
            raise ExportRequiresSelectionError(
                'Export requires specifying either "public_key" or "private_key".'
            )
        record = KeyAgreementKeyRecord(
            context=SUITE_CONTEXT if include_context else None,
            id=self.id,
            type=self.type,
            controller=self.controller,
            public_key_base58=self.public_key_base58 if public_key else None,
            private_key_base58=self.private_key_base58 if private_key else None,
            revoked=self.revoked,
        )
        return record.to_dict()

    def add_public_key(self, key: dict[str, object]) -> dict[str, object]:
        """Set ``publicKeyBase58`` on a JSON-LD key node and return it."""
        key["publicKeyBase58"] = self.public_key_base58
        return key

    def add_private_key(self, key: dict[str, object]) -> dict[str, object]:
        """Set ``privateKeyBase58`` on a JSON-LD key node and return it."""
        key["privateKeyBase58"] = self.private_key_base58
        return key

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, X25519KeyAgreementKey2019):
            return NotImplemented
        return (
            self._public_key == other._public_key
            and self._private_key == other._private_key
            and self.id == other.id
            and self.controller == other.controller
            and self.revoked == other.revoked
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"X25519KeyAgreementKey2019(id={self.id!r}, controller={self.controller!r}, "
            f"public_key_base58={self.public_key_base58!r}, "
            f"has_private_key={self.has_private_key})"
        )


def _decode_key(encoded: str, kind: str) -> bytes:
    decoded = decode_base58(encoded)
    if len(decoded) != X25519_KEY_LENGTH:
        raise InvalidKeyLengthError(
            f"X25519 {kind} key must be {X25519_KEY_LENGTH} bytes, got {len(decoded)}."
        )
    return decoded


__all__ = ["SUITE_CONTEXT", "SUITE_ID", "X25519KeyAgreementKey2019"]
