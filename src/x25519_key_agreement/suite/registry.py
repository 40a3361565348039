"""Key agreement suites and the registry that dispatches on their tag.

A document-processing layer that meets a key record with
``"type": "X25519KeyAgreementKey2019"`` should not need to know which class
implements it. It looks the tag up in a :class:`SuiteRegistry` and talks to
the returned :class:`KeyAgreementSuite`:

::

    registry = default_registry()
    suite = registry.get("X25519KeyAgreementKey2019")
    key = suite.generate(controller="did:example:alice")

    # or directly from a stored record
    key = registry.from_record(stored_record)

The registry is safe to share between threads; registration takes a lock.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from x25519_key_agreement.crypto.backends import KeyAgreementBackend
from x25519_key_agreement.errors import SuiteAlreadyRegisteredError, UnsupportedSuiteError
from x25519_key_agreement.keys.key_pair import X25519KeyAgreementKey2019
from x25519_key_agreement.keys.record import SUITE_ID

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyAgreementSuite(Protocol):
    """What a key agreement suite must provide to the registry."""

    suite_id: str

    def generate(self, *, controller: str | None = None, id: str | None = None) -> Any:
        ...

    def from_fingerprint(self, fingerprint: str) -> Any:
        ...

    def from_record(self, record: Mapping[str, Any]) -> Any:
        ...

    def derive_secret(self, local: Any, remote: Any) -> bytes:
        ...


class X25519KeyAgreementSuite:
    """The ``X25519KeyAgreementKey2019`` suite.

    Parameters
    ----------
    backend:
        Backend used for generation and derivation. ``None`` uses the
        default ``cryptography`` backend.
    """

    suite_id = SUITE_ID

    def __init__(self, backend: KeyAgreementBackend | None = None) -> None:
        self._backend = backend

    def generate(
        self, *, controller: str | None = None, id: str | None = None
    ) -> X25519KeyAgreementKey2019:
        return X25519KeyAgreementKey2019.generate(
            controller=controller, id=id, backend=self._backend
        )

    def from_fingerprint(self, fingerprint: str) -> X25519KeyAgreementKey2019:
        return X25519KeyAgreementKey2019.from_fingerprint(fingerprint)

    def from_record(self, record: Mapping[str, Any]) -> X25519KeyAgreementKey2019:
        return X25519KeyAgreementKey2019.from_record(record)

    def derive_secret(
        self, local: X25519KeyAgreementKey2019, remote: X25519KeyAgreementKey2019
    ) -> bytes:
        return local.derive_secret(remote, backend=self._backend)


class SuiteRegistry:
    """Dispatch table mapping suite tags to :class:`KeyAgreementSuite` objects.

    Example
    -------
    ::

        registry = SuiteRegistry()
        registry.register(X25519KeyAgreementSuite())
        assert "X25519KeyAgreementKey2019" in registry
    """

    def __init__(self) -> None:
        self._suites: dict[str, KeyAgreementSuite] = {}
        self._lock = threading.Lock()

    def register(self, suite: KeyAgreementSuite, *, replace: bool = False) -> str:
        """Register *suite* under its ``suite_id``.

        Parameters
        ----------
        suite:
            The suite implementation.
        replace:
            Overwrite an existing registration for the same tag.

        Returns
        -------
        str
            The tag the suite was registered under.

        Raises
        ------
        SuiteAlreadyRegisteredError
            If the tag is taken and *replace* is ``False``.
        """
        with self._lock:
            if suite.suite_id in self._suites and not replace:
                raise SuiteAlreadyRegisteredError(
                    f"Suite {suite.suite_id!r} is already registered. "
                    "Pass replace=True to override it."
                )
            self._suites[suite.suite_id] = suite
        logger.debug("Registered key agreement suite %s", suite.suite_id)
        return suite.suite_id

    def get(self, suite_id: str) -> KeyAgreementSuite:
        """Return the suite registered under *suite_id*.

        Raises
        ------
        UnsupportedSuiteError
            If no suite is registered under that tag.
        """
        with self._lock:
            suite = self._suites.get(suite_id)
        if suite is None:
            raise UnsupportedSuiteError(f"No key agreement suite registered for {suite_id!r}.")
        return suite

    def from_record(self, record: Mapping[str, Any]) -> Any:
        """Reconstruct a key from *record* using the suite named by its ``type``."""
        suite_id = record.get("type")
        if not isinstance(suite_id, str):
            raise UnsupportedSuiteError('Key record has no string "type" property.')
        return self.get(suite_id).from_record(record)

    def suite_ids(self) -> list[str]:
        """Return a sorted list of registered suite tags."""
        with self._lock:
            return sorted(self._suites)

    def __contains__(self, suite_id: object) -> bool:
        with self._lock:
            return suite_id in self._suites

    def __len__(self) -> int:
        with self._lock:
            return len(self._suites)


def default_registry(backend: KeyAgreementBackend | None = None) -> SuiteRegistry:
    """Return a new registry with the X25519 suite registered."""
    registry = SuiteRegistry()
    registry.register(X25519KeyAgreementSuite(backend=backend))
    return registry


__all__ = [
    "KeyAgreementSuite",
    "SuiteRegistry",
    "X25519KeyAgreementSuite",
    "default_registry",
]
