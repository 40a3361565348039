"""Tests for SuiteRegistry and the X25519 suite adapter."""
from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

import pytest

from x25519_key_agreement import (
    SUITE_ID,
    KeyAgreementSuite,
    NaclBackend,
    SuiteRegistry,
    X25519KeyAgreementKey2019,
    X25519KeyAgreementSuite,
    default_registry,
)
from x25519_key_agreement.errors import SuiteAlreadyRegisteredError, UnsupportedSuiteError


class _DummySuite:
    suite_id = "DummyKeyAgreement2024"

    def generate(self, *, controller: str | None = None, id: str | None = None) -> Any:
        return {"controller": controller, "id": id}

    def from_fingerprint(self, fingerprint: str) -> Any:
        return fingerprint

    def from_record(self, record: Mapping[str, Any]) -> Any:
        return dict(record)

    def derive_secret(self, local: Any, remote: Any) -> bytes:
        return b""


@pytest.fixture()
def registry() -> SuiteRegistry:
    return default_registry()


class TestRegistration:
    def test_default_registry_has_x25519(self, registry: SuiteRegistry) -> None:
        assert SUITE_ID in registry
        assert len(registry) == 1
        assert registry.suite_ids() == [SUITE_ID]

    def test_register_returns_suite_id(self) -> None:
        registry = SuiteRegistry()
        assert registry.register(_DummySuite()) == "DummyKeyAgreement2024"

    def test_duplicate_registration_raises(self, registry: SuiteRegistry) -> None:
        with pytest.raises(SuiteAlreadyRegisteredError):
            registry.register(X25519KeyAgreementSuite())

    def test_replace_overrides(self, registry: SuiteRegistry) -> None:
        replacement = X25519KeyAgreementSuite(backend=NaclBackend())
        registry.register(replacement, replace=True)
        assert registry.get(SUITE_ID) is replacement

    def test_suite_ids_sorted(self, registry: SuiteRegistry) -> None:
        registry.register(_DummySuite())
        assert registry.suite_ids() == sorted([SUITE_ID, "DummyKeyAgreement2024"])

    def test_get_unknown_raises(self, registry: SuiteRegistry) -> None:
        with pytest.raises(UnsupportedSuiteError):
            registry.get("Ed25519VerificationKey2018")

    def test_concurrent_registration(self) -> None:
        """Only one of many racing registrations of the same tag succeeds."""
        registry = SuiteRegistry()
        errors: list[Exception] = []

        def _register() -> None:
            try:
                registry.register(X25519KeyAgreementSuite())
            except SuiteAlreadyRegisteredError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=_register) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(registry) == 1
        assert len(errors) == 7

    def test_suites_satisfy_protocol(self) -> None:
        assert isinstance(X25519KeyAgreementSuite(), KeyAgreementSuite)
        assert isinstance(_DummySuite(), KeyAgreementSuite)


class TestDispatch:
    def test_from_record_dispatches_on_type(self, registry: SuiteRegistry) -> None:
        key = X25519KeyAgreementKey2019.generate(controller="did:example:alice")
        restored = registry.from_record(key.export(public_key=True, private_key=True))
        assert isinstance(restored, X25519KeyAgreementKey2019)
        assert restored == key

    def test_from_record_routes_to_other_suite(self, registry: SuiteRegistry) -> None:
        registry.register(_DummySuite())
        record = {"type": "DummyKeyAgreement2024", "value": 1}
        assert registry.from_record(record) == record

    def test_from_record_unknown_type_raises(self, registry: SuiteRegistry) -> None:
        with pytest.raises(UnsupportedSuiteError):
            registry.from_record({"type": "Unknown2099", "publicKeyBase58": "abc"})

    @pytest.mark.parametrize("record", [{}, {"type": None}, {"type": 7}])
    def test_from_record_without_string_type_raises(
        self, registry: SuiteRegistry, record: dict[str, object]
    ) -> None:
        with pytest.raises(UnsupportedSuiteError):
            registry.from_record(record)

    def test_suite_generate_and_derive(self, registry: SuiteRegistry) -> None:
        suite = registry.get(SUITE_ID)
        alice = suite.generate(controller="did:example:alice")
        bob = suite.generate(controller="did:example:bob")
        assert alice.controller == "did:example:alice"
        assert suite.derive_secret(alice, bob) == suite.derive_secret(bob, alice)

    def test_suite_from_fingerprint(self, registry: SuiteRegistry) -> None:
        key = X25519KeyAgreementKey2019.generate()
        restored = registry.get(SUITE_ID).from_fingerprint(key.fingerprint())
        assert restored.public_key == key.public_key
        assert restored.private_key is None

    def test_backend_is_used_by_suite(self) -> None:
        registry = default_registry(backend=NaclBackend())
        suite = registry.get(SUITE_ID)
        alice = suite.generate()
        bob = suite.generate()
        assert suite.derive_secret(alice, bob) == alice.derive_secret(bob)
