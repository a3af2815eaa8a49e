"""Tests for API key storage."""

from __future__ import annotations

from resumeflow.ingest.credentials import FileCredentialStore, InMemoryCredentialStore


def test_in_memory_store() -> None:
    store = InMemoryCredentialStore()
    assert store.get() is None
    store.set(" fc-abc ")
    assert store.get() == "fc-abc"
    store.set("")
    assert store.get() is None


def test_file_store_round_trip(tmp_path) -> None:
    path = tmp_path / "nested" / "credentials.json"
    store = FileCredentialStore(path)
    assert store.get() is None
    store.set("fc-abc")
    assert path.exists()
    assert FileCredentialStore(path).get() == "fc-abc"


def test_corrupt_file_means_no_key(tmp_path) -> None:
    path = tmp_path / "credentials.json"
    path.write_text("{not json", encoding="utf-8")
    assert FileCredentialStore(path).get() is None
