"""
Crawl API credential storage.

The Firecrawl API key is the only piece of durable state in the
pipeline.  It is read through a tiny `CredentialStore` interface that
is injected into the crawl client, so tests can use the in‑memory
store and the CLI can persist the key to a JSON file under the user's
home directory.
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

API_KEY_STORAGE_KEY = "firecrawl_api_key"
DEFAULT_CREDENTIALS_PATH = "~/.resumeflow/credentials.json"


class CredentialStore(ABC):
    """Key‑value access to the crawl API key."""

    @abstractmethod
    def get(self) -> Optional[str]:
        """Return the stored key, or None when no key is configured."""
        raise NotImplementedError

    @abstractmethod
    def set(self, api_key: str) -> None:
        """Persist `api_key`, replacing any previous key."""
        raise NotImplementedError


class InMemoryCredentialStore(CredentialStore):
    """Store that keeps the key for the lifetime of the process."""

    def __init__(self, api_key: Optional[str] = None) -> None:
        self._api_key = api_key or None

    def get(self) -> Optional[str]:
        return self._api_key

    def set(self, api_key: str) -> None:
        self._api_key = api_key.strip() or None


class FileCredentialStore(CredentialStore):
    """Store that persists the key in a small JSON file.

    The file holds a single object keyed by `API_KEY_STORAGE_KEY`.
    A missing or unreadable file is treated as "no key configured".
    """

    def __init__(self, path: str | os.PathLike = DEFAULT_CREDENTIALS_PATH) -> None:
        self.path = Path(path).expanduser()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read credentials from %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self) -> Optional[str]:
        value = self._read().get(API_KEY_STORAGE_KEY)
        return value or None

    def set(self, api_key: str) -> None:
        data = self._read()
        data[API_KEY_STORAGE_KEY] = api_key.strip()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.info("API key saved to %s", self.path)
