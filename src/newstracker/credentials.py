"""API credential storage."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

DEFAULT_STORAGE_KEY = "worldNewsApiKey"
DEFAULT_ENV_VAR = "WORLD_NEWS_API_KEY"

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Durable string storage keyed by name."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Storage that lives only as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """Storage backed by a single JSON object on disk.

    Writes go to a temporary file that replaces the original, so a crash
    never leaves a half-written file behind.

    Args:
        path: Location of the JSON file. Parent directories are created on
            first write.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def _load(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load storage {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self._path)


class CredentialStore:
    """Holds the World News API key.

    A value supplied at build time (normally the ``WORLD_NEWS_API_KEY``
    environment variable) wins over a key the user entered and stored.

    Args:
        storage: Durable storage for user-entered keys.
        build_value: Key configured outside the app, if any.
        storage_key: Name of the storage entry holding the key.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        build_value: str | None = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._build_value = build_value or None
        self._storage_key = storage_key

    @classmethod
    def from_env(
        cls,
        storage: KeyValueStorage,
        *,
        env_var: str = DEFAULT_ENV_VAR,
        storage_key: str = DEFAULT_STORAGE_KEY,
        environ: Mapping[str, str] | None = None,
    ) -> "CredentialStore":
        """Create a store whose build-time value comes from the environment."""
        env = os.environ if environ is None else environ
        return cls(storage, build_value=env.get(env_var), storage_key=storage_key)

    @property
    def has_build_value(self) -> bool:
        return self._build_value is not None

    def get(self) -> str | None:
        """Return the current key, or None if none is configured."""
        if self._build_value:
            return self._build_value
        return self._storage.get(self._storage_key) or None

    def set(self, key: str) -> bool:
        """Store a user-entered key.

        Args:
            key: The key as typed; surrounding whitespace is dropped.

        Returns:
            True if the key was stored, False if it was empty.
        """
        key = key.strip()
        if not key:
            return False
        self._storage.set(self._storage_key, key)
        logger.info("Stored API key")
        return True
