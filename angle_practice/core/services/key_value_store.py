"""String key-value stores backing session persistence."""

from __future__ import annotations

import errno
import os
from pathlib import Path
import re
import tempfile
from typing import Protocol

_PROBE_KEY = "__storage_probe__"
_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")
_DISK_FULL_ERRNOS = {errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)}


class StorageError(Exception):
    """Base class for key-value store failures."""


class StorageUnavailableError(StorageError):
    """The store cannot be read from or written to."""


class StorageQuotaExceededError(StorageError):
    """A write was rejected because the store is full."""


class StorageCorruptedError(StorageError):
    """A stored value exists but cannot be decoded."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


def is_store_available(store: KeyValueStore) -> bool:
    """Probe the store with a throwaway write, mirroring a browser storage check."""
    try:
        store.set(_PROBE_KEY, "probe")
        store.remove(_PROBE_KEY)
    except (StorageError, OSError):
        return False
    return True


class InMemoryStore:
    """Process-local store with an optional total size quota in bytes."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._values: dict[str, str] = {}
        self._quota_bytes = quota_bytes

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota_bytes is not None:
            others = sum(len(v.encode("utf-8")) for k, v in self._values.items() if k != key)
            if others + len(value.encode("utf-8")) > self._quota_bytes:
                raise StorageQuotaExceededError(f"Writing '{key}' would exceed {self._quota_bytes} bytes")
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStore:
    """One file per key inside ``directory``; writes replace files atomically."""

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise StorageCorruptedError(f"Stored '{key}' is not valid UTF-8") from exc
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot read '{key}': {exc}") from exc

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            if exc.errno in _DISK_FULL_ERRNOS:
                raise StorageQuotaExceededError(f"No space left writing '{key}'") from exc
            raise StorageUnavailableError(f"Cannot write '{key}': {exc}") from exc

    def remove(self, key: str) -> None:
        try:
            self._path_for(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot remove '{key}': {exc}") from exc

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Unsupported storage key: {key!r}")
        return self._directory / f"{key}.json"
