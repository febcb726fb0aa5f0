"""Service for persisting test history and the crash-recovery snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import json
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from angle_practice.constants.storage_constants import (
    CURRENT_SESSION_KEY,
    DEFAULT_MAX_STORED_TESTS,
    SETTINGS_KEY,
    TEST_HISTORY_KEY,
)
from angle_practice.core.models import TestSession, utc_now
from angle_practice.core.services.key_value_store import (
    KeyValueStore,
    StorageCorruptedError,
    StorageError,
    StorageQuotaExceededError,
    is_store_available,
)
from angle_practice.core.session_codec import SessionDecodeError, decode_session, encode_session

logger = logging.getLogger(__name__)


class StorageSettings(BaseModel):
    """Persisted storage preferences."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    max_stored_tests: int = Field(default=DEFAULT_MAX_STORED_TESTS, ge=1, alias="maxStoredTests")
    last_cleanup: datetime | None = Field(default=None, alias="lastCleanup")


@dataclass(frozen=True, slots=True)
class StorageInfo:
    is_available: bool
    test_count: int
    has_current_session: bool


def prune_sessions(sessions: list[TestSession], max_sessions: int) -> list[TestSession]:
    """Keep the ``max_sessions`` most recent sessions by start time (FIFO)."""
    if len(sessions) <= max_sessions:
        return list(sessions)
    ordered = sorted(sessions, key=lambda session: session.start_time)
    kept = ordered[-max_sessions:] if max_sessions > 0 else []
    logger.info("Cleaned up %s old test sessions", len(sessions) - len(kept))
    return kept


class SessionStorage:
    """History list plus a single recovery slot on top of a key-value store.

    No method raises for store failures: reads degrade to empty results and
    writes report ``False``.
    """

    def __init__(self, store: KeyValueStore, max_stored_tests: int | None = None) -> None:
        self._store = store
        self._max_override = max_stored_tests

    # --- Availability & settings ---

    def is_available(self) -> bool:
        return is_store_available(self._store)

    def get_settings(self) -> StorageSettings:
        settings = self._stored_settings()
        if self._max_override is not None:
            settings = settings.model_copy(update={"max_stored_tests": self._max_override})
        return settings

    def update_settings(self, **changes: object) -> bool:
        current = self._stored_settings().model_dump()
        current.update(changes)
        try:
            settings = StorageSettings.model_validate(current)
        except ValidationError as exc:
            logger.warning("Rejected storage settings update: %s", exc.errors())
            return False
        if "max_stored_tests" in changes:
            self._max_override = None
        return self._write_json(SETTINGS_KEY, settings.model_dump(mode="json", by_alias=True))

    def _stored_settings(self) -> StorageSettings:
        raw = self._read_json(SETTINGS_KEY)
        if raw is None:
            return StorageSettings()
        try:
            return StorageSettings.model_validate(raw)
        except ValidationError:
            logger.warning("Ignoring invalid storage settings")
            return StorageSettings()

    @property
    def max_stored_tests(self) -> int:
        return self.get_settings().max_stored_tests

    # --- History ---

    def save_test_session(self, session: TestSession) -> bool:
        """Append a completed session to history, pruning oldest entries first."""
        try:
            blob = encode_session(session)
        except ValidationError:
            logger.error("Invalid test session data; not saving %s", session.id)
            return False

        history = [entry for entry in self.get_test_history() if entry.id != session.id]
        limit = self.max_stored_tests
        kept = prune_sessions([*history, session], limit)
        try:
            self._store.set(TEST_HISTORY_KEY, self._dump_history(kept))
        except StorageQuotaExceededError:
            logger.warning("Storage full; pruning history to %s entries and retrying", limit // 2)
            return self._retry_after_prune(history, blob, limit // 2)
        except StorageError as exc:
            logger.error("Failed to save test session %s: %s", session.id, exc)
            return False

        self.update_settings(last_cleanup=utc_now())
        logger.info("Test session %s saved", session.id)
        return True

    def get_test_history(self) -> list[TestSession]:
        """Return valid sessions, most recent first; corrupted entries are dropped."""
        raw_entries = self._read_json(TEST_HISTORY_KEY)
        if raw_entries is None:
            return []
        if not isinstance(raw_entries, list):
            logger.warning("Test history has unexpected shape; clearing it")
            self._remove_quietly(TEST_HISTORY_KEY)
            return []

        sessions: list[TestSession] = []
        for entry in raw_entries:
            try:
                sessions.append(decode_session(entry))
            except SessionDecodeError as exc:
                logger.warning("Removing corrupted test session from history: %s", exc)

        if len(sessions) != len(raw_entries):
            try:
                self._store.set(TEST_HISTORY_KEY, self._dump_history(sessions))
            except StorageError as exc:
                logger.warning("Could not write cleaned test history: %s", exc)

        return sorted(sessions, key=lambda session: session.start_time, reverse=True)

    def get_test_session_by_id(self, session_id: str) -> TestSession | None:
        return next((session for session in self.get_test_history() if session.id == session_id), None)

    def delete_test_session(self, session_id: str) -> bool:
        history = self.get_test_history()
        remaining = [session for session in history if session.id != session_id]
        if len(remaining) == len(history):
            return False
        try:
            self._store.set(TEST_HISTORY_KEY, self._dump_history(remaining))
        except StorageError as exc:
            logger.error("Failed to delete test session %s: %s", session_id, exc)
            return False
        return True

    def clear_all_test_history(self) -> bool:
        try:
            self._store.remove(TEST_HISTORY_KEY)
            self._store.remove(CURRENT_SESSION_KEY)
        except StorageError as exc:
            logger.error("Failed to clear test history: %s", exc)
            return False
        return True

    # --- Recovery snapshot ---

    def save_current_session(self, session: TestSession) -> bool:
        try:
            self._store.set(CURRENT_SESSION_KEY, json.dumps(encode_session(session)))
        except (StorageError, ValidationError) as exc:
            logger.warning("Failed to save current session for recovery: %s", exc)
            return False
        return True

    def get_current_session(self) -> TestSession | None:
        raw = self._read_json(CURRENT_SESSION_KEY)
        if raw is None:
            return None
        try:
            return decode_session(raw)
        except SessionDecodeError as exc:
            logger.warning("Discarding invalid recovery snapshot: %s", exc)
            self._remove_quietly(CURRENT_SESSION_KEY)
            return None

    def clear_current_session(self) -> bool:
        return self._remove_quietly(CURRENT_SESSION_KEY)

    def get_storage_info(self) -> StorageInfo:
        if not self.is_available():
            return StorageInfo(is_available=False, test_count=0, has_current_session=False)
        return StorageInfo(
            is_available=True,
            test_count=len(self.get_test_history()),
            has_current_session=self.get_current_session() is not None,
        )

    # --- Internals ---

    def _retry_after_prune(self, history: list[TestSession], blob: dict, reduced_limit: int) -> bool:
        reduced = prune_sessions(history, reduced_limit)
        try:
            self._store.set(TEST_HISTORY_KEY, self._dump_history(reduced))
            entries = [encode_session(session) for session in reduced]
            entries.append(blob)
            self._store.set(TEST_HISTORY_KEY, json.dumps(entries))
        except StorageError as exc:
            logger.error("Failed to save test session even after cleanup: %s", exc)
            return False
        logger.info("Storage cleanup successful, test session saved")
        return True

    def _read_json(self, key: str) -> object | None:
        try:
            raw_text = self._store.get(key)
        except StorageCorruptedError as exc:
            logger.warning("Stored '%s' is corrupted; removing it: %s", key, exc)
            self._remove_quietly(key)
            return None
        except StorageError as exc:
            logger.warning("Failed to read '%s': %s", key, exc)
            return None
        if raw_text is None:
            return None
        try:
            return json.loads(raw_text)
        except ValueError:
            logger.warning("Stored '%s' is not valid JSON; removing it", key)
            self._remove_quietly(key)
            return None

    def _write_json(self, key: str, value: object) -> bool:
        try:
            self._store.set(key, json.dumps(value))
        except StorageError as exc:
            logger.warning("Failed to write '%s': %s", key, exc)
            return False
        return True

    def _remove_quietly(self, key: str) -> bool:
        try:
            self._store.remove(key)
        except StorageError as exc:
            logger.warning("Failed to remove '%s': %s", key, exc)
            return False
        return True

    @staticmethod
    def _dump_history(sessions: list[TestSession]) -> str:
        return json.dumps([encode_session(session) for session in sessions])
