"""Persistence keys and limits for the session store."""

TEST_HISTORY_KEY: str = "dat-angle-practice-history"
SETTINGS_KEY: str = "dat-angle-practice-settings"
CURRENT_SESSION_KEY: str = "dat-angle-practice-current-session"

DEFAULT_MAX_STORED_TESTS: int = 50
DATA_DIR_ENV_VAR: str = "ANGLE_PRACTICE_DATA_DIR"
