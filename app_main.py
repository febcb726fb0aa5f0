"""Application entry point for Angle Practice."""

from __future__ import annotations

import os
from pathlib import Path
import sys

from PySide6.QtCore import QStandardPaths, QTimer
from PySide6.QtWidgets import QApplication

from angle_practice.constants.about import APP_NAME, APP_VERSION
from angle_practice.constants.storage_constants import DATA_DIR_ENV_VAR
from angle_practice.core.services.key_value_store import JsonFileStore
from angle_practice.core.services.session_storage import SessionStorage
from angle_practice.core.session_controller import TestController
from angle_practice.ui.main_window import MainWindow
from angle_practice.ui.qt_ticker import QtTicker
from angle_practice.utils.logging_config import configure_logging


def _determine_data_dir() -> Path:
    """Storage directory: the override variable, else the per-user app data location."""
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path(QStandardPaths.writableLocation(QStandardPaths.AppDataLocation))


def main() -> None:
    """Initialize logging and storage, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    data_dir = _determine_data_dir()
    logger.info("Storing results in %s", data_dir)
    storage = SessionStorage(JsonFileStore(data_dir))
    if not storage.is_available():
        logger.warning("Storage is unavailable; results will not be kept")

    controller = TestController(storage=storage, ticker=QtTicker(parent=app))
    with controller:
        window = MainWindow(controller)
        window.show()
        QTimer.singleShot(0, window.offer_recovery)
        exit_code = app.exec()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
