"""
Qt Application Setup
Creates the single QApplication and registers the names QSettings uses to
locate the "tree/" overrides read by `config.load_config`.
"""
from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

logger = logging.getLogger(__name__)

ORG_ID = "pythagorastree"
APP_ID = "pythagoras-tree"
VISIBLE_APP_NAME = "Pythagoras Tree"

try:
    APP_VERSION = version("pythagorastree")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """
    Return the QApplication, creating it on first use.

    Args:
        argv: Arguments handed to Qt. Defaults to the program name only, so
            options already parsed by the command line never reach Qt.
    """
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QCoreApplication.setApplicationVersion(APP_VERSION)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance()
    if app is None:
        app = QApplication(list(argv) if argv is not None else sys.argv[:1])
        logger.debug(f"Created QApplication {APP_ID} {APP_VERSION}.")
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    logger.info(f"Settings file: {QSettings().fileName()}")
    return app
