"""
Logging Configuration
Sets up the package logger and forwards Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOGGER_NAME = "pythagorastree"

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


_qt_captured = False
_previous_qt_handler = None


def _qt_message_handler(msg_type, context, message: str) -> None:
    logging.getLogger(f"{LOGGER_NAME}.qt").log(_QT_LEVELS.get(msg_type, logging.WARNING), message)


def capture_qt_messages() -> None:
    """Install the forwarding handler once, remembering whatever it replaces."""
    global _qt_captured, _previous_qt_handler
    if _qt_captured:
        return
    _previous_qt_handler = qInstallMessageHandler(_qt_message_handler)
    _qt_captured = True


def release_qt_messages() -> None:
    """Put back the Qt message handler that was active before capturing."""
    global _qt_captured, _previous_qt_handler
    if not _qt_captured:
        return
    qInstallMessageHandler(_previous_qt_handler)
    _previous_qt_handler = None
    _qt_captured = False


def is_capturing_qt_messages() -> bool:
    return _qt_captured


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    capture_qt: bool = True,
) -> logging.Logger:
    """
    Configures the logger for the 'pythagorastree' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        capture_qt: Route qDebug/qWarning output through the 'pythagorastree.qt' logger.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if capture_qt:
        capture_qt_messages()

    logger.info("Logging initialized.")
    return logger
