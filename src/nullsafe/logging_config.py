"""
Logging Configuration for nullsafe.

All library loggers live under the ``nullsafe`` namespace. By default the
package logger only carries a NullHandler; debug handlers (file + stderr)
are attached by configure_debug_logging(), which runs automatically at
import time when NULLSAFE_DEBUG_LOG is set.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import DEBUG_LOG_FILE, get_settings

ROOT_LOGGER_NAME = "nullsafe"

_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _create_file_handler(log_dir: Path) -> Optional[logging.FileHandler]:
    """
    Create a DEBUG file handler writing to ``log_dir/nullsafe_debug.log``.

    Returns:
        Configured FileHandler, or None if the directory cannot be created
    """
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / DEBUG_LOG_FILE, mode='a', encoding='utf-8')
    except OSError:
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    return handler


class FlushingStreamHandler(logging.StreamHandler):
    """StreamHandler that flushes after every emit.

    ::: This is-in-layer Infrastructure-Layer.
    ::: This is a handler.
    ::: This is stateless.
    """
    def emit(self, record):
        super().emit(record)
        self.flush()


def _create_stderr_handler() -> logging.StreamHandler:
    handler = FlushingStreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the ``nullsafe`` namespace.

    Names already under the namespace (e.g. ``__name__`` of a library
    module) are used as-is; anything else is nested below it.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_debug_logging(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Attach debug file and stderr handlers to the package logger.

    Only configures once; call reset_debug_logging() to start over.

    Args:
        log_dir: Directory for the log file (default: settings.log_dir)

    Returns:
        The configured package logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        return root

    root.setLevel(logging.DEBUG)
    root.propagate = False

    file_handler = _create_file_handler(log_dir or get_settings().log_dir)
    if file_handler:
        root.addHandler(file_handler)

    root.addHandler(_create_stderr_handler())
    return root


def reset_debug_logging() -> None:
    """Remove the handlers added by configure_debug_logging()."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root.handlers[:]:
        if isinstance(handler, logging.NullHandler):
            continue
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True


def log_failure(logger: logging.Logger, message: str, *args) -> None:
    """Log a swallowed failure at DEBUG, unless NULLSAFE_LOG_FAILURES is off."""
    if get_settings().log_failures:
        logger.debug(message, *args)


def _stream_handlers():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            yield handler


def suppress_stderr_logging():
    """
    Silence the stderr debug handler, e.g. while rendering rich output.

    File logging continues to work normally.
    """
    for handler in _stream_handlers():
        handler.setLevel(logging.CRITICAL + 1)


def restore_stderr_logging():
    """Undo suppress_stderr_logging()."""
    for handler in _stream_handlers():
        handler.setLevel(logging.DEBUG)


# Pre-create loggers for import convenience
pipeline_logger = get_logger("nullsafe.transform")
validation_logger = get_logger("nullsafe.validation")

if get_settings().debug_log:
    configure_debug_logging()
