"""
NullSafe Configuration.

Settings dataclass with environment variable support. A single process-wide
instance is consulted by the validation engine (absence policy) and by the
logging setup; tests swap it with set_settings()/reset_settings().
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os


# =============================================================================
# Default Values
# =============================================================================

DEFAULT_LOG_DIR = ".nullsafe"
DEBUG_LOG_FILE = "nullsafe_debug.log"

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _default_log_dir() -> Path:
    log_dir = os.environ.get("NULLSAFE_LOG_DIR")
    if log_dir:
        return Path(log_dir)
    return Path.cwd() / DEFAULT_LOG_DIR


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class NullSafeSettings:
    """Library-wide settings.

    ::: This is-in-layer Infrastructure-Layer.
    ::: This is a value-object.
    ::: This is stateless.

    Supports environment variables:
    - NULLSAFE_FAIL_ON_ABSENT: Absent values fail validation (default: false)
    - NULLSAFE_LOG_FAILURES: Log pipeline aborts and predicate errors at DEBUG (default: true)
    - NULLSAFE_DEBUG_LOG: Attach file + stderr debug handlers (default: disabled)
    - NULLSAFE_LOG_DIR: Directory for the debug log file (default: ./.nullsafe)
    """

    # Validation
    fail_on_absent: bool = field(default_factory=lambda: _env_flag("NULLSAFE_FAIL_ON_ABSENT", False))

    # Logging
    log_failures: bool = field(default_factory=lambda: _env_flag("NULLSAFE_LOG_FAILURES", True))
    debug_log: bool = field(default_factory=lambda: _env_flag("NULLSAFE_DEBUG_LOG", False))
    log_dir: Path = field(default_factory=_default_log_dir)

    @property
    def debug_log_path(self) -> Path:
        return self.log_dir / DEBUG_LOG_FILE

    def validate(self) -> list[str]:
        """Validate configuration and return list of warnings."""
        warnings = []

        if self.debug_log and not self.log_failures:
            warnings.append("Debug log enabled but NULLSAFE_LOG_FAILURES is off - pipeline aborts will not be traced")

        if self.log_dir.exists() and not self.log_dir.is_dir():
            warnings.append(f"Log directory {self.log_dir} exists and is not a directory")

        return warnings

    @classmethod
    def from_env(cls) -> "NullSafeSettings":
        """Create configuration from environment variables."""
        return cls()

    @classmethod
    def for_testing(cls, fail_on_absent: bool = False) -> "NullSafeSettings":
        """Create configuration for tests, independent of the environment."""
        return cls(
            fail_on_absent=fail_on_absent,
            log_failures=True,
            debug_log=False,
            log_dir=Path(DEFAULT_LOG_DIR),
        )


# =============================================================================
# Process-wide instance
# =============================================================================

_settings: Optional[NullSafeSettings] = None


def get_settings() -> NullSafeSettings:
    """Return the active settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = NullSafeSettings.from_env()
    return _settings


def set_settings(settings: NullSafeSettings) -> None:
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the active settings; the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "NullSafeSettings",
    "get_settings",
    "set_settings",
    "reset_settings",
    "DEFAULT_LOG_DIR",
    "DEBUG_LOG_FILE",
]
