"""
Shared pytest fixtures for nullsafe tests.
"""

import pytest

from nullsafe import NullSafeValidator
from nullsafe.config import NullSafeSettings, reset_settings, set_settings
from nullsafe.logging_config import reset_debug_logging


@pytest.fixture(autouse=True)
def isolated_settings():
    """
    Pin library settings for every test.

    Tests must not depend on NULLSAFE_* variables of the developer's shell,
    so each test starts from NullSafeSettings.for_testing() and the
    process-wide instance is dropped afterwards.
    """
    set_settings(NullSafeSettings.for_testing())
    yield
    reset_settings()
    reset_debug_logging()


@pytest.fixture
def fail_closed():
    """Settings where an absent value fails validation."""
    set_settings(NullSafeSettings.for_testing(fail_on_absent=True))
    yield


@pytest.fixture
def password_validator():
    """Factory for the password rules: min length 8 and at least one digit."""
    def build(container):
        return (
            NullSafeValidator.of(container)
            .if_string()
            .min_length(8)
            .matches(r".*[0-9].*")
            .and_()
        )
    return build
