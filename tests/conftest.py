"""Pytest configuration and shared fixtures for typolint tests."""

import pytest

from typolint.configuration import LOCALE_ENV_VAR
from typolint.linter import Linter


@pytest.fixture(autouse=True)
def isolate_locale_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove the locale environment variable so host settings cannot leak in."""
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)


@pytest.fixture
def english_linter() -> Linter:
    """Provide a linter for English text."""
    return Linter("en")


@pytest.fixture
def french_linter() -> Linter:
    """Provide a linter for French text."""
    return Linter("fr")
