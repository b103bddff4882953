"""Pytest configuration shared by the unit and integration tests."""

from collections.abc import Iterator

import pytest

from fhir_r4.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Make every test read settings from its own environment."""
    monkeypatch.delenv("FHIR_R4_STRICT_DECODING", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
