import pytest

from pharmavault.catalog.store import load_catalog
from pharmavault.core.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    monkeypatch.setenv("TELEMETRY_ENABLED", "false")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("CATALOG_PATH", raising=False)
    get_settings.cache_clear()
    load_catalog.cache_clear()
    yield
    get_settings.cache_clear()
    load_catalog.cache_clear()
