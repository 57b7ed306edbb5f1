"""Shared test fixtures."""

from __future__ import annotations

import logging
import os

import pytest
import structlog
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch):
    """Provide default settings for all tests."""
    for key in list(os.environ):
        if key.startswith("CSPGUARD_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CSPGUARD_LOG_JSON", "false")
    monkeypatch.setenv("CSPGUARD_LOG_LEVEL", "debug")

    # Reset cached settings and presets
    import cspguard.config.loader as loader
    import cspguard.config.presets as presets
    loader._settings = None
    presets.reset_presets_cache()
    yield
    loader._settings = None
    presets.reset_presets_cache()

    # Drop handlers bound to this test's captured streams
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def client():
    """Create a FastAPI test client using the configured preset."""
    from cspguard.main import create_app

    with TestClient(create_app(), raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def report_body():
    """A complete violation report as sent by browsers."""
    return {
        "csp-report": {
            "blocked-uri": "http://evil.com",
            "document-uri": "https://example.com",
            "disposition": "report",
            "referrer": "https://example.com/blog",
            "status-code": 200,
            "original-policy": "default-src 'none'",
            "violated-directive": "default-src 'none'",
            "effective-directive": "default-src 'none'",
            "script-sample": "alert(1)",
            "source-file": "app.js",
            "line-number": 2,
            "column-number": 3,
        }
    }
