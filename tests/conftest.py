"""Shared fixtures."""

import os

import pytest

from adapters.output_sinks import MemorySink


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from SOLID_SHOWCASE_* variables and any local .env."""
    for key in list(os.environ):
        if key.startswith("SOLID_SHOWCASE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sink():
    """In-memory output sink."""
    return MemorySink()
