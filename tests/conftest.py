"""Shared fixtures for strtools tests."""

import time

import pytest


@pytest.fixture
def local_tz(monkeypatch):
    """Switch the process timezone to a POSIX TZ string for one test."""

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
