from __future__ import annotations

from datetime import datetime

import pytest

from fakes import InMemoryAttendance


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def app(monkeypatch, attendance_repo, fixed_now):
    monkeypatch.setenv("APP_ENV", "testing")
    from geo_attendance.main import create_app

    return create_app(attendance_repo=attendance_repo, clock=lambda: fixed_now)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socketio(app):
    return app.extensions["socketio"]
