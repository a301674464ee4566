from __future__ import annotations

from datetime import datetime, timedelta

from geo_attendance.core.constants import (
    MSG_CHECKIN_DUPLICATE,
    MSG_CHECKOUT_INVALID,
    MSG_FIELDS_REQUIRED,
    WELCOME_MESSAGE,
)

from fakes import BrokenAttendance


def _body(at: datetime, user_id="E1", **overrides):
    body = {"userId": user_id, "timestamp": at.isoformat(), "latitude": 1, "longitude": 2}
    body.update(overrides)
    return body


def test_index_banner(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_json() == {"message": WELCOME_MESSAGE}


def test_checkin_then_duplicate(client, attendance_repo, fixed_now):
    resp = client.post("/api/checkin", json=_body(fixed_now))
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Check-in successful."}

    rec = attendance_repo.get_for_employee_and_date("E1", fixed_now.date())
    assert rec.check_in_time == fixed_now
    assert (rec.check_in_location.latitude, rec.check_in_location.longitude) == (1.0, 2.0)

    resp = client.post("/api/checkin", json=_body(fixed_now))
    assert resp.status_code == 400
    assert resp.get_json() == {"message": MSG_CHECKIN_DUPLICATE}
    assert len(attendance_repo.all()) == 1


def test_checkin_accepts_epoch_milliseconds(client, attendance_repo, fixed_now):
    millis = int(fixed_now.timestamp() * 1000)

    resp = client.post("/api/checkin", json=_body(fixed_now, timestamp=millis))

    assert resp.status_code == 200
    rec = attendance_repo.get_for_employee_and_date("E1", fixed_now.date())
    assert rec.check_in_time == fixed_now


def test_checkin_zero_coordinates_are_valid(client, fixed_now):
    resp = client.post("/api/checkin", json=_body(fixed_now, latitude=0, longitude=0))
    assert resp.status_code == 200


def test_checkin_missing_fields(client, attendance_repo, fixed_now):
    for missing in ("userId", "timestamp", "latitude", "longitude"):
        body = _body(fixed_now)
        del body[missing]
        resp = client.post("/api/checkin", json=body)
        assert resp.status_code == 400, missing
        assert resp.get_json() == {"error": MSG_FIELDS_REQUIRED}

    assert attendance_repo.all() == []


def test_checkin_rejects_bad_timestamp_and_coordinates(client, fixed_now):
    assert client.post("/api/checkin", json=_body(fixed_now, timestamp="yesterday-ish")).status_code == 400
    assert client.post("/api/checkin", json=_body(fixed_now, latitude="north")).status_code == 400
    assert client.post("/api/checkin", data="not json", content_type="text/plain").status_code == 400


def test_checkin_rejects_non_finite_and_out_of_range_coordinates(client, attendance_repo, fixed_now):
    for overrides in ({"latitude": "nan"}, {"longitude": "inf"}, {"latitude": 999}, {"longitude": -180.5}):
        resp = client.post("/api/checkin", json=_body(fixed_now, **overrides))
        assert resp.status_code == 400, overrides
        assert resp.get_json() == {"error": MSG_FIELDS_REQUIRED}

    assert attendance_repo.all() == []


def test_checkout_flow(client, attendance_repo, fixed_now):
    t1 = fixed_now + timedelta(hours=8)
    client.post("/api/checkin", json=_body(fixed_now))

    resp = client.post("/api/checkout", json=_body(t1, latitude=5, longitude=6))
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Check-out successful."}

    rec = attendance_repo.get_for_employee_and_date("E1", fixed_now.date())
    assert rec.check_out_time == t1

    resp = client.post("/api/checkout", json=_body(t1 + timedelta(minutes=1)))
    assert resp.status_code == 400
    assert resp.get_json() == {"message": MSG_CHECKOUT_INVALID}


def test_checkout_without_checkin(client, attendance_repo, fixed_now):
    resp = client.post("/api/checkout", json=_body(fixed_now, "E2"))
    assert resp.status_code == 400
    assert resp.get_json() == {"message": MSG_CHECKOUT_INVALID}
    assert attendance_repo.all() == []


def test_checkout_missing_fields(client):
    resp = client.post("/api/checkout", json={"userId": "E1"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": MSG_FIELDS_REQUIRED}


def test_status_without_record(client):
    resp = client.get("/api/status/E9")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "Not Checked In", "checkInTime": None, "checkOutTime": None}


def test_status_tracks_transitions(client, fixed_now):
    client.post("/api/checkin", json=_body(fixed_now))

    data = client.get("/api/status/E1").get_json()
    assert data["status"] == "Checked In"
    assert data["checkInTime"] == "2026-02-02T08:30:00"
    assert data["checkOutTime"] is None

    client.post("/api/checkout", json=_body(fixed_now + timedelta(hours=9)))
    data = client.get("/api/status/E1").get_json()
    assert data["status"] == "Checked Out"
    assert data["checkOutTime"] == "2026-02-02T17:30:00"


def test_store_failure_maps_to_internal_error(monkeypatch, fixed_now):
    monkeypatch.setenv("APP_ENV", "testing")
    from geo_attendance.main import create_app

    client = create_app(attendance_repo=BrokenAttendance(), clock=lambda: fixed_now).test_client()

    resp = client.get("/api/status/E1")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal Server Error"}

    resp = client.post("/api/checkin", json=_body(fixed_now))
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal Server Error"}
