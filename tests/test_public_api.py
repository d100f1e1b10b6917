"""
HTTP-level tests for the public booking API.
"""
import pytest
from fastapi.testclient import TestClient

from api.v1.endpoints.public import get_repository
from main import allowed_origins, app
from services.catalog import SLOT_CATALOG


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def offline_client(offline_repo):
    app.dependency_overrides[get_repository] = lambda: offline_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root_health(client):
    assert client.get("/").json() == {"status": "ok"}


def test_create_booking(client, repo, valid_booking):
    response = client.post("/api/v1/bookings", json=valid_booking)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["bookingId"]
    assert body["message"] == "Booking submitted successfully"
    assert "error" not in body
    assert repo.collections["ConsultationBookings"][0]["status"] == "pending"


def test_create_booking_missing_phone(client, repo, valid_booking):
    del valid_booking["phone"]

    response = client.post("/api/v1/bookings", json=valid_booking)

    assert response.status_code == 200
    assert response.json() == {"success": False, "error": "Missing required fields"}
    assert repo.insert_calls == 0


def test_create_booking_with_non_object_body(client):
    response = client.post("/api/v1/bookings", json=["Jo"])

    assert response.status_code == 200
    assert response.json()["error"] == "Missing required fields"


def test_create_booking_bad_email(client, valid_booking):
    valid_booking["email"] = "bad-email"
    body = client.post("/api/v1/bookings", json=valid_booking).json()
    assert body == {"success": False, "error": "Invalid email address"}


def test_create_booking_store_offline(offline_client, valid_booking):
    body = offline_client.post("/api/v1/bookings", json=valid_booking).json()

    assert body["success"] is True
    assert body["bookingId"].startswith("temp-")
    degraded = offline_client.get("/api/v1/health/degraded").json()
    assert degraded == {"degradedWrites": 1, "failedOpenReads": 0}


def test_validate_booking(client):
    body = client.post("/api/v1/bookings/validate", json={}).json()

    assert body["isValid"] is False
    assert len(body["errors"]) == 6


def test_validate_booking_ok(client, valid_booking):
    body = client.post("/api/v1/bookings/validate", json=valid_booking).json()
    assert body == {"isValid": True, "errors": []}


def test_contact(client, repo):
    body = client.post(
        "/api/v1/contact", json={"name": "Sam", "email": "Sam@Example.com"}
    ).json()

    assert body["success"] is True
    assert body["submissionId"]
    assert repo.collections["ContactSubmissions"][0]["email"] == "sam@example.com"


def test_availability(client, valid_booking):
    client.post("/api/v1/bookings", json=valid_booking)

    body = client.get("/api/v1/availability", params={"date": "2024-02-15"}).json()

    assert body == {
        "success": True,
        "availableSlots": [s for s in SLOT_CATALOG if s != "09:00"],
        "date": "2024-02-15",
    }


def test_availability_without_date(client):
    body = client.get("/api/v1/availability").json()
    assert body == {"success": False, "error": "Could not retrieve available time slots"}


def test_availability_store_offline(offline_client):
    body = offline_client.get("/api/v1/availability", params={"date": "2024-02-15"}).json()

    assert body["success"] is True
    assert body["availableSlots"] == list(SLOT_CATALOG)


def test_services(client):
    body = client.get("/api/v1/services").json()
    assert len(body) == 4
    assert "duration_minutes" not in body[-1]


def test_time_slots(client):
    body = client.get("/api/v1/time-slots").json()
    assert body[4] == {"value": "13:00", "label": "1:00 PM"}


def test_booking_window(client):
    body = client.get("/api/v1/booking-window").json()
    assert set(body) == {"minDate", "maxDate", "disabledDates"}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("*", ["*"]),
        ('"*"', ["*"]),
        ("https://surecan.example, http://localhost:3000,", ["https://surecan.example", "http://localhost:3000"]),
    ],
)
def test_allowed_origins(raw, expected):
    assert allowed_origins(raw) == expected
