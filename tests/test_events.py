"""Tests for the event endpoints and the QR code mutation rules."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import TypeAdapter

from backend.fastapi.core.exceptions import InsecureUrl, QrCodeImmutable
from backend.fastapi.crud.event import check_qr_code_change


QR_CODE = "https://cdn.cloudinary.com/a.png"
IST = timezone(timedelta(hours=5, minutes=30))


def parse_timestamp(value):
    return TypeAdapter(datetime).validate_python(value)


@pytest.fixture
def create(client, auth_headers, event_payload):
    """Create an event through the API and return its JSON body."""
    def _create(**overrides):
        response = client.post("/api/events", json={**event_payload, **overrides}, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


class TestCreateEvent:
    """Tests for POST /api/events."""

    def test_create_with_trusted_qr_code(self, client, auth_headers, event_payload):
        response = client.post(
            "/api/events",
            json={**event_payload, "qrCode": "https://files.imagekit.io/x.png"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["qrCode"] == "https://files.imagekit.io/x.png"

    def test_create_with_http_qr_code(self, client, auth_headers, event_payload):
        response = client.post(
            "/api/events",
            json={**event_payload, "qrCode": "http://imagekit.io/x.png"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "QR code URL must use HTTPS"

    def test_create_with_untrusted_qr_code(self, client, auth_headers, event_payload):
        response = client.post(
            "/api/events",
            json={**event_payload, "qrCode": "https://evil.com/x.png"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "QR code URL must be from a trusted domain"

    def test_create_with_blank_qr_code_skips_check(self, create):
        assert create(qrCode="   ")["qrCode"] == "   "

    def test_create_requires_token(self, client, event_payload):
        assert client.post("/api/events", json=event_payload).status_code == 401

    def test_create_rejects_unknown_event_type(self, client, auth_headers, event_payload):
        response = client.post(
            "/api/events",
            json={**event_payload, "eventType": "concert"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_create_requires_core_fields(self, client, auth_headers):
        response = client.post("/api/events", json={"title": "Untitled"}, headers=auth_headers)
        assert response.status_code == 400

    def test_create_requires_coordinator_contact(self, client, auth_headers, event_payload):
        response = client.post(
            "/api/events",
            json={**event_payload, "coordinators": [{"name": "Asha"}]},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_title_is_trimmed(self, create):
        assert create(title="  Code Sprint  ")["title"] == "Code Sprint"


class TestRoundTrip:
    """Create followed by get returns what was sent plus defaults."""

    def test_unsupplied_fields_take_defaults(self, client, create, event_payload):
        created = create()

        response = client.get(f"/api/events/{created['id']}")

        assert response.status_code == 200
        event = response.json()
        for key, value in event_payload.items():
            assert event[key] == value
        assert event["registrationFees"] == {"solo": 0, "team": 0}
        assert event["qrCode"] == ""
        assert event["upiId"] == ""
        assert event["date"] is None
        assert event["location"] == ""
        assert event["aboutContent"] == ""
        assert event["detailsContent"] == ""
        assert event["rules"] == []
        assert event["requirements"] == []
        assert event["prizes"] == {"first": "", "second": "", "third": "", "other": ""}
        assert event["coordinators"] == []
        assert event["startTime"] == ""
        assert event["endTime"] == ""
        assert event["isTeamEvent"] is False
        assert event["teamSize"] == {"min": 1, "max": 1}
        assert event["isActive"] is True

    def test_supplied_fields_are_kept(self, client, create):
        supplied = {
            "registrationFees": {"solo": 100, "team": 250},
            "qrCode": QR_CODE,
            "upiId": "techfest@upi",
            "date": "2026-03-14T10:00:00+05:30",
            "location": "Main Auditorium",
            "aboutContent": "About the sprint",
            "detailsContent": "Details",
            "rules": ["No plagiarism", "Bring your laptop"],
            "requirements": ["Laptop"],
            "prizes": {"first": "5000", "second": "3000", "third": "1000", "other": "Goodies"},
            "coordinators": [
                {"name": "Asha", "contact": "9999999999", "email": "asha@techfest.in"},
                {"name": "Ravi", "contact": "8888888888"},
            ],
            "startTime": "10:00 AM",
            "endTime": "4:00 PM",
            "isTeamEvent": True,
            "teamSize": {"min": 2, "max": 4},
            "isActive": False,
        }
        created = create(**supplied)

        event = client.get(f"/api/events/{created['id']}").json()

        for key, value in supplied.items():
            if key in ("coordinators", "date"):
                continue
            assert event[key] == value
        assert parse_timestamp(event["date"]) == datetime(2026, 3, 14, 10, 0, tzinfo=IST)
        assert event["coordinators"] == [
            {"name": "Asha", "contact": "9999999999", "email": "asha@techfest.in"},
            {"name": "Ravi", "contact": "8888888888", "email": None},
        ]

    def test_offset_date_comes_back_as_same_instant_in_utc(self, client, create):
        created = create(date="2026-03-14T10:00:00+05:30")

        event = client.get(f"/api/events/{created['id']}").json()

        stored = parse_timestamp(event["date"])
        assert stored == datetime(2026, 3, 14, 4, 30, tzinfo=timezone.utc)
        assert stored.utcoffset() == timedelta(0)

    def test_utc_date_keeps_its_offset(self, client, create):
        created = create(date="2026-03-14T10:00:00Z")

        event = client.get(f"/api/events/{created['id']}").json()

        stored = parse_timestamp(event["date"])
        assert stored.tzinfo is not None
        assert stored == datetime(2026, 3, 14, 10, 0, tzinfo=timezone.utc)

    def test_timestamps_carry_utc_offset(self, create):
        created = create()

        assert parse_timestamp(created["createdAt"]).utcoffset() == timedelta(0)
        assert parse_timestamp(created["updatedAt"]).utcoffset() == timedelta(0)


class TestListAndGet:
    """Tests for GET /api/events and GET /api/events/{id}."""

    def test_list_excludes_inactive_events(self, client, create):
        active = create(title="Visible")
        hidden = create(title="Hidden", isActive=False)

        response = client.get("/api/events")

        assert response.status_code == 200
        ids = [event["id"] for event in response.json()]
        assert active["id"] in ids
        assert hidden["id"] not in ids
        assert all(event["isActive"] for event in response.json())

    def test_get_returns_inactive_event(self, client, create):
        hidden = create(isActive=False)

        response = client.get(f"/api/events/{hidden['id']}")

        assert response.status_code == 200
        assert response.json()["isActive"] is False

    def test_get_unknown_event(self, client):
        response = client.get(f"/api/events/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "Event not found"

    def test_get_with_malformed_id(self, client):
        assert client.get("/api/events/not-an-id").status_code == 400

    def test_list_is_public(self, client):
        response = client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == []


class TestUpdateEvent:
    """Tests for PUT /api/events/{id}."""

    def test_changing_existing_qr_code_is_forbidden(self, client, auth_headers, create):
        event = create(qrCode=QR_CODE)

        response = client.put(
            f"/api/events/{event['id']}",
            json={"qrCode": "https://cdn.cloudinary.com/b.png"},
            headers=auth_headers,
        )

        assert response.status_code == 403
        assert response.json()["detail"].startswith("Payment QR codes cannot be modified")

    def test_changing_existing_qr_code_to_invalid_value_is_still_forbidden(self, client, auth_headers, create):
        event = create(qrCode=QR_CODE)

        response = client.put(
            f"/api/events/{event['id']}",
            json={"qrCode": "http://evil.com/x.png"},
            headers=auth_headers,
        )

        assert response.status_code == 403

    def test_clearing_existing_qr_code_is_forbidden(self, client, auth_headers, create):
        event = create(qrCode=QR_CODE)

        response = client.put(f"/api/events/{event['id']}", json={"qrCode": ""}, headers=auth_headers)

        assert response.status_code == 403

    def test_resending_same_qr_code_is_allowed(self, client, auth_headers, create):
        event = create(qrCode=QR_CODE)

        response = client.put(
            f"/api/events/{event['id']}",
            json={"qrCode": QR_CODE, "capacity": 80},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["qrCode"] == QR_CODE
        assert response.json()["capacity"] == 80

    def test_first_qr_code_is_validated_and_stored(self, client, auth_headers, create):
        event = create()

        response = client.put(f"/api/events/{event['id']}", json={"qrCode": QR_CODE}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["qrCode"] == QR_CODE

        # Now locked in
        second = client.put(
            f"/api/events/{event['id']}",
            json={"qrCode": "https://files.imagekit.io/x.png"},
            headers=auth_headers,
        )
        assert second.status_code == 403

    def test_first_qr_code_must_be_trusted(self, client, auth_headers, create):
        event = create()

        response = client.put(
            f"/api/events/{event['id']}",
            json={"qrCode": "http://imagekit.io/x.png"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "QR code URL must use HTTPS"

    def test_update_only_touches_supplied_fields(self, client, auth_headers, create):
        event = create(rules=["Be on time"], location="Lab 1", qrCode=QR_CODE)

        response = client.put(f"/api/events/{event['id']}", json={"capacity": 10}, headers=auth_headers)

        assert response.status_code == 200
        updated = response.json()
        assert updated["capacity"] == 10
        assert updated["rules"] == ["Be on time"]
        assert updated["location"] == "Lab 1"
        assert updated["qrCode"] == QR_CODE
        assert updated["title"] == event["title"]

    def test_nested_fields_are_replaced_whole(self, client, auth_headers, create):
        event = create(registrationFees={"solo": 50, "team": 120})

        response = client.put(
            f"/api/events/{event['id']}",
            json={"registrationFees": {"solo": 75}},
            headers=auth_headers,
        )

        assert response.json()["registrationFees"] == {"solo": 75, "team": 0}

    def test_update_can_hide_event(self, client, auth_headers, create):
        event = create()

        client.put(f"/api/events/{event['id']}", json={"isActive": False}, headers=auth_headers)

        assert client.get("/api/events").json() == []
        assert client.get(f"/api/events/{event['id']}").json()["isActive"] is False

    def test_explicit_null_is_rejected(self, client, auth_headers, create):
        event = create()

        response = client.put(f"/api/events/{event['id']}", json={"title": None}, headers=auth_headers)

        assert response.status_code == 400

    def test_update_unknown_event(self, client, auth_headers):
        response = client.put(f"/api/events/{uuid4()}", json={"capacity": 5}, headers=auth_headers)
        assert response.status_code == 404

    def test_update_requires_token(self, client, create):
        event = create()
        assert client.put(f"/api/events/{event['id']}", json={"capacity": 5}).status_code == 401


class TestDeleteEvent:
    """Tests for DELETE /api/events/{id}."""

    def test_delete_then_get_is_not_found(self, client, auth_headers, create):
        event = create()

        response = client.delete(f"/api/events/{event['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Event removed", "id": event["id"]}
        assert client.get(f"/api/events/{event['id']}").status_code == 404

    def test_delete_unknown_event(self, client, auth_headers):
        response = client.delete(f"/api/events/{uuid4()}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Event not found"

    def test_delete_requires_token(self, client, create):
        event = create()
        assert client.delete(f"/api/events/{event['id']}").status_code == 401


class TestCheckQrCodeChange:
    """Unit tests for the QR code change rules."""

    def test_same_value_is_not_revalidated(self):
        # An untrusted value already stored can still be resent unchanged
        check_qr_code_change("https://legacy.example.net/qr.png", "https://legacy.example.net/qr.png")

    def test_different_value_is_rejected(self):
        with pytest.raises(QrCodeImmutable) as exc_info:
            check_qr_code_change(QR_CODE, "https://cdn.cloudinary.com/b.png")
        assert exc_info.value.status_code == 403

    def test_first_value_is_validated(self):
        with pytest.raises(InsecureUrl):
            check_qr_code_change("", "http://imagekit.io/x.png")

    def test_empty_to_empty_is_allowed(self):
        check_qr_code_change("", "")


def test_root_banner(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "is running" in response.json()["message"]
