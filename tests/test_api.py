from datetime import datetime, timedelta

from app.core.database import utcnow
from conftest import as_user, make_court


class TestAuth:
    async def test_check_in_requires_identity(self, client, court):
        response = await client.post(f"/courts/{court.id}/check-ins")

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    async def test_unknown_user_rejected(self, client, court):
        response = await client.post(f"/courts/{court.id}/check-ins", headers=as_user(999))

        assert response.status_code == 401


class TestCheckInEndpoints:
    async def test_check_in_flow(self, client, alice, court):
        response = await client.post(f"/courts/{court.id}/check-ins", headers=as_user(alice.id))
        assert response.status_code == 201
        assert response.json()["court_id"] == court.id

        response = await client.get("/check-ins/me", headers=as_user(alice.id))
        assert response.status_code == 200
        assert response.json()["user_id"] == alice.id

        response = await client.post(f"/courts/{court.id}/check-ins", headers=as_user(alice.id))
        assert response.status_code == 409
        assert response.json()["detail"] == "Already checked in"

        response = await client.delete("/check-ins/me", headers=as_user(alice.id))
        assert response.status_code == 204

        response = await client.get("/check-ins/me", headers=as_user(alice.id))
        assert response.status_code == 200
        assert response.json() is None

    async def test_check_out_when_not_checked_in(self, client, alice):
        response = await client.delete("/check-ins/me", headers=as_user(alice.id))

        assert response.status_code == 409
        assert response.json()["detail"] == "Not checked in"

    async def test_check_in_unknown_court(self, client, alice):
        response = await client.post("/courts/999/check-ins", headers=as_user(alice.id))

        assert response.status_code == 404

    async def test_listing_respects_blocks(self, client, alice, bob, dave, court):
        await client.post(f"/courts/{court.id}/check-ins", headers=as_user(alice.id))
        await client.post(f"/courts/{court.id}/check-ins", headers=as_user(bob.id))
        response = await client.post(
            "/blocked-users", json={"blocked_user_id": alice.id}, headers=as_user(bob.id)
        )
        assert response.status_code == 204

        seen_by_bob = await client.get(f"/courts/{court.id}/check-ins", headers=as_user(bob.id))
        seen_by_dave = await client.get(f"/courts/{court.id}/check-ins", headers=as_user(dave.id))
        seen_by_guest = await client.get(f"/courts/{court.id}/check-ins")

        assert [c["user"]["name"] for c in seen_by_bob.json()] == ["Bob"]
        assert {c["user"]["name"] for c in seen_by_dave.json()} == {"Alice", "Bob"}
        assert len(seen_by_guest.json()) == 2


class TestPlannedVisitEndpoints:
    async def test_create_list_and_delete(self, client, alice, court):
        planned = (utcnow() + timedelta(hours=2)).replace(microsecond=0)

        response = await client.post(
            f"/courts/{court.id}/planned-visits",
            json={"planned_time": planned.isoformat()},
            headers=as_user(alice.id),
        )
        assert response.status_code == 201
        visit_id = response.json()["id"]

        response = await client.post(
            f"/courts/{court.id}/planned-visits",
            json={"planned_time": planned.isoformat()},
            headers=as_user(alice.id),
        )
        assert response.status_code == 409

        response = await client.get(f"/courts/{court.id}/planned-visits")
        assert [v["id"] for v in response.json()] == [visit_id]
        assert response.json()[0]["user"]["name"] == "Alice"

        response = await client.get(f"/courts/{court.id}/planned-visits/slots")
        assert len(response.json()) == 1
        assert len(response.json()[0]["visits"]) == 1

        response = await client.get(
            f"/courts/{court.id}/planned-visits/me", headers=as_user(alice.id)
        )
        assert [v["id"] for v in response.json()] == [visit_id]

        response = await client.delete(f"/planned-visits/{visit_id}", headers=as_user(alice.id))
        assert response.status_code == 204

    async def test_past_time_rejected(self, client, alice, court):
        planned = utcnow() - timedelta(minutes=1)

        response = await client.post(
            f"/courts/{court.id}/planned-visits",
            json={"planned_time": planned.isoformat()},
            headers=as_user(alice.id),
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot plan for past times"

    async def test_timezone_aware_time_is_normalized(self, client, alice, court):
        planned = "2099-06-01T10:00:00-07:00"

        response = await client.post(
            f"/courts/{court.id}/planned-visits",
            json={"planned_time": planned},
            headers=as_user(alice.id),
        )

        assert response.status_code == 201
        assert response.json()["planned_time"] == "2099-06-01T17:00:00"

    async def test_cannot_delete_someone_elses_visit(self, client, alice, bob, court):
        planned = utcnow() + timedelta(hours=1)
        response = await client.post(
            f"/courts/{court.id}/planned-visits",
            json={"planned_time": planned.isoformat()},
            headers=as_user(alice.id),
        )

        response = await client.delete(
            f"/planned-visits/{response.json()['id']}", headers=as_user(bob.id)
        )

        assert response.status_code == 403

    async def test_delete_missing_visit(self, client, alice):
        response = await client.delete("/planned-visits/999", headers=as_user(alice.id))

        assert response.status_code == 404


class TestBlockedUserEndpoints:
    async def test_block_status_and_unblock(self, client, alice, bob):
        await client.post("/blocked-users", json={"blocked_user_id": bob.id}, headers=as_user(alice.id))
        await client.post("/blocked-users", json={"blocked_user_id": bob.id}, headers=as_user(alice.id))

        response = await client.get(f"/blocked-users/{bob.id}/status", headers=as_user(alice.id))
        assert response.json() == {"is_blocked": True, "is_blocked_by": False}

        response = await client.get(f"/blocked-users/{alice.id}/status", headers=as_user(bob.id))
        assert response.json() == {"is_blocked": False, "is_blocked_by": True}

        response = await client.get("/blocked-users", headers=as_user(alice.id))
        assert [u["id"] for u in response.json()] == [bob.id]

        response = await client.delete(f"/blocked-users/{bob.id}", headers=as_user(alice.id))
        assert response.status_code == 204

        response = await client.delete(f"/blocked-users/{bob.id}", headers=as_user(alice.id))
        assert response.status_code == 204

        response = await client.get("/blocked-users", headers=as_user(alice.id))
        assert response.json() == []

    async def test_block_self_rejected(self, client, alice):
        response = await client.post(
            "/blocked-users", json={"blocked_user_id": alice.id}, headers=as_user(alice.id)
        )

        assert response.status_code == 400


class TestCourtAndUserEndpoints:
    async def test_create_and_get_court(self, client):
        response = await client.post(
            "/courts",
            json={"name": "Queen Elizabeth Park", "latitude": 49.237805, "longitude": -123.111925},
        )
        assert response.status_code == 201
        court_id = response.json()["id"]
        assert datetime.fromisoformat(response.json()["created_at"]).tzinfo is None

        response = await client.get(f"/courts/{court_id}")
        assert response.json()["name"] == "Queen Elizabeth Park"

        response = await client.patch(f"/courts/{court_id}/notes", json={"notes": "Nets up"})
        assert response.json()["notes"] == "Nets up"

    async def test_default_court(self, client, db, alice):
        await make_court(db, "Queen Elizabeth Park")
        jericho = await make_court(db, "Jericho Beach")
        kits = await make_court(db, "Kitsilano")

        response = await client.get("/courts/default")
        assert response.json()["id"] == jericho.id

        response = await client.put(
            "/users/me/selected-court", json={"court_id": kits.id}, headers=as_user(alice.id)
        )
        assert response.json()["selected_court_id"] == kits.id

        response = await client.get("/courts/default", headers=as_user(alice.id))
        assert response.json()["id"] == kits.id

    async def test_create_user_and_me(self, client):
        response = await client.post("/users", json={"name": "Erin", "email": "erin@example.com"})
        assert response.status_code == 201
        user_id = response.json()["id"]

        response = await client.get("/users/me", headers=as_user(user_id))
        assert response.json()["email"] == "erin@example.com"


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
