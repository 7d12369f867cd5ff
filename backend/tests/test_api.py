"""
Faithtrack Backend: API Endpoint Tests
========================================

What:  End-to-end tests through the FastAPI app with HTTPX AsyncClient.
How:   The app runs against the per-test in-memory database; Grok is
       replaced with httpx.MockTransport via monkeypatch.

What we test:
    ✅ Status codes for every error class (401, 404, 422, 502)
    ✅ Create → 201 {id}, delete → 204
    ✅ Owner scoping across two users
    ✅ Health check and request id header
"""

import uuid

import httpx
import pytest

from faithtrack.services.grok_service import grok_service


PRAYER = {
    "title": "Healing for Mom",
    "content": "Please be with her during surgery.",
    "prayer_type": "petition",
    "is_public": False,
}


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/health", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"

        generated = await test_client.get("/health")
        assert len(generated.headers["X-Request-ID"]) == 8


class TestPrayerEndpoints:

    @pytest.mark.asyncio
    async def test_anonymous_create_is_401(self, test_client):
        response = await test_client.post("/api/prayers", json=PRAYER)
        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "unauthenticated"
        assert "request_id" in body

    @pytest.mark.asyncio
    async def test_lifecycle(self, test_client, auth_headers):
        owner = auth_headers("user-1")
        other = auth_headers("user-2")

        created = await test_client.post("/api/prayers", json=PRAYER, headers=owner)
        assert created.status_code == 201
        prayer_id = created.json()["id"]

        listed = await test_client.get("/api/prayers", headers=owner)
        assert [p["id"] for p in listed.json()] == [prayer_id]
        assert listed.json()[0]["is_answered"] is False
        assert (await test_client.get("/api/prayers", headers=other)).json() == []

        foreign = await test_client.post(f"/api/prayers/{prayer_id}/answered", headers=other)
        assert foreign.status_code == 404
        assert foreign.json()["error"] == "not_found"

        answered = await test_client.post(f"/api/prayers/{prayer_id}/answered", headers=owner)
        assert answered.status_code == 200
        assert answered.json()["is_answered"] is True

        assert (await test_client.delete(f"/api/prayers/{prayer_id}", headers=other)).status_code == 404
        deleted = await test_client.delete(f"/api/prayers/{prayer_id}", headers=owner)
        assert deleted.status_code == 204
        assert (await test_client.get("/api/prayers", headers=owner)).json() == []

    @pytest.mark.asyncio
    async def test_foreign_and_missing_look_identical(self, test_client, auth_headers):
        created = await test_client.post("/api/prayers", json=PRAYER, headers=auth_headers("user-1"))
        prayer_id = created.json()["id"]
        other = auth_headers("user-2")

        foreign = await test_client.delete(f"/api/prayers/{prayer_id}", headers=other)
        missing = await test_client.delete(f"/api/prayers/{uuid.uuid4()}", headers=other)

        assert foreign.status_code == missing.status_code == 404
        assert foreign.json()["message"] == missing.json()["message"]

    @pytest.mark.asyncio
    async def test_validation(self, test_client, auth_headers):
        headers = auth_headers()
        bad_type = await test_client.post(
            "/api/prayers", json={**PRAYER, "prayer_type": "complaint"}, headers=headers
        )
        assert bad_type.status_code == 422

        long_title = await test_client.post(
            "/api/prayers", json={**PRAYER, "title": "x" * 201}, headers=headers
        )
        assert long_title.status_code == 422

        bad_id = await test_client.delete("/api/prayers/not-a-uuid", headers=headers)
        assert bad_id.status_code == 422

        no_visibility = {k: v for k, v in PRAYER.items() if k != "is_public"}
        missing_flag = await test_client.post("/api/prayers", json=no_visibility, headers=headers)
        assert missing_flag.status_code == 422

    @pytest.mark.asyncio
    async def test_anonymous_delete_is_401(self, test_client, auth_headers):
        owner = auth_headers("user-1")
        created = await test_client.post("/api/prayers", json=PRAYER, headers=owner)
        prayer_id = created.json()["id"]

        response = await test_client.delete(f"/api/prayers/{prayer_id}")

        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"
        listed = await test_client.get("/api/prayers", headers=owner)
        assert [p["id"] for p in listed.json()] == [prayer_id]


class TestPrayerWallEndpoints:

    @pytest.mark.asyncio
    async def test_public_listing_and_praying(self, test_client, auth_headers):
        created = await test_client.post(
            "/api/prayer-wall",
            json={"intention": "Peace for my family", "user_name": "Ana"},
            headers=auth_headers("user-1"),
        )
        assert created.status_code == 201
        post_id = created.json()["id"]

        prayed = await test_client.post(
            f"/api/prayer-wall/{post_id}/pray", headers=auth_headers("user-2")
        )
        assert prayed.status_code == 200
        assert prayed.json()["prayer_count"] == 1

        wall = await test_client.get("/api/prayer-wall")
        assert wall.status_code == 200
        assert wall.headers["Cache-Control"] == "no-cache"
        [post] = wall.json()
        assert post["user_name"] == "Ana"
        assert post["prayer_count"] == 1

    @pytest.mark.asyncio
    async def test_anonymous_cannot_pray(self, test_client, auth_headers):
        created = await test_client.post(
            "/api/prayer-wall", json={"intention": "Rain"}, headers=auth_headers()
        )
        response = await test_client.post(f"/api/prayer-wall/{created.json()['id']}/pray")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_pray_for_missing_post(self, test_client, auth_headers):
        response = await test_client.post(
            f"/api/prayer-wall/{uuid.uuid4()}/pray", headers=auth_headers()
        )
        assert response.status_code == 404


class TestJournalEndpoints:

    @pytest.mark.asyncio
    async def test_create_list_delete(self, test_client, auth_headers):
        headers = auth_headers()
        created = await test_client.post(
            "/api/journal",
            json={"title": "Sunday", "content": "Sermon on hope.", "mood": "hopeful"},
            headers=headers,
        )
        assert created.status_code == 201
        entry_id = created.json()["id"]

        [entry] = (await test_client.get("/api/journal", headers=headers)).json()
        assert entry["mood"] == "hopeful"

        assert (await test_client.delete(f"/api/journal/{entry_id}", headers=headers)).status_code == 204
        assert (await test_client.get("/api/journal", headers=headers)).json() == []

    @pytest.mark.asyncio
    async def test_unknown_mood(self, test_client, auth_headers):
        response = await test_client.post(
            "/api/journal",
            json={"title": "t", "content": "c", "mood": "angry"},
            headers=auth_headers(),
        )
        assert response.status_code == 422


class TestDevotionalEndpoints:

    @pytest.mark.asyncio
    async def test_by_date(self, test_client, auth_headers):
        headers = auth_headers()
        created = await test_client.post(
            "/api/devotionals",
            json={"date": "2024-04-12", "verse": "Psalm 46:10", "reflection": "Be still."},
            headers=headers,
        )
        assert created.status_code == 201

        found = await test_client.get("/api/devotionals/by-date/2024-04-12", headers=headers)
        assert found.status_code == 200
        assert found.json()["verse"] == "Psalm 46:10"

        empty = await test_client.get("/api/devotionals/by-date/2024-04-13", headers=headers)
        assert empty.status_code == 200
        assert empty.json() is None

    @pytest.mark.asyncio
    async def test_bad_dates(self, test_client, auth_headers):
        headers = auth_headers()
        assert (
            await test_client.get("/api/devotionals/by-date/April-12", headers=headers)
        ).status_code == 422
        assert (
            await test_client.post(
                "/api/devotionals",
                json={"date": "2024-02-30", "verse": "v", "reflection": "r"},
                headers=headers,
            )
        ).status_code == 422

    @pytest.mark.asyncio
    async def test_delete(self, test_client, auth_headers):
        headers = auth_headers()
        created = await test_client.post(
            "/api/devotionals",
            json={"date": "2024-04-12", "verse": "v", "reflection": "r"},
            headers=headers,
        )
        devotional_id = created.json()["id"]

        assert (
            await test_client.delete(f"/api/devotionals/{devotional_id}", headers=auth_headers("user-2"))
        ).status_code == 404
        assert (
            await test_client.delete(f"/api/devotionals/{devotional_id}", headers=headers)
        ).status_code == 204


class TestSearchEndpoints:

    @pytest.mark.asyncio
    async def test_search_saves_answer(self, test_client, auth_headers, monkeypatch):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200, json={"choices": [{"message": {"content": "Answer text"}}]}
            )
        )
        monkeypatch.setattr(grok_service, "_transport", transport)
        headers = auth_headers()

        response = await test_client.post(
            "/api/search",
            json={"query": "What is hope?", "api_key": "xai-test-key"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json() == {"query": "What is hope?", "response": "Answer text"}
        [record] = (await test_client.get("/api/search/history", headers=headers)).json()
        assert record["query"] == "What is hope?"
        assert record["response"] == "Answer text"

    @pytest.mark.asyncio
    async def test_upstream_error_is_502(self, test_client, auth_headers, monkeypatch):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(401, text="Incorrect API key provided")
        )
        monkeypatch.setattr(grok_service, "_transport", transport)
        headers = auth_headers()

        response = await test_client.post(
            "/api/search",
            json={"query": "What is hope?", "api_key": "bad-key"},
            headers=headers,
        )

        assert response.status_code == 502
        body = response.json()
        assert body["error"] == "upstream_error"
        assert body["details"]["upstream_status"] == 401
        assert body["details"]["upstream_body"] == "Incorrect API key provided"
        assert (await test_client.get("/api/search/history", headers=headers)).json() == []

    @pytest.mark.asyncio
    async def test_anonymous_search_is_401(self, test_client, monkeypatch):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200, json={"choices": [{"message": {"content": "Answer text"}}]}
            )
        )
        monkeypatch.setattr(grok_service, "_transport", transport)

        response = await test_client.post(
            "/api/search", json={"query": "What is hope?", "api_key": "xai-test-key"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_api_key(self, test_client, auth_headers):
        response = await test_client.post(
            "/api/search", json={"query": "What is hope?"}, headers=auth_headers()
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_manual_history_append(self, test_client, auth_headers):
        headers = auth_headers()
        created = await test_client.post(
            "/api/search/history",
            json={"query": "Q", "response": "A"},
            headers=headers,
        )
        assert created.status_code == 201

        [record] = (await test_client.get("/api/search/history", headers=headers)).json()
        assert record["id"] == created.json()["id"]
        assert (await test_client.get("/api/search/history")).json() == []
