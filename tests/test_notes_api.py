"""
Notekeeper — HTTP API Tests
=============================

What:  End-to-end tests of the routes, envelopes and exception handlers.
How:   HTTPX AsyncClient over ASGITransport against create_app() built with
       a tmp_path notes document (see conftest.py).
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from notekeeper.config import Settings
from notekeeper.main import create_app


class TestListNotes:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client, notes_path):
        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}
        assert notes_path.exists()

    @pytest.mark.asyncio
    async def test_list_corrupt_document_returns_500_envelope(self, test_client, notes_path):
        notes_path.parent.mkdir(parents=True)
        notes_path.write_text("[{broken", encoding="utf-8")

        response = await test_client.get("/api/notes")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Failed to load notes"
        assert str(notes_path) not in response.text


class TestCreateNote:

    @pytest.mark.asyncio
    async def test_create_returns_note_envelope(self, test_client):
        response = await test_client.post(
            "/api/notes", json={"title": "  Title  ", "content": "  body  "}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        note = body["data"]
        assert note["title"] == "Title"
        assert note["content"] == "body"
        assert note["id"]
        assert note["createdAt"] == note["updatedAt"]

    @pytest.mark.asyncio
    async def test_created_note_is_listed_first(self, test_client):
        await test_client.post("/api/notes", json={"title": "older"})
        created = (await test_client.post("/api/notes", json={"title": "newer"})).json()["data"]

        listed = (await test_client.get("/api/notes")).json()["data"]

        assert listed[0] == created
        assert [n["title"] for n in listed] == ["newer", "older"]

    @pytest.mark.asyncio
    async def test_create_persists_camel_case_document(self, test_client, notes_path):
        await test_client.post("/api/notes", json={"title": "Saved"})

        data = json.loads(notes_path.read_text(encoding="utf-8"))
        assert data[0]["title"] == "Saved"
        assert "createdAt" in data[0]
        assert "created_at" not in data[0]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": "   "}, {"title": None}])
    async def test_create_without_title_returns_400(self, test_client, payload):
        response = await test_client.post("/api/notes", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "title required"

    @pytest.mark.asyncio
    async def test_create_without_body_returns_400(self, test_client):
        response = await test_client.post("/api/notes")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["error"] == "title required"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content, headers",
        [
            (b'["x"]', {"Content-Type": "application/json"}),
            (b'{"title": 42}', {"Content-Type": "application/json"}),
            (b"{not json", {"Content-Type": "application/json"}),
        ],
    )
    async def test_malformed_body_returns_400_envelope(self, test_client, notes_path, content, headers):
        response = await test_client.post("/api/notes", content=content, headers=headers)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "invalid request body"
        assert "detail" not in body
        assert not notes_path.exists()

    @pytest.mark.asyncio
    async def test_rejected_create_does_not_change_document(self, test_client, notes_path):
        await test_client.post("/api/notes", json={"title": "kept"})
        before = notes_path.read_bytes()

        await test_client.post("/api/notes", json={"title": " ", "content": "lost"})

        assert notes_path.read_bytes() == before


class TestDeleteNote:

    @pytest.mark.asyncio
    async def test_delete_existing_note(self, test_client):
        created = (await test_client.post("/api/notes", json={"title": "bye"})).json()["data"]

        response = await test_client.delete(f"/api/notes/{created['id']}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["deletedId"] == created["id"]
        listed = (await test_client.get("/api/notes")).json()["data"]
        assert listed == []

    @pytest.mark.asyncio
    async def test_delete_unknown_note_returns_404(self, test_client, notes_path):
        await test_client.post("/api/notes", json={"title": "stays"})
        before = notes_path.read_bytes()

        response = await test_client.delete("/api/notes/unknown-id")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "not found"
        assert notes_path.read_bytes() == before


class TestAppSurface:

    @pytest.mark.asyncio
    async def test_ping(self, test_client):
        response = await test_client.get("/api/test")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["version"]

    @pytest.mark.asyncio
    async def test_health_ok(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["storage"] == "available"

    @pytest.mark.asyncio
    async def test_health_reports_unreadable_document(self, test_client, notes_path):
        notes_path.parent.mkdir(parents=True)
        notes_path.write_text("nope", encoding="utf-8")

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    @pytest.mark.asyncio
    async def test_health_reports_non_utf8_document(self, test_client, notes_path):
        notes_path.parent.mkdir(parents=True)
        notes_path.write_bytes(b"[\xff\xfe]")

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["storage"] == "unavailable"

    @pytest.mark.asyncio
    async def test_unknown_route_returns_404_envelope(self, test_client):
        response = await test_client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["error"] == "route not found"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/notes", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/api/notes")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, test_client):
        response = await test_client.post(
            "/api/notes", json={"title": ""}, headers={"X-Request-ID": "req-1"}
        )
        assert response.json()["request_id"] == "req-1"

    @pytest.mark.asyncio
    async def test_apps_do_not_share_storage(self, tmp_path):
        first = create_app(Settings(notes_file=str(tmp_path / "one.json")))
        second = create_app(Settings(notes_file=str(tmp_path / "two.json")))

        async with AsyncClient(transport=ASGITransport(app=first), base_url="http://test") as c1:
            await c1.post("/api/notes", json={"title": "only in one"})
        async with AsyncClient(transport=ASGITransport(app=second), base_url="http://test") as c2:
            listed = (await c2.get("/api/notes")).json()["data"]

        assert listed == []


class TestStaticFrontend:

    @pytest.mark.asyncio
    async def test_frontend_directory_is_served(self, tmp_path):
        frontend = tmp_path / "frontend"
        frontend.mkdir()
        (frontend / "index.html").write_text("<h1>Notes</h1>", encoding="utf-8")
        app = create_app(Settings(
            notes_file=str(tmp_path / "notes.json"),
            frontend_dir=str(frontend),
        ))

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            page = await client.get("/")
            api = await client.get("/api/notes")

        assert page.status_code == 200
        assert "<h1>Notes</h1>" in page.text
        assert api.json() == {"success": True, "data": []}

    @pytest.mark.asyncio
    async def test_missing_frontend_directory_is_ignored(self, tmp_path):
        app = create_app(Settings(
            notes_file=str(tmp_path / "notes.json"),
            frontend_dir=str(tmp_path / "absent"),
        ))

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/")

        assert response.status_code == 404
