"""
HTTP API tests, end to end through FastAPI against the test database.
"""

import uuid

import pytest


async def register(client, username, first_name="Tester"):
    """Register a user; returns (auth headers, user json)."""
    response = await client.post(
        "/auth/register",
        json={
            "first_name": first_name,
            "email": f"{username}@example.com",
            "username": username,
            "password": "secret1",
        },
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return {"Authorization": f"Bearer {body['access_token']}"}, body["user"]


async def create_pin(client, headers, **overrides):
    payload = {
        "title": "Glazed bowl",
        "file": {"file_id": "pinboard/bowl", "file_url": "https://cdn.example.com/bowl.jpg"},
        "category": "Art",
        "tags": ["ceramics"],
    }
    payload.update(overrides)
    response = await client.post("/pins", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    """Tests for the health endpoints."""

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_ready(self, client):
        response = await client.get("/ready")

        assert response.status_code == 200


class TestRequestContext:
    """Tests for the request id middleware."""

    async def test_request_id_generated(self, client):
        response = await client.get("/health")

        assert len(response.headers["X-Request-ID"]) == 32

    async def test_request_id_echoed(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    async def test_request_id_on_error_response(self, client):
        """Handled errors still carry the request id."""
        response = await client.get(f"/pins/{uuid.uuid4()}", headers={"X-Request-ID": "abc123"})

        assert response.status_code == 401
        assert response.headers["X-Request-ID"] == "abc123"


class TestOpenApi:
    """Tests for the generated OpenAPI document."""

    async def test_error_bodies_documented(self, client):
        response = await client.get("/openapi.json")

        assert response.status_code == 200
        schema = response.json()
        assert "ErrorResponse" in schema["components"]["schemas"]
        pin_responses = schema["paths"]["/pins/{pin_id}"]["get"]["responses"]
        assert pin_responses["404"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }

    async def test_health_has_no_error_bodies(self, client):
        schema = (await client.get("/openapi.json")).json()

        assert "404" not in schema["paths"]["/health"]["get"]["responses"]


class TestAuthEndpoints:
    """Tests for /auth."""

    async def test_register_and_login(self, client):
        _, user = await register(client, "alice", first_name="Alice")

        response = await client.post(
            "/auth/login",
            json={"email": "ALICE@example.com", "password": "secret1"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == user["id"]
        assert body["token_type"] == "bearer"
        assert body["user"]["full_name"] == "Alice"

    async def test_register_duplicate_email(self, client):
        await register(client, "alice")

        response = await client.post(
            "/auth/register",
            json={
                "first_name": "Alice",
                "email": "alice@example.com",
                "username": "alice_two",
                "password": "secret1",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"] == ["email"]

    async def test_register_invalid_fields(self, client):
        """Schema violations are reported as 400 with the field names."""
        response = await client.post(
            "/auth/register",
            json={
                "first_name": "Al",
                "email": "alice@example.com",
                "username": "alice",
                "password": "123",
            },
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert set(error["details"]["fields"]) == {"first_name", "password"}

    async def test_login_wrong_password(self, client):
        await register(client, "alice")

        response = await client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "nope-nope"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


class TestAuthRequired:
    """Tests for bearer token handling."""

    async def test_missing_token(self, client):
        response = await client.get("/users/me")

        assert response.status_code == 401

    async def test_invalid_token(self, client):
        response = await client.get("/pins", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401

    async def test_token_of_deleted_user(self, client):
        headers, _ = await register(client, "alice")
        response = await client.delete("/users/me", headers=headers)
        assert response.status_code == 200

        response = await client.get("/users/me", headers=headers)

        assert response.status_code == 401


class TestUserEndpoints:
    """Tests for /users."""

    async def test_follow_toggle(self, client):
        alice_headers, _ = await register(client, "alice")
        _, bob = await register(client, "bob", first_name="Bobby")

        response = await client.post(f"/users/{bob['id']}/follow", headers=alice_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["following"] is True
        assert body["message"] == "You started following Bobby"

        me = (await client.get("/users/me", headers=alice_headers)).json()
        assert me["following"] == [bob["id"]]

        response = await client.post(f"/users/{bob['id']}/follow", headers=alice_headers)
        assert response.json()["following"] is False
        assert response.json()["followers_count"] == 0

    async def test_follow_self(self, client):
        headers, me = await register(client, "alice")

        response = await client.post(f"/users/{me['id']}/follow", headers=headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_OPERATION"

    async def test_profile_by_username(self, client):
        alice_headers, _ = await register(client, "alice")
        bob_headers, _ = await register(client, "bob")
        await client.post("/boards", json={"title": "Secret", "is_secret": True}, headers=bob_headers)
        public = (await client.post("/boards", json={"title": "Public"}, headers=bob_headers)).json()

        response = await client.get("/users/bob", headers=alice_headers)

        assert response.status_code == 200
        assert response.json()["boards"] == [public["id"]]

    async def test_unknown_profile(self, client):
        headers, _ = await register(client, "alice")

        response = await client.get("/users/nobody", headers=headers)

        assert response.status_code == 404

    async def test_update_me(self, client):
        headers, _ = await register(client, "alice")

        response = await client.patch("/users/me", json={"bio": "Potter"}, headers=headers)

        assert response.status_code == 200
        assert response.json()["bio"] == "Potter"


class TestPinEndpoints:
    """Tests for /pins."""

    async def test_create_and_fetch(self, client):
        headers, me = await register(client, "alice")

        pin = await create_pin(client, headers)

        assert pin["created_by"] == me["id"]
        assert pin["category"] == "Art"
        assert pin["file"]["file_type"] == "image/jpeg"

        response = await client.get(f"/pins/{pin['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json()["comment_details"] == []

        created = (await client.get("/pins/created", headers=headers)).json()
        assert [item["id"] for item in created] == [pin["id"]]

    async def test_create_missing_file(self, client):
        headers, _ = await register(client, "alice")

        response = await client.post("/pins", json={"title": "No file"}, headers=headers)

        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"] == ["file"]

    async def test_feed_pagination(self, client):
        headers, _ = await register(client, "alice")
        for _ in range(3):
            await create_pin(client, headers)

        response = await client.get("/pins?page=1&per_page=2", headers=headers)

        body = response.json()
        assert len(body["data"]) == 2
        assert body["pagination"]["total"] == 3
        assert body["pagination"]["has_next"] is True

    async def test_like_toggle(self, client):
        alice_headers, _ = await register(client, "alice")
        bob_headers, bob = await register(client, "bob")
        pin = await create_pin(client, alice_headers)

        response = await client.post(f"/pins/{pin['id']}/like", headers=bob_headers)
        assert response.json() == {"liked": True, "likes_count": 1}

        fetched = (await client.get(f"/pins/{pin['id']}", headers=alice_headers)).json()
        assert fetched["likes"] == [bob["id"]]

        response = await client.post(f"/pins/{pin['id']}/like", headers=bob_headers)
        assert response.json() == {"liked": False, "likes_count": 0}

    async def test_like_unknown_pin(self, client):
        headers, _ = await register(client, "alice")

        response = await client.post(f"/pins/{uuid.uuid4()}/like", headers=headers)

        assert response.status_code == 404

    async def test_save_and_unsave(self, client):
        alice_headers, _ = await register(client, "alice")
        bob_headers, _ = await register(client, "bob")
        pin = await create_pin(client, alice_headers)
        board = (await client.post("/boards", json={"title": "Bowls"}, headers=bob_headers)).json()

        response = await client.post(
            f"/pins/{pin['id']}/save", json={"board_id": board["id"]}, headers=bob_headers
        )
        assert response.status_code == 200
        assert response.json()["saved_by_count"] == 1

        response = await client.post(f"/pins/{pin['id']}/save", headers=bob_headers)
        assert response.status_code == 409

        board_view = (await client.get(f"/boards/{board['id']}", headers=bob_headers)).json()
        assert board_view["pins"] == [pin["id"]]

        response = await client.delete(f"/pins/{pin['id']}/save", headers=bob_headers)
        assert response.status_code == 200
        saved = (await client.get("/pins/saved", headers=bob_headers)).json()
        assert saved == []

    async def test_save_to_foreign_board(self, client):
        alice_headers, _ = await register(client, "alice")
        bob_headers, _ = await register(client, "bob")
        pin = await create_pin(client, alice_headers)
        board = (await client.post("/boards", json={"title": "Mine"}, headers=alice_headers)).json()

        response = await client.post(
            f"/pins/{pin['id']}/save", json={"board_id": board["id"]}, headers=bob_headers
        )

        assert response.status_code == 400

    async def test_only_author_edits(self, client):
        alice_headers, _ = await register(client, "alice")
        bob_headers, _ = await register(client, "bob")
        pin = await create_pin(client, alice_headers)

        response = await client.patch(f"/pins/{pin['id']}", json={"title": "Mine"}, headers=bob_headers)
        assert response.status_code == 403

        response = await client.patch(f"/pins/{pin['id']}", json={"title": "Ours"}, headers=alice_headers)
        assert response.status_code == 200
        assert response.json()["title"] == "Ours"

    async def test_delete(self, client):
        headers, _ = await register(client, "alice")
        pin = await create_pin(client, headers)

        response = await client.delete(f"/pins/{pin['id']}", headers=headers)
        assert response.status_code == 200

        response = await client.get(f"/pins/{pin['id']}", headers=headers)
        assert response.status_code == 404


class TestCommentEndpoints:
    """Tests for comments and replies under /pins."""

    async def test_comment_and_reply(self, client):
        alice_headers, _ = await register(client, "alice")
        bob_headers, bob = await register(client, "bob")
        pin = await create_pin(client, alice_headers)

        response = await client.post(
            f"/pins/{pin['id']}/comments", json={"text": "Love it"}, headers=bob_headers
        )
        assert response.status_code == 201
        comment = response.json()
        assert comment["created_by"] == bob["id"]
        assert comment["is_reply"] is False

        response = await client.post(
            f"/pins/{pin['id']}/comments/{comment['id']}/replies",
            json={"text": "Thank you"},
            headers=alice_headers,
        )
        assert response.status_code == 201
        reply = response.json()
        assert reply["parent_id"] == comment["id"]
        assert reply["is_reply"] is True

        fetched = (await client.get(f"/pins/{pin['id']}", headers=alice_headers)).json()
        assert fetched["comments"] == [comment["id"]]

        thread = (
            await client.get(f"/pins/{pin['id']}/comments/{comment['id']}", headers=alice_headers)
        ).json()
        assert thread["replies"] == [reply["id"]]

    async def test_like_comment(self, client):
        headers, _ = await register(client, "alice")
        pin = await create_pin(client, headers)
        comment = (
            await client.post(f"/pins/{pin['id']}/comments", json={"text": "Hi"}, headers=headers)
        ).json()

        response = await client.post(
            f"/pins/{pin['id']}/comments/{comment['id']}/like", headers=headers
        )

        assert response.json() == {"liked": True, "likes_count": 1}

    async def test_empty_comment(self, client):
        headers, _ = await register(client, "alice")
        pin = await create_pin(client, headers)

        response = await client.post(
            f"/pins/{pin['id']}/comments", json={"text": ""}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"] == ["text"]

    async def test_delete_thread(self, client):
        headers, _ = await register(client, "alice")
        pin = await create_pin(client, headers)
        comment = (
            await client.post(f"/pins/{pin['id']}/comments", json={"text": "Hi"}, headers=headers)
        ).json()
        await client.post(
            f"/pins/{pin['id']}/comments/{comment['id']}/replies",
            json={"text": "Hello"},
            headers=headers,
        )

        response = await client.delete(f"/pins/{pin['id']}/comments/{comment['id']}", headers=headers)
        assert response.status_code == 200

        fetched = (await client.get(f"/pins/{pin['id']}", headers=headers)).json()
        assert fetched["comments"] == []


class TestBoardEndpoints:
    """Tests for /boards."""

    async def test_secret_board_forbidden(self, client):
        alice_headers, _ = await register(client, "alice")
        bob_headers, _ = await register(client, "bob")
        board = (
            await client.post(
                "/boards", json={"title": "Gifts", "is_secret": True}, headers=alice_headers
            )
        ).json()

        assert (await client.get(f"/boards/{board['id']}", headers=alice_headers)).status_code == 200

        response = await client.get(f"/boards/{board['id']}", headers=bob_headers)
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "AUTHORIZATION_ERROR"

    async def test_update_visibility(self, client):
        headers, _ = await register(client, "alice")
        board = (await client.post("/boards", json={"title": "Plans"}, headers=headers)).json()

        response = await client.patch(
            f"/boards/{board['id']}", json={"is_secret": True}, headers=headers
        )
        assert response.json()["is_secret"] is True

        me = (await client.get("/users/me", headers=headers)).json()
        assert me["boards"] == [board["id"]]
        assert me["public_boards"] == []

    async def test_non_owner_delete(self, client):
        alice_headers, _ = await register(client, "alice")
        bob_headers, _ = await register(client, "bob")
        board = (await client.post("/boards", json={"title": "Plans"}, headers=alice_headers)).json()

        response = await client.delete(f"/boards/{board['id']}", headers=bob_headers)
        assert response.status_code == 403

        assert (await client.get(f"/boards/{board['id']}", headers=alice_headers)).status_code == 200

    async def test_unknown_board(self, client):
        headers, _ = await register(client, "alice")

        response = await client.get(f"/boards/{uuid.uuid4()}", headers=headers)

        assert response.status_code == 404
