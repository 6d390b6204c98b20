"""
Tests for the auth gate in front of write endpoints.
"""

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.testclient import TestClient

from api.middleware.auth import get_optional_user
from modules.auth.exceptions import TOKEN_ERROR_MESSAGE
from modules.auth.service import AuthService

POST_BODY = {"title": "Rice", "quantity": 5, "latitude": 12.9, "longitude": 77.6}


class TestTokenStrategy:
    """AUTH_STRATEGY=token"""

    def test_missing_token_returns_401(self, make_app, settings):
        client = TestClient(make_app(settings))
        response = client.post("/posts", json=POST_BODY)

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["error"] == "UNAUTHENTICATED"

    def test_malformed_header_returns_401(self, make_app, settings):
        client = TestClient(make_app(settings))
        response = client.post("/posts", json=POST_BODY, headers={"Authorization": "Token abc"})
        assert response.status_code == 401

    def test_failures_are_indistinguishable(self, make_app, settings, token_factory):
        """Missing, garbage, forged and expired tokens produce the same body."""
        client = TestClient(make_app(settings))
        header_sets = [
            {},
            {"Authorization": "Bearer not-a-jwt"},
            {"Authorization": f"Bearer {token_factory(secret='another-secret')}"},
            {"Authorization": f"Bearer {token_factory(expired=True)}"},
        ]

        bodies = []
        for headers in header_sets:
            response = client.post("/posts", json=POST_BODY, headers=headers)
            assert response.status_code == 401
            bodies.append(response.json())

        assert all(body == bodies[0] for body in bodies)
        assert bodies[0]["message"] == TOKEN_ERROR_MESSAGE

    def test_valid_token_attaches_creator(
        self, make_app, settings, auth_headers, test_user_id, post_service, mock_post
    ):
        post_service.create_post.return_value = mock_post
        client = TestClient(make_app(settings))

        response = client.post("/posts", json=POST_BODY, headers=auth_headers)

        assert response.status_code == 201
        _, kwargs = post_service.create_post.call_args
        assert kwargs["created_by"] == test_user_id

    def test_missing_secret_returns_500(self, make_app, settings_factory, auth_headers):
        client = TestClient(make_app(settings_factory(jwt_secret="")))

        response = client.post("/posts", json=POST_BODY, headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["error"] == "SERVER_MISCONFIGURED"

    def test_api_key_is_ignored_in_token_mode(self, make_app, settings):
        client = TestClient(make_app(settings))
        response = client.post("/posts", json=POST_BODY, headers={"x-api-key": settings.api_key})
        assert response.status_code == 401


class TestApiKeyStrategy:
    """AUTH_STRATEGY=api_key"""

    def test_missing_key_returns_401(self, make_app, api_key_settings):
        client = TestClient(make_app(api_key_settings))
        response = client.post("/posts", json=POST_BODY)
        assert response.status_code == 401

    def test_key_failure_has_no_bearer_challenge(self, make_app, api_key_settings):
        client = TestClient(make_app(api_key_settings))

        response = client.post("/posts", json=POST_BODY, headers={"x-api-key": "nope"})

        assert response.status_code == 401
        assert "www-authenticate" not in response.headers

    def test_wrong_key_returns_401(self, make_app, api_key_settings):
        client = TestClient(make_app(api_key_settings))
        response = client.post("/posts", json=POST_BODY, headers={"x-api-key": "nope"})
        assert response.status_code == 401

    def test_correct_key_creates_anonymous_post(
        self, make_app, api_key_settings, post_service, mock_post
    ):
        post_service.create_post.return_value = mock_post
        client = TestClient(make_app(api_key_settings))

        response = client.post(
            "/posts", json=POST_BODY, headers={"x-api-key": api_key_settings.api_key}
        )

        assert response.status_code == 201
        _, kwargs = post_service.create_post.call_args
        assert kwargs["created_by"] is None

    def test_unconfigured_key_returns_500(self, make_app, settings_factory):
        """A credential with no server-side secret configured is a server error."""
        settings = settings_factory(auth_strategy="api_key", api_key="")
        client = TestClient(make_app(settings))

        response = client.post("/posts", json=POST_BODY, headers={"x-api-key": "anything"})

        assert response.status_code == 500
        assert response.json()["error"] == "SERVER_MISCONFIGURED"

    def test_claims_are_protected(self, make_app, api_key_settings):
        client = TestClient(make_app(api_key_settings))
        response = client.post("/claims", json={"postId": "64b7f0c2a1b2c3d4e5f60001"})
        assert response.status_code == 401

    def test_custom_header_name(self, make_app, settings_factory, post_service, mock_post):
        settings = settings_factory(auth_strategy="api_key", api_key_header="x-board-key")
        post_service.create_post.return_value = mock_post
        client = TestClient(make_app(settings))

        response = client.post("/posts", json=POST_BODY, headers={"x-board-key": settings.api_key})

        assert response.status_code == 201


class TestOptionalUser:
    @pytest.mark.asyncio
    async def test_no_credentials(self, user_repository, settings):
        assert await get_optional_user(None, AuthService(user_repository, settings)) is None

    @pytest.mark.asyncio
    async def test_invalid_token_yields_none(self, user_repository, settings):
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="garbage")
        user = await get_optional_user(credentials, AuthService(user_repository, settings))
        assert user is None
