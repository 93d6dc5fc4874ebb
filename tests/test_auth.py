"""Tests for bearer token validation against the auth service"""

import json

import httpx
import pytest
from fastapi.security import HTTPAuthorizationCredentials

from schedule_service.auth import get_current_user, validate_token
from schedule_service.errors import AuthError

AUTH_URL = "http://auth.test/graphql"

USER = {
    "id": "u-1",
    "email": "staff@clinic.test",
    "createdAt": "2030-01-01T00:00:00Z",
    "updatedAt": "2030-01-01T00:00:00Z",
}


def client_returning(status_code=200, body=None, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(json.loads(request.content))
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestValidateToken:
    async def test_valid_token_returns_user(self):
        seen = []
        async with client_returning(body={"data": {"validateToken": USER}}, seen=seen) as client:
            user = await validate_token("good-token", AUTH_URL, client=client)

        assert user == USER
        assert seen[0]["variables"] == {"token": "good-token"}
        assert "validateToken" in seen[0]["query"]

    async def test_graphql_errors_mean_invalid_token(self):
        body = {"errors": [{"message": "jwt expired"}], "data": None}
        async with client_returning(body=body) as client:
            with pytest.raises(AuthError, match="Invalid token"):
                await validate_token("expired", AUTH_URL, client=client)

    async def test_missing_user_means_invalid_token(self):
        async with client_returning(body={"data": {"validateToken": None}}) as client:
            with pytest.raises(AuthError):
                await validate_token("unknown", AUTH_URL, client=client)

    async def test_http_error_fails_validation(self):
        async with client_returning(status_code=503, body={"error": "down"}) as client:
            with pytest.raises(AuthError, match="Token validation failed"):
                await validate_token("any", AUTH_URL, client=client)

    async def test_non_json_body_fails_validation(self):
        async with client_returning(body="<html>gateway</html>") as client:
            with pytest.raises(AuthError, match="Token validation failed"):
                await validate_token("any", AUTH_URL, client=client)

    async def test_transport_error_fails_validation(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(AuthError):
                await validate_token("any", AUTH_URL, client=client)


class TestCurrentUser:
    async def test_missing_credentials(self):
        with pytest.raises(AuthError, match="No token provided"):
            await get_current_user(None)

    async def test_non_bearer_scheme(self):
        credentials = HTTPAuthorizationCredentials(scheme="Basic", credentials="dXNlcjpwYXNz")

        with pytest.raises(AuthError, match="No token provided"):
            await get_current_user(credentials)
