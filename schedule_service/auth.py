import logging
from typing import Optional

import httpx
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import AUTH_SERVICE_URL, AUTH_TIMEOUT_SECONDS
from .errors import AuthError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

VALIDATE_TOKEN_QUERY = """
query ValidateToken($token: String!) {
  validateToken(token: $token) {
    id
    email
    createdAt
    updatedAt
  }
}
"""


async def validate_token(
    token: str,
    auth_service_url: str = AUTH_SERVICE_URL,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """
    Ask the auth service who a token belongs to.

    Returns the user dict ({id, email, createdAt, updatedAt}); any GraphQL
    error, HTTP error or transport failure raises AuthError.
    """
    payload = {"query": VALIDATE_TOKEN_QUERY, "variables": {"token": token}}

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=AUTH_TIMEOUT_SECONDS) as own_client:
                response = await own_client.post(auth_service_url, json=payload)
        else:
            response = await client.post(auth_service_url, json=payload)
        response.raise_for_status()
        body = response.json()
    except httpx.HTTPError as e:
        logger.warning(f"⚠️ Token validation request failed: {e}")
        raise AuthError("Token validation failed") from e
    except ValueError as e:
        logger.warning(f"⚠️ Auth service returned invalid JSON: {e}")
        raise AuthError("Token validation failed") from e

    if body.get("errors"):
        logger.debug(f"Auth service rejected token: {body['errors']}")
        raise AuthError("Invalid token")

    user = (body.get("data") or {}).get("validateToken")
    if not user:
        raise AuthError("Invalid token")
    return user


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """FastAPI dependency guarding every customer/doctor/schedule route"""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("No token provided")
    return await validate_token(credentials.credentials)
