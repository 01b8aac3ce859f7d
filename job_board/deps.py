# job_board/deps.py
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from .auth import SessionRegistry
from .intake import AdminIntake
from .scheduler import AutoRefresher
from .store import JobStore


def get_store(request: Request) -> JobStore:
    return request.app.state.store


def get_intake(request: Request) -> AdminIntake:
    return request.app.state.intake


def get_refresher(request: Request) -> AutoRefresher:
    return request.app.state.refresher


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_admin(
    request: Request,
    token: Optional[str] = Depends(bearer_token),
    x_api_key: Optional[str] = Header(None),
    sessions: SessionRegistry = Depends(get_sessions),
) -> str:
    """Return the acting admin, or raise 401.

    A bearer token from /auth/login identifies the admin by email. When
    API_KEY is configured a matching X-API-Key header is accepted as the
    "api-key" actor.
    """
    email = sessions.lookup(token)
    if email:
        return email
    api_key = request.app.state.settings.API_KEY.strip()
    if api_key and x_api_key == api_key:
        return "api-key"
    raise HTTPException(status_code=401, detail="Unauthorized: sign in required")
