"""Admin credential check and login sessions.

The credential check sits behind ``CredentialVerifier`` so a real identity
provider can replace the configured single admin without touching routes.
"""
from __future__ import annotations

import hmac
import secrets
import threading
from typing import Optional, Protocol


class CredentialVerifier(Protocol):
    def verify(self, email: str, password: str) -> bool: ...


class StaticCredentialVerifier:
    """Single admin account from configuration.

    An empty email or password disables login entirely.
    """

    def __init__(self, email: str, password: str):
        self._email = (email or "").strip().lower()
        self._password = password or ""

    def verify(self, email: str, password: str) -> bool:
        if not self._email or not self._password:
            return False
        email_ok = hmac.compare_digest((email or "").strip().lower().encode(), self._email.encode())
        password_ok = hmac.compare_digest((password or "").encode(), self._password.encode())
        return email_ok and password_ok


class SessionRegistry:
    """In-memory token -> email map; sessions end on logout or restart."""

    def __init__(self):
        self._sessions: dict[str, str] = {}
        self._lock = threading.Lock()

    def create(self, email: str) -> str:
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[token] = email
        return token

    def lookup(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        with self._lock:
            return self._sessions.get(token)

    def revoke(self, token: str) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None
