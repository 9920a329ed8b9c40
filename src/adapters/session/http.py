"""
HTTP session adapters - Session sinks bound to one outgoing response.

When the signup workflow runs behind the HTTP surface, "durable client
storage" is a cookie on the response, the user context is the response
body, and navigation is the redirect target the client should follow.
"""

from typing import Any

from fastapi import Response


class CookieTokenStorage:
    """
    Implements TokenStorage protocol by setting HttpOnly cookies.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, response: Response, secure: bool = False) -> None:
        self._response = response
        self._secure = secure
        self.items: dict[str, str] = {}

    def set_item(self, key: str, value: str) -> None:
        self._response.set_cookie(
            key=key,
            value=value,
            httponly=True,
            secure=self._secure,
            samesite="lax",
        )
        self.items[key] = value


class RecordingUserSink:
    """Implements UserContextSink protocol by keeping the last user pushed."""

    def __init__(self) -> None:
        self.user: dict[str, Any] | None = None
        self.updates = 0

    def update(self, user: dict[str, Any] | None) -> None:
        self.user = user
        self.updates += 1


class RedirectNavigator:
    """Implements Navigator protocol by recording the requested destination."""

    def __init__(self) -> None:
        self.destination: str | None = None

    def navigate(self, path: str) -> None:
        self.destination = path
