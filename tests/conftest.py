"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from typing import Any


def github_payload(**overrides: Any) -> dict[str, Any]:
    """GitHub /user response as returned for a public profile.

    Pass a field with value ... to drop it from the payload.
    """
    payload = {
        "id": 12345,
        "login": "johndoe",
        "name": "John Doe",
        "email": "john@example.com",
        "avatar_url": "https://avatars.githubusercontent.com/u/12345",
        "site_admin": False,
        "public_repos": 8,
    }
    return _apply(payload, overrides)


def google_payload(**overrides: Any) -> dict[str, Any]:
    """Google OpenID Connect userinfo response."""
    payload = {
        "sub": "g-1",
        "name": "Jane",
        "email": "jane@x.com",
        "email_verified": True,
        "picture": "https://x/p.jpg",
    }
    return _apply(payload, overrides)


def facebook_payload(**overrides: Any) -> dict[str, Any]:
    """Facebook Graph /me response with the picture field requested."""
    payload = {
        "id": "10158000000000001",
        "name": "Fay Book",
        "email": "fay@example.com",
        "picture": {
            "data": {
                "height": 50,
                "is_silhouette": False,
                "url": "https://x/y.jpg",
                "width": 50,
            }
        },
    }
    return _apply(payload, overrides)


def _apply(payload: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    for key, value in overrides.items():
        if value is ...:
            payload.pop(key, None)
        else:
            payload[key] = value
    return payload


class FakeClock:
    """Deterministic clock for resolver tests.

    Each call returns the current instant; advance() moves it forward.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> datetime:
        self.now = self.now + timedelta(**delta)
        return self.now
