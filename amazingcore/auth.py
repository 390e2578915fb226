"""Admin session authentication."""

from __future__ import annotations

import hmac
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

__all__ = ["AdminLoginForm", "AuthService"]

_USERNAME_KEY = "username"


@dataclass
class AdminLoginForm:
    username: str = ""
    password: str = ""


def _same(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


class AuthService:
    """Checks admin credentials and records the logged-in user in a session mapping."""

    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password

    def authenticate_session(
        self, session: MutableMapping[str, Any], form: AdminLoginForm
    ) -> bool:
        """Store the user in ``session`` if the credentials match; return whether they did."""
        valid_username = _same(form.username, self._username)
        valid_password = _same(form.password, self._password)
        if not (valid_username and valid_password):
            return False
        session[_USERNAME_KEY] = form.username
        return True

    def deauthenticate_session(self, session: MutableMapping[str, Any]) -> None:
        session.pop(_USERNAME_KEY, None)

    def get_session_username(self, session: MutableMapping[str, Any]) -> str | None:
        """Return the logged-in username, or ``None`` when nobody is logged in."""
        username = session.get(_USERNAME_KEY)
        return username if isinstance(username, str) else None