"""
Per-browser-session sign-in state.

The role marker lives under USER_ROLE_KEY. It is written at login, read by
guarded pages and cleared at logout. Pages never touch st.session_state keys
for it directly; they go through a SessionRepository.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional, Protocol

import streamlit as st

USER_ROLE_KEY = "userRole"
ACCESS_TOKEN_KEY = "accessToken"
USERNAME_KEY = "username"

SESSION_KEYS = (USER_ROLE_KEY, ACCESS_TOKEN_KEY, USERNAME_KEY)


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class SessionContext:
    role: Optional[str] = None
    username: Optional[str] = None
    access_token: Optional[str] = None

    @property
    def signed_in(self) -> bool:
        return self.role is not None

    def has_role(self, role: str) -> bool:
        return self.role is not None and self.role == role


class SessionRepository(Protocol):
    def read(self) -> SessionContext:
        ...

    def write(self, context: SessionContext) -> None:
        ...

    def clear(self) -> None:
        ...


class MemorySessionRepository:
    """Session storage in a plain dict."""

    def __init__(self, data: Optional[MutableMapping[str, Any]] = None):
        self._data = data if data is not None else {}

    def read(self) -> SessionContext:
        return SessionContext(
            role=_clean(self._data.get(USER_ROLE_KEY)),
            username=_clean(self._data.get(USERNAME_KEY)),
            access_token=_clean(self._data.get(ACCESS_TOKEN_KEY)),
        )

    def write(self, context: SessionContext) -> None:
        self._data[USER_ROLE_KEY] = context.role
        self._data[USERNAME_KEY] = context.username
        self._data[ACCESS_TOKEN_KEY] = context.access_token

    def clear(self) -> None:
        for key in SESSION_KEYS:
            if key in self._data:
                del self._data[key]


class StreamlitSessionRepository(MemorySessionRepository):
    """Session storage backed by st.session_state."""

    def __init__(self, state: Optional[MutableMapping[str, Any]] = None):
        super().__init__(state if state is not None else st.session_state)
