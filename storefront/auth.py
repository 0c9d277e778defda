from __future__ import annotations

import logging
from typing import Callable, Optional

import jwt

from storefront.config import PROFILE_PAGE, ApiSettings
from storefront.session import SessionContext, SessionRepository
from storefront.store_api import AuthError, login

logger = logging.getLogger(__name__)

ROLE_STAFF = "ROLE_STAFF"

ROLE_CLAIM = "role"


def role_from_token(token: str) -> str:
    """
    Read the role claim from a backend-issued JWT.
    The signature is not checked here; the backend verifies every request.
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        raise AuthError(f"Could not read sign-in token: {e}")

    role = str(claims.get(ROLE_CLAIM) or "").strip()
    if not role:
        raise AuthError("Sign-in token has no role.")
    return role


def sign_in(
    repo: SessionRepository,
    settings: ApiSettings,
    username: str,
    password: str,
) -> SessionContext:
    username = (username or "").strip()
    if not username or not password:
        raise AuthError("Username and password are required.")

    token = login(settings, username, password)
    role = role_from_token(token)

    context = SessionContext(role=role, username=username, access_token=token)
    repo.write(context)
    logger.info("Signed in %s as %s", username, role)
    return context


def sign_out(repo: SessionRepository, navigate: Optional[Callable[[], None]] = None) -> None:
    username = repo.read().username
    repo.clear()
    logger.info("Signed out %s", username or "(anonymous)")
    if navigate is not None:
        navigate()


def home_page_for(role: Optional[str]) -> Optional[str]:
    """Landing page after login, or None to stay on the home route."""
    if role == ROLE_STAFF:
        return PROFILE_PAGE
    return None
