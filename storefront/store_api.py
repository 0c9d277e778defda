from __future__ import annotations

# Storefront REST backend helpers used by the login form and staff pages.

import logging
from typing import Any, Callable, List, Optional

import requests

from storefront.config import ApiSettings

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/auth/login"
PRODUCTS_PATH = "/api/products"


class StoreApiError(RuntimeError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"Storefront API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class AuthError(ValueError):
    pass


def _headers(access_token: Optional[str] = None) -> dict:
    headers = {"Accept": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return headers


def login(settings: ApiSettings, username: str, password: str) -> str:
    """
    Exchange credentials for a bearer token.
    Rejected credentials raise AuthError; any other failure raises StoreApiError.
    """
    r = requests.post(
        f"{settings.base_url}{LOGIN_PATH}",
        headers=_headers(),
        json={"username": username, "password": password},
        timeout=settings.timeout_s,
    )
    if r.status_code in (401, 403):
        logger.warning("Login rejected for %s (%s)", username, r.status_code)
        raise AuthError("Invalid username or password.")
    if not r.ok:
        raise StoreApiError(r.status_code, r.text)

    payload = r.json()
    token = payload.get("token") if isinstance(payload, dict) else None
    if not token:
        raise StoreApiError(r.status_code, f"login response missing token: {payload}")
    return str(token)


def fetch_products(settings: ApiSettings, access_token: Optional[str] = None) -> Optional[List[Any]]:
    """
    Return every product record the backend lists, in backend order.
    An empty body or JSON null comes back as None.
    """
    r = requests.get(
        f"{settings.base_url}{PRODUCTS_PATH}",
        headers=_headers(access_token),
        timeout=settings.timeout_s,
    )
    if not r.ok:
        raise StoreApiError(r.status_code, r.text)

    if not r.content:
        return None

    payload = r.json()
    if payload is None:
        return None
    if not isinstance(payload, list):
        raise StoreApiError(r.status_code, f"expected a JSON list of products, got {type(payload).__name__}")

    logger.debug("Fetched %d products", len(payload))
    return payload


def product_fetcher(settings: ApiSettings, access_token: Optional[str] = None) -> Callable[[], Optional[List[Any]]]:
    """Bind settings and token into the no-argument call the profile screen uses."""

    def _fetch() -> Optional[List[Any]]:
        return fetch_products(settings, access_token)

    return _fetch
