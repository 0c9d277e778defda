from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import streamlit as st

DEFAULT_API_URL = "http://localhost:8080"
DEFAULT_TIMEOUT_S = 30
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

HOME_PAGE = "app.py"
PROFILE_PAGE = "pages/1_Staff_Profile.py"

_logging_configured = False


@dataclass(frozen=True)
class ApiSettings:
    base_url: str
    timeout_s: float = DEFAULT_TIMEOUT_S


def _read_secret(name: str) -> Optional[str]:
    # No secrets.toml is a normal local setup, not an error.
    try:
        val = st.secrets.get(name, "")
    except FileNotFoundError:
        return None
    return str(val) if val not in (None, "") else None


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Look a setting up in Streamlit secrets, then the environment.
    Returns default when neither has a non-empty value.
    """
    val = _read_secret(name)
    if val is not None:
        return val

    env_val = os.environ.get(name, "")
    if env_val:
        return env_val

    return default


def get_api_settings() -> ApiSettings:
    base_url = (get_setting("STOREFRONT_API_URL", DEFAULT_API_URL) or DEFAULT_API_URL).rstrip("/")
    raw_timeout = get_setting("STOREFRONT_API_TIMEOUT_S", str(DEFAULT_TIMEOUT_S))
    try:
        timeout_s = float(raw_timeout)
    except (TypeError, ValueError):
        raise ValueError(f"STOREFRONT_API_TIMEOUT_S must be a number, got {raw_timeout!r}")
    return ApiSettings(base_url=base_url, timeout_s=timeout_s)


def configure_logging() -> None:
    """Install the root log handler once per process."""
    global _logging_configured
    if _logging_configured:
        return

    level_name = (get_setting("STOREFRONT_LOG_LEVEL", "INFO") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _logging_configured = True
