from __future__ import annotations

import logging
from typing import Callable, Optional

import streamlit as st

from storefront.auth import sign_out
from storefront.config import HOME_PAGE, PROFILE_PAGE
from storefront.session import SessionRepository, StreamlitSessionRepository

logger = logging.getLogger(__name__)

APP_TITLE = "Little Lovely"
ACTIVE_PAGE_KEY = "active_page"
PROFILE_VIEW_KEY = "staff_profile_view"


def hide_sidebar():
    st.markdown(
        """
        <style>
        [data-testid="stSidebar"] { display: none; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def sidebar_divider_compact():
    """A tighter divider than st.sidebar.markdown('---') to reduce vertical whitespace."""
    st.sidebar.markdown(
        '<hr style="margin: 0.25rem 0; border: 0; border-top: 1px solid rgba(49, 51, 63, 0.2);" />',
        unsafe_allow_html=True,
    )


class StreamlitNavigator:
    """Page switching for the profile screen. st.switch_page ends the current run."""

    def __init__(self, home_page: str = HOME_PAGE):
        self.home_page = home_page

    def go_home(self) -> None:
        hide_sidebar()
        st.switch_page(self.home_page)


class ToastNotifier:
    def error(self, message: str) -> None:
        st.toast(message, icon="⚠️")


def is_new_activation(page_key: str) -> bool:
    """
    True on the first run of a page after arriving from somewhere else.
    Widget reruns on the same page return False. Every page calls this, so
    leaving and coming back counts as a new activation.
    """
    previous = st.session_state.get(ACTIVE_PAGE_KEY)
    st.session_state[ACTIVE_PAGE_KEY] = page_key
    return previous != page_key


def require_role(role: str, repo: Optional[SessionRepository] = None) -> None:
    """Redirect to the home page unless the session holds the given role."""
    repo = repo or StreamlitSessionRepository()
    if repo.read().has_role(role):
        return

    logger.info("Role %s required; redirecting to %s", role, HOME_PAGE)
    StreamlitNavigator().go_home()
    st.stop()


def logout(repo: SessionRepository, navigate: Optional[Callable[[], None]] = None) -> None:
    """Sign out and drop page state left over from the signed-in user."""
    st.session_state.pop(PROFILE_VIEW_KEY, None)
    sign_out(repo, navigate or StreamlitNavigator().go_home)


def render_staff_header():
    left, right = st.columns([4, 1])
    with left:
        st.page_link(HOME_PAGE, label=f"**{APP_TITLE}**", icon="🏠")
    with right:
        st.caption("Staff console")
    st.markdown("---")


def render_staff_sidebar(repo: Optional[SessionRepository] = None):
    """Sidebar user info plus the logout button."""
    repo = repo or StreamlitSessionRepository()
    context = repo.read()
    if not context.signed_in:
        return

    st.sidebar.write(f"**{context.username or 'Staff'}**")
    st.sidebar.caption(f"Role: {context.role}")

    sidebar_divider_compact()
    st.sidebar.page_link(PROFILE_PAGE, label="Profile")

    sidebar_divider_compact()
    if st.sidebar.button("Logout", use_container_width=True):
        logout(repo)
