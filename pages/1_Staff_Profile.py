import streamlit as st

from storefront.auth import ROLE_STAFF
from storefront.config import configure_logging, get_api_settings
from storefront.guard import (
    APP_TITLE,
    PROFILE_VIEW_KEY,
    StreamlitNavigator,
    ToastNotifier,
    is_new_activation,
    render_staff_header,
    render_staff_sidebar,
    require_role,
)
from storefront.presentation import render_products
from storefront.profile_screen import ProfileScreen
from storefront.session import StreamlitSessionRepository
from storefront.store_api import product_fetcher

st.set_page_config(page_title=f"{APP_TITLE} - Staff Profile", layout="wide")
configure_logging()

PAGE_KEY = "staff_profile"

AVATAR_HTML = """
<div style="display:flex; justify-content:center;">
  <svg width="120" height="120" viewBox="0 0 120 120" role="img" aria-label="avatar">
    <circle cx="60" cy="60" r="60" fill="#e6e9ef"/>
    <circle cx="60" cy="46" r="22" fill="#b8bfcc"/>
    <path d="M20 104c8-22 26-32 40-32s32 10 40 32" fill="#b8bfcc"/>
  </svg>
</div>
"""

repo = StreamlitSessionRepository()
session = repo.read()

if is_new_activation(PAGE_KEY) or PROFILE_VIEW_KEY not in st.session_state:
    screen = ProfileScreen(
        session=session,
        fetch_products=product_fetcher(get_api_settings(), session.access_token),
        navigator=StreamlitNavigator(),
        notifier=ToastNotifier(),
    )
    st.session_state[PROFILE_VIEW_KEY] = screen.mount()
else:
    require_role(ROLE_STAFF, repo)

view = st.session_state[PROFILE_VIEW_KEY]

render_staff_header()
render_staff_sidebar(repo)

# -----------------------------
# Profile detail
# -----------------------------
avatar_col, info_col = st.columns([1, 3])

with avatar_col:
    st.markdown(AVATAR_HTML, unsafe_allow_html=True)

with info_col:
    # Staff details block; the backend exposes no staff profile fields yet.
    st.container()
    st.button(
        "Edit profile",
        disabled=True,
        help="Editing staff profiles is not available yet.",
        key="staff_profile_edit",
    )

st.markdown("---")
st.subheader("Products")
render_products(view.products, load_failed=view.load_failed)
