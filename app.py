import logging

import requests
import streamlit as st

from storefront.auth import ROLE_STAFF, home_page_for, sign_in
from storefront.config import PROFILE_PAGE, configure_logging, get_api_settings
from storefront.guard import APP_TITLE, hide_sidebar, is_new_activation, logout
from storefront.session import StreamlitSessionRepository
from storefront.store_api import AuthError, StoreApiError

st.set_page_config(page_title=APP_TITLE, layout="wide")
configure_logging()

logger = logging.getLogger(__name__)

PAGE_KEY = "home"


def home_login(repo: StreamlitSessionRepository):
    st.title(APP_TITLE)
    st.write(
        "Welcome to the Little Lovely staff console.\n\n"
        "Log in with your store account to manage products and orders."
    )

    st.markdown("---")
    st.subheader("Login")

    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if not submitted:
        return

    try:
        context = sign_in(repo, get_api_settings(), username, password)
    except AuthError as e:
        st.error(str(e))
        return
    except (StoreApiError, requests.RequestException) as e:
        logger.exception("Login request failed")
        st.error(f"Could not reach the store server: {e}")
        return

    target = home_page_for(context.role)
    if target:
        st.switch_page(target)
    st.rerun()


def home_signed_in(repo: StreamlitSessionRepository):
    context = repo.read()
    st.title(APP_TITLE)
    st.write(f"Signed in as **{context.username}**.")

    if context.has_role(ROLE_STAFF):
        st.page_link(PROFILE_PAGE, label="Go to staff profile", icon="👤")
    else:
        st.info("This console is for store staff. Your account does not have staff access.")

    if st.button("Logout"):
        logout(repo, st.rerun)


def main():
    is_new_activation(PAGE_KEY)
    repo = StreamlitSessionRepository()

    if not repo.read().signed_in:
        hide_sidebar()
        home_login(repo)
    else:
        home_signed_in(repo)


if __name__ == "__main__":
    main()
