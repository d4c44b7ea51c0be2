import logging

import streamlit as st

from domain.constants import PAGE_TITLE, LOG_LEVEL

# Import the page rendering functions from the view modules
from views import login, data_entry

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# --- Page Registry ---
# Maps a page key to its label, rendering function, and whether it needs a logged-in user.
PAGE_REGISTRY = {
    "login": {
        "label": "🔐 Iniciar Sesión",
        "render_func": login.view,
        "auth": False,
    },
    "data_entry": {
        "label": "📋 Registros",
        "render_func": data_entry.view,
        "auth": True,
    },
}


def current_page_key() -> str:
    """Login page until a username is in the session, then the data-entry page."""
    return "data_entry" if st.session_state.get('username') else "login"


def main():
    """
    Main application router.

    There is no navigation menu: the login gate decides which page renders.
    """
    st.set_page_config(page_title=PAGE_TITLE, layout="wide")

    page = PAGE_REGISTRY[current_page_key()]
    page["render_func"]()

    if page["auth"]:
        st.sidebar.markdown("---")
        st.sidebar.caption(f"Sesión: {st.session_state.get('username')}")


if __name__ == "__main__":
    main()
