# screens/utils.py
# -------------------------------------------------------------------
# Helpers shared by every screen: navigation actions and error display
# -------------------------------------------------------------------
from __future__ import annotations
import logging
from typing import MutableMapping

import streamlit as st

from core.navigation import Destination
from core.session import ScreenContext
from core.settings import load_settings

# Set up a logger for server-side logging
logger = logging.getLogger(__name__)

# Widget and buffer keys owned by an open editor start with this prefix
EDITOR_PREFIX = "edit_"


def reset_editors(state: MutableMapping) -> None:
    """Forget unsaved editor input, like leaving a screen does."""
    for key in [k for k in state.keys() if str(k).startswith(EDITOR_PREFIX)]:
        del state[key]


def go(ctx: ScreenContext, destination: Destination) -> None:
    reset_editors(st.session_state)
    ctx.navigator.navigate(destination)
    st.rerun()


def back(ctx: ScreenContext) -> None:
    reset_editors(st.session_state)
    ctx.navigator.pop_back()
    st.rerun()


def handle_error(e: Exception, user_message: str = "An error occurred."):
    """
    Log the full exception server-side and show a friendly or
    detailed error in Streamlit based on the debug setting.
    """
    settings = load_settings()
    logger.error(f"Screen error: {e}", exc_info=True)

    if settings.debug:
        st.error(f"{user_message}\n\n**Debug Info:**\n```\n{e}\n```")
    else:
        st.error(user_message)
