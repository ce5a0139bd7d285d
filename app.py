# app.py
from __future__ import annotations
import logging
import traceback
import streamlit as st

# --- Core imports (fail visibly; no blank screens) ---
try:
    from core.settings import load_settings
    from core.logging_setup import configure_logging
    from core.navigation import Navigator, START_DESTINATION, STACK_KEY, parse_route
    from core.session import ScreenContext, get_school_session
    from core.nav_registry import ROUTE_INDEX
    from screens.utils import handle_error
except Exception as e:
    st.error(f"Startup import failed: {e}")
    st.code(traceback.format_exc())
    st.stop()

logger = logging.getLogger(__name__)


def _ensure_navigator() -> Navigator:
    """Create the back stack once per session, honouring ?route= deep links."""
    first_visit = STACK_KEY not in st.session_state
    navigator = Navigator(st.session_state)
    if first_visit:
        start = parse_route(st.query_params.get("route"))
        if start != START_DESTINATION:
            navigator.navigate(start)
    return navigator


def main():
    try:
        settings = load_settings()
    except Exception as e:
        st.error(f"Settings could not be loaded: {e}")
        st.code(traceback.format_exc())
        st.stop()

    configure_logging(settings)
    st.set_page_config(page_title=settings.app.name, page_icon=settings.app.page_icon, layout=settings.app.layout)

    session = get_school_session(st.session_state)
    navigator = _ensure_navigator()
    destination = navigator.current
    route = ROUTE_INDEX[destination.key]
    logger.debug("Rendering %s", destination.route)

    ctx = ScreenContext(session=session, navigator=navigator, destination=destination, settings=settings)
    try:
        route.render(ctx)
    except Exception as e:
        handle_error(e, f"{route.icon} {route.label}: не удалось показать экран.")


if __name__ == "__main__":
    main()
