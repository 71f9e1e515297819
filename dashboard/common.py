"""Common setup for dashboard pages.

This module handles path configuration, logging, database initialization and
the shared profile repository.

Usage:
    from dashboard.common import get_repository, show_notification
    # logging, init_db() and seeding run automatically on import
"""
import html
import sys
from pathlib import Path

# Add project root to path (for imports from src/)
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from config.settings import settings
from src.logging_config import setup_logging
from src.notifications.toast import Notification
from src.persistence.database import init_db
from src.persistence.repository import ProfileRepository
from src.persistence.store import SqlStore

# Initialize logging, database and seed data once on module import
setup_logging(level=settings.log_level, log_file=settings.log_file or None)
init_db()

_repository = ProfileRepository(SqlStore())
_repository.initialize(seed=settings.seed_demo_data)

_QUEUED_KEY = "queued_notification"


def get_repository() -> ProfileRepository:
    """Return the repository shared by all pages."""
    return _repository


def sanitize_html(text: str) -> str:
    """Escape user-supplied text for safe use in st.markdown(unsafe_allow_html=True)."""
    if not text:
        return ""
    return html.escape(str(text))


def show_notification(notification: Notification) -> None:
    """Render a Notification as a Streamlit toast."""
    icon = "⚠️" if notification.is_error else "✅"
    st.toast(f"**{notification.title}** {notification.description}", icon=icon)


def queue_notification(notification: Notification) -> None:
    """Keep a notification for the next page, e.g. across st.switch_page."""
    st.session_state[_QUEUED_KEY] = notification


def show_queued_notification() -> None:
    """Show and clear the notification queued by the previous page, if any."""
    notification = st.session_state.pop(_QUEUED_KEY, None)
    if notification is not None:
        show_notification(notification)


__all__ = [
    "get_repository",
    "queue_notification",
    "sanitize_html",
    "show_notification",
    "show_queued_notification",
    "settings",
]
