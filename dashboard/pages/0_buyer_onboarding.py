"""Buyer registration wizard page."""
import sys
from pathlib import Path

# Add project root to path (required for Streamlit)
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from dashboard.common import get_repository
from dashboard.components.wizard_view import (
    checkbox_group,
    get_controller,
    render_navigation,
    render_review,
    render_stepper,
    select_field,
    text_field,
)
from src.onboarding.options import (
    ACQUISITION_TYPE_OPTIONS,
    BUDGET_OPTIONS,
    EXPERIENCE_OPTIONS,
    INDUSTRY_OPTIONS,
    TIMELINE_OPTIONS,
    experience_label,
)
from src.onboarding.wizard import buyer_wizard

st.set_page_config(page_title="Buyer Registration | Deal Match", page_icon="🤝", layout="wide")

STATE_KEY = "buyer_wizard"
DONE_KEY = "buyer_registration_done"


def render_personal(controller):
    text_field(controller, "name", "Full Name *", "Enter your full name")
    text_field(controller, "email", "Email Address *", "Enter your email address")
    text_field(controller, "location", "Location *", "City, State/Country")


def render_preferences(controller):
    checkbox_group(controller, "industries", "Industries of Interest *", INDUSTRY_OPTIONS)
    select_field(controller, "budget", "Investment Budget *", BUDGET_OPTIONS)
    select_field(controller, "timeline", "Acquisition Timeline *", TIMELINE_OPTIONS)


def render_experience(controller):
    select_field(
        controller,
        "experience",
        "Investment Experience *",
        [value for value, _ in EXPERIENCE_OPTIONS],
        format_func=experience_label,
    )
    checkbox_group(
        controller, "acquisition_type", "Acquisition Types of Interest *",
        ACQUISITION_TYPE_OPTIONS, columns=2,
    )


def main():
    """Buyer registration wizard."""
    controller = get_controller(STATE_KEY, lambda: buyer_wizard(get_repository()))

    st.title("Buyer Registration")
    st.markdown("Complete your profile to start finding acquisition opportunities")

    if st.session_state.get(DONE_KEY):
        profile = controller.submitted_profile
        st.success(f"Registration complete! Welcome aboard, {profile.name}.")
        st.page_link("pages/2_matches.py", label="Browse Matches →")
        if st.button("Register another buyer"):
            controller.reset()
            st.session_state[DONE_KEY] = False
            st.rerun()
        return

    render_stepper(controller)
    st.header(controller.step.title)

    renderers = {
        "personal": render_personal,
        "preferences": render_preferences,
        "experience": render_experience,
        "review": render_review,
    }
    renderers[controller.step.id](controller)

    st.divider()
    render_navigation(controller, DONE_KEY)


main()
