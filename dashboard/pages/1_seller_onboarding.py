"""Seller registration wizard page."""
import sys
from pathlib import Path

# Add project root to path (required for Streamlit)
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from dashboard.common import get_repository
from dashboard.components.wizard_view import (
    get_controller,
    render_navigation,
    render_review,
    render_stepper,
    select_field,
    text_field,
)
from src.onboarding.options import EMPLOYEE_OPTIONS, INDUSTRY_OPTIONS
from src.onboarding.wizard import seller_wizard

st.set_page_config(page_title="Seller Registration | Deal Match", page_icon="🏢", layout="wide")

STATE_KEY = "seller_wizard"
DONE_KEY = "seller_registration_done"


def render_personal(controller):
    text_field(controller, "name", "Full Name *", "Enter your full name")
    text_field(controller, "email", "Email Address *", "Enter your email address")


def render_business(controller):
    text_field(controller, "business_name", "Business Name *", "Your company's name")
    select_field(controller, "industry", "Industry *", INDUSTRY_OPTIONS)
    text_field(controller, "location", "Location *", "City, State/Country")
    text_field(controller, "founded", "Year Founded *", "e.g. 2015")
    select_field(controller, "employees", "Employees *", EMPLOYEE_OPTIONS)


def render_financial(controller):
    text_field(controller, "revenue", "Annual Revenue *", "e.g. $2.5M ARR")
    text_field(controller, "asking_price", "Asking Price *", "e.g. $12M")


def main():
    """Seller registration wizard."""
    controller = get_controller(STATE_KEY, lambda: seller_wizard(get_repository()))

    st.title("Seller Registration")
    st.markdown("List your business to connect with qualified buyers")

    if st.session_state.get(DONE_KEY):
        profile = controller.submitted_profile
        st.success(f"Registration complete! {profile.business_name} is now listed.")
        st.page_link("pages/2_matches.py", label="Browse Matches →")
        if st.button("Register another business"):
            controller.reset()
            st.session_state[DONE_KEY] = False
            st.rerun()
        return

    render_stepper(controller)
    st.header(controller.step.title)

    renderers = {
        "personal": render_personal,
        "business": render_business,
        "financial": render_financial,
        "review": render_review,
    }
    renderers[controller.step.id](controller)

    st.divider()
    render_navigation(controller, DONE_KEY)


main()
