"""Matches page - Browse and filter buyer and seller profiles."""
import sys
from pathlib import Path

# Add project root to path (required for Streamlit)
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from dashboard.common import get_repository, show_notification, show_queued_notification
from dashboard.components import render_profile_card
from src.matching import ALL_BUDGETS, ALL_INDUSTRIES, DirectoryFilters, MatchActions, results_summary
from src.onboarding.options import BUDGET_OPTIONS, INDUSTRY_OPTIONS

st.set_page_config(page_title="Matches | Deal Match", page_icon="🔎", layout="wide")
show_queued_notification()

if "match_filters" not in st.session_state:
    st.session_state.match_filters = DirectoryFilters()
if "expanded_profile" not in st.session_state:
    st.session_state.expanded_profile = None

filters: DirectoryFilters = st.session_state.match_filters

st.title("🔎 Matches")

view_type = st.radio("Show", ["buyers", "sellers"], horizontal=True, format_func=str.title)
st.markdown(f"Connect with qualified {view_type} for your business")

repository = get_repository()
profiles = repository.get_buyers() if view_type == "buyers" else repository.get_sellers()
actions = MatchActions(profiles)

# Filters
st.sidebar.header("Filters")
if filters.has_active_filters:
    st.sidebar.caption(f"{filters.active_count} active")

filters.query = st.sidebar.text_input(
    "Search",
    value=filters.query,
    placeholder="Search by name or keyword...",
)

industry_choices = [ALL_INDUSTRIES] + INDUSTRY_OPTIONS
filters.industry = st.sidebar.selectbox(
    "Industry",
    industry_choices,
    index=industry_choices.index(filters.industry) if filters.industry in industry_choices else 0,
    format_func=lambda v: "All Industries" if v == ALL_INDUSTRIES else v,
)

budget_choices = [ALL_BUDGETS] + BUDGET_OPTIONS
filters.budget = st.sidebar.selectbox(
    "Budget Range",
    budget_choices,
    index=budget_choices.index(filters.budget) if filters.budget in budget_choices else 0,
    format_func=lambda v: "All Budgets" if v == ALL_BUDGETS else v,
)

if st.sidebar.button("Clear Filters", disabled=not filters.has_active_filters):
    filters.clear()
    st.rerun()

# Results
matches = filters.apply(profiles)
st.caption(results_summary(len(matches), len(profiles), view_type))


def _view(profile_id: str) -> None:
    st.session_state.expanded_profile = profile_id


if not matches:
    st.info("No matches found. Try adjusting your filters or search criteria.")
else:
    cols = st.columns(3)
    for i, profile in enumerate(matches):
        with cols[i % 3]:
            render_profile_card(
                profile,
                on_accept=lambda pid: show_notification(actions.accept(pid)),
                on_reject=lambda pid: show_notification(actions.reject(pid)),
                on_view=_view,
            )

# Expanded profile
expanded = actions.find_profile(st.session_state.expanded_profile or "")
if expanded is not None:
    st.divider()
    st.subheader(expanded.name)
    st.json(expanded.to_record())
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Send Message", type="primary"):
            show_notification(actions.message(expanded.id))
    with col2:
        if st.button("Close"):
            st.session_state.expanded_profile = None
            st.rerun()
