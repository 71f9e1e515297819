"""Profile card component for the matches view."""
from typing import Callable, Optional

import streamlit as st

from dashboard.common import sanitize_html
from src.persistence.profiles import BuyerProfile, ProfileRecord, SellerProfile


def render_profile_card(
    profile: ProfileRecord,
    on_accept: Optional[Callable[[str], None]] = None,
    on_reject: Optional[Callable[[str], None]] = None,
    on_view: Optional[Callable[[str], None]] = None,
) -> None:
    """
    Render a profile card with summary details and actions.

    Args:
        profile: Buyer or seller profile
        on_accept: Called with the profile id when "Accept" is clicked
        on_reject: Called with the profile id when "Pass" is clicked
        on_view: Called with the profile id when "View Profile" is clicked
    """
    tags = ", ".join(profile.industry_tags) or "No industries listed"

    if isinstance(profile, BuyerProfile):
        details = f"💰 {profile.budget} • ⏱️ {profile.timeline}"
    elif isinstance(profile, SellerProfile):
        details = f"🏢 {profile.business_name} • 💵 {profile.asking_price}"
    else:
        details = ""

    with st.container(border=True):
        st.markdown(
            f"""
            <h4 style="margin: 0;">{sanitize_html(profile.name)}</h4>
            <p style="margin: 0.25rem 0; color: #666;">📍 {sanitize_html(getattr(profile, "location", ""))}</p>
            <p style="margin: 0.25rem 0;">{sanitize_html(details)}</p>
            <p style="margin: 0.25rem 0; font-size: 0.9rem;">🏷️ {sanitize_html(tags)}</p>
            """,
            unsafe_allow_html=True,
        )

        col1, col2, col3 = st.columns(3)
        with col1:
            if on_accept and st.button("Accept", key=f"accept_{profile.id}", type="primary"):
                on_accept(profile.id)
        with col2:
            if on_reject and st.button("Pass", key=f"reject_{profile.id}"):
                on_reject(profile.id)
        with col3:
            if on_view and st.button("View Profile", key=f"view_{profile.id}"):
                on_view(profile.id)
