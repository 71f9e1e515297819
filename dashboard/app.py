"""Main Streamlit dashboard application."""
import sys
from pathlib import Path

# Add project root to path (required for Streamlit to find dashboard module)
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from dashboard.common import get_repository


def main():
    """Main entry point for the dashboard."""
    st.set_page_config(
        page_title="Deal Match",
        page_icon="🤝",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    repository = get_repository()
    buyers = repository.get_buyers()
    sellers = repository.get_sellers()

    with st.sidebar:
        st.title("Deal Match")
        st.markdown("---")
        st.metric("Registered Buyers", len(buyers))
        st.metric("Registered Sellers", len(sellers))
        st.markdown("---")
        st.markdown("Use the pages in the sidebar to navigate.")

    st.title("🤝 Deal Match")
    st.markdown("Connect business owners with qualified acquirers.")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Looking to acquire?")
        st.markdown("Register as a buyer and tell sellers what you're looking for.")
        st.page_link("pages/0_buyer_onboarding.py", label="Buyer Registration →")
    with col2:
        st.subheader("Selling a business?")
        st.markdown("List your company and get matched with interested buyers.")
        st.page_link("pages/1_seller_onboarding.py", label="Seller Registration →")

    st.divider()
    st.page_link("pages/2_matches.py", label="Browse Matches →")


if __name__ == "__main__":
    main()
