"""Dashboard UI components."""
from .profile_card import render_profile_card

__all__ = ["render_profile_card"]
