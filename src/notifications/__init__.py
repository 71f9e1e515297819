"""User-facing notifications."""
from .toast import Notification

__all__ = ["Notification"]
