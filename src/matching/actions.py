"""Accept / pass / message actions on browsed profiles."""
import logging
from typing import Optional, Sequence

from src.notifications.toast import DESTRUCTIVE, Notification
from src.persistence.profiles import ProfileRecord

logger = logging.getLogger(__name__)


def results_summary(shown: int, total: int, view_type: str) -> str:
    """Result count line, e.g. "Showing 1 of 2 buyers"."""
    return f"Showing {shown} of {total} {view_type}"


class MatchActions:
    """Build notifications for actions taken on profiles in a browse view."""

    def __init__(self, profiles: Sequence[ProfileRecord]):
        """
        Initialize match actions.

        Args:
            profiles: Profiles currently available in the view
        """
        self.profiles = list(profiles)

    def find_profile(self, profile_id: str) -> Optional[ProfileRecord]:
        """Look up a profile by id for the expanded view."""
        return next((p for p in self.profiles if p.id == profile_id), None)

    def _display_name(self, profile_id: str) -> str:
        profile = self.find_profile(profile_id)
        if profile is None:
            logger.warning("Match action on unknown profile id %s", profile_id)
            return "this contact"
        return profile.name

    def accept(self, profile_id: str) -> Notification:
        name = self._display_name(profile_id)
        return Notification(
            title="Match Accepted!",
            description=f"You've accepted a connection with {name}. They will be notified.",
        )

    def reject(self, profile_id: str) -> Notification:
        name = self._display_name(profile_id)
        return Notification(
            title="Match Passed",
            description=f"You've passed on {name}. This action cannot be undone.",
            variant=DESTRUCTIVE,
        )

    def message(self, profile_id: str) -> Notification:
        name = self._display_name(profile_id)
        return Notification(
            title="Message Sent",
            description=f"Opening conversation with {name}",
        )
