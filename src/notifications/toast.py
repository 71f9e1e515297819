"""User-visible notifications raised by wizard and match actions.

The core only builds these; the dashboard decides how to show them.
"""
from dataclasses import dataclass

DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    """A toast-style message."""

    title: str
    description: str
    variant: str = DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant == DESTRUCTIVE


def registration_complete(message: str) -> Notification:
    return Notification(title="Registration Complete!", description=message)


def registration_failed() -> Notification:
    return Notification(
        title="Registration Failed",
        description="Something went wrong while saving your profile. Please review your details and try again.",
        variant=DESTRUCTIVE,
    )
