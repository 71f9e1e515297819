"""Step-wise validated onboarding wizard.

The controller owns the draft record, the current step index and the field
error map. Forward moves are gated by the current step's schema; backward
moves are always allowed. Submitting from the last step re-validates the
whole draft and appends a profile to the repository.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from src.notifications.toast import Notification, registration_complete, registration_failed
from src.persistence.profiles import ProfileRecord
from src.persistence.repository import ProfileRepository
from src.persistence.store import StorageError

from .exceptions import AlreadySubmittedError, StepIndexError, UnknownFieldError
from .steps import BUYER_WIZARD, FIELD_LABELS, SELLER_WIZARD, StepDescriptor, WizardDefinition
from .validators import collect_errors

logger = logging.getLogger(__name__)

COMPLETION_ROUTE = "/dashboard"


@dataclass
class SubmitResult:
    """Outcome of a final submission."""

    success: bool
    notification: Notification
    profile: Optional[ProfileRecord] = None
    redirect_to: Optional[str] = None


@dataclass
class ReviewSection:
    """A titled group of (label, value) rows for the review step."""

    title: str
    rows: list[tuple[str, Any]] = field(default_factory=list)


class WizardController:
    """Drive a four-step onboarding wizard for one role."""

    def __init__(self, definition: WizardDefinition, repository: ProfileRepository):
        """
        Initialize wizard controller.

        Args:
            definition: Steps, schemas and draft type of the wizard
            repository: Where the finished profile is appended
        """
        self.definition = definition
        self.repository = repository
        self.reset()

    def reset(self) -> None:
        """Discard the draft and start over at the first step."""
        self.draft = self.definition.draft_factory()
        self.current_step = 0
        self.errors: dict[str, str] = {}
        self.confirmed_steps: set[int] = set()
        self.submitted_profile: Optional[ProfileRecord] = None

    # ------------------------------------------------------------------
    # Step metadata
    # ------------------------------------------------------------------

    @property
    def steps(self) -> tuple[StepDescriptor, ...]:
        return self.definition.steps

    @property
    def step(self) -> StepDescriptor:
        """Descriptor of the current step."""
        return self.steps[self.current_step]

    @property
    def is_first_step(self) -> bool:
        return self.current_step == 0

    @property
    def is_last_step(self) -> bool:
        return self.current_step == len(self.steps) - 1

    @property
    def is_submitted(self) -> bool:
        return self.submitted_profile is not None

    def progress(self) -> float:
        """Fraction of the wizard reached, 1/n on the first step and 1.0 on review."""
        return (self.current_step + 1) / len(self.steps)

    def _step_for_field(self, name: str) -> Optional[int]:
        for index, step in enumerate(self.steps):
            if name in step.fields:
                return index
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.steps):
            raise StepIndexError(index, len(self.steps))

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def update_field(self, name: str, value: Any) -> None:
        """Set a draft field and clear its error. Does not validate."""
        self.draft.set(name, value)
        self._after_edit(name)

    def toggle_option(self, name: str, value: str, checked: bool) -> list[str]:
        """Check or uncheck one value of a multi-select field."""
        updated = self.draft.toggle(name, value, checked)
        self._after_edit(name)
        return updated

    def _after_edit(self, name: str) -> None:
        self.errors.pop(name, None)
        owner = self._step_for_field(name)
        if owner is not None:
            self.confirmed_steps.discard(owner)

    def field_error(self, name: str) -> Optional[str]:
        """Inline error message for a field, if any."""
        if name not in self.draft.field_names():
            raise UnknownFieldError(name)
        return self.errors.get(name)

    # ------------------------------------------------------------------
    # Validation and navigation
    # ------------------------------------------------------------------

    def validate_step(self, index: int) -> dict[str, str]:
        """Validate the draft against the schema bound to step ``index``.

        On failure the error map is replaced by the step's errors. On success
        the step's field errors are cleared and the step is confirmed.

        Returns:
            The step's field -> message map (empty when valid)
        """
        self._check_index(index)
        step = self.steps[index]
        if step.schema is None:
            return {}

        errors = collect_errors(step.schema, self.draft.build())
        if errors:
            self.errors = dict(errors)
            self.confirmed_steps.discard(index)
            logger.debug("Step %s (%s) failed validation: %s", index, step.id, sorted(errors))
            return errors

        for name in step.fields:
            self.errors.pop(name, None)
        self.confirmed_steps.add(index)
        return {}

    def next_step(self) -> Optional[SubmitResult]:
        """Advance if the current step is valid; submit from the last step.

        Returns:
            The SubmitResult when this call submitted, otherwise None
        """
        if self.validate_step(self.current_step):
            return None
        if not self.is_last_step:
            self.current_step += 1
            return None
        return self.submit()

    def prev_step(self) -> None:
        """Go back one step. Never validates."""
        if self.current_step > 0:
            self.current_step -= 1

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit(self) -> SubmitResult:
        """Validate the whole draft and append it to the repository.

        Raises:
            AlreadySubmittedError: If this wizard already saved a profile
        """
        if self.is_submitted:
            raise AlreadySubmittedError()

        data = self.draft.build()
        errors = collect_errors(self.definition.complete_schema, data)
        if errors:
            logger.warning(
                "%s registration rejected; invalid fields: %s",
                self.definition.role,
                ", ".join(sorted(errors)),
            )
            return SubmitResult(success=False, notification=registration_failed())

        validated = self.definition.complete_schema.model_validate(data)
        try:
            profile = self.repository.save(self.definition.role, validated)
        except StorageError:
            logger.exception("Could not save %s registration", self.definition.role)
            return SubmitResult(success=False, notification=registration_failed())
        self.submitted_profile = profile
        logger.info("Registered %s profile %s", self.definition.role, profile.id)

        return SubmitResult(
            success=True,
            notification=registration_complete(self.definition.success_message),
            profile=profile,
            redirect_to=COMPLETION_ROUTE,
        )

    # ------------------------------------------------------------------
    # Review
    # ------------------------------------------------------------------

    def review_sections(self) -> list[ReviewSection]:
        """Group confirmed field values for the review step.

        Fields of steps that are not confirmed are left out.
        """
        confirmed = {
            name
            for index in self.confirmed_steps
            for name in self.steps[index].fields
        }
        sections = []
        for title, names in self.definition.review_layout:
            rows = [
                (FIELD_LABELS.get(name, name), self.draft.get(name))
                for name in names
                if name in confirmed
            ]
            if rows:
                sections.append(ReviewSection(title=title, rows=rows))
        return sections


def buyer_wizard(repository: ProfileRepository) -> WizardController:
    """Create a controller for buyer registration."""
    return WizardController(BUYER_WIZARD, repository)


def seller_wizard(repository: ProfileRepository) -> WizardController:
    """Create a controller for seller registration."""
    return WizardController(SELLER_WIZARD, repository)
