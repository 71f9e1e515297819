"""Draft records accumulated by the onboarding wizards."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ValidationError

from .exceptions import UnknownFieldError
from .validators import BuyerComplete, SellerComplete, errors_from_validation


def with_option(values: list[str], value: str) -> list[str]:
    """Return a new list holding ``values`` plus ``value`` if it was absent."""
    if value in values:
        return list(values)
    return [*values, value]


def without_option(values: list[str], value: str) -> list[str]:
    """Return a new list holding ``values`` minus ``value``."""
    return [v for v in values if v != value]


def unique_in_order(values) -> list[str]:
    """Drop repeated values, keeping first-seen order."""
    return list(dict.fromkeys(values))


@dataclass
class DraftRecord:
    """Base for draft records.

    Subclasses declare their fields as dataclass fields with empty defaults
    and name the schema a finished draft must satisfy.
    """

    complete_schema: ClassVar[type[BaseModel]]
    multi_select_fields: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def field_names(cls) -> list[str]:
        """Names of all draft fields, in declaration order."""
        return [f.name for f in fields(cls)]

    def get(self, name: str) -> Any:
        """Read a field value."""
        if name not in self.field_names():
            raise UnknownFieldError(name)
        return getattr(self, name)

    def set(self, name: str, value: Any) -> None:
        """Write a field value. Multi-select values become ordered-unique lists.

        Raises:
            UnknownFieldError: If ``name`` is not a draft field
            TypeError: If a multi-select field is given a single string
        """
        if name not in self.field_names():
            raise UnknownFieldError(name)
        if name in self.multi_select_fields:
            if isinstance(value, str):
                raise TypeError(f"{name} takes a list of options, not {value!r}")
            value = unique_in_order(value or [])
        setattr(self, name, value)

    def toggle(self, name: str, value: str, checked: bool) -> list[str]:
        """Add or remove ``value`` in a multi-select field and return the new list."""
        if name not in self.multi_select_fields:
            raise UnknownFieldError(name)
        current = getattr(self, name)
        updated = with_option(current, value) if checked else without_option(current, value)
        setattr(self, name, updated)
        return updated

    def build(self) -> dict:
        """Build the draft as a plain dictionary keyed by field name."""
        return asdict(self)

    def validate(self) -> BaseModel:
        """Validate the whole draft against the complete schema.

        Raises:
            ValidationError: If validation fails
        """
        return self.complete_schema.model_validate(self.build())

    def is_valid(self) -> tuple[bool, Optional[str]]:
        """Check if the whole draft is valid.

        Returns:
            Tuple of (is_valid, first_error_message)
        """
        try:
            self.validate()
            return True, None
        except ValidationError as e:
            errors = errors_from_validation(e)
            return False, next(iter(errors.values()), str(e))


@dataclass
class BuyerDraft(DraftRecord):
    """In-progress buyer registration.

    Usage:
        draft = BuyerDraft()
        draft.set_personal_info("Sarah Chen", "sarah@example.com", "Austin, TX")
        draft.set_investment_focus(["SaaS"], "$1M - $5M", "3-6 months")
        draft.set_experience("1-3", ["Asset Purchase"])
        profile = draft.validate()
    """

    complete_schema: ClassVar[type[BaseModel]] = BuyerComplete
    multi_select_fields: ClassVar[frozenset[str]] = frozenset({"industries", "acquisition_type"})

    # Personal info
    name: str = ""
    email: str = ""
    location: str = ""

    # Investment focus
    industries: list[str] = field(default_factory=list)
    budget: str = ""
    timeline: str = ""

    # Experience
    experience: str = ""
    acquisition_type: list[str] = field(default_factory=list)

    def set_personal_info(self, name: str, email: str, location: str) -> "BuyerDraft":
        """Set name, email and location."""
        self.name = name
        self.email = email
        self.location = location
        return self

    def set_investment_focus(
        self,
        industries: list[str],
        budget: str,
        timeline: str,
    ) -> "BuyerDraft":
        """Set industries of interest, budget range and timeline."""
        self.industries = unique_in_order(industries)
        self.budget = budget
        self.timeline = timeline
        return self

    def set_experience(self, experience: str, acquisition_types: list[str]) -> "BuyerDraft":
        """Set experience level and acquisition types of interest."""
        self.experience = experience
        self.acquisition_type = unique_in_order(acquisition_types)
        return self


@dataclass
class SellerDraft(DraftRecord):
    """In-progress seller registration."""

    complete_schema: ClassVar[type[BaseModel]] = SellerComplete

    # Personal info
    name: str = ""
    email: str = ""

    # Business
    business_name: str = ""
    industry: str = ""
    location: str = ""
    founded: str = ""
    employees: str = ""

    # Financials
    revenue: str = ""
    asking_price: str = ""

    def set_personal_info(self, name: str, email: str) -> "SellerDraft":
        """Set name and email."""
        self.name = name
        self.email = email
        return self

    def set_business(
        self,
        business_name: str,
        industry: str,
        location: str,
        founded: str,
        employees: str,
    ) -> "SellerDraft":
        """Set the business details."""
        self.business_name = business_name
        self.industry = industry
        self.location = location
        self.founded = founded
        self.employees = employees
        return self

    def set_financials(self, revenue: str, asking_price: str) -> "SellerDraft":
        """Set revenue and asking price."""
        self.revenue = revenue
        self.asking_price = asking_price
        return self
