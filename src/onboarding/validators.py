"""Pydantic validation models for the buyer and seller onboarding steps.

Each wizard step owns one schema. The complete schema of a role is the union
of its step schemas and is what a final submission is checked against.
Validation failures are turned into a field -> message map so the UI can show
them inline next to the offending input.
"""

from datetime import date
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

YEAR_PATTERN = r"^\d{4}$"
EARLIEST_FOUNDED_YEAR = 1800


# Messages keyed by field name, then by pydantic error type. "default" covers
# anything not listed (missing values, wrong types).
FIELD_MESSAGES: dict[str, dict[str, str]] = {
    "name": {
        "string_too_short": "Name must be at least 2 characters",
        "string_too_long": "Name must be less than 50 characters",
        "default": "Name is required",
    },
    "email": {
        "default": "Please enter a valid email address",
    },
    "location": {
        "string_too_long": "Location must be less than 100 characters",
        "default": "Location is required",
    },
    "industries": {
        "default": "Please select at least one industry",
    },
    "budget": {
        "default": "Budget range is required",
    },
    "timeline": {
        "default": "Timeline is required",
    },
    "experience": {
        "default": "Experience level is required",
    },
    "acquisition_type": {
        "default": "Please select at least one acquisition type",
    },
    "business_name": {
        "string_too_short": "Business name must be at least 2 characters",
        "string_too_long": "Business name must be less than 100 characters",
        "default": "Business name is required",
    },
    "industry": {
        "default": "Industry is required",
    },
    "founded": {
        "founded_year_range": "Founded year must be between 1800 and current year",
        "default": "Please enter a valid 4-digit year",
    },
    "employees": {
        "default": "Employee count is required",
    },
    "revenue": {
        "default": "Revenue is required",
    },
    "asking_price": {
        "default": "Asking price is required",
    },
}


class StepSchema(BaseModel):
    """Base for step schemas: trims strings and ignores other draft fields."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


# =============================================================================
# Buyer steps
# =============================================================================

class BuyerPersonalInfo(StepSchema):
    """Step 0: who the buyer is."""
    name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    location: str = Field(min_length=2, max_length=100)


class BuyerInvestmentFocus(StepSchema):
    """Step 1: what the buyer wants to acquire."""
    industries: list[str] = Field(min_length=1)
    budget: str = Field(min_length=1)
    timeline: str = Field(min_length=1)


class BuyerExperience(StepSchema):
    """Step 2: the buyer's acquisition background."""
    experience: str = Field(min_length=1)
    acquisition_type: list[str] = Field(min_length=1)


class BuyerComplete(BuyerPersonalInfo, BuyerInvestmentFocus, BuyerExperience):
    """All buyer fields, checked on final submission."""


# =============================================================================
# Seller steps
# =============================================================================

class SellerPersonalInfo(StepSchema):
    """Step 0: who the seller is."""
    name: str = Field(min_length=2, max_length=50)
    email: EmailStr


class SellerBusinessInfo(StepSchema):
    """Step 1: the business being sold."""
    business_name: str = Field(min_length=2, max_length=100)
    industry: str = Field(min_length=1)
    location: str = Field(min_length=2, max_length=100)
    founded: str = Field(pattern=YEAR_PATTERN)
    employees: str = Field(min_length=1)

    @field_validator("founded")
    @classmethod
    def founded_year_in_range(cls, v: str) -> str:
        """Reject years before 1800 or in the future."""
        if not EARLIEST_FOUNDED_YEAR <= int(v) <= date.today().year:
            raise PydanticCustomError(
                "founded_year_range",
                "Founded year must be between 1800 and current year",
            )
        return v


class SellerFinancialInfo(StepSchema):
    """Step 2: the deal's numbers."""
    revenue: str = Field(min_length=1)
    asking_price: str = Field(min_length=1)


class SellerComplete(SellerPersonalInfo, SellerBusinessInfo, SellerFinancialInfo):
    """All seller fields, checked on final submission."""


# =============================================================================
# Error mapping
# =============================================================================

def _message_for(field: str, error: dict) -> str:
    messages = FIELD_MESSAGES.get(field, {})
    return messages.get(error["type"]) or messages.get("default") or error["msg"]


def errors_from_validation(exc: ValidationError) -> dict[str, str]:
    """Convert a ValidationError into a field -> message map.

    Only the first error of each field is kept; item-level errors of list
    fields are reported against the list field itself.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        if field not in errors:
            errors[field] = _message_for(field, error)
    return errors


def collect_errors(schema: type[BaseModel], data: Mapping[str, Any]) -> dict[str, str]:
    """Run a schema over draft data and return its error map.

    Args:
        schema: Step or complete schema class
        data: Draft field values (extra keys are ignored)

    Returns:
        Empty dict when the data satisfies the schema
    """
    try:
        schema.model_validate(dict(data))
    except ValidationError as e:
        return errors_from_validation(e)
    return {}


def validate_buyer(data: Mapping[str, Any]) -> BuyerComplete:
    """Validate a complete buyer record.

    Raises:
        ValidationError: If validation fails
    """
    return BuyerComplete.model_validate(dict(data))


def validate_seller(data: Mapping[str, Any]) -> SellerComplete:
    """Validate a complete seller record.

    Raises:
        ValidationError: If validation fails
    """
    return SellerComplete.model_validate(dict(data))
