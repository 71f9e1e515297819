"""Step descriptors and wizard definitions for buyer and seller onboarding."""

from dataclasses import dataclass
from typing import Callable, Optional

from pydantic import BaseModel

from .drafts import BuyerDraft, DraftRecord, SellerDraft
from .validators import (
    BuyerComplete,
    BuyerExperience,
    BuyerInvestmentFocus,
    BuyerPersonalInfo,
    SellerBusinessInfo,
    SellerComplete,
    SellerFinancialInfo,
    SellerPersonalInfo,
)


@dataclass(frozen=True)
class StepDescriptor:
    """One page of a wizard. ``schema`` is None for display-only steps."""

    id: str
    title: str
    description: str
    schema: Optional[type[BaseModel]] = None

    @property
    def fields(self) -> tuple[str, ...]:
        """Draft fields this step owns."""
        if self.schema is None:
            return ()
        return tuple(self.schema.model_fields)


@dataclass(frozen=True)
class WizardDefinition:
    """Everything that distinguishes one onboarding wizard from another."""

    role: str
    title: str
    steps: tuple[StepDescriptor, ...]
    draft_factory: Callable[[], DraftRecord]
    complete_schema: type[BaseModel]
    # (section title, fields shown in that section) for the review step
    review_layout: tuple[tuple[str, tuple[str, ...]], ...]
    success_message: str


FIELD_LABELS = {
    "name": "Name",
    "email": "Email",
    "location": "Location",
    "industries": "Industries",
    "budget": "Budget",
    "timeline": "Timeline",
    "experience": "Experience",
    "acquisition_type": "Acquisition Types",
    "business_name": "Business Name",
    "industry": "Industry",
    "founded": "Founded",
    "employees": "Employees",
    "revenue": "Revenue",
    "asking_price": "Asking Price",
}


BUYER_STEPS = (
    StepDescriptor("personal", "Personal Info", "Basic details", BuyerPersonalInfo),
    StepDescriptor("preferences", "Investment Focus", "Industry & budget", BuyerInvestmentFocus),
    StepDescriptor("experience", "Experience", "Background info", BuyerExperience),
    StepDescriptor("review", "Review", "Confirm details"),
)

SELLER_STEPS = (
    StepDescriptor("personal", "Personal Info", "Basic details", SellerPersonalInfo),
    StepDescriptor("business", "Business Info", "Company details", SellerBusinessInfo),
    StepDescriptor("financial", "Financials", "Revenue & price", SellerFinancialInfo),
    StepDescriptor("review", "Review", "Confirm details"),
)

BUYER_WIZARD = WizardDefinition(
    role="buyer",
    title="Buyer Registration",
    steps=BUYER_STEPS,
    draft_factory=BuyerDraft,
    complete_schema=BuyerComplete,
    review_layout=(
        ("Personal Information", ("name", "email", "location")),
        ("Investment Focus", ("budget", "timeline", "experience")),
        ("Industries", ("industries",)),
        ("Acquisition Types", ("acquisition_type",)),
    ),
    success_message="Your buyer profile has been created successfully.",
)

SELLER_WIZARD = WizardDefinition(
    role="seller",
    title="Seller Registration",
    steps=SELLER_STEPS,
    draft_factory=SellerDraft,
    complete_schema=SellerComplete,
    review_layout=(
        ("Personal Information", ("name", "email")),
        ("Business", ("business_name", "industry", "location", "founded", "employees")),
        ("Financials", ("revenue", "asking_price")),
    ),
    success_message="Your seller profile has been created successfully.",
)
