"""Onboarding module for the Deal Match buyer and seller registration wizards."""

from .drafts import BuyerDraft, SellerDraft
from .exceptions import AlreadySubmittedError, OnboardingError, StepIndexError, UnknownFieldError
from .steps import BUYER_WIZARD, SELLER_WIZARD, StepDescriptor, WizardDefinition
from .validators import collect_errors, validate_buyer, validate_seller
from .wizard import SubmitResult, WizardController, buyer_wizard, seller_wizard

__all__ = [
    "BuyerDraft",
    "SellerDraft",
    "StepDescriptor",
    "WizardDefinition",
    "BUYER_WIZARD",
    "SELLER_WIZARD",
    "WizardController",
    "SubmitResult",
    "buyer_wizard",
    "seller_wizard",
    "collect_errors",
    "validate_buyer",
    "validate_seller",
    "OnboardingError",
    "UnknownFieldError",
    "StepIndexError",
    "AlreadySubmittedError",
]
