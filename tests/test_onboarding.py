"""Tests for onboarding validators and draft records."""
from datetime import date

import pytest
from pydantic import ValidationError

from src.onboarding.drafts import (
    BuyerDraft,
    SellerDraft,
    unique_in_order,
    with_option,
    without_option,
)
from src.onboarding.exceptions import UnknownFieldError
from src.onboarding.steps import BUYER_STEPS, BUYER_WIZARD, SELLER_STEPS
from src.onboarding.validators import (
    BuyerComplete,
    BuyerExperience,
    BuyerInvestmentFocus,
    BuyerPersonalInfo,
    SellerBusinessInfo,
    SellerFinancialInfo,
    SellerPersonalInfo,
    collect_errors,
    validate_buyer,
    validate_seller,
)


def _business(**overrides):
    data = {
        "business_name": "Bright Bakery",
        "industry": "Food & Beverage",
        "location": "Portland, OR",
        "founded": "2012",
        "employees": "26-50",
    }
    data.update(overrides)
    return data


class TestBuyerPersonalInfo:
    """Tests for the buyer personal info step schema."""

    def test_valid(self):
        """Test valid personal info has no errors."""
        errors = collect_errors(
            BuyerPersonalInfo,
            {"name": "Sarah Chen", "email": "sarah.chen@email.com", "location": "San Francisco, CA"},
        )
        assert errors == {}

    def test_all_three_fields_reported(self):
        """Test short name, bad email and empty location are all reported."""
        errors = collect_errors(BuyerPersonalInfo, {"name": "A", "email": "bad", "location": ""})

        assert errors == {
            "name": "Name must be at least 2 characters",
            "email": "Please enter a valid email address",
            "location": "Location is required",
        }

    def test_name_length_bounds(self):
        """Test name must be 2-50 characters."""
        base = {"email": "a@b.co", "location": "NYC"}

        assert "name" not in collect_errors(BuyerPersonalInfo, {**base, "name": "Al"})
        assert "name" not in collect_errors(BuyerPersonalInfo, {**base, "name": "x" * 50})

        errors = collect_errors(BuyerPersonalInfo, {**base, "name": "x" * 51})
        assert errors["name"] == "Name must be less than 50 characters"

    def test_whitespace_only_name_fails(self):
        """Test that a blank name is rejected after trimming."""
        errors = collect_errors(
            BuyerPersonalInfo, {"name": "   ", "email": "a@b.co", "location": "NYC"}
        )
        assert errors["name"] == "Name must be at least 2 characters"

    @pytest.mark.parametrize(
        "email",
        [
            "bad",
            "user@domain",
            "a b@c.com",
            "@example.com",
            "",
            "a..b@example.com",
            ".a@example.com",
            "a.@example.com",
            "a@-x.com",
        ],
    )
    def test_invalid_emails(self, email):
        """Test malformed email addresses are rejected."""
        errors = collect_errors(
            BuyerPersonalInfo, {"name": "Sam", "email": email, "location": "NYC"}
        )
        assert errors["email"] == "Please enter a valid email address"

    @pytest.mark.parametrize("email", ["sarah.chen@email.com", "first+tag@sub.example.co.uk"])
    def test_valid_emails(self, email):
        """Test well-formed email addresses pass."""
        errors = collect_errors(
            BuyerPersonalInfo, {"name": "Sam", "email": email, "location": "NYC"}
        )
        assert "email" not in errors

    def test_location_too_long(self):
        """Test location above 100 characters fails."""
        errors = collect_errors(
            BuyerPersonalInfo, {"name": "Sam", "email": "a@b.co", "location": "x" * 101}
        )
        assert errors["location"] == "Location must be less than 100 characters"

    def test_missing_fields(self):
        """Test missing keys map to the field's required message."""
        errors = collect_errors(BuyerPersonalInfo, {})
        assert errors["name"] == "Name is required"
        assert errors["location"] == "Location is required"


class TestBuyerLaterSteps:
    """Tests for buyer investment focus and experience schemas."""

    def test_investment_focus_requires_everything(self):
        """Test empty industries, budget and timeline are reported."""
        errors = collect_errors(
            BuyerInvestmentFocus, {"industries": [], "budget": "", "timeline": ""}
        )
        assert errors == {
            "industries": "Please select at least one industry",
            "budget": "Budget range is required",
            "timeline": "Timeline is required",
        }

    def test_investment_focus_valid(self):
        """Test filled investment focus passes."""
        errors = collect_errors(
            BuyerInvestmentFocus,
            {"industries": ["SaaS"], "budget": "$1M - $5M", "timeline": "3-6 months"},
        )
        assert errors == {}

    def test_experience_requires_everything(self):
        """Test empty experience and acquisition types are reported."""
        errors = collect_errors(BuyerExperience, {"experience": "", "acquisition_type": []})
        assert errors == {
            "experience": "Experience level is required",
            "acquisition_type": "Please select at least one acquisition type",
        }

    def test_step_schemas_ignore_other_fields(self):
        """Test step schemas only look at the fields they own."""
        errors = collect_errors(
            BuyerExperience,
            {"experience": "1-3", "acquisition_type": ["Merger"], "name": ""},
        )
        assert errors == {}

    def test_complete_schema_is_union_of_steps(self):
        """Test the complete schema owns every step field."""
        step_fields = set()
        for schema in (BuyerPersonalInfo, BuyerInvestmentFocus, BuyerExperience):
            step_fields |= set(schema.model_fields)
        assert set(BuyerComplete.model_fields) == step_fields


class TestSellerSchemas:
    """Tests for seller step schemas."""

    def test_personal_info(self):
        """Test seller personal info needs only name and email."""
        assert collect_errors(SellerPersonalInfo, {"name": "Priya", "email": "p@b.com"}) == {}

    def test_business_valid(self):
        """Test valid business info passes."""
        assert collect_errors(SellerBusinessInfo, _business()) == {}

    def test_business_name_too_short(self):
        """Test short business names fail."""
        errors = collect_errors(SellerBusinessInfo, _business(business_name="B"))
        assert errors["business_name"] == "Business name must be at least 2 characters"

    @pytest.mark.parametrize("founded", ["20x5", "12", "19999", ""])
    def test_founded_must_be_four_digits(self, founded):
        """Test non four-digit years fail the pattern."""
        errors = collect_errors(SellerBusinessInfo, _business(founded=founded))
        assert errors["founded"] == "Please enter a valid 4-digit year"

    def test_founded_before_1800(self):
        """Test years before 1800 fail the range check."""
        errors = collect_errors(SellerBusinessInfo, _business(founded="1799"))
        assert errors["founded"] == "Founded year must be between 1800 and current year"

    def test_founded_in_future(self):
        """Test next year fails the range check."""
        next_year = str(date.today().year + 1)
        errors = collect_errors(SellerBusinessInfo, _business(founded=next_year))
        assert errors["founded"] == "Founded year must be between 1800 and current year"

    def test_founded_bounds_inclusive(self):
        """Test 1800 and the current year are accepted."""
        assert collect_errors(SellerBusinessInfo, _business(founded="1800")) == {}
        current = str(date.today().year)
        assert collect_errors(SellerBusinessInfo, _business(founded=current)) == {}

    def test_financial_requires_both(self):
        """Test revenue and asking price are required."""
        errors = collect_errors(SellerFinancialInfo, {"revenue": "", "asking_price": ""})
        assert errors == {
            "revenue": "Revenue is required",
            "asking_price": "Asking price is required",
        }


class TestCompleteValidation:
    """Tests for whole-record validation helpers."""

    def test_validate_buyer(self, valid_buyer_draft):
        """Test validate_buyer returns a model."""
        record = validate_buyer(valid_buyer_draft.build())
        assert record.name == "Jordan Blake"
        assert record.industries == ["Healthcare", "SaaS"]

    def test_validate_buyer_raises(self):
        """Test validate_buyer raises on an empty draft."""
        with pytest.raises(ValidationError):
            validate_buyer(BuyerDraft().build())

    def test_validate_seller(self, valid_seller_draft):
        """Test validate_seller returns a model."""
        record = validate_seller(valid_seller_draft.build())
        assert record.business_name == "Bright Bakery"


class TestOptionHelpers:
    """Tests for ordered-unique multi-select helpers."""

    def test_with_option_appends(self):
        values = ["SaaS"]
        result = with_option(values, "Retail")
        assert result == ["SaaS", "Retail"]
        assert values == ["SaaS"]

    def test_with_option_no_duplicate(self):
        assert with_option(["SaaS"], "SaaS") == ["SaaS"]

    def test_without_option(self):
        values = ["SaaS", "Retail"]
        assert without_option(values, "SaaS") == ["Retail"]
        assert values == ["SaaS", "Retail"]

    def test_without_absent_option(self):
        assert without_option(["SaaS"], "Retail") == ["SaaS"]

    def test_unique_in_order(self):
        assert unique_in_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


class TestBuyerDraft:
    """Tests for BuyerDraft."""

    def test_defaults_are_empty(self):
        """Test a new draft has empty values."""
        draft = BuyerDraft()
        assert draft.name == ""
        assert draft.industries == []
        assert draft.acquisition_type == []

    def test_defaults_not_shared(self):
        """Test list defaults are per instance."""
        first, second = BuyerDraft(), BuyerDraft()
        first.toggle("industries", "SaaS", True)
        assert second.industries == []

    def test_field_names(self):
        """Test field names follow declaration order."""
        assert BuyerDraft.field_names() == [
            "name", "email", "location",
            "industries", "budget", "timeline",
            "experience", "acquisition_type",
        ]

    def test_fluent_interface(self, valid_buyer_draft):
        """Test fluent setters fill the draft."""
        assert valid_buyer_draft.name == "Jordan Blake"
        assert valid_buyer_draft.budget == "$1M - $5M"
        assert valid_buyer_draft.acquisition_type == ["Asset Purchase"]

    def test_set_unknown_field(self):
        """Test unknown fields raise."""
        with pytest.raises(UnknownFieldError):
            BuyerDraft().set("favorite_color", "blue")

    def test_set_multi_select_dedupes(self):
        """Test multi-select values are stored ordered-unique."""
        draft = BuyerDraft()
        draft.set("industries", ["SaaS", "Retail", "SaaS"])
        assert draft.industries == ["SaaS", "Retail"]

    def test_set_multi_select_rejects_string(self):
        """Test a bare string is not split into characters."""
        draft = BuyerDraft()
        with pytest.raises(TypeError):
            draft.set("industries", "Technology")
        assert draft.industries == []

    def test_toggle_round_trip(self):
        """Test toggling the same value twice restores the list."""
        draft = BuyerDraft()
        draft.set("industries", ["SaaS", "Retail"])

        draft.toggle("industries", "Healthcare", True)
        assert draft.industries == ["SaaS", "Retail", "Healthcare"]
        draft.toggle("industries", "Healthcare", False)
        assert draft.industries == ["SaaS", "Retail"]

        draft.toggle("industries", "SaaS", False)
        draft.toggle("industries", "SaaS", True)
        assert sorted(draft.industries) == ["Retail", "SaaS"]

    def test_toggle_does_not_mutate_previous_list(self):
        """Test toggle builds a new list."""
        draft = BuyerDraft()
        before = draft.industries
        draft.toggle("industries", "SaaS", True)
        assert before == []
        assert draft.industries is not before

    def test_toggle_single_value_field_fails(self):
        """Test toggle is only for multi-select fields."""
        with pytest.raises(UnknownFieldError):
            BuyerDraft().toggle("budget", "$1M - $5M", True)

    def test_is_valid(self, valid_buyer_draft):
        """Test is_valid on a complete draft."""
        assert valid_buyer_draft.is_valid() == (True, None)

    def test_is_valid_failure(self):
        """Test is_valid returns the first message on failure."""
        is_valid, error = BuyerDraft().is_valid()
        assert is_valid is False
        assert error is not None


class TestSellerDraft:
    """Tests for SellerDraft."""

    def test_build(self, valid_seller_draft):
        """Test build returns plain field values."""
        data = valid_seller_draft.build()
        assert data["business_name"] == "Bright Bakery"
        assert data["asking_price"] == "$9M"

    def test_no_multi_select_fields(self):
        """Test sellers have no toggle fields."""
        with pytest.raises(UnknownFieldError):
            SellerDraft().toggle("industry", "SaaS", True)

    def test_validate(self, valid_seller_draft):
        """Test validate returns the complete model."""
        assert valid_seller_draft.validate().founded == "2012"


class TestStepDescriptors:
    """Tests for step definitions."""

    def test_buyer_steps(self):
        """Test the buyer wizard has four fixed steps."""
        assert [s.id for s in BUYER_STEPS] == ["personal", "preferences", "experience", "review"]
        assert [s.title for s in BUYER_STEPS] == [
            "Personal Info", "Investment Focus", "Experience", "Review",
        ]

    def test_seller_steps(self):
        """Test the seller wizard has four fixed steps."""
        assert [s.id for s in SELLER_STEPS] == ["personal", "business", "financial", "review"]

    def test_step_fields(self):
        """Test each step owns the fields of its schema."""
        assert BUYER_STEPS[0].fields == ("name", "email", "location")
        assert BUYER_STEPS[1].fields == ("industries", "budget", "timeline")
        assert BUYER_STEPS[3].fields == ()

    def test_every_draft_field_owned_once(self):
        """Test every buyer draft field belongs to exactly one step."""
        owned = [name for step in BUYER_WIZARD.steps for name in step.fields]
        assert sorted(owned) == sorted(BuyerDraft.field_names())
