"""Persisted buyer and seller profile records.

Stored JSON uses camelCase keys (``acquisitionType``, ``businessName``,
``askingPrice``); Python code uses the snake_case attribute names. Both are
accepted on input.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProfileRecord(BaseModel):
    """Fields shared by every persisted profile."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str
    name: str
    email: str

    def to_record(self) -> dict:
        """Serialize to the stored JSON shape."""
        return self.model_dump(by_alias=True)


class BuyerProfile(ProfileRecord):
    """A submitted buyer registration."""

    location: str = ""
    industries: list[str] = Field(default_factory=list)
    budget: str = ""
    timeline: str = ""
    experience: str = ""
    acquisition_type: list[str] = Field(default_factory=list)

    @property
    def industry_tags(self) -> list[str]:
        return self.industries

    @property
    def budget_tier(self) -> Optional[str]:
        return self.budget or None


class SellerProfile(ProfileRecord):
    """A submitted seller registration."""

    business_name: str = ""
    industry: str = ""
    location: str = ""
    founded: str = ""
    employees: str = ""
    revenue: str = ""
    asking_price: str = ""

    @property
    def industry_tags(self) -> list[str]:
        return [self.industry] if self.industry else []

    @property
    def budget_tier(self) -> Optional[str]:
        # Sellers list an asking price, not a buyer budget range
        return None


PROFILE_MODELS: dict[str, type[ProfileRecord]] = {
    "buyer": BuyerProfile,
    "seller": SellerProfile,
}
