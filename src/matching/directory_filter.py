"""Directory filter for the matches view.

Narrows a profile collection by a free-text query and categorical filters.
All predicates are combined with AND and the input order is kept; there is
no ranking.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, Sequence, TypeVar, runtime_checkable

ALL_INDUSTRIES = "all-industries"
ALL_BUDGETS = "all-budgets"


@runtime_checkable
class FilterableProfile(Protocol):
    """What the filter needs from a profile."""

    name: str

    @property
    def industry_tags(self) -> Sequence[str]:
        ...

    @property
    def budget_tier(self) -> Optional[str]:
        ...


P = TypeVar("P")


def _industry_tags(profile: Any) -> Sequence[str]:
    if isinstance(profile, Mapping):
        if "industries" in profile:
            return profile.get("industries") or []
        industry = profile.get("industry")
        return [industry] if industry else []
    return profile.industry_tags


def _budget_tier(profile: Any) -> Optional[str]:
    if isinstance(profile, Mapping):
        return profile.get("budget")
    return profile.budget_tier


def _name(profile: Any) -> str:
    if isinstance(profile, Mapping):
        return profile.get("name") or ""
    return profile.name or ""


def _is_unset(value: Optional[str], sentinel: str) -> bool:
    return not value or value == sentinel


def matches_query(profile: Any, query: Optional[str]) -> bool:
    """Case-insensitive substring match on name or any industry tag."""
    needle = (query or "").strip().lower()
    if not needle:
        return True
    if needle in _name(profile).lower():
        return True
    return any(needle in tag.lower() for tag in _industry_tags(profile))


def matches_industry(profile: Any, industry: Optional[str]) -> bool:
    """True if no industry is selected or the profile carries it."""
    if _is_unset(industry, ALL_INDUSTRIES):
        return True
    return industry in _industry_tags(profile)


def matches_budget(profile: Any, budget: Optional[str]) -> bool:
    """True if no budget is selected or the profile's budget equals it."""
    if _is_unset(budget, ALL_BUDGETS):
        return True
    return _budget_tier(profile) == budget


def filter_profiles(
    profiles: Sequence[P],
    query: Optional[str] = "",
    industry_filter: Optional[str] = ALL_INDUSTRIES,
    budget_filter: Optional[str] = ALL_BUDGETS,
) -> list[P]:
    """
    Return the profiles matching every predicate, in input order.

    Args:
        profiles: Profile models (or plain dicts with name/industries/budget)
        query: Free text; empty matches everything
        industry_filter: Industry, or empty/"all-industries" for any
        budget_filter: Budget range, or empty/"all-budgets" for any

    Returns:
        New list of matching profiles
    """
    return [
        profile
        for profile in profiles
        if matches_query(profile, query)
        and matches_industry(profile, industry_filter)
        and matches_budget(profile, budget_filter)
    ]


@dataclass
class DirectoryFilters:
    """Current filter selection of a browse view."""

    query: str = ""
    industry: str = ""
    budget: str = ""

    def clear(self) -> None:
        """Reset every predicate to match everything."""
        self.query = ""
        self.industry = ""
        self.budget = ""

    @property
    def active_count(self) -> int:
        """Number of predicates that narrow the result."""
        return sum([
            bool(self.query.strip()),
            not _is_unset(self.industry, ALL_INDUSTRIES),
            not _is_unset(self.budget, ALL_BUDGETS),
        ])

    @property
    def has_active_filters(self) -> bool:
        return self.active_count > 0

    def apply(self, profiles: Sequence[P]) -> list[P]:
        """Filter ``profiles`` with the current selection."""
        return filter_profiles(profiles, self.query, self.industry, self.budget)
