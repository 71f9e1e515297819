"""Profile browsing and filtering."""
from .actions import MatchActions, results_summary
from .directory_filter import ALL_BUDGETS, ALL_INDUSTRIES, DirectoryFilters, filter_profiles

__all__ = [
    "ALL_BUDGETS",
    "ALL_INDUSTRIES",
    "DirectoryFilters",
    "MatchActions",
    "filter_profiles",
    "results_summary",
]
