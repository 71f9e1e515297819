"""Selectable option lists shared by the onboarding wizards and the browse view.

These are the values offered by checkboxes and select boxes. Validation does
not restrict drafts to these values; they only drive what the UI offers.
"""

INDUSTRY_OPTIONS = [
    "Technology",
    "SaaS",
    "E-commerce",
    "Retail",
    "Healthcare",
    "Manufacturing",
    "Financial Services",
    "Real Estate",
    "Food & Beverage",
    "Professional Services",
    "Education",
    "Logistics",
]

BUDGET_OPTIONS = [
    "Under $1M",
    "$1M - $5M",
    "$5M - $15M",
    "$15M - $50M",
    "$50M+",
]

TIMELINE_OPTIONS = [
    "0-3 months",
    "3-6 months",
    "6-12 months",
    "12+ months",
]

ACQUISITION_TYPE_OPTIONS = [
    "Asset Purchase",
    "Stock Purchase",
    "Merger",
    "Strategic Partnership",
    "Majority Stake",
    "Minority Stake",
]

# (value, label) pairs; the value is what gets stored
EXPERIENCE_OPTIONS = [
    ("first-time", "First-time buyer"),
    ("1-3", "1-3 acquisitions"),
    ("3-5", "3-5 acquisitions"),
    ("5+", "5+ acquisitions"),
    ("serial", "Serial acquirer (10+)"),
]

EMPLOYEE_OPTIONS = [
    "1-10",
    "11-25",
    "26-50",
    "51-100",
    "101-250",
    "250+",
]


def experience_label(value: str) -> str:
    """Return the display label for a stored experience value."""
    return dict(EXPERIENCE_OPTIONS).get(value, value)
