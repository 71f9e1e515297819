"""Pytest fixtures for Deal Match tests."""
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.onboarding.drafts import BuyerDraft, SellerDraft
from src.persistence.models import Base
from src.persistence.profiles import BuyerProfile, SellerProfile
from src.persistence.repository import ProfileRepository
from src.persistence.store import InMemoryStore, SqlStore, StorageError


# =============================================================================
# STORAGE FIXTURES
# =============================================================================


@pytest.fixture
def memory_store():
    """Fresh process-local key-value store."""
    return InMemoryStore()


class UnreliableStore(InMemoryStore):
    """In-memory store whose reads or writes can be switched to fail."""

    def __init__(self):
        super().__init__()
        self.fail_reads = False
        self.fail_writes = False

    def get_item(self, key):
        if self.fail_reads:
            raise StorageError("database is locked")
        return super().get_item(key)

    def set_item(self, key, value):
        if self.fail_writes:
            raise StorageError("disk I/O error")
        super().set_item(key, value)


@pytest.fixture
def unreliable_store():
    """Store with switchable backend failures."""
    return UnreliableStore()


@pytest.fixture(scope="function")
def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(test_engine):
    """SqlStore bound to the in-memory database."""
    return SqlStore(sessionmaker(bind=test_engine))


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2026-01-25 12:00:00 UTC."""
    return lambda: 1769342400.0


@pytest.fixture
def repository(memory_store, fixed_clock):
    """Repository over an in-memory store with a frozen clock."""
    return ProfileRepository(memory_store, clock=fixed_clock)


# =============================================================================
# DRAFT FIXTURES
# =============================================================================


@pytest.fixture
def valid_buyer_draft():
    """A buyer draft that passes every step."""
    return (
        BuyerDraft()
        .set_personal_info("Jordan Blake", "jordan.blake@example.com", "Denver, CO")
        .set_investment_focus(["Healthcare", "SaaS"], "$1M - $5M", "3-6 months")
        .set_experience("first-time", ["Asset Purchase"])
    )


@pytest.fixture
def valid_seller_draft():
    """A seller draft that passes every step."""
    return (
        SellerDraft()
        .set_personal_info("Priya Natarajan", "priya@brightbakery.com")
        .set_business("Bright Bakery", "Food & Beverage", "Portland, OR", "2012", "26-50")
        .set_financials("$4M", "$9M")
    )


# =============================================================================
# PROFILE FIXTURES
# =============================================================================


@pytest.fixture
def sample_buyers():
    """The two buyers from the browse example."""
    return [
        BuyerProfile(
            id="1",
            name="Sarah Chen",
            email="sarah.chen@email.com",
            location="San Francisco, CA",
            industries=["Technology", "SaaS"],
            budget="$5M - $15M",
            timeline="6-12 months",
            experience="3-5",
            acquisition_type=["Asset Purchase", "Strategic Partnership"],
        ),
        BuyerProfile(
            id="2",
            name="Michael Rodriguez",
            email="michael.rodriguez@email.com",
            location="Austin, TX",
            industries=["E-commerce"],
            budget="$1M - $5M",
            timeline="3-6 months",
            experience="1-3",
            acquisition_type=["Asset Purchase"],
        ),
    ]


@pytest.fixture
def sample_seller():
    """A single seller profile."""
    return SellerProfile(
        id="1",
        name="David Thompson",
        email="david@techstartup.com",
        business_name="TechFlow Analytics",
        industry="Technology",
        revenue="$2.5M ARR",
        asking_price="$12M",
        location="Seattle, WA",
        founded="2019",
        employees="11-25",
    )
