"""Profile persistence layer."""
from .database import get_session, init_db
from .models import Base, StorageEntry
from .profiles import BuyerProfile, ProfileRecord, SellerProfile
from .repository import ProfileRepository
from .store import InMemoryStore, KeyValueStore, SqlStore, StorageError

__all__ = [
    "Base",
    "StorageEntry",
    "BuyerProfile",
    "SellerProfile",
    "ProfileRecord",
    "ProfileRepository",
    "KeyValueStore",
    "InMemoryStore",
    "SqlStore",
    "StorageError",
    "init_db",
    "get_session",
]
