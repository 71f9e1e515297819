"""Profile repository: ordered, append-only collections of buyer and seller records."""
import json
import logging
import time
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ValidationError

from config.settings import settings
from src.persistence.profiles import PROFILE_MODELS, BuyerProfile, ProfileRecord, SellerProfile
from src.persistence.seed import DEFAULT_BUYERS, DEFAULT_SELLERS
from src.persistence.store import KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class ProfileRepository:
    """Read and append profile records on top of a key-value store.

    Each collection is stored under one key as a JSON array. Appends rewrite
    the whole array; there is no update or delete path.
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], float] = time.time,
        buyers_key: Optional[str] = None,
        sellers_key: Optional[str] = None,
    ):
        """
        Initialize profile repository.

        Args:
            store: Backing key-value store
            clock: Returns the current time in seconds; used to derive record ids
            buyers_key: Storage key for buyers (defaults to settings)
            sellers_key: Storage key for sellers (defaults to settings)
        """
        self.store = store
        self.clock = clock
        self.collection_keys = {
            "buyer": buyers_key or settings.buyers_key,
            "seller": sellers_key or settings.sellers_key,
        }

    # ------------------------------------------------------------------
    # Raw collections
    # ------------------------------------------------------------------

    def read(self, collection: str) -> list[dict]:
        """Return the records of a collection, or [] if absent or malformed."""
        value = self.store.get_json(collection, [])
        if not isinstance(value, list):
            logger.warning('Storage key "%s" does not hold a list; treating as empty', collection)
            return []
        return [record for record in value if isinstance(record, dict)]

    def append(self, collection: str, record: Mapping[str, Any]) -> dict:
        """Append a record with a freshly generated id and return it.

        The whole collection is rewritten, so backend failures propagate
        instead of being read as an empty list.

        Raises:
            StorageError: If the collection cannot be read or written; nothing
                is written when the read fails
        """
        existing = self._read_for_update(collection)
        saved = {**record, "id": self._new_id(existing)}
        self.store.set_item(collection, json.dumps([*existing, saved]))
        logger.info('Appended record %s to "%s"', saved["id"], collection)
        return saved

    def _read_for_update(self, collection: str) -> list[dict]:
        raw = self.store.get_item(collection)
        if not raw:
            return []
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning('Storage key "%s" holds malformed JSON; starting a new list', collection)
            return []
        if not isinstance(value, list):
            logger.warning('Storage key "%s" does not hold a list; starting a new list', collection)
            return []
        return [record for record in value if isinstance(record, dict)]

    def _new_id(self, existing: list[dict]) -> str:
        """Millisecond timestamp id, bumped until unused in the collection."""
        taken = {str(record.get("id")) for record in existing}
        candidate = int(self.clock() * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    # ------------------------------------------------------------------
    # Typed access
    # ------------------------------------------------------------------

    def list_profiles(self, role: str) -> list[ProfileRecord]:
        """Return the parsed profiles for ``role`` ("buyer" or "seller")."""
        model = PROFILE_MODELS[role]
        profiles = []
        for record in self.read(self.collection_keys[role]):
            try:
                profiles.append(model.model_validate(record))
            except ValidationError as e:
                logger.warning("Skipping unreadable %s record %s: %s", role, record.get("id"), e)
        return profiles

    def save(self, role: str, fields: BaseModel | Mapping[str, Any]) -> ProfileRecord:
        """Persist a validated registration for ``role`` and return the stored profile.

        Raises:
            StorageError: If the collection cannot be read or written
        """
        model = PROFILE_MODELS[role]
        data = fields.model_dump() if isinstance(fields, BaseModel) else dict(fields)
        record = model.model_validate({**data, "id": ""}).to_record()
        del record["id"]
        saved = self.append(self.collection_keys[role], record)
        return model.model_validate(saved)

    def get_buyers(self) -> list[BuyerProfile]:
        return self.list_profiles("buyer")

    def get_sellers(self) -> list[SellerProfile]:
        return self.list_profiles("seller")

    def save_buyer(self, fields: BaseModel | Mapping[str, Any]) -> BuyerProfile:
        return self.save("buyer", fields)

    def save_seller(self, fields: BaseModel | Mapping[str, Any]) -> SellerProfile:
        return self.save("seller", fields)

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def initialize(self, seed: bool = True) -> list[str]:
        """Write example profiles into collections that were never initialized.

        A collection that holds a stored (possibly empty) list is left alone;
        an absent key or an unreadable value is seeded.

        Returns:
            Keys that were seeded
        """
        if not seed:
            return []

        seeded = []
        defaults = {"buyer": DEFAULT_BUYERS, "seller": DEFAULT_SELLERS}
        for role, records in defaults.items():
            key = self.collection_keys[role]
            if self.needs_seed(key) and self.store.set_json(key, records):
                seeded.append(key)
                logger.info('Seeded "%s" with %d example records', key, len(records))
        return seeded

    def needs_seed(self, key: str) -> bool:
        """True if ``key`` was never written or holds something other than a list."""
        try:
            raw = self.store.get_item(key)
        except StorageError as e:
            logger.error('Cannot check storage key "%s": %s', key, e)
            return False
        if raw is None:
            return True
        try:
            return not isinstance(json.loads(raw), list)
        except ValueError:
            logger.warning('Storage key "%s" holds malformed JSON; reseeding', key)
            return True
