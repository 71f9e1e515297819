#!/usr/bin/env python3
"""Create the profile store and write the example buyers and sellers.

Collections that already hold a list are left alone unless --reset is given.

Usage:
    python scripts/seed_profiles.py
    python scripts/seed_profiles.py --reset
    python scripts/seed_profiles.py --dry-run
"""
import argparse
import logging
import sys

from scripts.bootstrap import get_session, init_db, settings
from src.logging_config import setup_logging
from src.persistence.models import StorageEntry
from src.persistence.repository import ProfileRepository
from src.persistence.store import SqlStore

logger = logging.getLogger(__name__)


def show_entries() -> None:
    """Log every storage key with its record count."""
    with get_session() as session:
        entries = session.query(StorageEntry).order_by(StorageEntry.key).all()
        if not entries:
            logger.info("Store is empty.")
        for entry in entries:
            logger.info("  %-12s %8d bytes  updated %s", entry.key, len(entry.value), entry.updated_at)


def main():
    parser = argparse.ArgumentParser(description="Seed the Deal Match profile store")
    parser.add_argument("--reset", action="store_true", help="Remove both collections before seeding")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be seeded without writing")
    args = parser.parse_args()

    setup_logging(settings.log_level)
    init_db()

    store = SqlStore()
    repository = ProfileRepository(store)
    keys = list(repository.collection_keys.values())

    logger.info("Database: %s", settings.database_url)

    if args.dry_run:
        pending = [key for key in keys if args.reset or repository.needs_seed(key)]
        logger.info("[DRY RUN] Would seed: %s", ", ".join(pending) or "nothing")
        show_entries()
        return 0

    if args.reset:
        for key in keys:
            store.remove_item(key)
            logger.info('Removed "%s"', key)

    seeded = repository.initialize(seed=True)
    logger.info("Seeded: %s", ", ".join(seeded) or "nothing (collections already initialized)")
    show_entries()
    return 0


if __name__ == "__main__":
    sys.exit(main())
