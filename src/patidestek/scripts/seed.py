"""Populate the configured database with demo accounts, taxonomy and listings.

Usage: ``python -m patidestek.scripts.seed``. Safe to run repeatedly.
"""
from __future__ import annotations

import logging

from patidestek.db.session import SessionLocal, create_tables
from patidestek.services.seeding import ADMIN_EMAIL, seed_database

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")
    create_tables()
    with SessionLocal() as db:
        report = seed_database(db)
    for name in report.created:
        logger.info("created %s", name)
    logger.info("%d records already present", len(report.existing))
    logger.info("Admin login: %s", ADMIN_EMAIL)


if __name__ == "__main__":
    main()
