#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the MongoDB connection and see the collection sizes.
Usage: python scripts/check_connection.py
"""
import logging

from schoolapp.core.config import get_settings
from schoolapp.core.logging_config import configure_logging
from schoolapp.db.mongodb import COLLECTIONS, check_mongo_connection, create_mongo_client

logger = logging.getLogger("check_connection")


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("URI: %s", settings.mongodb_uri)
    logger.info("Database: %s", settings.mongodb_db)

    client = create_mongo_client(settings)
    if not check_mongo_connection(client):
        logger.error("MongoDB: FAILED")
        return 1

    logger.info("MongoDB: CONNECTED")
    db = client[settings.mongodb_db]
    for name in COLLECTIONS.values():
        logger.info("  %-10s %d documents", name, db[name].count_documents({}))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
