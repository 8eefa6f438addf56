# scripts/init_db.py
"""
Drop and recreate the customers table in the database named by
DATABASE_URL (default: sqlite:///customers.sqlite).

Usage:
    python -m scripts.init_db
"""

import logging

from customer_api.core.config import load_settings
from customer_api.core.logging_config import setup_logging
from customer_api.db.engine import create_db_engine
from customer_api.db.schema import metadata

logger = logging.getLogger(__name__)


def main():
    settings = load_settings()
    setup_logging(settings.log_level)
    engine = create_db_engine(settings.database_url, echo=settings.db_echo)
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created at %s", settings.database_url)


if __name__ == "__main__":
    main()
