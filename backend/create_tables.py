# create_tables.py: create the schema straight from the models (development helper)
# Usage: python create_tables.py [--drop]
# Production databases go through alembic instead.
import logging
import sys

from expense_api.core.logging import configure_logging
from expense_api.db.base import Base
from expense_api.db import models  # noqa: F401  (registers tables on Base.metadata)
from expense_api.db.session import engine

logger = logging.getLogger("create_tables")


def main(argv) -> int:
    configure_logging("INFO")
    try:
        if "--drop" in argv:
            logger.warning("Dropping tables: %s", ", ".join(reversed(Base.metadata.tables)))
            Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
    except Exception:
        logger.exception("Error creating tables:")
        return 1
    logger.info("Tables ready: %s", ", ".join(Base.metadata.tables))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
