# src/folio/scripts/reconcile_counters.py
"""
Recompute follower, following, like and comment counters from the edge tables.

Only rows whose stored value disagrees with the edge count are rewritten, so
the job is safe to run repeatedly.
"""

import logging

from folio.core.logging import configure_logging
from folio.db.session import SessionLocal
from folio.services.counters import reconcile_counters

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    db = SessionLocal()
    try:
        fixed = reconcile_counters(db)
    finally:
        db.close()
    for label, count in fixed.items():
        logger.info("%s: %d rows corrected", label, count)


if __name__ == "__main__":
    main()
