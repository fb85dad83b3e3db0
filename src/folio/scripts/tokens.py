# src/folio/scripts/tokens.py
"""
Cron job that removes dead credentials.

Run daily to delete:
1. Auth tokens that expired or were revoked at logout
2. Password reset tokens that were used or expired
"""

import logging

from folio.core.logging import configure_logging
from folio.db.session import SessionLocal
from folio.services.auth import purge_tokens

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    db = SessionLocal()
    try:
        tokens, resets = purge_tokens(db)
    finally:
        db.close()
    logger.info("purged %d auth tokens and %d password resets", tokens, resets)


if __name__ == "__main__":
    main()
