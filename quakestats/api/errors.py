# File: quakestats/api/errors.py

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger("quakestats.api")


@contextmanager
def database_errors(action: str) -> Iterator[None]:
    """
    Log database failures and answer them with a generic 500.
    """
    try:
        yield
    except SQLAlchemyError:
        logger.exception("Error fetching %s", action)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
