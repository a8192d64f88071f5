"""
Repositories: datastore access for one resource per module.

    topics    - topic listing and existence checks
    users     - user listing and lookup by username
    articles  - article reads with the derived comment_count, vote updates
    comments  - comment listing, insert, vote updates and delete

Every function takes the request's ``AsyncSession`` first and returns
plain dicts.  Raw SQLAlchemy errors do not cross this boundary: calls
that can hit a constraint run inside :func:`translate_datastore_errors`,
which re-raises them as :class:`~news_api.errors.ApiError`.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator

from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import DataError, IntegrityError

from news_api.errors import ApiError, ErrorKind

logger = logging.getLogger(__name__)


@contextmanager
def translate_datastore_errors(
    *,
    foreign_key: ErrorKind | None = None,
    foreign_key_msg: str | None = None,
) -> Iterator[None]:
    """
    Map datastore failures raised inside the block to tagged failures.

    - ``IntegrityError`` (a missing referenced row) becomes *foreign_key*
      when the caller declared one.
    - ``DataError`` (value out of range, bad literal) becomes
      ``MalformedInput``.

    Anything else propagates unchanged and is reported as a 500.
    """
    try:
        yield
    except IntegrityError as exc:
        if foreign_key is None:
            raise
        logger.debug("Integrity violation mapped to %s: %s", foreign_key.value, exc.orig)
        raise ApiError(foreign_key, foreign_key_msg) from exc
    except DataError as exc:
        logger.debug("Data error mapped to MalformedInput: %s", exc.orig)
        raise ApiError(ErrorKind.MALFORMED_INPUT) from exc


def row_to_dict(row: RowMapping) -> dict[str, Any]:
    """Convert a result row mapping to a JSON-ready dict."""
    data = dict(row)
    for key, value in data.items():
        if isinstance(value, datetime):
            data[key] = value.isoformat()
    return data
