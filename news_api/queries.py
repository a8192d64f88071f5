"""
Validation of caller-supplied query parameters and identifiers.

Everything here is pure: raw strings go in, either a validated value
comes out or an :class:`~news_api.errors.ApiError` is raised.  Nothing
touches the datastore, so callers run these checks before any query.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from news_api.errors import ApiError, ErrorKind

ASC = "asc"
DESC = "desc"

DEFAULT_SORT_COLUMN = "created_at"
DEFAULT_ORDER = DESC

# Columns each listing may be sorted by.  Nothing outside these sets ever
# reaches an ORDER BY clause.
SORTABLE_COLUMNS: dict[str, frozenset[str]] = {
    "articles": frozenset(
        {"article_id", "title", "topic", "author", "created_at", "votes", "comment_count"}
    ),
    "comments": frozenset({"comment_id", "votes", "created_at", "author"}),
}

# Identifiers and vote counters are stored in 32-bit integer columns.
MAX_IDENTIFIER = 2**31 - 1
MAX_INCREMENT = 2**31 - 1

_IDENTIFIER_RE = re.compile(r"[0-9]+")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class SortSpec:
    """A whitelisted ``(column, direction)`` pair."""

    column: str
    direction: str

    @property
    def descending(self) -> bool:
        return self.direction == DESC


def validate_sort(resource: str, sort_by: str | None = None, order: str | None = None) -> SortSpec:
    """
    Return the :class:`SortSpec` for *resource* or raise.

    ``sort_by`` is checked first, so an unknown column is reported as
    ``InvalidSortColumn`` whatever the value of ``order``.
    """
    column = DEFAULT_SORT_COLUMN if sort_by is None else sort_by
    if column not in SORTABLE_COLUMNS[resource]:
        raise ApiError(ErrorKind.INVALID_SORT_COLUMN, field="sort_by")

    direction = DEFAULT_ORDER if order is None else order.lower()
    if direction not in (ASC, DESC):
        raise ApiError(ErrorKind.INVALID_ORDER, field="order")

    return SortSpec(column=column, direction=direction)


def parse_identifier(raw: Any, field: str = "id") -> int:
    """Parse a path identifier as a positive integer that fits the id columns."""
    if isinstance(raw, bool):
        raise ApiError(ErrorKind.INVALID_IDENTIFIER, field=field)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _IDENTIFIER_RE.fullmatch(raw):
        value = int(raw)
    else:
        raise ApiError(ErrorKind.INVALID_IDENTIFIER, field=field)

    if not 0 < value <= MAX_IDENTIFIER:
        raise ApiError(ErrorKind.INVALID_IDENTIFIER, field=field)
    return value


def parse_increment(raw: Any) -> int:
    """
    Parse an ``inc_votes`` value.

    ``None`` (field absent) means no change.  Integers, integral floats
    and base-10 integer strings are accepted when they fit a 32-bit
    counter; anything else is malformed.
    """
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise ApiError(ErrorKind.MALFORMED_INPUT, field="inc_votes")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and raw.is_integer():
        value = int(raw)
    elif isinstance(raw, str) and _INTEGER_RE.fullmatch(raw.strip()):
        value = int(raw.strip())
    else:
        raise ApiError(ErrorKind.MALFORMED_INPUT, field="inc_votes")

    if abs(value) > MAX_INCREMENT:
        raise ApiError(ErrorKind.MALFORMED_INPUT, field="inc_votes")
    return value
