"""
Failure taxonomy and the single place where failures become responses.

Services and repositories raise :class:`ApiError` carrying one of the
closed set of :class:`ErrorKind` values.  Routers never build error
responses themselves: :func:`install_error_handlers` registers the
FastAPI exception handlers once, and every failure (tagged, framework
level, or unexpected) is classified there into a status code plus a
``{"msg": ...}`` body.
"""
from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    INVALID_SORT_COLUMN = "InvalidSortColumn"
    INVALID_ORDER = "InvalidOrder"
    MALFORMED_INPUT = "MalformedInput"
    MISSING_FIELD = "MissingField"
    INVALID_IDENTIFIER = "InvalidIdentifier"
    TOPIC_NOT_FOUND = "TopicNotFound"
    ARTICLE_NOT_FOUND = "ArticleNotFound"
    COMMENT_NOT_FOUND = "CommentNotFound"
    USER_NOT_FOUND = "UserNotFound"


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

BAD_REQUEST = "Bad Request"
INVALID_SORT_BY = "Invalid sort by query"
INVALID_ORDER = "Invalid order query"
TOPIC_NOT_FOUND = "Topic Not Found"
COMMENT_NOT_FOUND = "comment not found"
USER_NOT_FOUND = "user not found"

# Clients match on these, so each article lookup keeps its own wording.
ARTICLE_ID_NOT_FOUND = "article_id not found"
ARTICLE_WITH_ID_NOT_FOUND = "Article with id: {article_id} not found"
ARTICLE_NOT_FOUND = "Article Not Found"
NOT_FOUND = "Not Found"

METHOD_NOT_ALLOWED = "Method Not Allowed"
ROUTE_NOT_FOUND = "Route Not Found"
INTERNAL_SERVER_ERROR = "Internal Server Error"

_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_SORT_COLUMN: 400,
    ErrorKind.INVALID_ORDER: 400,
    ErrorKind.MALFORMED_INPUT: 400,
    ErrorKind.MISSING_FIELD: 400,
    ErrorKind.INVALID_IDENTIFIER: 400,
    ErrorKind.TOPIC_NOT_FOUND: 404,
    ErrorKind.ARTICLE_NOT_FOUND: 404,
    ErrorKind.COMMENT_NOT_FOUND: 404,
    ErrorKind.USER_NOT_FOUND: 404,
}

_DEFAULT_MSG: dict[ErrorKind, str] = {
    ErrorKind.INVALID_SORT_COLUMN: INVALID_SORT_BY,
    ErrorKind.INVALID_ORDER: INVALID_ORDER,
    ErrorKind.MALFORMED_INPUT: BAD_REQUEST,
    ErrorKind.MISSING_FIELD: BAD_REQUEST,
    ErrorKind.INVALID_IDENTIFIER: BAD_REQUEST,
    ErrorKind.TOPIC_NOT_FOUND: TOPIC_NOT_FOUND,
    ErrorKind.ARTICLE_NOT_FOUND: NOT_FOUND,
    ErrorKind.COMMENT_NOT_FOUND: COMMENT_NOT_FOUND,
    ErrorKind.USER_NOT_FOUND: USER_NOT_FOUND,
}


class ApiError(Exception):
    """
    Tagged failure raised by the service and repository layers.

    Attributes
    ----------
    kind:
        One of :class:`ErrorKind`; decides the response status.
    msg:
        Human-readable message sent to the caller.  Defaults to the
        kind's standard wording.
    field:
        Name of the offending input field, when there is one.
    """

    def __init__(self, kind: ErrorKind, msg: str | None = None, field: str | None = None) -> None:
        self.kind = kind
        self.msg = msg if msg is not None else _DEFAULT_MSG[kind]
        self.field = field
        super().__init__(self.msg)

    @property
    def status_code(self) -> int:
        return _STATUS[self.kind]

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.value!r}, msg={self.msg!r}, field={self.field!r})"


def _respond(status_code: int, msg: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg}, headers=headers)


def classify(exc: Exception) -> tuple[int, str]:
    """
    Return the ``(status, message)`` pair the caller should see for *exc*.

    Anything that is neither an :class:`ApiError` nor a recognised
    framework error collapses to a 500 with a fixed message so internal
    details never leave the process.
    """
    if isinstance(exc, ApiError):
        return exc.status_code, exc.msg
    if isinstance(exc, RequestValidationError):
        return _STATUS[ErrorKind.MALFORMED_INPUT], BAD_REQUEST
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == 405:
            return 405, METHOD_NOT_ALLOWED
        if exc.status_code == 404:
            return 404, ROUTE_NOT_FOUND
        if 400 <= exc.status_code < 500:
            return exc.status_code, BAD_REQUEST
    return 500, INTERNAL_SERVER_ERROR


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.debug(
        "%s %s failed: %s (field=%s)", request.method, request.url.path, exc.kind.value, exc.field
    )
    status_code, msg = classify(exc)
    return _respond(status_code, msg)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    status_code, msg = classify(exc)
    return _respond(status_code, msg)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    status_code, msg = classify(exc)
    headers = getattr(exc, "headers", None)
    return _respond(status_code, msg, headers=headers)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    status_code, msg = classify(exc)
    return _respond(status_code, msg)


def install_error_handlers(app: FastAPI) -> None:
    """Register the failure-to-response handlers on *app*."""
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
