from fastapi import Query


class SortParams:
    """
    Reusable FastAPI dependency collecting the raw sorting query
    parameters of a listing endpoint.

    Usage in a router::

        @router.get("/articles")
        async def list_articles(sorting: SortParams = Depends()):
            ...

    The values are passed through untouched.  Whitelisting happens in
    ``news_api.queries.validate_sort`` so that a bad value produces the
    API's own error message instead of a framework validation error.

    Attributes
    ----------
    sort_by:
        Column name to sort by, or None for the default (``created_at``).
    order:
        ``"asc"`` or ``"desc"`` in any case, or None for the default
        (``desc``).
    """

    def __init__(
        self,
        sort_by: str | None = Query(
            None,
            description="Column to sort results by (default: created_at).",
        ),
        order: str | None = Query(
            None,
            description="Sort direction: 'asc' or 'desc' (default: desc).",
        ),
    ) -> None:
        self.sort_by = sort_by
        self.order = order
