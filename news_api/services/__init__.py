# Services package.
#
# Each module exposes a focused set of async functions for one slice of
# the API:
#
#   article_service  - article listing / detail with derived comment_count
#   comment_service  - comments scoped to a parent article, delete by id
#   vote_service     - atomic vote increments for articles and comments
#   topic_service    - topic listing (cached)
#   user_service     - user listing and lookup (cached)
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.  Failures are raised as ``ApiError``; routers
# never translate them.
