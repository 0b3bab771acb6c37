"""
Book resolvers for GraphQL API
"""

import strawberry

from ...catalog import list_books
from ...logging import get_logger
from ..types.book import Book

logger = get_logger(__name__)


def resolve_books(info: strawberry.Info) -> list[Book | None]:
    """Get every book in the catalog, in declaration order.

    Args:
        info: GraphQL info context

    Returns:
        List of books
    """
    _ = info  # Unused but required by GraphQL interface

    records = list_books()
    logger.debug("Resolving books", count=len(records))

    # Convert to GraphQL types
    return [Book(title=record.title, author=record.author) for record in records]
