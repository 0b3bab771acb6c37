"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[Book | None] | None:
        """Get all books in the catalog."""
        from ..resolvers.book import resolve_books

        return resolve_books(info)
