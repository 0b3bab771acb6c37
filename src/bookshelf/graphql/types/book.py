"""
Book GraphQL type definitions
"""

import strawberry


@strawberry.type
class Book:
    """A book in the catalog."""

    title: str | None
    author: str | None
