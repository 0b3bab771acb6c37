"""
In-memory book catalog

The collection is fixed at import time and never mutated; records are
frozen and the sequence is a tuple.
"""

from pydantic import BaseModel, ConfigDict


class BookRecord(BaseModel):
    """A single catalog entry."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    author: str | None = None


BOOKS: tuple[BookRecord, ...] = (
    BookRecord(title="The Awakening", author="Kate Chopin"),
    BookRecord(title="City of Glass", author="Paul Auster"),
)


def list_books() -> tuple[BookRecord, ...]:
    """Return every book in declaration order."""
    return BOOKS
