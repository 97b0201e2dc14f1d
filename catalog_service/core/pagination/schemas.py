"""Pagination schemas for cursor-based pagination.

This module provides two pagination styles:

1. Connection Pattern (Relay specification):
   - Edges pairing each node with its cursor
   - PageInfo with navigation metadata
   - Serializes to the camelCase shape GraphQL clients expect

2. Simple REST Style:
   - Just items, cursors, and a has_more flag

Both styles are produced from the same Connection returned by the engine.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following the Relay specification.

    Attributes:
        has_previous_page: Whether records exist before the window
        has_next_page: Whether records exist after the window
        start_cursor: Cursor of the first edge in this page
        end_cursor: Cursor of the last edge in this page
    """

    has_previous_page: bool = Field(
        alias="hasPreviousPage",
        description="Whether previous items exist",
    )
    has_next_page: bool = Field(
        alias="hasNextPage",
        description="Whether more items exist",
    )
    start_cursor: str | None = Field(
        default=None,
        alias="startCursor",
        description="Cursor of the first item",
    )
    end_cursor: str | None = Field(
        default=None,
        alias="endCursor",
        description="Cursor of the last item",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern).

    Attributes:
        node: The actual data item
        cursor: Cursor for this specific item
    """

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")

    model_config = ConfigDict(frozen=True)


class Connection(BaseModel, Generic[T]):
    """Relay Connection returned by :func:`paginate`.

    Client navigation:
        # First page
        paginate(records, first=10)

        # Next page (using end_cursor from previous result)
        paginate(records, first=10, after=page.page_info.end_cursor)

        # Previous page (using start_cursor)
        paginate(records, last=10, before=page.page_info.start_cursor)

    Attributes:
        edges: Tuple of Edge objects containing nodes and cursors
        page_info: Navigation metadata
    """

    edges: tuple[Edge[T], ...] = Field(
        default=(),
        description="Edges (items with cursors) in snapshot order",
    )
    page_info: PageInfo = Field(
        alias="pageInfo",
        description="Pagination metadata",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]

    def to_cursor_page(self) -> CursorPage[T]:
        """Convert to simple REST-style pagination.

        Returns:
            CursorPage with items and cursors
        """
        return CursorPage(
            items=self.nodes,
            next_cursor=self.page_info.end_cursor if self.page_info.has_next_page else None,
            prev_cursor=self.page_info.start_cursor if self.page_info.has_previous_page else None,
            has_more=self.page_info.has_next_page,
        )


class CursorPage(BaseModel, Generic[T]):
    """Simple REST-style cursor pagination response.

    Attributes:
        items: Tuple of data items
        next_cursor: Cursor for the next page (None if no more)
        prev_cursor: Cursor for the previous page (None if at start)
        has_more: Whether more items exist after this page
    """

    items: tuple[T, ...] = Field(
        default=(),
        description="Items in snapshot order",
    )
    next_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch next page",
    )
    prev_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch previous page",
    )
    has_more: bool = Field(
        default=False,
        description="Whether more items exist",
    )

    model_config = ConfigDict(frozen=True)


class PaginationArgs(BaseModel):
    """The four Relay pagination arguments as a single value.

    Counts are not range-checked here: zero and negative values are valid
    input and produce an empty page.
    """

    first: int | None = Field(default=None, description="Number of items from the start of the window")
    after: str | None = Field(default=None, description="Cursor to start after (exclusive)")
    last: int | None = Field(default=None, description="Number of items from the end of the window")
    before: str | None = Field(default=None, description="Cursor to end before (exclusive)")

    model_config = ConfigDict(frozen=True)


__all__ = [
    "Connection",
    "CursorPage",
    "Edge",
    "PageInfo",
    "PaginationArgs",
]
