"""Window-then-clip cursor pagination over an ordered snapshot.

The engine narrows a half-open window ``[start, end)`` over the full
snapshot in a fixed order:

1. ``after``  moves the start past the cursor's record
2. ``before`` moves the end onto the cursor's record (exclusive)
3. ``first``  keeps at most N records from the start of the window
4. ``last``   keeps at most N records from the end of what ``first`` left

``first``/``last`` are therefore resolved against the window already
narrowed by the cursors. A cursor whose record is not in the snapshot
leaves its side of the window untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Protocol

from catalog_service.core.pagination.cursor import CursorCodec
from catalog_service.core.pagination.schemas import (
    Connection,
    Edge,
    PageInfo,
    PaginationArgs,
)

logger = logging.getLogger(__name__)


class Identified(Protocol):
    """Anything the engine can paginate: a record with a stable integer id."""

    @property
    def id(self) -> int: ...


def _position_of(
    cursor: str,
    positions: dict[int, int],
) -> int | None:
    """Resolve a cursor to its index in the snapshot, or None if absent."""
    record_id = CursorCodec.decode(cursor)
    index = positions.get(record_id)
    if index is None:
        logger.debug(
            "Cursor does not match any record in the snapshot, ignoring it",
            extra={"cursor": cursor, "record_id": record_id},
        )
    return index


def paginate(
    records: Iterable[Identified],
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
) -> Connection[Any]:
    """Slice an ordered snapshot into a Relay Connection.

    Args:
        records: Records in stable id order. Copied before use, so a live
            collection mutated afterwards does not affect the result.
        first: Keep at most this many records from the start of the window.
            Zero or negative yields an empty page.
        after: Cursor of the record the window starts after.
        last: Keep at most this many records from the end of the window.
            Zero or negative yields an empty page.
        before: Cursor of the record the window ends before.

    Returns:
        Connection with one edge per record in the page.

    Raises:
        InvalidCursorError: If ``after`` or ``before`` cannot be decoded.
    """
    snapshot: Sequence[Identified] = tuple(records)
    total = len(snapshot)

    start_index = 0
    end_index = total

    positions: dict[int, int] = {}
    if after is not None or before is not None:
        for index, record in enumerate(snapshot):
            positions.setdefault(record.id, index)

    if after is not None:
        index = _position_of(after, positions)
        if index is not None:
            start_index = index + 1

    if before is not None:
        index = _position_of(before, positions)
        if index is not None:
            end_index = index

    if first is not None:
        if first <= 0:
            end_index = start_index
        else:
            end_index = min(start_index + first, end_index)

    if last is not None:
        if last <= 0:
            start_index = end_index
        else:
            start_index = max(end_index - last, start_index)

    start_index = min(max(start_index, 0), total)
    end_index = min(max(end_index, 0), total)

    edges = tuple(
        Edge(node=record, cursor=CursorCodec.encode(record.id))
        for record in snapshot[start_index:end_index]
    )

    page_info = PageInfo(
        has_next_page=end_index < total,
        has_previous_page=start_index > 0,
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
    )
    return Connection(edges=edges, page_info=page_info)


def paginate_with(records: Iterable[Identified], args: PaginationArgs) -> Connection[Any]:
    """Paginate using a bundled :class:`PaginationArgs`."""
    return paginate(
        records,
        first=args.first,
        after=args.after,
        last=args.last,
        before=args.before,
    )


__all__ = ["Identified", "paginate", "paginate_with"]
