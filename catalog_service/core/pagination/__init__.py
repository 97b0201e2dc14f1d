"""Cursor-based pagination in the Relay Connection style.

The engine slices an ordered snapshot of records using opaque cursors and
forward/backward page sizes:

    from catalog_service.core.pagination import paginate

    page = paginate(store.snapshot(), first=5)
    next_page = paginate(store.snapshot(), first=5, after=page.page_info.end_cursor)

Results can be returned as-is (Relay Connection) or flattened for REST:

    page.to_cursor_page()

Cursors are opaque base64 strings that clients pass back unchanged.
"""

from catalog_service.core.pagination.cursor import (
    CursorCodec,
    decode_cursor,
    encode_cursor,
)
from catalog_service.core.pagination.engine import (
    Identified,
    paginate,
    paginate_with,
)
from catalog_service.core.pagination.schemas import (
    Connection,
    CursorPage,
    Edge,
    PageInfo,
    PaginationArgs,
)

__all__ = [
    # Relay-style schemas
    "Connection",
    # Cursor utilities
    "CursorCodec",
    # REST-style schemas
    "CursorPage",
    "Edge",
    # Engine
    "Identified",
    "PageInfo",
    "PaginationArgs",
    "decode_cursor",
    "encode_cursor",
    "paginate",
    "paginate_with",
]
