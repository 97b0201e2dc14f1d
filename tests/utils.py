"""Helpers shared by the test modules."""

from __future__ import annotations

from catalog_service.core.pagination import Connection, decode_cursor


def edge_ids(connection: Connection) -> list[int]:
    """Ids of the nodes in a connection, in page order."""
    return [edge.node.id for edge in connection.edges]


def cursor_ids(connection: Connection) -> list[int]:
    """Ids recovered from the edge cursors, in page order."""
    return [decode_cursor(edge.cursor) for edge in connection.edges]
