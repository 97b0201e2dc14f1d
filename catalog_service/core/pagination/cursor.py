"""Cursor encoding and decoding for pagination.

Cursors are opaque strings that encode the identifier of a single record.
Clients receive them in page results and pass them back unchanged as the
``after``/``before`` boundary of the next request.

The cursor format is the standard base64 encoding of the decimal string
of the record id:

    1   -> "MQ=="
    25  -> "MjU="

Nothing outside this module should build or parse cursors by hand.
"""

from __future__ import annotations

import base64
import binascii
import re

from catalog_service.core.exceptions import InvalidCursorError

_DECIMAL_ID = re.compile(r"-?[0-9]+")


class CursorCodec:
    """Encode and decode pagination cursors.

    Usage:
        cursor = CursorCodec.encode(book.id)
        book_id = CursorCodec.decode(cursor)
    """

    @staticmethod
    def encode(record_id: int) -> str:
        """Encode a record id to an opaque cursor string.

        Args:
            record_id: Integer identifier of the record

        Returns:
            Base64 encoded cursor string

        Raises:
            TypeError: If the id is not an integer
        """
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise TypeError(f"Cursor ids must be integers, got {type(record_id).__name__}")
        return base64.b64encode(str(record_id).encode("ascii")).decode("ascii")

    @staticmethod
    def decode(cursor: str) -> int:
        """Decode a cursor string back to the record id it encodes.

        Args:
            cursor: Base64 encoded cursor string

        Returns:
            The record id

        Raises:
            InvalidCursorError: If the cursor is not a string, is not valid
                base64, or does not wrap a decimal integer
        """
        if not isinstance(cursor, str):
            raise InvalidCursorError(cursor)

        try:
            raw = base64.b64decode(cursor.encode("ascii"), validate=True)
            text = raw.decode("ascii")
        except (binascii.Error, UnicodeError) as e:
            raise InvalidCursorError(cursor, detail=f"Invalid cursor: {e}") from e

        if not _DECIMAL_ID.fullmatch(text):
            raise InvalidCursorError(cursor)
        try:
            return int(text)
        except ValueError as e:
            # digit strings past the interpreter's int conversion limit
            raise InvalidCursorError(cursor, detail=f"Invalid cursor: {e}") from e


def encode_cursor(record_id: int) -> str:
    """Shortcut for :meth:`CursorCodec.encode`."""
    return CursorCodec.encode(record_id)


def decode_cursor(cursor: str) -> int:
    """Shortcut for :meth:`CursorCodec.decode`."""
    return CursorCodec.decode(cursor)


__all__ = ["CursorCodec", "decode_cursor", "encode_cursor"]
