"""Ordered in-memory record storage with store-owned id sequences."""

from catalog_service.core.store.records import IdSequence, Record, RecordStore

__all__ = ["IdSequence", "Record", "RecordStore"]
