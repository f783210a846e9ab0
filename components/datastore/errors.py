from __future__ import annotations


class DataStoreError(Exception):
    """Base error for the DataStore component."""


class EntryEncodeError(DataStoreError):
    """Raised when a record cannot be represented as a stored entry."""


class EntryDecodeError(DataStoreError):
    """Raised when a stored entry cannot be read back (internal corruption)."""
