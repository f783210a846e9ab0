from __future__ import annotations

from typing import Any, Dict, List, Optional

Key = int
Record = Dict[str, Any]

# Tag stored alongside every record; never treated as a record field.
KEY_FIELD = "_key"


class DataStore:
    """Port interface for a keyed record store.

    Absence is a normal outcome and is reported as ``None``, never raised.
    """

    def add(self, record: Record) -> Optional[Key]:
        """Store the record under a freshly generated key and return the key."""
        raise NotImplementedError

    def delete(self, key: Key) -> Optional[str]:
        """Remove the entry and return its stored representation."""
        raise NotImplementedError

    def get(self, key: Key) -> Optional[str]:
        raise NotImplementedError

    def get_all(self) -> List[str]:
        """Return every stored entry; order is backend-defined."""
        raise NotImplementedError

    def replace(self, key: Key, record: Record) -> Optional[Key]:
        """Overwrite the whole record; fields missing from ``record`` are dropped."""
        raise NotImplementedError

    def update(self, key: Key, record: Record) -> Optional[Key]:
        """Shallow-merge ``record`` into the stored record; unknown fields are added."""
        raise NotImplementedError
