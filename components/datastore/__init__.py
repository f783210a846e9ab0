"""
DataStore component package.
Exports the store port, the in-memory adapter and the HTTP wiring.
"""
from .contracts import DataStore, Key, Record, KEY_FIELD
from .errors import DataStoreError, EntryEncodeError, EntryDecodeError
from .store import InMemoryDataStore
from .routes import get_router, DATA_ENDPOINT
from .settings import DataStoreSettings
from .app import create_app

__all__ = [
    "DataStore",
    "Key",
    "Record",
    "KEY_FIELD",
    "DataStoreError",
    "EntryEncodeError",
    "EntryDecodeError",
    "InMemoryDataStore",
    "get_router",
    "DATA_ENDPOINT",
    "DataStoreSettings",
    "create_app",
]
