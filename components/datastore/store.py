from __future__ import annotations

import logging
import random
import threading
from typing import Dict, List, Optional

from .codec import decode_entry, encode_entry
from .contracts import KEY_FIELD, DataStore, Key, Record
from .errors import EntryDecodeError, EntryEncodeError

log = logging.getLogger("datastore.store")

KEY_BITS = 64


class InMemoryDataStore(DataStore):
    """Thread-safe in-memory store with a single coarse-grained lock.

    Entries live as encoded text keyed by a random unsigned 64-bit key.
    Process-local only; nothing survives a restart.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._data: Dict[Key, str] = {}
        self._lock = threading.Lock()
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    # ---------- Public API ----------
    def add(self, record: Record) -> Optional[Key]:
        with self._lock:
            key = self._generate_key()
            try:
                self._data[key] = encode_entry(key, record)
            except EntryEncodeError as e:
                log.warning("entry_encode_failed op=add error=%s", e)
                return None
        log.debug("entry_added key=%d", key)
        return key

    def delete(self, key: Key) -> Optional[str]:
        with self._lock:
            return self._data.pop(key, None)

    def get(self, key: Key) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def get_all(self) -> List[str]:
        with self._lock:
            return list(self._data.values())

    def replace(self, key: Key, record: Record) -> Optional[Key]:
        with self._lock:
            if self._load(key, "replace") is None:
                return None
            return self._store(key, record, "replace")

    def update(self, key: Key, record: Record) -> Optional[Key]:
        with self._lock:
            current = self._load(key, "update")
            if current is None:
                return None
            for field, value in record.items():
                if field == KEY_FIELD:
                    continue
                # unknown fields are added, not rejected
                current[field] = value
            return self._store(key, current, "update")

    # ---------- Internals (caller holds the lock) ----------
    def _generate_key(self) -> Key:
        key = self._rng.getrandbits(KEY_BITS)
        while key in self._data:
            key = self._rng.getrandbits(KEY_BITS)
        return key

    def _load(self, key: Key, op: str) -> Optional[Record]:
        text = self._data.get(key)
        if text is None:
            return None
        try:
            _, record = decode_entry(text)
        except EntryDecodeError as e:
            log.error("entry_decode_failed op=%s key=%d error=%s", op, key, e)
            return None
        return record

    def _store(self, key: Key, record: Record, op: str) -> Optional[Key]:
        try:
            self._data[key] = encode_entry(key, record)
        except EntryEncodeError as e:
            log.warning("entry_encode_failed op=%s key=%d error=%s", op, key, e)
            return None
        return key
