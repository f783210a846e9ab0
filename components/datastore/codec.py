from __future__ import annotations

import json
from typing import Tuple

from .contracts import KEY_FIELD, Key, Record
from .errors import EntryDecodeError, EntryEncodeError


def encode_entry(key: Key, record: Record) -> str:
    """
    Serialize a record tagged with its key into the stored text form.
    Strict JSON: NaN/Infinity, non-JSON values, non-string field names and
    nesting deeper than the interpreter can walk are rejected.
    """
    bad_fields = [k for k in record if not isinstance(k, str)]
    if bad_fields:
        raise EntryEncodeError(f"field names must be strings: {bad_fields!r}")
    payload = {k: v for k, v in record.items() if k != KEY_FIELD}
    payload[KEY_FIELD] = key
    try:
        return json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise EntryEncodeError(str(e)) from e


def decode_entry(text: str) -> Tuple[Key, Record]:
    try:
        payload = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise EntryDecodeError(str(e)) from e
    if not isinstance(payload, dict):
        raise EntryDecodeError("stored entry is not an object")
    key = payload.pop(KEY_FIELD, None)
    # bool is an int subclass; reject it explicitly
    if not isinstance(key, int) or isinstance(key, bool):
        raise EntryDecodeError("stored entry has no integer key tag")
    return key, payload
