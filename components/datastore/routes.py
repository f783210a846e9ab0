from __future__ import annotations
from typing import Annotated, Any, Callable, Dict
import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from .contracts import DataStore, Key
from .store import InMemoryDataStore

log = logging.getLogger("datastore.routes")

DATA_ENDPOINT = "/data"

KeyPath = Annotated[Key, Path(ge=0, description="Store-generated entry key")]


def _json(body: str) -> Response:
    return Response(content=body, media_type="application/json")


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="entry not found")


def get_router(
    store_factory: Callable[[], DataStore] = InMemoryDataStore,
    prefix: str = DATA_ENDPOINT,
) -> APIRouter:
    """
    Build the CRUD router over a single store instance shared by all handlers.
    Handlers are sync, so concurrent requests reach the store from worker threads.
    """
    r = APIRouter(prefix=prefix, tags=["datastore"])
    store = store_factory()

    def get_store() -> DataStore:
        return store

    @r.post("", status_code=status.HTTP_201_CREATED)
    def create(record: Dict[str, Any], ds: DataStore = Depends(get_store)) -> int:
        key = ds.add(record)
        if key is None:
            raise HTTPException(status_code=400, detail="record could not be stored")
        log.info("entry_created key=%d", key)
        return key

    @r.get("")
    def read_all(ds: DataStore = Depends(get_store)):
        return _json("[" + ",".join(ds.get_all()) + "]")

    @r.get("/{key}")
    def read(key: KeyPath, ds: DataStore = Depends(get_store)):
        entry = ds.get(key)
        if entry is None:
            # lookup miss: empty body, not an error
            return Response(status_code=200)
        return _json(entry)

    @r.put("/{key}")
    def replace(record: Dict[str, Any], key: KeyPath, ds: DataStore = Depends(get_store)) -> int:
        result = ds.replace(key, record)
        if result is None:
            raise _not_found()
        return result

    @r.patch("/{key}")
    def update(record: Dict[str, Any], key: KeyPath, ds: DataStore = Depends(get_store)) -> int:
        result = ds.update(key, record)
        if result is None:
            raise _not_found()
        return result

    @r.delete("/{key}")
    def delete(key: KeyPath, ds: DataStore = Depends(get_store)):
        removed = ds.delete(key)
        if removed is None:
            raise _not_found()
        log.info("entry_deleted key=%d", key)
        return _json(removed)

    return r
