from __future__ import annotations
import argparse
import logging
from typing import Callable, List, Optional

from fastapi import FastAPI

from .contracts import DataStore
from .observability import RequestContextMiddleware
from .routes import get_router
from .settings import DataStoreSettings
from .store import InMemoryDataStore

log = logging.getLogger("datastore.app")


def create_app(
    settings: Optional[DataStoreSettings] = None,
    store_factory: Callable[[], DataStore] = InMemoryDataStore,
) -> FastAPI:
    settings = settings or DataStoreSettings()
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(get_router(store_factory, prefix=settings.ENDPOINT))

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="In-memory key-value record store over HTTP")
    parser.add_argument("--host", help="bind address (env: DATASTORE_HOST)")
    parser.add_argument("--port", type=int, help="bind port (env: DATASTORE_PORT)")
    parser.add_argument("--log-level", help="logging level (env: DATASTORE_LOG_LEVEL)")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> DataStoreSettings:
    # Command line wins over environment
    overrides = {
        "HOST": args.host,
        "PORT": args.port,
        "LOG_LEVEL": args.log_level,
    }
    return DataStoreSettings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None) -> None:
    import uvicorn

    settings = load_settings(parse_args(argv))
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    log.info("datastore_starting host=%s port=%d endpoint=%s", settings.HOST, settings.PORT, settings.ENDPOINT)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
