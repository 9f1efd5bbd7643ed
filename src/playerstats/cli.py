"""Command-line entry point for serving the statistics API."""

from __future__ import annotations

import argparse

import uvicorn

from playerstats.api import create_app
from playerstats.config import Settings
from playerstats.store import PlayerStore, StoreState


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve read-only player statistics over HTTP")
    parser.add_argument("--host", default=None, help="Interface to bind (default from PLAYERSTATS_HOST)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default from PLAYERSTATS_PORT)")
    parser.add_argument("--mongodb-uri", dest="mongodb_uri", default=None, help="MongoDB connection URI")
    parser.add_argument("--database", default=None, help="MongoDB database name")
    parser.add_argument("--collection", default=None, help="MongoDB collection holding player documents")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="uvicorn log level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = Settings.from_env().with_overrides(
        host=args.host,
        port=args.port,
        mongodb_uri=args.mongodb_uri,
        database=args.database,
        collection=args.collection,
    )
    store = PlayerStore(settings)
    app = create_app(store=store, settings=settings)
    print(f"Backend running at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=args.log_level)
    if store.state is StoreState.FAILED:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
