"""REST API for player statistics."""

from __future__ import annotations

import asyncio
import logging
import os
import signal
from contextlib import asynccontextmanager
from typing import Any, Callable

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from playerstats.api.schemas import (
    AssistEntry,
    DefenderEntry,
    ErrorResponse,
    GoalkeeperEntry,
    MessageResponse,
    PlayerNameHit,
    PlayerNotFoundResponse,
    ScorerEntry,
    TouchesEntry,
)
from playerstats.config import RankingRules, Settings, get_ranking, iter_rankings
from playerstats.rankings import rank_defenders
from playerstats.store import PlayerStore, StoreNotReadyError


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

HELLO_MESSAGE = "Hello from Express backend!"
NOT_READY_MESSAGE = "Database connection not ready"
NOT_FOUND_MESSAGE = "Player not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"

RANKING_MODELS = {
    "scorers": ScorerEntry,
    "goalkeepers": GoalkeeperEntry,
    "defenders": DefenderEntry,
    "touches": TouchesEntry,
    "assists": AssistEntry,
}


class PlayerNotFoundError(LookupError):
    def __init__(self, player_name: str):
        super().__init__(f"Player not found: {player_name}")
        self.player_name = player_name


def get_store(request: Request) -> PlayerStore:
    store: PlayerStore = request.app.state.player_store
    if not store.ready:
        raise StoreNotReadyError(NOT_READY_MESSAGE)
    return store


def _parse_limit(raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid search limit %r; using default %d", raw, default)
        return default
    if value < 1:
        logger.warning("Non-positive search limit %d; using default %d", value, default)
        return default
    return value


async def _connect_in_background(store: PlayerStore) -> None:
    try:
        await asyncio.to_thread(store.connect)
    except Exception:
        logger.exception("Could not connect to MongoDB; shutting down")
        os.kill(os.getpid(), signal.SIGTERM)


def _stat_ranking_endpoint(rules: RankingRules) -> Callable[..., list[Any]]:
    def endpoint(store: PlayerStore = Depends(get_store)) -> list[Any]:
        return store.top_by_stat(rules)

    endpoint.__name__ = f"top_{rules.key}"
    endpoint.__doc__ = rules.summary
    return endpoint


def _build_router() -> APIRouter:
    router = APIRouter(prefix="/api", dependencies=[Depends(get_store)])

    @router.get("", response_model=MessageResponse)
    async def hello() -> dict[str, str]:
        return {"message": HELLO_MESSAGE}

    @router.get("/search/players", response_model=list[PlayerNameHit], response_model_exclude_unset=True)
    def search_players(
        request: Request,
        q: str | None = None,
        limit: str | None = None,
        store: PlayerStore = Depends(get_store),
    ):
        if not q or not q.strip():
            return []
        default_limit = request.app.state.settings.search_limit
        return store.search_names(q, _parse_limit(limit, default_limit))

    @router.get(
        "/player/{name}",
        responses={404: {"model": PlayerNotFoundResponse}},
    )
    def get_player(name: str, store: PlayerStore = Depends(get_store)) -> dict[str, Any]:
        player = store.find_player(name)
        if player is None:
            raise PlayerNotFoundError(name)
        return player

    for rules in iter_rankings():
        if rules.stat_field is None:
            continue
        router.add_api_route(
            rules.path,
            _stat_ranking_endpoint(rules),
            methods=["GET"],
            response_model=list[RANKING_MODELS[rules.key]],
            response_model_exclude_unset=True,
            summary=rules.summary,
        )

    defenders = get_ranking("defenders")

    @router.get(
        defenders.path,
        response_model=list[DefenderEntry],
        response_model_exclude_unset=True,
        summary=defenders.summary,
    )
    def top_defenders(store: PlayerStore = Depends(get_store)):
        return rank_defenders(store.defenders(), limit=defenders.limit)

    return router


def create_app(store: PlayerStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around ``store``.

    When no ready store is supplied, the lifespan connects one in the
    background; requests that arrive before it is ready get a 503. A failed
    connection stops the server.
    """
    if settings is None:
        settings = store.settings if store is not None else Settings.from_env()
    if store is None:
        store = PlayerStore(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task = None
        if not store.ready:
            task = asyncio.create_task(_connect_in_background(store))
        try:
            yield
        finally:
            if task is not None and not task.done():
                task.cancel()
            store.close()

    app = FastAPI(title="playerstats", lifespan=lifespan)
    app.state.player_store = store
    app.state.settings = settings

    @app.exception_handler(StoreNotReadyError)
    async def store_not_ready(request: Request, exc: StoreNotReadyError) -> JSONResponse:
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(error=NOT_READY_MESSAGE).model_dump(),
        )

    @app.exception_handler(PlayerNotFoundError)
    async def player_not_found(request: Request, exc: PlayerNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=PlayerNotFoundResponse(error=NOT_FOUND_MESSAGE, playerName=exc.player_name).model_dump(),
        )

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Request %s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "store": store.state.value}

    app.include_router(_build_router())
    return app


__all__ = ["PlayerNotFoundError", "create_app", "get_store"]
