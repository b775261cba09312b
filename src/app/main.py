"""MAPSTATE - bookmark demo map.

Main FastAPI application. The lifespan builds one MapConfigStore, runs the
demo bootstrap sequence against it and hangs the store and its FeatureWalker
off ``app.state`` for the routers.
"""

import random
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from loguru import logger

from app.config import Settings, settings
from app.routers.bookmarks import router as bookmarks_router
from mapstate.demo import bootstrap
from mapstate.store import MapConfigStore
from mapstate.walker import FeatureWalker


def log_action(snapshot, action) -> None:
    """Store observer: one debug line per committed action."""
    logger.debug(
        f"{type(action).__name__} committed: view={snapshot.viewport.center}@{snapshot.viewport.zoom}, "
        f"{len(snapshot.sources)} sources, {len(snapshot.layers)} layers"
    )


def build_map(cfg: Settings) -> tuple[MapConfigStore, FeatureWalker]:
    """Create the store, wire the logging observer and run the demo setup."""
    store = MapConfigStore()
    store.subscribe(log_action)
    rng = random.Random(cfg.random_seed)
    bootstrap(
        store,
        center=(cfg.map_center_lng, cfg.map_center_lat),
        zoom=cfg.map_zoom,
        n_points=cfg.random_points,
        cluster_radius=cfg.cluster_radius,
        rng=rng,
    )
    walker = FeatureWalker(zoom=cfg.bookmark_zoom)
    return store, walker


@asynccontextmanager
async def lifespan(app: FastAPI):
    store, walker = build_map(settings)
    app.state.store = store
    app.state.walker = walker
    app.state.bookmark_source = settings.bookmark_source
    snap = store.read()
    logger.info(
        f"{settings.app_name} ready: {len(snap.sources)} sources, {len(snap.layers)} layers"
    )
    yield
    # No persistence: the map is rebuilt on every start.
    app.state.store = None
    app.state.walker = None
    logger.info(f"{settings.app_name} shut down")


app = FastAPI(
    title=settings.app_name,
    description="Bookmark demo map configuration service",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(bookmarks_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def run() -> None:
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
