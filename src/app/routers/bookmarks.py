"""Map state API — read the map configuration and walk bookmarks.

All handlers are ``async def`` so they run on the event loop thread; the
store is single-writer and must not see interleaved ``apply`` calls.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from loguru import logger
from pydantic import BaseModel

from mapstate.actions import AddFeatures, SetView
from mapstate.errors import (
    DuplicateKeyError,
    EmptyCollectionError,
    InvalidCoordinateError,
    MapStateError,
    UnknownSourceError,
    WrongSourceKindError,
)
from mapstate.geojson import export_source, parse_features
from mapstate.store import MapConfigStore
from mapstate.walker import FeatureWalker

router = APIRouter(prefix="/api/map", tags=["map"])

_STATUS_BY_ERROR = {
    UnknownSourceError: 404,
    DuplicateKeyError: 409,
    EmptyCollectionError: 409,
    WrongSourceKindError: 400,
    InvalidCoordinateError: 422,
}


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class SetViewRequest(BaseModel):
    """Move the map to a center and zoom."""
    lng: float
    lat: float
    zoom: float


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _store(request: Request) -> MapConfigStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Map store not initialized")
    return store


def _walker(request: Request) -> FeatureWalker:
    walker = getattr(request.app.state, "walker", None)
    if walker is None:
        raise HTTPException(status_code=503, detail="Bookmark walker not initialized")
    return walker


def _http_error(e: MapStateError) -> HTTPException:
    for error_type, status in _STATUS_BY_ERROR.items():
        if isinstance(e, error_type):
            return HTTPException(status_code=status, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/state")
async def get_state(request: Request):
    """Current viewport, sources, layers and overlay, in collaborator wire form."""
    return _store(request).read().to_dict()


@router.post("/advance")
async def advance(request: Request):
    """Zoom to the next bookmark of the configured source and update the overlay."""
    store = _store(request)
    walker = _walker(request)
    source_key = getattr(request.app.state, "bookmark_source", "points")
    try:
        payload = walker.advance(store, source_key)
    except MapStateError as e:
        logger.warning(f"Bookmark advance on '{source_key}' rejected: {e}")
        raise _http_error(e)
    view = store.read().viewport
    return {
        "source": source_key,
        "cursor": walker.cursor(source_key),
        "view": view.to_dict(),
        "bookmark": payload.to_dict(),
    }


@router.post("/view")
async def set_view(request: Request, body: SetViewRequest):
    store = _store(request)
    try:
        store.apply(SetView(center=(body.lng, body.lat), zoom=body.zoom))
    except MapStateError as e:
        raise _http_error(e)
    return store.read().viewport.to_dict()


@router.get("/sources/{key}/geojson")
async def get_source_geojson(request: Request, key: str):
    """Export a source's features as a FeatureCollection."""
    try:
        source = _store(request).get_source(key)
    except UnknownSourceError as e:
        raise _http_error(e)
    return export_source(source)


@router.post("/sources/{key}/features")
async def add_features(request: Request, key: str, body: dict):
    """Append a GeoJSON Feature or FeatureCollection to a geojson source."""
    store = _store(request)
    try:
        features = parse_features(body)
        store.apply(AddFeatures(source_key=key, features=tuple(features)))
    except MapStateError as e:
        raise _http_error(e)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    count = len(store.get_source(key).features)
    logger.info(f"Added {len(features)} features to '{key}' ({count} total)")
    return {"source": key, "added": len(features), "total": count}
