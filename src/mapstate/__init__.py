"""Map configuration store and bookmark walker.

A map's contents (viewport, sources, layers, overlay) are described by a
closed set of actions applied to a MapConfigStore. FeatureWalker cycles a
highlight through a geojson source's features.
"""

from mapstate.actions import AddFeatures, AddLayer, AddSource, SetControl, SetView
from mapstate.errors import (
    DuplicateKeyError,
    EmptyCollectionError,
    InvalidCoordinateError,
    MapStateError,
    UnknownSourceError,
    WrongSourceKindError,
)
from mapstate.models import (
    ControlPanel,
    Feature,
    Layer,
    MapSnapshot,
    RenderKind,
    Source,
    SourceKind,
    Viewport,
)
from mapstate.store import MapConfigStore
from mapstate.walker import FeatureWalker

__all__ = [
    "AddFeatures",
    "AddLayer",
    "AddSource",
    "ControlPanel",
    "DuplicateKeyError",
    "EmptyCollectionError",
    "Feature",
    "FeatureWalker",
    "InvalidCoordinateError",
    "Layer",
    "MapConfigStore",
    "MapSnapshot",
    "MapStateError",
    "RenderKind",
    "SetControl",
    "SetView",
    "Source",
    "SourceKind",
    "UnknownSourceError",
    "Viewport",
    "WrongSourceKindError",
]
