"""Value types for the map configuration store.

All coordinates follow the GeoJSON convention: (lng, lat). Every type here is
frozen, and the maps/lists inside them are stored as read-only views
(``MappingProxyType`` / tuples), so a snapshot taken with
``MapConfigStore.read()`` can neither change underneath its holder nor be
used to change the store. ``to_dict()`` converts back to plain dicts/lists.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union

from mapstate.errors import InvalidCoordinateError

Scalar = Union[str, int, float, bool, None]

_SCALAR_TYPES = (str, int, float, bool, type(None))


class SourceKind(str, Enum):
    RASTER = "raster"
    GEOJSON = "geojson"


class RenderKind(str, Enum):
    RASTER = "raster"
    CIRCLE = "circle"
    SYMBOL = "symbol"
    FILL = "fill"
    LINE = "line"


def freeze(value: Any) -> Any:
    """Deep-copy ``value`` into read-only containers (mappings -> proxies, lists -> tuples)."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``: plain, mutable dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return value


def validate_lnglat(coordinates) -> tuple[float, float]:
    """Coerce ``coordinates`` to a (lng, lat) float pair and range-check it.

    Raises:
        InvalidCoordinateError: if the pair is malformed, non-finite, or out
            of the [-180, 180] x [-90, 90] range.
    """
    if isinstance(coordinates, (str, bytes)):
        raise InvalidCoordinateError(f"Expected a (lng, lat) pair, got {coordinates!r}")
    try:
        lng, lat = (float(c) for c in coordinates)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinateError(f"Expected a (lng, lat) pair, got {coordinates!r}") from e
    if not (math.isfinite(lng) and math.isfinite(lat)):
        raise InvalidCoordinateError(f"Non-finite coordinate: ({lng}, {lat})")
    if not -180.0 <= lng <= 180.0:
        raise InvalidCoordinateError(f"Longitude out of range [-180, 180]: {lng}")
    if not -90.0 <= lat <= 90.0:
        raise InvalidCoordinateError(f"Latitude out of range [-90, 90]: {lat}")
    return (lng, lat)


@dataclass(frozen=True)
class Viewport:
    """Map center and zoom level. Replaced wholesale by SetView."""

    center: tuple[float, float] = (0.0, 0.0)
    zoom: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", validate_lnglat(self.center))
        try:
            zoom = float(self.zoom)
        except (TypeError, ValueError) as e:
            raise InvalidCoordinateError(f"Zoom must be a number, got {self.zoom!r}") from e
        if not math.isfinite(zoom) or zoom < 0:
            raise InvalidCoordinateError(f"Zoom must be finite and >= 0: {self.zoom}")
        object.__setattr__(self, "zoom", zoom)

    def to_dict(self) -> dict:
        return {"center": list(self.center), "zoom": self.zoom}


@dataclass(frozen=True)
class Feature:
    """A GeoJSON Point feature.

    Attributes:
        coordinates: (lng, lat), range-checked at construction.
        properties: Flat read-only mapping of string keys to scalars or booleans.
    """

    coordinates: tuple[float, float]
    properties: Mapping[str, Scalar] = field(default_factory=dict)

    geometry_type = "Point"

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", validate_lnglat(self.coordinates))
        if not isinstance(self.properties, Mapping):
            raise ValueError(f"Feature properties must be a mapping, got {type(self.properties).__name__}")
        for key, value in self.properties.items():
            if not isinstance(key, str):
                raise ValueError(f"Property key must be a string: {key!r}")
            if not isinstance(value, _SCALAR_TYPES):
                raise ValueError(f"Property '{key}' must be a scalar, got {type(value).__name__}")
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def to_dict(self) -> dict:
        return {
            "type": "Feature",
            "properties": dict(self.properties),
            "geometry": {
                "type": self.geometry_type,
                "coordinates": list(self.coordinates),
            },
        }


@dataclass(frozen=True)
class Source:
    """A named data source. Only geojson sources carry features."""

    key: str
    kind: SourceKind
    config: Mapping[str, Any] = field(default_factory=dict)
    features: tuple[Feature, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "config", freeze(self.config))
        object.__setattr__(self, "features", tuple(self.features))

    def to_dict(self) -> dict:
        data = thaw(self.config)
        data["type"] = self.kind.value
        if self.kind is SourceKind.GEOJSON:
            data["data"] = {
                "type": "FeatureCollection",
                "features": [f.to_dict() for f in self.features],
            }
        return data


@dataclass(frozen=True)
class Layer:
    """A rendering rule bound to exactly one source."""

    key: str
    source_ref: str
    render_kind: RenderKind | None = None
    paint: Mapping[str, Any] = field(default_factory=dict)
    layout: Mapping[str, Any] = field(default_factory=dict)
    filter: tuple | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "paint", freeze(self.paint))
        object.__setattr__(self, "layout", freeze(self.layout))
        if self.filter is not None:
            object.__setattr__(self, "filter", freeze(self.filter))

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"id": self.key, "source": self.source_ref}
        if self.render_kind is not None:
            out["type"] = self.render_kind.value
        if self.paint:
            out["paint"] = thaw(self.paint)
        if self.layout:
            out["layout"] = thaw(self.layout)
        if self.filter is not None:
            out["filter"] = thaw(self.filter)
        return out


@dataclass(frozen=True)
class ControlPanel:
    """The single informational overlay shown over the map."""

    html: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", freeze(self.metadata))

    def to_dict(self) -> dict:
        return {"html": self.html, "metadata": thaw(self.metadata)}


@dataclass(frozen=True)
class MapSnapshot:
    """Read-only copy of the store state at one point in time."""

    viewport: Viewport
    sources: dict[str, Source]
    layers: dict[str, Layer]
    control: ControlPanel

    def to_dict(self) -> dict:
        return {
            "view": self.viewport.to_dict(),
            "sources": {k: s.to_dict() for k, s in self.sources.items()},
            "layers": [layer.to_dict() for layer in self.layers.values()],
            "control": self.control.to_dict(),
        }
