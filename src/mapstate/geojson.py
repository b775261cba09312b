"""GeoJSON (RFC 7946) codec for Point features and geojson sources.

Only Point geometries are accepted. Coordinates are already [lng, lat],
which is also the internal storage convention.
"""

from __future__ import annotations

from mapstate.errors import InvalidCoordinateError
from mapstate.models import Feature, Source


def parse_feature(raw: dict) -> Feature:
    """Parse a single GeoJSON Feature dict into a Feature.

    Raises:
        ValueError: if ``raw`` is not a Feature with a valid Point geometry.
    """
    if not isinstance(raw, dict) or raw.get("type") != "Feature":
        raise ValueError("Expected a GeoJSON Feature object")

    geometry = raw.get("geometry")
    if not isinstance(geometry, dict):
        raise ValueError("Feature has no geometry")
    if geometry.get("type") != "Point":
        raise ValueError(f"Unsupported geometry type: {geometry.get('type')!r}")

    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, (list, tuple)) or len(coordinates) < 2:
        raise ValueError(f"Point needs [lng, lat] coordinates, got {coordinates!r}")

    properties = raw.get("properties") or {}
    if not isinstance(properties, dict):
        raise ValueError("Feature properties must be an object")
    # Altitude, if present, is dropped. Feature rejects non-scalar properties.
    return Feature(coordinates=tuple(coordinates[:2]), properties=properties)


def parse_features(data: dict) -> list[Feature]:
    """Parse a Feature or FeatureCollection dict into a list of Features.

    Every feature must parse; one bad feature rejects the whole document.

    Raises:
        ValueError: on any malformed feature (InvalidCoordinateError for
            out-of-range coordinates).
    """
    if not isinstance(data, dict):
        raise ValueError("Expected a GeoJSON object")

    if data.get("type") == "FeatureCollection":
        raw_features = data.get("features")
        if not isinstance(raw_features, list):
            raise ValueError("FeatureCollection.features must be a list")
        features = []
        for idx, raw in enumerate(raw_features):
            try:
                features.append(parse_feature(raw))
            except InvalidCoordinateError:
                raise
            except ValueError as e:
                raise ValueError(f"features[{idx}]: {e}") from e
        return features
    if data.get("type") == "Feature":
        return [parse_feature(data)]
    raise ValueError(f"Unsupported GeoJSON type: {data.get('type')!r}")


def export_source(source: Source) -> dict:
    """Export a source's features as a GeoJSON FeatureCollection dict."""
    return {
        "type": "FeatureCollection",
        "features": [feature_to_geojson(f) for f in source.features],
    }


def feature_to_geojson(feature: Feature) -> dict:
    return feature.to_dict()
