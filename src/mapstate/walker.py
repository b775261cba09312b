"""FeatureWalker — cycle a highlight through a geojson source's features.

Each ``advance`` zooms the map to the feature under the cursor, rewrites the
overlay with that feature's details, then moves the cursor one step forward,
wrapping to 0 after the last feature. Cursors are kept per source key, so
walking "points" never disturbs the position in another source.

Sources are append-only, so a cursor is always a valid index once it has been
computed; features appended later are reached in later passes.
"""

from __future__ import annotations

import logging

from mapstate.actions import SetControl, SetView
from mapstate.errors import EmptyCollectionError, UnknownSourceError
from mapstate.models import SourceKind
from mapstate.panel import DEFAULT_CONTROL_METADATA, BookmarkPayload, render_html
from mapstate.store import MapConfigStore

logger = logging.getLogger(__name__)

DEFAULT_ZOOM = 5.0


class FeatureWalker:
    """Stateful bookmark navigator over one or more geojson sources."""

    def __init__(self, zoom: float = DEFAULT_ZOOM, control_metadata: dict | None = None) -> None:
        self.zoom = zoom
        self.control_metadata = dict(control_metadata or DEFAULT_CONTROL_METADATA)
        self._cursors: dict[str, int] = {}

    def advance(self, store: MapConfigStore, source_key: str) -> BookmarkPayload:
        """Highlight the next feature of ``source_key``.

        Returns:
            The payload that was rendered into the overlay.

        Raises:
            UnknownSourceError: if the source is missing or not geojson.
            EmptyCollectionError: if the source has no features. Nothing is
                dispatched and the cursor is left as it was.
        """
        snapshot = store.read()
        source = snapshot.sources.get(source_key)
        if source is None or source.kind is not SourceKind.GEOJSON:
            raise UnknownSourceError(f"No geojson source named: {source_key}")

        features = source.features
        if not features:
            raise EmptyCollectionError(f"Source has no features: {source_key}")

        # Normalised in case this walker last saw a longer sequence in another store.
        cursor = self._cursors.get(source_key, 0) % len(features)
        feature = features[cursor]
        payload = BookmarkPayload.from_feature(feature)

        store.apply(SetView(center=feature.coordinates, zoom=self.zoom))
        store.apply(SetControl(html=render_html(payload), metadata=self.control_metadata))

        self._cursors[source_key] = (cursor + 1) % len(features)
        logger.debug(f"Bookmark {source_key}[{cursor}] -> {feature.coordinates}")
        return payload

    def cursor(self, source_key: str) -> int:
        """Index the next ``advance`` on ``source_key`` will select."""
        return self._cursors.get(source_key, 0)

    def reset(self, source_key: str | None = None) -> None:
        """Forget the cursor for ``source_key``, or all cursors."""
        if source_key is None:
            self._cursors.clear()
        else:
            self._cursors.pop(source_key, None)
