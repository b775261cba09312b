"""MapConfigStore — the single source of truth for a map's configuration.

Holds the viewport, named sources, named layers and the overlay control
panel. State only changes through ``apply(action)``; every action either
commits fully or raises and leaves the state untouched. Observers registered
with ``subscribe`` are called synchronously after each commit.

The store is single-writer: all actions must come from one logical sequence
(one thread or one event loop).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from mapstate.actions import Action, AddFeatures, AddLayer, AddSource, SetControl, SetView
from mapstate.errors import (
    DuplicateKeyError,
    UnknownSourceError,
    WrongSourceKindError,
)
from mapstate.models import ControlPanel, Feature, Layer, MapSnapshot, Source, SourceKind, Viewport

logger = logging.getLogger(__name__)

Observer = Callable[[MapSnapshot, Action], None]


class MapConfigStore:
    """In-memory map configuration with a closed action vocabulary."""

    def __init__(
        self,
        viewport: Viewport | None = None,
        control: ControlPanel | None = None,
    ) -> None:
        self._viewport = viewport or Viewport()
        self._control = control or ControlPanel()
        self._sources: dict[str, Source] = {}
        self._layers: dict[str, Layer] = {}
        self._observers: list[Observer] = []
        self._applying = False
        self._handlers = {
            SetView: self._set_view,
            AddSource: self._add_source,
            AddLayer: self._add_layer,
            AddFeatures: self._add_features,
            SetControl: self._set_control,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply(self, action: Action) -> None:
        """Apply one action atomically, then notify observers.

        Raises:
            MapStateError: subclass describing why the action was rejected.
            TypeError: if ``action`` is not one of the known action types, or
                AddFeatures carries something other than Feature objects.
            RuntimeError: if called from inside an observer callback.
        """
        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"Unsupported action: {type(action).__name__}")
        if self._applying:
            raise RuntimeError("MapConfigStore.apply is not re-entrant")

        self._applying = True
        try:
            handler(action)
            snapshot = self.read()
            for observer in list(self._observers):
                try:
                    observer(snapshot, action)
                except Exception as e:
                    logger.error(f"Store observer {observer!r} failed on {type(action).__name__}: {e}")
        finally:
            self._applying = False

    def read(self) -> MapSnapshot:
        """Return an immutable snapshot of the current state."""
        return MapSnapshot(
            viewport=self._viewport,
            sources=dict(self._sources),
            layers=dict(self._layers),
            control=self._control,
        )

    def subscribe(self, observer: Observer) -> Observer:
        """Register ``observer(snapshot, action)``; returns it for unsubscribe."""
        self._observers.append(observer)
        return observer

    def unsubscribe(self, observer: Observer) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def get_source(self, key: str) -> Source:
        """Return the source named ``key``.

        Raises:
            UnknownSourceError: if no such source exists.
        """
        source = self._sources.get(key)
        if source is None:
            raise UnknownSourceError(f"Source not found: {key}")
        return source

    # ------------------------------------------------------------------
    # Handlers. Each validates everything before touching state.
    # ------------------------------------------------------------------

    def _set_view(self, action: SetView) -> None:
        self._viewport = Viewport(center=action.center, zoom=action.zoom)

    def _add_source(self, action: AddSource) -> None:
        if action.key in self._sources:
            raise DuplicateKeyError(f"Source already exists: {action.key}")
        self._sources[action.key] = Source(key=action.key, kind=action.kind, config=action.config)
        logger.debug(f"Source added: {action.key} ({action.kind.value})")

    def _add_layer(self, action: AddLayer) -> None:
        if action.key in self._layers:
            raise DuplicateKeyError(f"Layer already exists: {action.key}")
        if action.source_ref not in self._sources:
            raise UnknownSourceError(
                f"Layer '{action.key}' references unknown source: {action.source_ref}"
            )
        self._layers[action.key] = Layer(
            key=action.key,
            source_ref=action.source_ref,
            render_kind=action.render_kind,
            paint=action.paint,
            layout=action.layout,
            filter=action.filter,
        )
        logger.debug(f"Layer added: {action.key} -> {action.source_ref}")

    def _add_features(self, action: AddFeatures) -> None:
        source = self.get_source(action.source_key)
        if source.kind is not SourceKind.GEOJSON:
            raise WrongSourceKindError(
                f"Cannot add features to {source.kind.value} source: {source.key}"
            )
        for idx, feature in enumerate(action.features):
            if not isinstance(feature, Feature):
                raise TypeError(
                    f"features[{idx}] must be a Feature, got {type(feature).__name__}"
                )
        self._sources[source.key] = replace(source, features=source.features + action.features)

    def _set_control(self, action: SetControl) -> None:
        self._control = ControlPanel(html=action.html, metadata=action.metadata)
