"""Map configuration actions.

Each action is a plain frozen record; ``MapConfigStore.apply`` dispatches on
the record type. The set is closed: SetView, AddSource, AddLayer, AddFeatures,
SetControl.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from mapstate.models import Feature, RenderKind, SourceKind


@dataclass(frozen=True)
class SetView:
    """Replace the viewport. Range checks happen when the store applies it."""

    center: tuple[float, float]
    zoom: float


@dataclass(frozen=True)
class AddSource:
    key: str
    kind: SourceKind
    config: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", SourceKind(self.kind))


@dataclass(frozen=True)
class AddLayer:
    key: str
    source_ref: str
    render_kind: RenderKind | None = None
    paint: dict[str, Any] = field(default_factory=dict)
    layout: dict[str, Any] = field(default_factory=dict)
    filter: list | None = None

    def __post_init__(self) -> None:
        if self.render_kind is not None:
            object.__setattr__(self, "render_kind", RenderKind(self.render_kind))


@dataclass(frozen=True)
class AddFeatures:
    """Append ``features`` to a geojson source, in the given order."""

    source_key: str
    features: tuple[Feature, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))


@dataclass(frozen=True)
class SetControl:
    html: str
    metadata: dict[str, Any] = field(default_factory=dict)


Action = Union[SetView, AddSource, AddLayer, AddFeatures, SetControl]
