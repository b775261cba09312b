"""Bookmark overlay: the payload shown for the highlighted feature and its HTML."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from mapstate.models import Feature, Scalar

# Descriptor the control collaborator uses to build its outer/inner elements.
DEFAULT_CONTROL_METADATA = {
    "name": "bookmark",
    "inner_html_element": "div",
    "inner_element_class": "interior",
    "outer_html_element": "div",
    "outer_element_class": "modal-window",
}

PROPERTY_LABELS = {"randomName": "Name"}


@dataclass(frozen=True)
class BookmarkPayload:
    title: str
    longitude: float
    latitude: float
    details: dict[str, Scalar] = field(default_factory=dict)

    @classmethod
    def from_feature(cls, feature: Feature) -> BookmarkPayload:
        props = dict(feature.properties)
        title = props.pop("title", "")
        lng, lat = feature.coordinates
        return cls(
            title="" if title is None else str(title),
            longitude=lng,
            latitude=lat,
            details=props,
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "longitude": self.longitude,
            "latitude": self.latitude,
            "details": dict(self.details),
        }


def render_html(payload: BookmarkPayload) -> str:
    """Render the overlay block. Coordinates are wrapped in ``.coords`` spans."""
    lines = [f"<header>{escape(payload.title)}</header>"]
    for key, value in payload.details.items():
        label = PROPERTY_LABELS.get(key, key)
        lines.append(f"{escape(label)}: {escape(str(value))} <br/>")
    lines.append(f"Latitude: <span class='coords'>{payload.latitude}</span> <br/>")
    lines.append(f"Longitude: <span class='coords'>{payload.longitude}</span> <br/>")
    return "\n".join(lines)
