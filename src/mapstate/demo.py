"""Bookmark demo map: OSM basemap plus clustered random points.

``bootstrap`` issues the fixed setup sequence against a store:

    set view -> osm raster source -> osm layer -> points geojson source
    -> clustered-points / clustered-labels / random-points layers
    -> N random point features (one AddFeatures per point)
"""

from __future__ import annotations

import logging
import random

from mapstate.actions import AddFeatures, AddLayer, AddSource, SetView
from mapstate.models import Feature, RenderKind, SourceKind
from mapstate.store import MapConfigStore

logger = logging.getLogger(__name__)

BASEMAP_SOURCE = "osm"
POINTS_SOURCE = "points"

OSM_TILES = [
    "https://a.tile.openstreetmap.org/{z}/{x}/{y}.png",
    "https://b.tile.openstreetmap.org/{z}/{x}/{y}.png",
    "https://c.tile.openstreetmap.org/{z}/{x}/{y}.png",
]

# http://listofrandomnames.com/
RANDOM_NAMES = [
    "Riva Ristau",
    "Reena Rodgers",
    "Brent Borgia",
    "Annemarie Asher",
    "Solomon Salgado",
    "Tatiana Treece",
    "Philomena Paradise",
    "Adelle Audie",
    "Janean Jordahl",
    "Celine Cataldo",
    "Faustino Fournier",
    "Carlo Convery",
    "Carla Ciriaco",
    "Florance Farnham",
    "Jeraldine Jaycox",
    "Albina Auclair",
    "Breanne Blind",
    "Carmina Croney",
    "Mila Mero",
    "Lorita Laux",
]

HAS_POINT_COUNT = ["has", "point_count"]
NOT_HAS_POINT_COUNT = ["!has", "point_count"]


def random_points(n: int, rng: random.Random | None = None) -> list[Feature]:
    """Generate ``n`` Point features anywhere on the globe, each with a name."""
    rng = rng or random.Random()
    return [
        Feature(
            coordinates=(rng.uniform(-180.0, 180.0), rng.uniform(-90.0, 90.0)),
            properties={
                "title": "Random Point",
                "isRandom": True,
                "randomName": rng.choice(RANDOM_NAMES),
            },
        )
        for _ in range(n)
    ]


def setup_actions(
    center: tuple[float, float] = (-93.0, 45.0),
    zoom: float = 5.0,
    cluster_radius: int = 50,
) -> list:
    """Actions that build the empty demo map, in dispatch order."""
    return [
        SetView(center=center, zoom=zoom),
        AddSource(
            key=BASEMAP_SOURCE,
            kind=SourceKind.RASTER,
            config={"tileSize": 256, "tiles": list(OSM_TILES)},
        ),
        # Raster layers need no paint.
        AddLayer(key="osm", source_ref=BASEMAP_SOURCE),
        AddSource(
            key=POINTS_SOURCE,
            kind=SourceKind.GEOJSON,
            config={"clusterRadius": cluster_radius},
        ),
        AddLayer(
            key="clustered-points",
            source_ref=POINTS_SOURCE,
            render_kind=RenderKind.CIRCLE,
            paint={
                "circle-radius": {
                    "type": "interval",
                    "default": 3,
                    "property": "point_count",
                    # [min point_count, radius px]
                    "stops": [[0, 5], [2, 8], [5, 13], [10, 21]],
                },
                "circle-color": "#feb24c",
                "circle-stroke-color": "#f03b20",
            },
            filter=HAS_POINT_COUNT,
        ),
        AddLayer(
            key="clustered-labels",
            source_ref=POINTS_SOURCE,
            layout={
                "text-field": "{point_count}",
                "text-font": ["Arial"],
                "text-size": 10,
            },
            filter=HAS_POINT_COUNT,
        ),
        AddLayer(
            key="random-points",
            source_ref=POINTS_SOURCE,
            render_kind=RenderKind.CIRCLE,
            paint={
                "circle-radius": 3,
                "circle-color": "#756bb1",
                "circle-stroke-color": "#756bb1",
            },
            filter=NOT_HAS_POINT_COUNT,
        ),
    ]


def bootstrap(
    store: MapConfigStore,
    *,
    center: tuple[float, float] = (-93.0, 45.0),
    zoom: float = 5.0,
    n_points: int = 10,
    cluster_radius: int = 50,
    rng: random.Random | None = None,
) -> MapConfigStore:
    """Run the demo setup sequence against ``store`` and return it."""
    for action in setup_actions(center=center, zoom=zoom, cluster_radius=cluster_radius):
        store.apply(action)
    for feature in random_points(n_points, rng):
        store.apply(AddFeatures(source_key=POINTS_SOURCE, features=(feature,)))
    logger.info(f"Demo map ready: {n_points} points in '{POINTS_SOURCE}'")
    return store
