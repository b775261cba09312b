"""Shared fixtures for mapstate tests."""

from __future__ import annotations

import pytest

from mapstate import AddFeatures, AddSource, Feature, MapConfigStore, SourceKind

A = Feature((-93.0, 45.0), {"title": "A", "randomName": "Riva Ristau"})
B = Feature((2.35, 48.85), {"title": "B", "randomName": "Mila Mero"})
C = Feature((151.2, -33.87), {"title": "C", "isRandom": True})


@pytest.fixture
def store():
    return MapConfigStore()


@pytest.fixture
def abc_store(store):
    """Store with a 'points' geojson source holding A, B, C in that order."""
    store.apply(AddSource("points", SourceKind.GEOJSON, {"clusterRadius": 50}))
    store.apply(AddFeatures("points", [A, B, C]))
    return store


@pytest.fixture
def abc():
    return [A, B, C]
