"""
Tests for parkfinder.spatial.surfaces — the three map surfaces and selection.
"""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from parkfinder.spatial.region import Coordinate, MapChild, Region
from parkfinder.spatial.surfaces import (
    TEXT_OPEN_NATIVE,
    TEXT_UNAVAILABLE,
    NativeRegionSurface,
    ProjectedSurface,
    TextSurface,
    select_surface,
)
from parkfinder.spatial.viewport import Viewport, ViewportProjector

REGION = Region(37.7749, -122.4194, 0.2, 0.2)
CHILDREN = [
    MapChild.marker(Coordinate(37.78, -122.41), "You are here"),
    MapChild("callout", "ignored"),
]


class TestNativeRegionSurface:
    def test_region_passthrough(self):
        out = NativeRegionSurface().render(REGION, CHILDREN, shows_user_location=True)
        assert out["surface"] == "native"
        assert out["region"] == REGION.as_dict()
        assert out["shows_user_location"] is True
        assert out["markers"] == [
            {
                "coordinate": {"latitude": 37.78, "longitude": -122.41},
                "title": "You are here",
                "in_view": True,
            },
        ]

    def test_marker_outside_region_not_in_view(self):
        far = [MapChild.marker(Coordinate(51.5, -0.12), "London")]
        out = NativeRegionSurface().render(REGION, far)
        assert out["markers"][0]["in_view"] is False

    def test_marker_on_edge_in_view(self):
        edge = [MapChild.marker(Coordinate(REGION.north, REGION.east))]
        out = NativeRegionSurface().render(REGION, edge)
        assert out["markers"][0]["in_view"] is True

    def test_markers_without_region_not_in_view(self):
        out = NativeRegionSurface().render(None, CHILDREN)
        assert out["region"] is None
        assert out["markers"][0]["in_view"] is False

    def test_no_children(self):
        out = NativeRegionSurface().render(REGION)
        assert out["markers"] == []
        assert out["shows_user_location"] is False


class TestProjectedSurface:
    def test_center_and_zoom(self):
        surface = ProjectedSurface(ViewportProjector(), api_key="key-123")
        out = surface.render(REGION, CHILDREN)
        assert out["surface"] == "projected"
        assert out["center"] == {"lat": 37.7749, "lng": -122.4194}
        assert out["zoom"] == 11
        assert out["api_key"] == "key-123"
        assert len(out["markers"]) == 1

    def test_goes_through_projector(self):
        projector = MagicMock(spec=ViewportProjector)
        projector.project.return_value = Viewport(Coordinate(1.0, 2.0), 7)
        out = ProjectedSurface(projector, api_key="k").render(REGION)
        projector.project.assert_called_once_with(REGION)
        assert out["center"] == {"lat": 1.0, "lng": 2.0}
        assert out["zoom"] == 7

    def test_missing_key(self):
        out = ProjectedSurface(ViewportProjector()).render(REGION)
        assert out["api_key"] is None

    def test_no_region(self):
        out = ProjectedSurface(ViewportProjector()).render(None)
        assert out["center"] is None
        assert out["zoom"] is None

    def test_uses_projector_range(self):
        surface = ProjectedSurface(ViewportProjector(min_zoom=1, max_zoom=8))
        out = surface.render(Region(0.0, 0.0, 0.0001, 0.0001))
        assert out["zoom"] == 8


class TestTextSurface:
    def test_with_region(self):
        out = TextSurface().render(REGION, CHILDREN)
        assert out == {
            "surface": "text",
            "title": TEXT_UNAVAILABLE,
            "subtitle": "Center: 37.77490, -122.41940",
        }

    def test_without_region(self):
        out = TextSurface().render(None)
        assert out["subtitle"] == TEXT_OPEN_NATIVE


class TestSelectSurface:
    @pytest.mark.parametrize("kind,cls", [
        ("native", NativeRegionSurface),
        ("projected", ProjectedSurface),
        ("text", TextSurface),
    ])
    def test_kinds(self, kind, cls):
        assert isinstance(select_surface(kind), cls)

    def test_api_key_injected(self):
        surface = select_surface("projected", api_key="abc")
        assert surface.api_key == "abc"

    def test_projector_injected(self):
        projector = ViewportProjector(max_zoom=10)
        surface = select_surface("projected", projector=projector)
        assert surface.projector is projector

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown map surface"):
            select_surface("vector")
