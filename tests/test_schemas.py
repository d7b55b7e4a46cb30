"""Tests for the output message schemas."""

import json
from datetime import datetime, timezone

import pytest

from tessera_geometry import DelaunayVoronoi, InvalidGeometryError, Point2D, Polygon2D
from tessera_io.schemas import (
    SCHEMA_VERSION,
    DiagramMessage,
    PolygonTriangulationMessage,
    Timestamp,
)


@pytest.fixture(scope="module")
def small_result():
    return DelaunayVoronoi.generate_bowyer_watson_result(
        200, 100, points=[Point2D(50, 50), Point2D(150, 40), Point2D(100, 80)]
    )


class TestTimestamp:
    def test_now_is_utc(self):
        assert Timestamp.now().to_datetime().tzinfo is not None

    def test_from_datetime(self):
        moment = datetime(2026, 10, 19, 12, 30, tzinfo=timezone.utc)
        assert Timestamp.from_datetime(moment).to_datetime() == moment

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid ISO timestamp"):
            Timestamp("yesterday").to_datetime()


class TestDiagramMessage:
    def test_from_result(self, small_result):
        message = DiagramMessage.from_result(small_result)
        assert message.schema_version == SCHEMA_VERSION
        assert message.bounds == small_result.bounds
        assert message.triangles == small_result.delaunay_triangles
        assert message.triangle_count == len(small_result.delaunay_triangles)
        assert message.voronoi_edges == small_result.voronoi_distinct_edges

    def test_sequences_stored_as_tuples(self, small_result):
        message = DiagramMessage(
            schema_version=SCHEMA_VERSION,
            timestamp=Timestamp.now(),
            bounds=small_result.bounds,
            triangles=list(small_result.delaunay_triangles),
        )
        assert isinstance(message.triangles, tuple)

    def test_required_fields(self, small_result):
        with pytest.raises(ValueError):
            DiagramMessage(schema_version="", timestamp=Timestamp.now(), bounds=small_result.bounds)
        with pytest.raises(ValueError):
            DiagramMessage(schema_version=SCHEMA_VERSION, timestamp=Timestamp.now(), bounds=None)

    def test_to_dict_is_json_ready(self, small_result):
        data = DiagramMessage.from_result(small_result).to_dict()
        encoded = json.dumps(data)
        assert json.loads(encoded)['schema_version'] == SCHEMA_VERSION
        assert len(data['circumcenters']) == len(data['triangles'])

    def test_round_trip(self, small_result):
        message = DiagramMessage.from_result(small_result)
        restored = DiagramMessage.from_dict(json.loads(json.dumps(message.to_dict())))
        assert restored == message

    def test_missing_field(self):
        with pytest.raises(ValueError, match="Missing required DiagramMessage field"):
            DiagramMessage.from_dict({'schema_version': SCHEMA_VERSION})

    def test_invalid_geometry_propagates(self, small_result):
        data = DiagramMessage.from_result(small_result).to_dict()
        data['delaunay_edges'].append({'start': {'x': 1, 'y': 1}, 'end': {'x': 1, 'y': 1}})
        with pytest.raises(InvalidGeometryError):
            DiagramMessage.from_dict(data)


class TestPolygonTriangulationMessage:
    def make(self, polygon, point):
        return PolygonTriangulationMessage(
            schema_version=SCHEMA_VERSION,
            timestamp=Timestamp.now(),
            polygon=polygon,
            point=point,
            triangles=polygon.triangulate_at_point(point),
        )

    def test_area(self, unit_square):
        message = self.make(unit_square, Point2D(0.5, 0.5))
        assert message.area == pytest.approx(1.0)
        assert message.to_dict()['area'] == pytest.approx(1.0)

    def test_outside_point_gives_no_triangles(self, unit_square):
        message = self.make(unit_square, Point2D(4, 4))
        assert message.triangles == ()
        assert message.area == 0

    def test_round_trip(self):
        polygon = Polygon2D((Point2D(0, 0), Point2D(4, 0), Point2D(4, 3), Point2D(0, 3)))
        message = self.make(polygon, Point2D(1, 1))
        restored = PolygonTriangulationMessage.from_dict(json.loads(json.dumps(message.to_dict())))
        assert restored == message

    def test_missing_field(self):
        with pytest.raises(ValueError, match="Missing required PolygonTriangulationMessage field"):
            PolygonTriangulationMessage.from_dict({'schema_version': SCHEMA_VERSION, 'timestamp': 'x'})
