"""Tests for the JSON writers."""

import io
import json

import pytest

from tessera_geometry import DelaunayVoronoi, Point2D
from tessera_geometry.logging import LogEvent
from tessera_io.schemas import SCHEMA_VERSION, DiagramMessage, PolygonTriangulationMessage, Timestamp
from tessera_io.writers import DiagramWriter, PolygonTriangulationWriter


@pytest.fixture
def diagram_message():
    result = DelaunayVoronoi.generate_bowyer_watson_result(100, 100, points=[Point2D(50, 50)])
    return DiagramMessage.from_result(result)


class TestDiagramWriter:
    def test_write_to_file(self, tmp_path, test_logger, diagram_message):
        path = tmp_path / "out" / "diagram.json"
        writer = DiagramWriter(logger=test_logger, path=path, indent=2)

        assert writer.write_diagram(diagram_message)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data['triangles']) == 4
        assert len(data['voronoi_edges']) == 4
        assert writer.get_stats() == {'write_count': 1, 'destination': str(path)}

    def test_file_is_overwritten(self, tmp_path, test_logger, diagram_message):
        path = tmp_path / "diagram.json"
        writer = DiagramWriter(logger=test_logger, path=path)
        writer.write_diagram(diagram_message)
        writer.write_diagram(diagram_message)
        assert json.loads(path.read_text(encoding="utf-8"))['schema_version'] == SCHEMA_VERSION
        assert writer.get_stats()['write_count'] == 2

    def test_write_to_stream(self, test_logger, diagram_message):
        stream = io.StringIO()
        writer = DiagramWriter(logger=test_logger, stream=stream)

        assert writer.write_diagram(diagram_message)
        assert writer.write_diagram(diagram_message)
        lines = stream.getvalue().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])['bounds'] == diagram_message.bounds.to_dict()
        assert writer.destination == '<stream>'

    def test_unwritable_path(self, tmp_path, test_logger, diagram_message, logged_events):
        writer = DiagramWriter(logger=test_logger, path=tmp_path)

        assert not writer.write_diagram(diagram_message)
        assert writer.get_stats()['write_count'] == 0
        assert LogEvent.DIAGRAM_WRITE_FAILED.value in logged_events()

    def test_unserializable_message(self, test_logger, logged_events):
        writer = DiagramWriter(logger=test_logger, stream=io.StringIO())

        assert not writer.write_diagram(None)
        with pytest.raises(ValueError, match="Failed to format diagram message"):
            writer.format_message(object())
        assert LogEvent.SERIALIZATION_ERROR.value in logged_events()

    def test_written_event(self, test_logger, diagram_message, logged_events):
        DiagramWriter(logger=test_logger, stream=io.StringIO()).write_diagram(diagram_message)
        assert LogEvent.DIAGRAM_WRITTEN.value in logged_events()


class TestPolygonTriangulationWriter:
    def test_write(self, test_logger, unit_square):
        point = Point2D(0.5, 0.5)
        message = PolygonTriangulationMessage(
            schema_version=SCHEMA_VERSION,
            timestamp=Timestamp.now(),
            polygon=unit_square,
            point=point,
            triangles=unit_square.triangulate_at_point(point),
        )
        stream = io.StringIO()

        assert PolygonTriangulationWriter(logger=test_logger, stream=stream).write_triangulation(message)
        data = json.loads(stream.getvalue())
        assert len(data['triangles']) == 2
        assert data['area'] == pytest.approx(1.0)

    def test_unserializable_message(self, test_logger):
        writer = PolygonTriangulationWriter(logger=test_logger, stream=io.StringIO())
        assert not writer.write_triangulation(None)
