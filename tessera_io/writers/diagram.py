"""
Diagram Writers
===============

Bounded Context: Triangulation Output

Writers for DiagramMessage and PolygonTriangulationMessage.

Example:
    >>> from tessera_geometry import DelaunayVoronoi
    >>> from tessera_geometry.logging import create_logger
    >>> from tessera_io.schemas import DiagramMessage
    >>> from tessera_io.writers import DiagramWriter
    >>>
    >>> writer = DiagramWriter(logger=create_logger("writer"), path="diagram.json", indent=2)
    >>> result = DelaunayVoronoi.generate_bowyer_watson_result(800, 600, seed=3)
    >>> writer.write_diagram(DiagramMessage.from_result(result))
    True
"""

from typing import Dict, Any

from tessera_geometry.logging import LogEvent

from .base import BaseWriter
from ..schemas import DiagramMessage, PolygonTriangulationMessage


class DiagramWriter(BaseWriter):
    """Writer for plane triangulation results."""

    def format_message(self, diagram_msg: DiagramMessage) -> Dict[str, Any]:
        """
        Format DiagramMessage to JSON-compatible dict.

        Raises:
            ValueError: If diagram_msg cannot be serialized
        """
        try:
            formatted = diagram_msg.to_dict()
        except (AttributeError, TypeError) as e:
            self.logger.error(
                event=LogEvent.SERIALIZATION_ERROR,
                message="Failed to serialize diagram message",
                exc_info=e
            )
            raise ValueError(f"Failed to format diagram message: {e}") from e

        self.logger.debug(
            event=LogEvent.DIAGRAM_SERIALIZED,
            message="Serialized diagram message",
            metadata={
                'triangle_count': diagram_msg.triangle_count,
                'delaunay_edge_count': len(diagram_msg.delaunay_edges),
                'voronoi_edge_count': len(diagram_msg.voronoi_edges)
            }
        )
        return formatted

    def write_diagram(self, diagram_msg: DiagramMessage) -> bool:
        """
        Write a diagram message.

        Returns:
            True if written successfully, False otherwise
        """
        try:
            message_data = self.format_message(diagram_msg)
        except ValueError:
            return False

        return self.write(message_data)


class PolygonTriangulationWriter(BaseWriter):
    """Writer for single-polygon triangulations."""

    def format_message(self, triangulation_msg: PolygonTriangulationMessage) -> Dict[str, Any]:
        """
        Format PolygonTriangulationMessage to JSON-compatible dict.

        Raises:
            ValueError: If triangulation_msg cannot be serialized
        """
        try:
            formatted = triangulation_msg.to_dict()
        except (AttributeError, TypeError) as e:
            self.logger.error(
                event=LogEvent.SERIALIZATION_ERROR,
                message="Failed to serialize polygon triangulation",
                exc_info=e
            )
            raise ValueError(f"Failed to format polygon triangulation: {e}") from e

        self.logger.debug(
            event=LogEvent.DIAGRAM_SERIALIZED,
            message="Serialized polygon triangulation",
            metadata={
                'triangle_count': len(triangulation_msg.triangles),
                'area': triangulation_msg.area
            }
        )
        return formatted

    def write_triangulation(self, triangulation_msg: PolygonTriangulationMessage) -> bool:
        """
        Write a polygon triangulation message.

        Returns:
            True if written successfully, False otherwise
        """
        try:
            message_data = self.format_message(triangulation_msg)
        except ValueError:
            return False

        return self.write(message_data)
