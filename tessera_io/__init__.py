"""
Tessera I/O
===========

Bounded Context: Result serialization.

    tessera_io/
    ├── schemas/    # DiagramMessage, PolygonTriangulationMessage, Timestamp
    └── writers/    # DiagramWriter, PolygonTriangulationWriter (JSON)
"""

from tessera_io.schemas import (
    SCHEMA_VERSION,
    Timestamp,
    DiagramMessage,
    PolygonTriangulationMessage,
)
from tessera_io.writers import BaseWriter, DiagramWriter, PolygonTriangulationWriter

__all__ = [
    "SCHEMA_VERSION",
    "Timestamp",
    "DiagramMessage",
    "PolygonTriangulationMessage",
    "BaseWriter",
    "DiagramWriter",
    "PolygonTriangulationWriter",
]
