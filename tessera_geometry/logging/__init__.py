"""
Structured Logging for Tessera
==============================

Bounded Context: Observability

JSON-structured logging for the geometry engine and its command-line surface.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from tessera_geometry.logging import create_logger, LogEvent
    >>> logger = create_logger("delaunay")
    >>> logger.info(
    ...     event=LogEvent.DELAUNAY_TRIANGULATED,
    ...     message="Triangulated 100 points",
    ...     metadata={'triangle_count': 198, 'elapsed_ms': 41.2}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
