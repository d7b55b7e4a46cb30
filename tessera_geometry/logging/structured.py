"""
Structured JSON Logger
======================

Bounded Context: Observability

One JSON document per record, so a triangulation run can be followed with
jq: which phase ran, how many points/triangles/edges it saw, how long it took.

Record shape:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "delaunay",
        "event": "delaunay.triangulated",
        "message": "Performed Delaunay triangulation",
        "metadata": {"point_count": 100, "triangle_count": 198, "elapsed_ms": 41.2}
    }

Loggers are named tessera.<component> and propagate, so pytest's caplog and
any root handler see them too.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    Emits LogEvent records as JSON through a standard logging.Logger.

    Constructing one (re)sets the level of the shared tessera.<component>
    logger; the JSON handler is attached only the first time.

    Attributes:
        component: Component name ("delaunay", "writer", "cli")
        logger_name: Name of the underlying logger
        logger: Underlying logging.Logger
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.logger_name = logger_name or f"tessera.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        log_level = getattr(logging, level)
        # Skip building the record for filtered levels (debug runs per phase)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        # Points, paths and seeds in metadata fall back to str()
        self.logger.log(
            log_level,
            json.dumps(log_entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('DEBUG', event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('INFO', event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log an ERROR record.

        exc_info adds an "exception" object ({type, message}) to the JSON and
        hands the exception to logging for the traceback.

        Example:
            >>> try:
            ...     Polygon2D([Point2D(0, 0), Point2D(1, 1)])
            ... except InvalidArgumentError as e:
            ...     logger.error(event=LogEvent.GEOMETRY_ERROR, message="Rejected polygon", exc_info=e)
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Passes through the JSON document StructuredLogger already built."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    StructuredLogger for tessera.<component> at the given level.

    Example:
        >>> logger = create_logger("delaunay", level=logging.DEBUG)
        >>> result = DelaunayVoronoi.generate_bowyer_watson_result(800, 600, logger=logger)
    """
    return StructuredLogger(component=component, level=level)
