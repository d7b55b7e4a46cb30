"""
Base JSON Writer
================

Bounded Context: Output Infrastructure

Abstract base class for writers that emit schema messages as JSON.

Design:
- Destination is either a file path (overwritten per write) or an open
  text stream (one JSON document per line)
- Failures are logged and reported as False, never raised
- Structured logging integration

Architecture:
    BaseWriter (abstract)
        ↓
    DiagramWriter, PolygonTriangulationWriter (concrete)

Responsibilities:
- JSON encoding and output
- Error handling and logging
- NOT responsible for: Message formatting (delegated to subclasses)
"""

import json
import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Any, Optional, TextIO, Union

from tessera_geometry.logging import StructuredLogger, LogEvent


class BaseWriter(ABC):
    """
    Abstract base class for JSON writers.

    Subclasses must implement format_message() for message-specific logic.

    Attributes:
        path: Output file path (None when writing to a stream)
        stream: Output stream (used when path is None)
        indent: JSON indentation (None = compact)
        logger: Structured logger instance

    Thread Safety:
        The write counter is guarded by a lock; concurrent writes to the
        same path race at the file system level.
    """

    def __init__(
        self,
        logger: StructuredLogger,
        path: Optional[Union[str, Path]] = None,
        stream: Optional[TextIO] = None,
        indent: Optional[int] = None
    ):
        """
        Initialize writer.

        Args:
            logger: Structured logger for observability
            path: File to write (takes precedence over stream)
            stream: Text stream to write (default: sys.stdout)
            indent: JSON indentation for file output
        """
        self.path = Path(path) if path is not None else None
        self.stream = stream
        self.indent = indent
        self.logger = logger

        self._write_count = 0
        self._stats_lock = threading.Lock()

    @property
    def destination(self) -> str:
        """Human-readable destination name for logs."""
        if self.path is not None:
            return str(self.path)
        return getattr(self.stream or sys.stdout, 'name', '<stream>')

    @abstractmethod
    def format_message(self, *args, **kwargs) -> Dict[str, Any]:
        """
        Format message for output.

        Returns:
            Dictionary ready for JSON serialization
        """
        raise NotImplementedError("Subclasses must implement format_message()")

    def write(self, message_data: Dict[str, Any]) -> bool:
        """
        Write a formatted message.

        Args:
            message_data: Message dictionary (already formatted)

        Returns:
            True if written successfully, False otherwise
        """
        try:
            if self.path is not None:
                payload = json.dumps(message_data, indent=self.indent)
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text(payload + "\n", encoding="utf-8")
            else:
                stream = self.stream or sys.stdout
                stream.write(json.dumps(message_data) + "\n")
                stream.flush()

            with self._stats_lock:
                self._write_count += 1

            self.logger.info(
                event=LogEvent.DIAGRAM_WRITTEN,
                message="Wrote message",
                metadata={
                    'destination': self.destination,
                    'write_count': self._write_count
                }
            )
            return True

        except (OSError, TypeError, ValueError) as e:
            self.logger.error(
                event=LogEvent.DIAGRAM_WRITE_FAILED,
                message="Error writing message",
                exc_info=e,
                metadata={'destination': self.destination}
            )
            return False

    def get_stats(self) -> Dict[str, Any]:
        """
        Get writer statistics.

        Returns:
            Dictionary with write count and destination
        """
        with self._stats_lock:
            return {
                'write_count': self._write_count,
                'destination': self.destination
            }
