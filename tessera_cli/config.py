"""
Configuration schema for the tessera command line.

Defines the plane, logging and output settings for diagram generation and
the polygon definition for polygon triangulation. Both are loaded from YAML
and validated at construction.
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from tessera_geometry import Point2D, Polygon2D


def load_yaml_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML mapping.

    Args:
        config_path: Path to YAML file

    Returns:
        Parsed mapping (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid or not a mapping
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {config_path} must contain a mapping, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class PlaneConfig:
    """Plane dimensions and point source."""

    width: float = 800.0
    height: float = 600.0
    point_count: int = 100
    seed: Optional[int] = None
    epsilon: float = 0.0  # Colinearity threshold for the sliver guard

    def __post_init__(self):
        """Validate plane configuration."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")

        if self.height <= 0:
            raise ValueError(f"height must be > 0, got {self.height}")

        if self.point_count < 0:
            raise ValueError(f"point_count must be >= 0, got {self.point_count}")

        if self.epsilon < 0:
            raise ValueError(f"epsilon must be >= 0, got {self.epsilon}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging configuration."""

    level: str = "INFO"

    def __post_init__(self):
        """Validate logging configuration."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if self.level not in valid_levels:
            raise ValueError(
                f"Invalid logging level: {self.level}. "
                f"Must be one of {sorted(valid_levels)}"
            )

    @property
    def level_number(self) -> int:
        return getattr(logging, self.level)


@dataclass(frozen=True)
class DiagramConfig:
    """
    Configuration for `tessera generate`.

    Immutable after construction; command-line flags are applied with
    with_overrides(), which returns a new instance.
    """

    plane: PlaneConfig = field(default_factory=PlaneConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output_path: Optional[Path] = None  # None = stdout
    indent: Optional[int] = 2

    def __post_init__(self):
        """Validate output configuration."""
        if self.indent is not None and (isinstance(self.indent, bool) or not isinstance(self.indent, int)):
            raise ValueError(f"indent must be an integer or null, got {self.indent!r}")

        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")

    def with_overrides(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None,
        point_count: Optional[int] = None,
        seed: Optional[int] = None,
        output_path: Optional[Union[str, Path]] = None
    ) -> "DiagramConfig":
        """Return a copy with any non-None values replaced."""
        plane_changes = {
            name: value
            for name, value in (
                ("width", width),
                ("height", height),
                ("point_count", point_count),
                ("seed", seed),
            )
            if value is not None
        }

        config = self
        if plane_changes:
            config = replace(config, plane=replace(config.plane, **plane_changes))
        if output_path is not None:
            config = replace(config, output_path=Path(output_path))
        return config

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "DiagramConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            plane:
              width: 800
              height: 600
              point_count: 100
              seed: 42
              epsilon: 0.0

            logging:
              level: "INFO"

            output_path: "out/diagram.json"
            indent: 2
        """
        data = load_yaml_config(yaml_path)

        try:
            plane = PlaneConfig(**(data.get("plane") or {}))
            logging_config = LoggingConfig(**(data.get("logging") or {}))
        except TypeError as e:
            raise ValueError(f"Invalid config in {yaml_path}: {e}")

        output_path = data.get("output_path")

        return cls(
            plane=plane,
            logging=logging_config,
            output_path=Path(output_path) if output_path else None,
            indent=data.get("indent", 2),
        )


@dataclass(frozen=True)
class PolygonConfig:
    """
    Configuration for `tessera triangulate-polygon`.

    Attributes:
        points: Polygon vertices as (x, y) pairs, any order
        point: Interior point to triangulate at (default: polygon centroid)
        logging: Structured logging configuration
    """

    points: Tuple[Tuple[float, float], ...]
    point: Optional[Tuple[float, float]] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Validate coordinate shapes."""
        if len(self.points) < 3:
            raise ValueError(f"Polygon must have at least 3 points, got {len(self.points)}")

        for coordinate in self.points:
            if len(coordinate) != 2:
                raise ValueError(f"Polygon points must be [x, y] pairs, got {list(coordinate)}")

        if self.point is not None and len(self.point) != 2:
            raise ValueError(f"point must be an [x, y] pair, got {list(self.point)}")

    def to_polygon(self) -> Polygon2D:
        """Build the polygon (geometry validation errors propagate)."""
        return Polygon2D(tuple(Point2D(x, y) for x, y in self.points))

    def interior_point(self, polygon: Polygon2D) -> Point2D:
        """Configured point, or the polygon's centroid."""
        if self.point is None:
            return polygon.centroid
        return Point2D(*self.point)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "PolygonConfig":
        """
        Load polygon definition from YAML file.

        Example YAML:
            points: [[0, 0], [4, 0], [4, 3], [0, 3]]
            point: [2, 1.5]
            logging:
              level: "WARNING"
        """
        data = load_yaml_config(yaml_path)

        try:
            points = tuple(tuple(coordinate) for coordinate in data["points"])
            point = data.get("point")
            return cls(
                points=points,
                point=tuple(point) if point is not None else None,
                logging=LoggingConfig(**(data.get("logging") or {})),
            )
        except KeyError as e:
            raise ValueError(f"Missing required polygon field in {yaml_path}: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid polygon config in {yaml_path}: {e}")
