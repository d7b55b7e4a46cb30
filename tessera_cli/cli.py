"""
Tessera CLI - Main entry point.

Generates Delaunay / Voronoi diagrams and polygon triangulations as JSON.
"""

import argparse
import sys
from typing import List, Optional

from tessera_geometry import DelaunayVoronoi, GeometryError
from tessera_geometry.logging import LogEvent, StructuredLogger, create_logger
from tessera_io.schemas import SCHEMA_VERSION, DiagramMessage, PolygonTriangulationMessage, Timestamp
from tessera_io.writers import DiagramWriter, PolygonTriangulationWriter

from .config import DiagramConfig, PolygonConfig


def run_generate(args: argparse.Namespace) -> int:
    """
    Triangulate a plane and write the diagram.

    Returns:
        Exit code (0 = written, 1 = write failed)

    Raises:
        ValueError, OSError: Invalid configuration or geometry
    """
    config = DiagramConfig.from_yaml(args.config) if args.config else DiagramConfig()
    config = config.with_overrides(
        width=args.width,
        height=args.height,
        point_count=args.points,
        seed=args.seed,
        output_path=args.output,
    )

    level = config.logging.level_number
    logger = create_logger("cli", level=level)
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Loaded diagram configuration",
        metadata={
            'source': args.config or '<defaults>',
            'width': config.plane.width,
            'height': config.plane.height,
            'point_count': config.plane.point_count,
            'seed': config.plane.seed
        }
    )

    result = DelaunayVoronoi.generate_bowyer_watson_result(
        config.plane.width,
        config.plane.height,
        point_count=config.plane.point_count,
        seed=config.plane.seed,
        epsilon=config.plane.epsilon,
        logger=create_logger("delaunay", level=level),
    )

    writer = DiagramWriter(
        logger=create_logger("writer", level=level),
        path=config.output_path,
        indent=config.indent,
    )
    return 0 if writer.write_diagram(DiagramMessage.from_result(result)) else 1


def run_triangulate_polygon(args: argparse.Namespace) -> int:
    """
    Triangulate the polygon described by a YAML file.

    An interior point outside the polygon is not an error: the result is
    written with no triangles.

    Returns:
        Exit code (0 = written, 1 = write failed)
    """
    config = PolygonConfig.from_yaml(args.polygon)
    level = config.logging.level_number
    logger = create_logger("cli", level=level)

    polygon = config.to_polygon()
    point = config.interior_point(polygon)
    triangles = DelaunayVoronoi.triangulate_polygon_at_point(polygon, point)

    if triangles:
        logger.info(
            event=LogEvent.POLYGON_TRIANGULATED,
            message=f"Triangulated polygon into {len(triangles)} triangles",
            metadata={
                'vertex_count': len(polygon.points),
                'triangle_count': len(triangles),
                'point': point.to_dict()
            }
        )
    else:
        logger.warning(
            event=LogEvent.POLYGON_REJECTED,
            message="Point lies outside the polygon; no triangles produced",
            metadata={'point': point.to_dict()}
        )

    message = PolygonTriangulationMessage(
        schema_version=SCHEMA_VERSION,
        timestamp=Timestamp.now(),
        polygon=polygon,
        point=point,
        triangles=triangles,
    )
    writer = PolygonTriangulationWriter(
        logger=create_logger("writer", level=level),
        path=args.output,
        indent=2 if args.output else None,
    )
    return 0 if writer.write_triangulation(message) else 1


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with the generate and triangulate-polygon commands."""
    parser = argparse.ArgumentParser(
        prog="tessera",
        description="Tessera - Delaunay triangulation and Voronoi edges as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100 random points on an 800x600 plane, JSON to stdout
  tessera generate

  # Reproducible diagram from a YAML config, written to a file
  tessera generate --config config/diagram.yaml --seed 7 --output out/diagram.json

  # Triangulate a polygon
  tessera triangulate-polygon config/polygon.yaml
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # generate command
    generate = subparsers.add_parser('generate', help='Triangulate random points on a plane')
    generate.add_argument('--config', help='Path to diagram config YAML')
    generate.add_argument('--width', type=float, help='Plane width (overrides config)')
    generate.add_argument('--height', type=float, help='Plane height (overrides config)')
    generate.add_argument('--points', type=int, help='Random point count (overrides config)')
    generate.add_argument('--seed', type=int, help='Random seed (overrides config)')
    generate.add_argument('--output', help='Output JSON path (default: stdout)')

    # triangulate-polygon command
    triangulate = subparsers.add_parser(
        'triangulate-polygon',
        help='Triangulate a polygon from YAML'
    )
    triangulate.add_argument('polygon', help='Path to polygon YAML')
    triangulate.add_argument('--output', help='Output JSON path (default: stdout)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    error_logger: StructuredLogger = create_logger("cli")

    try:
        if args.command == 'generate':
            return run_generate(args)

        elif args.command == 'triangulate-polygon':
            return run_triangulate_polygon(args)

    except GeometryError as e:
        error_logger.error(
            event=LogEvent.GEOMETRY_ERROR,
            message="Invalid geometry",
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except (OSError, ValueError) as e:
        error_logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Invalid configuration",
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
