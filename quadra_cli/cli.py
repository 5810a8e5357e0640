"""
Quadra CLI - Main entry point.

Provides command-line access to area computation, comparison and summaries.
"""

import argparse
import logging
import sys
from typing import List, Optional

from quadra_shapes import (
    ComparisonPolicy,
    InvalidDimensionError,
    QuadraConfig,
    Rectangle,
    ShapeRegistry,
    Square,
)
from quadra_shapes.config import VALID_LOG_LEVELS
from quadra_shapes.logging import LogEvent, StructuredLogger, create_logger


def parse_shape(literal: str) -> Rectangle:
    """
    Parse a shape literal.

    Accepted forms:
        square:SIDE           e.g. square:2.5
        rectangle:WIDTHxLENGTH  e.g. rectangle:3x4

    Raises:
        ValueError: If the literal is malformed
        InvalidDimensionError: If a dimension is rejected
    """
    kind, sep, dims = literal.partition(":")
    kind = kind.strip().lower()
    if not sep or not dims:
        raise ValueError(
            f"Invalid shape '{literal}'. Use square:SIDE or rectangle:WIDTHxLENGTH"
        )

    try:
        if kind == "square":
            return Square(float(dims))
        if kind == "rectangle":
            width, x, length = dims.lower().partition("x")
            if not x:
                raise ValueError(f"Rectangle needs WIDTHxLENGTH, got '{dims}'")
            return Rectangle(float(width), float(length))
    except InvalidDimensionError:
        raise
    except ValueError as e:
        raise ValueError(f"Invalid shape '{literal}': {e}") from e

    raise ValueError(f"Unknown shape kind '{kind}'. Use 'square' or 'rectangle'")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    policies = [p.value for p in ComparisonPolicy]

    parser = argparse.ArgumentParser(
        prog="quadra",
        description="Quadra CLI - Rectangle and square areas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  quadra area rectangle 3 4
  quadra area square 5

  quadra compare square:3 square:2
  quadra compare square:2 rectangle:1x4 --policy strict_sign

  quadra summary config/shapes.example.yaml
"""
    )

    # Global arguments
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Log level for JSON logs on stderr (default: WARNING, or config value)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # area command
    area = subparsers.add_parser('area', help='Compute the area of one shape')
    area_kinds = area.add_subparsers(dest='kind', help='Shape kind')
    area_kinds.required = True

    rectangle = area_kinds.add_parser('rectangle', help='Rectangle from width and length')
    rectangle.add_argument('width', type=float)
    rectangle.add_argument('length', type=float)

    square = area_kinds.add_parser('square', help='Square from side length')
    square.add_argument('side', type=float)

    # compare command
    compare = subparsers.add_parser('compare', help='Compare two shapes by area')
    compare.add_argument('left', help='square:SIDE or rectangle:WIDTHxLENGTH')
    compare.add_argument('right', help='square:SIDE or rectangle:WIDTHxLENGTH')
    compare.add_argument(
        '--policy',
        choices=policies,
        default=ComparisonPolicy.EXACT.value,
        help='Comparison policy (default: exact)'
    )

    # summary command
    summary = subparsers.add_parser('summary', help='Rank and summarize shapes from YAML config')
    summary.add_argument('config', help='Path to shapes config YAML')
    summary.add_argument(
        '--policy',
        choices=policies,
        default=None,
        help='Override the comparison policy from config'
    )

    return parser


def _run_area(args: argparse.Namespace, logger: StructuredLogger) -> None:
    if args.kind == 'rectangle':
        shape = Rectangle(args.width, args.length)
    else:
        shape = Square(args.side)

    area = shape.area()
    logger.info(
        event=LogEvent.SHAPE_AREA_COMPUTED,
        message="Computed area",
        metadata={'shape': shape.to_dict(), 'area': area}
    )
    print(f"{area:g}")


def _run_compare(args: argparse.Namespace, logger: StructuredLogger) -> None:
    left = parse_shape(args.left)
    right = parse_shape(args.right)
    result = left.compare_to(right, args.policy)

    logger.info(
        event=LogEvent.SHAPE_COMPARED,
        message="Compared shapes",
        metadata={
            'left': left.to_dict(),
            'right': right.to_dict(),
            'policy': args.policy,
            'result': result,
        }
    )
    print(result)


def _run_summary(args: argparse.Namespace, logger: StructuredLogger) -> None:
    try:
        config = QuadraConfig.from_yaml(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load config",
            metadata={'path': args.config},
            exc_info=e
        )
        raise

    if args.log_level is None:
        logger.set_level(config.level)
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Loaded config",
        metadata={'path': args.config, 'shape_count': len(config.shapes)}
    )

    policy = ComparisonPolicy.parse(args.policy or config.comparison_policy)
    registry = ShapeRegistry.from_config(config, logger=logger)

    for rank, (name, shape) in enumerate(registry.ranked(policy), start=1):
        print(f"{rank:>3}. {name:<20} {shape.area():g}")

    summary = registry.summary()
    logger.info(
        event=LogEvent.SHAPE_SUMMARY_COMPUTED,
        message="Computed area summary",
        metadata=summary.to_dict()
    )
    print(summary)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli")
    logger.set_level(getattr(logging, args.log_level or "WARNING"))

    handlers = {
        'area': _run_area,
        'compare': _run_compare,
        'summary': _run_summary,
    }

    try:
        handlers[args.command](args, logger)
    except InvalidDimensionError as e:
        logger.error(
            event=LogEvent.INVALID_DIMENSION_ERROR,
            message="Rejected shape dimension",
            metadata={'dimension': e.name},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
