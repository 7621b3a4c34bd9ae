"""Parser for the JSON figure format.

The input looks like::

    {
      "Figure": {
        "description": "A triangle",
        "points": [{"name": "A", "x": 0, "y": 0}, ...],
        "segments": [{"A": ["B", "C"]}, ...]
      }
    }

Every object the parser would create is requested from a
:class:`~geofigure.builder.FigureBuilder`, so the same walk either builds a
:class:`~geofigure.ast.Figure` or merely checks the document.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from .ast import Figure, Point, PointRegistry, SegmentGraph
from .builder import FigureBuilder, GeometryBuilder
from .logging_utils import apply_debug_logging
from .numbers import is_representable

logger = logging.getLogger(__name__)

JSON_FIGURE = "Figure"
JSON_DESCRIPTION = "description"
JSON_POINTS = "points"
JSON_SEGMENTS = "segments"
JSON_NAME = "name"
JSON_X = "x"
JSON_Y = "y"


class StructuralError(ValueError):
    """Raised when a figure document is malformed or references unknown points."""

    def __init__(self, message: str):
        super().__init__(f"Parse error: {message}")


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _require_key(key: str, obj: Dict[str, Any], kind: str) -> Any:
    if key not in obj:
        raise StructuralError(f'could not find {kind} with key "{key}"')
    return obj[key]


def _get_object(key: str, obj: Dict[str, Any]) -> Dict[str, Any]:
    value = _require_key(key, obj, "object")
    if not isinstance(value, dict):
        raise StructuralError(f'key "{key}" must hold an object, got {_type_name(value)}')
    return value


def _get_string(key: str, obj: Dict[str, Any]) -> str:
    value = _require_key(key, obj, "string")
    if not isinstance(value, str):
        raise StructuralError(f'key "{key}" must hold a string, got {_type_name(value)}')
    return value


def _get_array(key: str, obj: Dict[str, Any]) -> List[Any]:
    value = _require_key(key, obj, "array")
    if not isinstance(value, list):
        raise StructuralError(f'key "{key}" must hold an array, got {_type_name(value)}')
    return value


def _get_number(key: str, obj: Dict[str, Any]) -> float:
    value = _require_key(key, obj, "number")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StructuralError(f'key "{key}" must hold a number, got {_type_name(value)}')
    try:
        value = float(value)
    except OverflowError as exc:
        raise StructuralError(f'key "{key}" holds a number too large for a coordinate') from exc
    if not math.isfinite(value):
        raise StructuralError(f'key "{key}" must hold a finite number, got {value}')
    if not is_representable(value):
        raise StructuralError(f'key "{key}" holds a number too large for a coordinate, got {value}')
    return value


def _load_root(text: str) -> Dict[str, Any]:
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StructuralError(
            f"invalid JSON at line {exc.lineno}, col {exc.colno}: {exc.msg}"
        ) from exc
    except ValueError as exc:
        raise StructuralError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise StructuralError("invalid JSON: nesting too deep") from exc
    if not isinstance(root, dict):
        raise StructuralError(f"expected a JSON object at top level, got {_type_name(root)}")
    return root


def _parse_point(entry: Any, index: int, builder: FigureBuilder) -> Tuple[str, Optional[Point]]:
    if not isinstance(entry, dict):
        raise StructuralError(f"point #{index} must be an object, got {_type_name(entry)}")
    name = _get_string(JSON_NAME, entry)
    x = _get_number(JSON_X, entry)
    y = _get_number(JSON_Y, entry)
    return name, builder.build_point(name, x, y)


def _parse_points(
    entries: List[Any], builder: FigureBuilder
) -> Tuple[Optional[PointRegistry], Dict[str, Optional[Point]]]:
    declared: Dict[str, Optional[Point]] = {}
    built: List[Optional[Point]] = []
    for index, entry in enumerate(entries):
        name, point = _parse_point(entry, index, builder)
        if name in declared:
            logger.warning('Point name "%s" declared more than once; keeping the first', name)
        else:
            declared[name] = point
        built.append(point)
    return builder.build_point_registry(built), declared


def _resolve(
    name: str,
    declared: Dict[str, Optional[Point]],
    registry: Optional[PointRegistry],
    context: str,
) -> Optional[Point]:
    if name not in declared:
        raise StructuralError(f'{context} refers to undefined point "{name}"')
    point = declared[name]
    if point is None or registry is None:
        return point
    # coordinate-equal duplicates collapse onto the registry's stored instance
    stored = registry.lookup_by_coords(point.x, point.y)
    return stored if stored is not None else point


def _segment_entry(entry: Any, index: int) -> Tuple[str, List[Any]]:
    if not isinstance(entry, dict):
        raise StructuralError(f"segment #{index} must be an object, got {_type_name(entry)}")
    if len(entry) != 1:
        raise StructuralError(
            f"segment #{index} must have exactly one point name key, got {len(entry)}"
        )
    (key, value), = entry.items()
    if not isinstance(value, list):
        raise StructuralError(
            f'segment "{key}" must map to an array of point names, got {_type_name(value)}'
        )
    return key, value


def _parse_segments(
    entries: List[Any],
    declared: Dict[str, Optional[Point]],
    registry: Optional[PointRegistry],
    builder: FigureBuilder,
) -> Tuple[Optional[SegmentGraph], int]:
    graph = builder.build_segment_graph()
    linked = 0
    for index, entry in enumerate(entries):
        key, neighbor_names = _segment_entry(entry, index)
        origin = _resolve(key, declared, registry, "segment")
        for neighbor_name in neighbor_names:
            if not isinstance(neighbor_name, str):
                raise StructuralError(
                    f'segment "{key}" lists a non-string point name ({_type_name(neighbor_name)})'
                )
            target = _resolve(neighbor_name, declared, registry, f'segment "{key}" point')
            if neighbor_name == key or (origin is not None and origin == target):
                logger.warning('Skipping degenerate segment %s-%s', key, neighbor_name)
                continue
            builder.link_segment(graph, builder.build_segment(origin, target))
            linked += 1
    return graph, linked


def parse_figure(text: str, builder: Optional[FigureBuilder] = None) -> Optional[Figure]:
    """Parse a figure document and assemble it with ``builder``.

    ``builder`` defaults to :class:`GeometryBuilder`. Returns whatever the
    builder produces for the figure, ``None`` for :class:`NullBuilder`.
    Raises :class:`StructuralError` on the first malformed or unresolved item.
    """

    if builder is None:
        builder = GeometryBuilder()

    root = _load_root(text)
    figure = _get_object(JSON_FIGURE, root)
    description = _get_string(JSON_DESCRIPTION, figure)
    registry, declared = _parse_points(_get_array(JSON_POINTS, figure), builder)
    graph, linked = _parse_segments(_get_array(JSON_SEGMENTS, figure), declared, registry, builder)

    logger.info(
        "Parsed figure %r: %d point name(s), %d segment link(s)",
        description,
        len(declared),
        linked,
    )
    return builder.build_figure(description, registry, graph)


apply_debug_logging(
    globals(),
    logger=logger,
    skip={"_type_name", "_require_key", "_get_object", "_get_string", "_get_array", "_get_number"},
)
