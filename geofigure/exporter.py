"""JSON rendering of the figure model, in the same shape the parser reads."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .ast import Figure, Node, Point, PointRegistry, SegmentGraph
from .config import ExportConfig, get_export_config
from .parser import (
    JSON_DESCRIPTION,
    JSON_FIGURE,
    JSON_NAME,
    JSON_POINTS,
    JSON_SEGMENTS,
    JSON_X,
    JSON_Y,
)


def export_node(node: Node) -> Any:
    """Return the JSON-compatible value for any model node."""

    if isinstance(node, Figure):
        return {
            JSON_FIGURE: {
                JSON_DESCRIPTION: node.description,
                JSON_POINTS: export_node(node.points),
                JSON_SEGMENTS: export_node(node.segments),
            }
        }
    if isinstance(node, PointRegistry):
        return [export_node(point) for point in node]
    if isinstance(node, SegmentGraph):
        # one direction per edge
        segments: List[Dict[str, List[str]]] = []
        for point, neighbors in node.unique_adjacency().items():
            segments.append({point.name: [neighbor.name for neighbor in neighbors]})
        return segments
    if isinstance(node, Point):
        return {JSON_NAME: node.name, JSON_X: node.x, JSON_Y: node.y}
    raise ValueError(f"unknown node type {type(node).__name__!r}")


def figure_to_dict(figure: Figure) -> Dict[str, Any]:
    return export_node(figure)


def figure_to_json(figure: Figure, *, config: Optional[ExportConfig] = None) -> str:
    config = config or get_export_config()
    return json.dumps(figure_to_dict(figure), indent=config.json_indent)
