from typing import List, Optional

from .ast import Figure, Node, Point, PointRegistry, SegmentGraph
from .config import ExportConfig, get_export_config


def _adjacency_line(point: Point, neighbors) -> str:
    return f"{point.name} :" + "".join(f" {neighbor.name}" for neighbor in neighbors)


def unparse_node(node: Node, level: int = 0, *, config: Optional[ExportConfig] = None) -> List[str]:
    """Return the indented text lines for ``node`` starting at nesting ``level``."""

    config = config or get_export_config()
    pad = " " * config.indent_width
    indent = pad * level
    lines: List[str] = []

    if isinstance(node, Figure):
        inner = pad * (level + 1)
        lines.append(f"{indent}Figure")
        lines.append(f"{indent}{{")
        lines.append(f"{inner}Description: {node.description}")
        lines.append(f"{inner}Points:")
        lines.extend(unparse_node(node.points, level + 1, config=config))
        lines.append(f"{inner}Segments:")
        lines.extend(unparse_node(node.segments, level + 1, config=config))
        lines.append(f"{indent}}}")
    elif isinstance(node, PointRegistry):
        lines.append(f"{indent}{{")
        for point in node:
            lines.extend(unparse_node(point, level + 1, config=config))
        lines.append(f"{indent}}}")
    elif isinstance(node, SegmentGraph):
        lines.append(f"{indent}{{")
        for point, neighbors in node.unique_adjacency().items():
            lines.append(indent + pad + _adjacency_line(point, neighbors))
        lines.append(f"{indent}}}")
    elif isinstance(node, Point):
        lines.append(indent + str(node))
    else:
        raise ValueError(f"unknown node type {type(node).__name__!r}")

    return lines


def print_figure(node: Node, *, config: Optional[ExportConfig] = None) -> str:
    return "\n".join(unparse_node(node, config=config)) + "\n"
