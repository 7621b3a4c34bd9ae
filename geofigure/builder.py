"""Construction strategies driven by the figure parser."""

from __future__ import annotations

from typing import List, Optional, Protocol

from .ast import Figure, Point, PointRegistry, Segment, SegmentGraph


class FigureBuilder(Protocol):
    """Protocol implemented by construction strategies.

    The parser routes every object it would create through one of these
    methods, so a strategy decides whether anything is materialized.
    """

    def build_figure(
        self,
        description: str,
        points: Optional[PointRegistry],
        segments: Optional[SegmentGraph],
    ) -> Optional[Figure]:
        ...

    def build_point(self, name: str, x: float, y: float) -> Optional[Point]:
        ...

    def build_point_registry(self, points: List[Optional[Point]]) -> Optional[PointRegistry]:
        ...

    def build_segment_graph(self) -> Optional[SegmentGraph]:
        ...

    def build_segment(self, point1: Optional[Point], point2: Optional[Point]) -> Optional[Segment]:
        ...

    def link_segment(self, segments: Optional[SegmentGraph], segment: Optional[Segment]) -> None:
        ...


class NullBuilder:
    """Builds nothing; parsing with it only checks the input."""

    def build_figure(self, description, points, segments):
        return None

    def build_point(self, name, x, y):
        return None

    def build_point_registry(self, points):
        return None

    def build_segment_graph(self):
        return None

    def build_segment(self, point1, point2):
        return None

    def link_segment(self, segments, segment):
        pass


class GeometryBuilder:
    """Materializes the figure model."""

    def build_figure(
        self,
        description: str,
        points: Optional[PointRegistry],
        segments: Optional[SegmentGraph],
    ) -> Figure:
        points = points if points is not None else PointRegistry()
        segments = segments if segments is not None else SegmentGraph()
        points.freeze()
        segments.freeze()
        return Figure(description, points, segments)

    def build_point(self, name: str, x: float, y: float) -> Point:
        return Point(x, y, name)

    def build_point_registry(self, points: List[Optional[Point]]) -> PointRegistry:
        return PointRegistry(point for point in points if point is not None)

    def build_segment_graph(self) -> SegmentGraph:
        return SegmentGraph()

    def build_segment(self, point1: Optional[Point], point2: Optional[Point]) -> Optional[Segment]:
        if point1 is None or point2 is None:
            return None
        return Segment(point1, point2)

    def link_segment(self, segments: Optional[SegmentGraph], segment: Optional[Segment]) -> None:
        if segments is None or segment is None:
            return
        segments.add_undirected_edge(segment.point1, segment.point2)
