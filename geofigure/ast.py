from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .numbers import approximately_equal, coordinate_key, is_representable

UNNAMED = "__UNNAMED"


@dataclass(frozen=True, eq=False)
class Point:
    """A named 2D point.

    Identity is the coordinate pair snapped to the ``EPSILON`` grid; the name is
    carried along but ignored by ``==`` and ``hash``.
    """

    x: float
    y: float
    name: str = UNNAMED

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        if not (is_representable(self.x) and is_representable(self.y)):
            raise ValueError(f"coordinates out of range: ({self.x}, {self.y})")

    @property
    def key(self) -> Tuple[int, int]:
        return coordinate_key(self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.name}({self.x}, {self.y})"


class PointRegistry:
    """Insertion-ordered set of points with no two coordinate-equal members."""

    def __init__(self, points: Optional[Iterable[Point]] = None):
        self._points: Dict[Point, Point] = {}
        self._frozen = False
        for point in points or ():
            self.insert(point)

    def insert(self, point: Point) -> None:
        if self._frozen:
            raise ValueError("point registry is frozen")
        # first instance wins so its name is kept
        self._points.setdefault(point, point)

    def lookup_by_name(self, name: str) -> Optional[Point]:
        for point in self._points:
            if point.name == name:
                return point
        return None

    def lookup_by_coords(self, x: float, y: float) -> Optional[Point]:
        for point in self._points:
            if approximately_equal(point.x, x) and approximately_equal(point.y, y):
                return point
        return None

    def contains(self, point: Point) -> bool:
        return self.lookup_by_coords(point.x, point.y) is not None

    def names(self) -> List[str]:
        return [point.name for point in self._points]

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.contains(point)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"PointRegistry({list(self._points)!r})"


@dataclass(frozen=True, eq=False)
class Segment:
    """Undirected connection between two points."""

    point1: Point
    point2: Point

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return {self.point1, self.point2} == {other.point1, other.point2}

    def __hash__(self) -> int:
        return hash(frozenset((self.point1, self.point2)))

    def other(self, point: Point) -> Point:
        if point == self.point1:
            return self.point2
        if point == self.point2:
            return self.point1
        raise ValueError(f"{point} is not an endpoint of {self}")

    def __str__(self) -> str:
        return f"{self.point1.name}-{self.point2.name}"


Adjacency = Dict[Point, Dict[Point, None]]


class SegmentGraph:
    """Undirected graph over points stored as symmetric adjacency lists.

    Neighbour sets are dicts with ``None`` values so iteration follows
    insertion order and the exported edge direction is reproducible.
    """

    def __init__(self) -> None:
        self._adj: Adjacency = {}
        self._frozen = False

    def _add_directed_edge(self, a: Point, b: Point) -> None:
        self._adj.setdefault(a, {})[b] = None

    def add_undirected_edge(self, a: Point, b: Point) -> None:
        if self._frozen:
            raise ValueError("segment graph is frozen")
        self._add_directed_edge(a, b)
        self._add_directed_edge(b, a)

    def add_adjacency_list(self, point: Point, neighbors: Iterable[Point]) -> None:
        for neighbor in neighbors:
            self.add_undirected_edge(point, neighbor)

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adj.values()) // 2

    def neighbors(self, point: Point) -> List[Point]:
        return list(self._adj.get(point, ()))

    def has_edge(self, a: Point, b: Point) -> bool:
        return b in self._adj.get(a, ())

    def all_directed_pairs(self) -> Iterator[Tuple[Point, Point]]:
        for a, neighbors in self._adj.items():
            for b in neighbors:
                yield a, b

    def unique_undirected_pairs(self) -> Iterator[Tuple[Point, Point]]:
        """Yield each undirected edge once, in whichever direction is walked first."""

        kept: Adjacency = {}
        for a, b in self.all_directed_pairs():
            if a in kept.get(b, ()):
                continue
            kept.setdefault(a, {})[b] = None
            yield a, b

    def unique_adjacency(self) -> Adjacency:
        unique: Adjacency = {}
        for a, b in self.unique_undirected_pairs():
            unique.setdefault(a, {})[b] = None
        return unique

    def segments(self) -> List[Segment]:
        return [Segment(a, b) for a, b in self.unique_undirected_pairs()]

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{a.name}-{b.name}" for a, b in self.unique_undirected_pairs())
        return f"SegmentGraph([{pairs}])"


@dataclass(frozen=True)
class Figure:
    description: str
    points: PointRegistry
    segments: SegmentGraph


Node = Union[Figure, PointRegistry, SegmentGraph, Point]
