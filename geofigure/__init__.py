from .ast import Figure, Node, Point, PointRegistry, Segment, SegmentGraph, UNNAMED
from .numbers import EPSILON, approximately_equal, normalize
from .builder import FigureBuilder, GeometryBuilder, NullBuilder
from .parser import parse_figure, StructuralError
from .config import ExportConfig, get_export_config, set_export_config
from .exporter import export_node, figure_to_dict, figure_to_json
from .printer import print_figure, unparse_node
from .loader import load_figure, read_figure_text, strip_comments

__all__ = [
    'Figure',
    'Node',
    'Point',
    'PointRegistry',
    'Segment',
    'SegmentGraph',
    'UNNAMED',
    'EPSILON',
    'approximately_equal',
    'normalize',
    'FigureBuilder',
    'GeometryBuilder',
    'NullBuilder',
    'parse_figure',
    'StructuralError',
    'ExportConfig',
    'get_export_config',
    'set_export_config',
    'export_node',
    'figure_to_dict',
    'figure_to_json',
    'print_figure',
    'unparse_node',
    'load_figure',
    'read_figure_text',
    'strip_comments',
]
