import json

import pytest

from geofigure.ast import Point
from geofigure.config import ExportConfig, get_export_config, set_export_config
from geofigure.exporter import export_node, figure_to_dict, figure_to_json
from geofigure.parser import parse_figure


def figure_text(points, segments, description='Export me'):
    return json.dumps(
        {'Figure': {'description': description, 'points': points, 'segments': segments}}
    )


SQUARE = figure_text(
    [
        {'name': 'A', 'x': 0, 'y': 0},
        {'name': 'B', 'x': 2, 'y': 0},
        {'name': 'C', 'x': 2, 'y': 2},
        {'name': 'D', 'x': 0, 'y': 2.5},
    ],
    [{'A': ['B', 'D']}, {'B': ['C', 'A']}, {'C': ['D', 'B']}, {'D': ['A', 'C']}],
)


def edge_set(figure):
    return {
        frozenset((a.name, b.name)) for a, b in figure.segments.unique_undirected_pairs()
    }


def test_export_matches_input_schema():
    figure = parse_figure(SQUARE)
    data = figure_to_dict(figure)

    assert list(data) == ['Figure']
    body = data['Figure']
    assert body['description'] == 'Export me'
    assert body['points'][3] == {'name': 'D', 'x': 0.0, 'y': 2.5}
    assert body['segments'] == [{'A': ['B', 'D']}, {'B': ['C']}, {'D': ['C']}]


def test_exported_segments_list_each_edge_once():
    figure = parse_figure(SQUARE)
    segments = figure_to_dict(figure)['Figure']['segments']

    pairs = [(src, dst) for entry in segments for src, dsts in entry.items() for dst in dsts]
    assert len(pairs) == figure.segments.edge_count() == 4
    assert len({frozenset(pair) for pair in pairs}) == 4


def test_json_round_trip_preserves_figure():
    figure = parse_figure(SQUARE)
    again = parse_figure(figure_to_json(figure))

    assert again.description == figure.description
    assert [(p.name, p.x, p.y) for p in again.points] == [(p.name, p.x, p.y) for p in figure.points]
    assert edge_set(again) == edge_set(figure)


def test_export_does_not_mutate_figure():
    figure = parse_figure(SQUARE)
    before = list(figure.segments.all_directed_pairs())

    figure_to_json(figure)
    figure_to_dict(figure)

    assert list(figure.segments.all_directed_pairs()) == before


def test_export_single_point():
    assert export_node(Point(1, 2, 'P')) == {'name': 'P', 'x': 1.0, 'y': 2.0}


def test_unknown_node_raises_value_error():
    with pytest.raises(ValueError):
        export_node({'Figure': {}})


def test_json_indent_follows_config():
    figure = parse_figure(SQUARE)

    assert '\n' not in figure_to_json(figure, config=ExportConfig(json_indent=None))
    assert '\n  "Figure"' in figure_to_json(figure, config=ExportConfig(json_indent=2))


def test_global_export_config_round_trip():
    original = get_export_config()
    try:
        set_export_config(ExportConfig(indent_width=4, json_indent=None))
        figure = parse_figure(SQUARE)
        assert '\n' not in figure_to_json(figure)
    finally:
        set_export_config(original)


def test_set_export_config_rejects_negative_indent():
    with pytest.raises(ValueError):
        set_export_config(ExportConfig(indent_width=-1))


def test_explicit_config_wins_over_module_default():
    original = get_export_config()
    try:
        set_export_config(ExportConfig(json_indent=None))
        figure = parse_figure(SQUARE)
        assert '\n  "Figure"' in figure_to_json(figure, config=ExportConfig(json_indent=2))
    finally:
        set_export_config(original)
