"""Tests for the curve classes and CurveContainer."""
import math

import pytest

from curves import (CURVE_TYPES, Circle, CurveContainer, FormatError, Line, Point,
                    Polyline, curve_from_dict)


def test_point_converts_coordinates_to_float():
    p = Point(1, 2)
    assert isinstance(p.x, float) and isinstance(p.y, float)
    assert p == Point(1.0, 2.0)


def test_curves_are_immutable_values():
    line = Line((0, 0), (1, 1))
    assert line == Line(Point(0, 0), Point(1, 1))
    assert line is not Line((0, 0), (1, 1))
    with pytest.raises(AttributeError):
        line.start = Point(3, 3)


def test_equal_fields_of_different_types_are_not_equal():
    assert Line((0, 0), (1, 1)) != Polyline([(0, 0), (1, 1)])


def test_polyline_stores_vertices_as_tuple():
    vertices = [(0, 0), (1, 1)]
    polyline = Polyline(vertices)
    vertices.append((2, 2))
    assert polyline.points == (Point(0, 0), Point(1, 1))


def test_circle_rejects_negative_radius():
    with pytest.raises(ValueError):
        Circle((0, 0), -1)
    with pytest.raises(ValueError):
        Circle((0, 0), math.nan)
    with pytest.raises(ValueError):
        Circle((0, 0), math.inf)


def test_zero_radius_circle_is_allowed():
    assert Circle((1, 1), 0).radius == 0.0


class TestDraw:

    def test_line(self, context):
        Line((0, 0), (3, 4)).draw(context)
        assert context.calls == [("line", [(0.0, 0.0), (3.0, 4.0)])]

    def test_circle_draws_bounding_ellipse(self, context):
        Circle((5, 5), 2).draw(context)
        assert context.calls == [("ellipse", (3.0, 3.0, 7.0, 7.0))]

    def test_polyline_draws_connected_segments(self, context):
        Polyline([(0, 0), (1, 2), (3, 1)]).draw(context)
        assert context.calls == [("line", [(0.0, 0.0), (1.0, 2.0), (3.0, 1.0)])]

    @pytest.mark.parametrize("points", [[], [(1, 1)]])
    def test_polyline_without_segments_draws_nothing(self, context, points):
        Polyline(points).draw(context)
        assert context.calls == []


class TestBounds:

    def test_line(self):
        assert Line((4, 1), (2, 3)).bounds() == (2, 1, 4, 3)

    def test_circle(self):
        assert Circle((0, 0), 1.5).bounds() == (-1.5, -1.5, 1.5, 1.5)

    def test_polyline(self):
        assert Polyline([(0, 5), (2, -1), (1, 1)]).bounds() == (0, -1, 2, 5)

    def test_empty_polyline(self):
        assert Polyline().bounds() is None


class TestSerialization:

    def test_to_dict_carries_type_tag(self, sample_curves):
        tags = [c.to_dict()['type'] for c in sample_curves]
        assert tags == ["line", "circle", "line", "polyline"]

    def test_circle_to_dict(self):
        assert Circle((5, 5), 2).to_dict() == {
            'type': 'circle', 'center': [5.0, 5.0], 'radius': 2.0,
        }

    def test_from_dict_restores_concrete_type(self, sample_curves):
        for curve in sample_curves:
            restored = curve_from_dict(curve.to_dict())
            assert type(restored) is type(curve)
            assert restored == curve

    def test_registry_covers_every_curve_type(self):
        assert CURVE_TYPES == {'line': Line, 'circle': Circle, 'polyline': Polyline}

    @pytest.mark.parametrize("record", [
        {'type': 'spline', 'points': []},
        {'points': []},
        {'type': None},
        {'type': 3},
    ])
    def test_unknown_type_tag(self, record):
        with pytest.raises(FormatError, match="unknown curve type"):
            curve_from_dict(record)

    @pytest.mark.parametrize("record", [
        {'type': 'line', 'start': [0, 0]},
        {'type': 'circle', 'center': [0, 0]},
        {'type': 'polyline'},
    ])
    def test_missing_field(self, record):
        with pytest.raises(FormatError, match="missing"):
            curve_from_dict(record)

    @pytest.mark.parametrize("record", [
        {'type': 'line', 'start': [0, 'a'], 'end': [1, 1]},
        {'type': 'line', 'start': [0, 0, 0], 'end': [1, 1]},
        {'type': 'line', 'start': {'x': 0, 'y': 0}, 'end': [1, 1]},
        {'type': 'circle', 'center': [0, 0], 'radius': True},
        {'type': 'circle', 'center': [0, 0], 'radius': -2},
        {'type': 'circle', 'center': [0, 0], 'radius': float('inf')},
        {'type': 'line', 'start': [float('nan'), 0], 'end': [1, 1]},
        {'type': 'circle', 'center': [0, 0], 'radius': 10 ** 400},
        {'type': 'polyline', 'points': [[0, 0], None]},
        {'type': 'polyline', 'points': 'abc'},
    ])
    def test_malformed_field(self, record):
        with pytest.raises(FormatError):
            curve_from_dict(record)

    def test_record_must_be_an_object(self):
        with pytest.raises(FormatError):
            curve_from_dict(["line", [0, 0], [1, 1]])

    def test_format_error_is_a_value_error(self):
        assert issubclass(FormatError, ValueError)


class TestCurveContainer:

    def test_of_type_matches_exact_type_in_order(self, sample_curves):
        lines = CurveContainer.of_type(sample_curves, Line)
        assert list(lines) == [sample_curves[0], sample_curves[2]]

    def test_of_type_excludes_subclasses(self):
        class DashedLine(Line):
            pass

        curves = [Line((0, 0), (1, 1)), DashedLine((0, 0), (2, 2))]
        assert len(CurveContainer.of_type(curves, Line)) == 1

    def test_append_and_extend(self):
        container = CurveContainer()
        container.append(Circle((0, 0), 1))
        container.extend([Circle((1, 1), 2), Circle((2, 2), 3)])
        assert len(container) == 3
        assert container[1] == Circle((1, 1), 2)
        assert container == [Circle((0, 0), 1), Circle((1, 1), 2), Circle((2, 2), 3)]

    def test_owns_its_items(self):
        source = [Line((0, 0), (1, 1))]
        container = CurveContainer(source)
        container.append(Line((1, 1), (2, 2)))
        assert len(source) == 1
