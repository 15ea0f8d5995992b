import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure the top-level modules import when the project is not installed.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


class RecordingContext:
    """Render context that records the calls curves make on it"""

    def __init__(self):
        self.calls = []

    def draw_line(self, points):
        self.calls.append(("line", [(p.x, p.y) for p in points]))

    def draw_ellipse(self, bbox):
        self.calls.append(("ellipse", tuple(bbox)))


@pytest.fixture
def context():
    return RecordingContext()


@pytest.fixture
def sample_curves():
    """Two lines, one circle and one polyline, interleaved"""
    from curves import Circle, Line, Polyline

    return [
        Line((0, 0), (1, 1)),
        Circle((5, 5), 2.0),
        Line((2, 3), (4, 5)),
        Polyline([(0, 0), (1, 2), (3, 1)]),
    ]


@pytest.fixture
def drawing(sample_curves):
    from drawing import Drawing

    return Drawing(sample_curves)


@pytest.fixture
def notifications(drawing):
    """Payloads of every change notification fired by ``drawing``"""
    received = []
    drawing.subscribe(received.append)
    return received
