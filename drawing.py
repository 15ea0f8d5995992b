# ============================================================================
# FILE: drawing.py
# ============================================================================
"""
The Drawing: an ordered collection of curves with change notification and
JSON save/load.
"""
import json
import os
from typing import Callable, Iterable, List, Tuple, Union

from config import FILE_FORMAT_VERSION
from curves import Circle, Curve, CurveContainer, FormatError, Line, Polyline, curve_from_dict

PathLike = Union[str, "os.PathLike[str]"]


class Drawing:
    """Holds the curves of a drawing in insertion (z-) order.

    Every mutating operation notifies each subscribed callback exactly once,
    synchronously, with the affected curve (add/remove) or a tuple of curves
    (remove all/load) as the only argument.
    """

    def __init__(self, curves: Iterable[Curve] = ()):
        self._curves: List[Curve] = list(curves)
        self._listeners: List[Callable] = []

    @property
    def curves(self) -> Tuple[Curve, ...]:
        """Snapshot of the curves; changing the drawing does not change it"""
        return tuple(self._curves)

    def __len__(self):
        return len(self._curves)

    def __iter__(self):
        return iter(tuple(self._curves))

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable):
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable):
        """Remove *callback*; raises ValueError if it was never subscribed"""
        self._listeners.remove(callback)

    def _notify(self, payload):
        for callback in list(self._listeners):
            callback(payload)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_curve(self, curve: Curve):
        self._curves.append(curve)
        self._notify(curve)

    def remove_curve(self, index: int):
        """Remove the curve at 0-based *index*.

        Negative indices are not wrapped around; anything outside
        ``[0, len(drawing))`` raises IndexError and leaves the drawing as is.
        """
        if not 0 <= index < len(self._curves):
            raise IndexError(f"curve index {index} out of range for drawing with {len(self._curves)} curves")
        curve = self._curves.pop(index)
        self._notify(curve)

    def remove_all_curves(self):
        removed = tuple(self._curves)
        self._curves.clear()
        self._notify(removed)

    # ------------------------------------------------------------------
    # Rendering and filtering
    # ------------------------------------------------------------------

    def draw(self, context):
        """Draw all curves on *context*, back to front"""
        for curve in self._curves:
            curve.draw(context)

    def get_lines(self) -> CurveContainer[Line]:
        return CurveContainer.of_type(self._curves, Line)

    def get_circles(self) -> CurveContainer[Circle]:
        return CurveContainer.of_type(self._curves, Circle)

    def get_polylines(self) -> CurveContainer[Polyline]:
        return CurveContainer.of_type(self._curves, Polyline)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_dict(self):
        return {
            'version': FILE_FORMAT_VERSION,
            'curves': [curve.to_dict() for curve in self._curves]
        }

    def save(self, path: PathLike):
        """Write the drawing to *path* as JSON. Raises OSError on I/O failure."""
        text = json.dumps(self.to_dict(), indent=2)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)

    def load(self, path: PathLike):
        """Replace the curves with those stored in *path*.

        Raises OSError if the file cannot be read and FormatError if it does
        not hold curve data. The current curves are kept on either failure.
        """
        with open(path, 'rb') as f:
            raw = f.read()
        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise FormatError(f"file is not UTF-8 text: {e}") from e

        curves = parse_curves(text)

        self._curves = curves
        self._notify(tuple(curves))


def parse_curves(text: str) -> List[Curve]:
    """Parse a saved drawing document into a list of curves"""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise FormatError(f"not a valid JSON document: {e}") from e

    if isinstance(data, dict):
        version = data.get('version', FILE_FORMAT_VERSION)
        if str(version).split('.')[0] != FILE_FORMAT_VERSION.split('.')[0]:
            raise FormatError(f"unsupported file version {version!r}")
        records = data.get('curves')
        if not isinstance(records, list):
            raise FormatError("document has no 'curves' list")
    elif isinstance(data, list):
        records = data
    else:
        raise FormatError(f"expected an object or a list of curves, got {type(data).__name__}")

    return [curve_from_dict(record) for record in records]
