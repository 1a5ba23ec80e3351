import inspect
import sys
from contextlib import contextmanager

from geomspec import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

POINT = Point([102.0, 0.5])
MULTI_POINT = MultiPoint([[1.0, 2.0], [3.0, 4.0]])
LINE_STRING = LineString([[102.0, 0.0], [103.0, 1.0], [104.0, 0.0], [105.0, 1.0]])
MULTI_LINE_STRING = MultiLineString([[[1.0, 2.0], [3.0, 4.0]], [[5.0, 6.0], [7.0, 8.0]]])
POLYGON = Polygon(
    [
        [[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]],
        [[100.8, 0.8], [100.8, 0.2], [100.2, 0.2], [100.2, 0.8], [100.8, 0.8]],
    ]
)
MULTI_POLYGON = MultiPolygon(
    [
        [[[1.0, 2.0], [3.0, 4.0]], [[5.0, 6.0], [7.0, 8.0]]],
        [[[8.0, 7.0], [6.0, 5.0]], [[4.0, 3.0], [2.0, 1.0]]],
    ]
)
GEOMETRY_COLLECTION = GeometryCollection(
    [POINT, MULTI_LINE_STRING, GeometryCollection([LINE_STRING, POLYGON])]
)

GEOMETRIES = [
    POINT,
    MULTI_POINT,
    LINE_STRING,
    MULTI_LINE_STRING,
    POLYGON,
    MULTI_POLYGON,
    GEOMETRY_COLLECTION,
]


def nested_collection(depth):
    """A document of `depth` nested geometry levels, with a point at the bottom"""
    doc = {"type": "Point", "coordinates": [1, 2]}
    for _ in range(depth - 1):
        doc = {"type": "GeometryCollection", "geometries": [doc]}
    return doc


@contextmanager
def max_call_depth(n):
    cur_depth = len(inspect.stack(0))
    orig = sys.getrecursionlimit()
    try:
        # Our measure of the current stack depth can be off by a bit. Trying to
        # set a recursionlimit < the current depth will raise a RecursionError.
        # We just try again with a slightly higher limit, bailing after an
        # unreasonable amount of adjustments.
        for i in range(64):
            try:
                sys.setrecursionlimit(cur_depth + i + n)
                break
            except RecursionError:
                pass
        else:
            raise ValueError("Failed to set low recursion limit, something is wrong here")
        yield
    finally:
        sys.setrecursionlimit(orig)
