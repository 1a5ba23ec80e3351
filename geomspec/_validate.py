import math
from typing import Any, Iterator, Tuple

from ._core import (
    Geometry,
    GeometryCollection,
    InvalidPositionError,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    OutOfBoundsError,
    Point,
    Polygon,
    Position,
)

__all__ = ("validate",)


# The number of array levels between `coordinates` and its positions
_POSITION_DEPTHS = {
    Point: 0,
    MultiPoint: 1,
    LineString: 1,
    MultiLineString: 2,
    Polygon: 2,
    MultiPolygon: 3,
}


def _walk(obj: Any, depth: int, path: str) -> Iterator[Tuple[Position, str]]:
    if depth == 0:
        yield obj, path
        return
    for i, o in enumerate(obj):
        yield from _walk(o, depth - 1, f"{path}[{i}]")


def _positions(geometry: Geometry, path: str) -> Iterator[Tuple[Position, str]]:
    if isinstance(geometry, GeometryCollection):
        for i, g in enumerate(geometry.geometries):
            yield from _positions(g, f"{path}.geometries[{i}]")
        return
    depth = _POSITION_DEPTHS.get(type(geometry))
    if depth is not None:
        yield from _walk(geometry.coordinates, depth, f"{path}.coordinates")


def validate(
    geometry: Geometry, *, min_dimensions: int = 2, check_bounds: bool = True
) -> None:
    """Check that every position in a geometry is a valid coordinate.

    Decoding only checks the *shape* of a document. This optional pass
    additionally checks the values.

    Parameters
    ----------
    geometry : Geometry
        The geometry to check.
    min_dimensions : int, optional
        The minimum number of elements in each position. Defaults to 2.
    check_bounds : bool, optional
        Whether to check that longitudes are in [-180, 180] and latitudes are
        in [-90, 90]. Defaults to ``True``.

    Raises
    ------
    InvalidPositionError
        If a position has too few elements.
    OutOfBoundsError
        If a longitude or latitude is out of range or not finite.
    """
    for position, path in _positions(geometry, "$"):
        if len(position) < min_dimensions:
            raise InvalidPositionError(
                f"Expected a position with at least {min_dimensions} elements,"
                f" got {len(position)} - at `{path}`",
                position,
                path,
            )
        if not check_bounds:
            continue
        for i, (name, limit) in enumerate((("longitude", 180), ("latitude", 90))):
            if i >= len(position):
                break
            value = position[i]
            if not (math.isfinite(value) and -limit <= value <= limit):
                raise OutOfBoundsError(
                    f"Expected {name} in [-{limit}, {limit}], got {value!r}"
                    f" - at `{path}[{i}]`",
                    value,
                    f"{path}[{i}]",
                )
