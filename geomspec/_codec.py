import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Tuple, Type

from ._core import (
    AnyGeometry,
    Geometry,
    GeometryCollection,
    GeometryError,
    GeometryType,
    InvalidGeometrySequenceError,
    InvalidPathSequenceError,
    InvalidPolygonSequenceError,
    InvalidPositionError,
    InvalidPositionSequenceError,
    InvalidTypeError,
    LineString,
    MaxDepthError,
    MissingTypeError,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    PathSequence,
    Point,
    Polygon,
    PolygonSequence,
    Position,
    PositionSequence,
    UnknownGeometry,
)

__all__ = (
    "DEFAULT_MAX_DEPTH",
    "Decoder",
    "encode",
    "decode",
    "decode_position",
    "decode_position_sequence",
    "decode_path_sequence",
    "decode_polygon_sequence",
    "decode_geometries",
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


def _type_name(obj: Any) -> str:
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "bool"
    if isinstance(obj, (int, float, str)):
        return type(obj).__name__
    if isinstance(obj, (list, tuple)):
        return "array"
    if isinstance(obj, Mapping):
        return "object"
    return type(obj).__name__


def _expected(kind: str, obj: Any, path: str) -> str:
    return f"Expected `{kind}`, got `{_type_name(obj)}` - at `{path}`"


def _is_array(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def _as_float(obj: Any, path: str) -> float:
    """Coerce a numeric document leaf to a float.

    Integers of any size are accepted, bools are not (even though ``bool`` is
    a subclass of ``int``).
    """
    if isinstance(obj, (int, float)) and not isinstance(obj, bool):
        try:
            return float(obj)
        except OverflowError:
            raise InvalidPositionError(
                f"Number out of range - at `{path}`", obj, path
            ) from None
    raise InvalidPositionError(_expected("number", obj, path), obj, path)


def _decode_array(
    decode_item: Callable[[Any, str], Any],
    error_cls: Type[GeometryError],
    what: str,
    obj: Any,
    path: str,
) -> list:
    if not _is_array(obj):
        raise error_cls(_expected("array", obj, path), obj, path)
    out = []
    for i, item in enumerate(obj):
        item_path = f"{path}[{i}]"
        try:
            out.append(decode_item(item, item_path))
        except GeometryError as exc:
            raise error_cls(
                f"Invalid {what}: {exc.detail}", item, item_path, exc
            ) from exc
    return out


def decode_position(obj: Any, path: str = "$") -> Position:
    """Decode a single position (an array of numbers).

    Parameters
    ----------
    obj : Any
        The raw document value.
    path : str, optional
        The location of ``obj`` in the enclosing document, used in error
        messages.

    Returns
    -------
    position : list of float

    Raises
    ------
    InvalidPositionError
        If ``obj`` isn't an array, or any element isn't a number.
    """
    if not _is_array(obj):
        raise InvalidPositionError(_expected("array", obj, path), obj, path)
    return [_as_float(x, f"{path}[{i}]") for i, x in enumerate(obj)]


def decode_position_sequence(obj: Any, path: str = "$") -> PositionSequence:
    """Decode an array of positions, as used by ``MultiPoint`` and
    ``LineString``. Raises `InvalidPositionSequenceError` on failure."""
    return _decode_array(
        decode_position, InvalidPositionSequenceError, "position sequence", obj, path
    )


def decode_path_sequence(obj: Any, path: str = "$") -> PathSequence:
    """Decode an array of position arrays, as used by ``MultiLineString`` and
    ``Polygon``. Raises `InvalidPathSequenceError` on failure."""
    return _decode_array(
        decode_position_sequence, InvalidPathSequenceError, "path sequence", obj, path
    )


def decode_polygon_sequence(obj: Any, path: str = "$") -> PolygonSequence:
    """Decode the coordinates of a ``MultiPolygon``. Raises
    `InvalidPolygonSequenceError` on failure."""
    return _decode_array(
        decode_path_sequence,
        InvalidPolygonSequenceError,
        "polygon sequence",
        obj,
        path,
    )


def _recursion_error(obj: Any, path: str) -> MaxDepthError:
    # Raised when `max_depth` is set above what the interpreter stack allows
    return MaxDepthError(
        f"Geometry nesting exceeds the interpreter recursion limit - at `{path}`",
        obj,
        path,
    )


_COORDINATE_TYPES: Dict[str, Tuple[type, Callable[[Any, str], Any]]] = {
    GeometryType.POINT.value: (Point, decode_position),
    GeometryType.MULTI_POINT.value: (MultiPoint, decode_position_sequence),
    GeometryType.LINE_STRING.value: (LineString, decode_position_sequence),
    GeometryType.MULTI_LINE_STRING.value: (MultiLineString, decode_path_sequence),
    GeometryType.POLYGON.value: (Polygon, decode_path_sequence),
    GeometryType.MULTI_POLYGON.value: (MultiPolygon, decode_polygon_sequence),
}


class Decoder:
    """A geometry decoder.

    Validates structured documents (as produced by a JSON, MessagePack, YAML
    or TOML parser) against the shape required by their ``type`` and builds
    the matching `Geometry`.

    Parameters
    ----------
    max_depth : int, optional
        The maximum number of nested geometry levels. A top-level geometry is
        at depth 1, the members of a top-level ``GeometryCollection`` are at
        depth 2, and so on. Defaults to 64.
    allow_unknown : bool, optional
        If ``False`` (the default), a ``type`` naming no known geometry type
        raises an `InvalidTypeError`. If ``True``, such documents decode as an
        `UnknownGeometry` holding only the type name; any other fields are
        dropped.
    """

    __slots__ = ("max_depth", "allow_unknown")

    def __init__(
        self, *, max_depth: int = DEFAULT_MAX_DEPTH, allow_unknown: bool = False
    ):
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.max_depth = max_depth
        self.allow_unknown = allow_unknown

    def __repr__(self) -> str:
        return (
            f"Decoder(max_depth={self.max_depth}, allow_unknown={self.allow_unknown})"
        )

    def decode(self, doc: Any) -> Geometry:
        """Decode a geometry from a document.

        Parameters
        ----------
        doc : Mapping
            The document to decode.

        Returns
        -------
        geometry : Geometry
            The decoded geometry.

        Raises
        ------
        GeometryError
            If the document isn't a valid geometry. No partial result is
            returned.
        """
        try:
            return self._decode(doc, "$", 1)
        except RecursionError:
            raise _recursion_error(doc, "$") from None

    def decode_geometries(self, obj: Any, path: str = "$") -> List[AnyGeometry]:
        """Decode an array of geometry documents.

        Either every element decodes, or `InvalidGeometrySequenceError` is
        raised for the first that doesn't.
        """
        try:
            return self._decode_geometries(obj, path, 1)
        except RecursionError:
            raise _recursion_error(obj, path) from None

    def _decode(self, doc: Any, path: str, depth: int) -> Geometry:
        if depth > self.max_depth:
            raise MaxDepthError(
                f"Geometry nesting exceeds the maximum depth of {self.max_depth}"
                f" - at `{path}`",
                doc,
                path,
            )
        if not isinstance(doc, Mapping):
            raise GeometryError(_expected("object", doc, path), doc, path)

        try:
            tag = doc["type"]
        except KeyError:
            raise MissingTypeError(
                f"Object missing required field `type` - at `{path}`", doc, path
            ) from None
        type_path = f"{path}.type"
        if not isinstance(tag, str):
            raise InvalidTypeError(_expected("str", tag, type_path), tag, type_path)

        if tag == GeometryType.GEOMETRY_COLLECTION:
            return GeometryCollection(
                self._decode_geometries(
                    doc.get("geometries"), f"{path}.geometries", depth + 1
                )
            )
        try:
            cls, extract = _COORDINATE_TYPES[tag]
        except KeyError:
            if not self.allow_unknown:
                raise InvalidTypeError(
                    f"Invalid geometry type {tag!r} - at `{type_path}`",
                    tag,
                    type_path,
                ) from None
            logger.debug("Unknown geometry type %r at `%s`, dropping payload", tag, path)
            return UnknownGeometry(tag)
        return cls(extract(doc.get("coordinates"), f"{path}.coordinates"))

    def _decode_geometries(self, obj: Any, path: str, depth: int) -> list:
        if not _is_array(obj):
            raise InvalidGeometrySequenceError(_expected("array", obj, path), obj, path)
        out = []
        for i, item in enumerate(obj):
            item_path = f"{path}[{i}]"
            if not isinstance(item, Mapping):
                raise InvalidGeometrySequenceError(
                    _expected("object", item, item_path), item, item_path
                )
            try:
                out.append(self._decode(item, item_path, depth))
            except GeometryError as exc:
                raise InvalidGeometrySequenceError(
                    f"Invalid geometry sequence: {exc.detail}", item, item_path, exc
                ) from exc
        return out


def decode(
    doc: Any, *, max_depth: int = DEFAULT_MAX_DEPTH, allow_unknown: bool = False
) -> Geometry:
    """Decode a geometry from a document.

    Parameters
    ----------
    doc : Mapping
        The document to decode, e.g. the output of ``msgspec.json.decode``.
    max_depth : int, optional
        The maximum number of nested geometry levels. Defaults to 64.
    allow_unknown : bool, optional
        Whether to decode documents with an unrecognized ``type`` as an
        `UnknownGeometry` rather than erroring. Defaults to ``False``.

    Returns
    -------
    geometry : Geometry

    See Also
    --------
    Decoder
    encode
    """
    return Decoder(max_depth=max_depth, allow_unknown=allow_unknown).decode(doc)


def decode_geometries(
    obj: Any,
    path: str = "$",
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_unknown: bool = False,
) -> List[AnyGeometry]:
    """Decode an array of geometry documents. See `Decoder.decode_geometries`."""
    decoder = Decoder(max_depth=max_depth, allow_unknown=allow_unknown)
    return decoder.decode_geometries(obj, path)


def _encode_coordinates(obj: Any, depth: int) -> Any:
    # `depth` is the number of array levels above the numeric leaves
    if depth == 0:
        return float(obj)
    return [_encode_coordinates(o, depth - 1) for o in obj]


_COORDINATE_DEPTHS = {
    Point: 1,
    MultiPoint: 2,
    LineString: 2,
    MultiLineString: 3,
    Polygon: 3,
    MultiPolygon: 4,
}


def encode(geometry: Geometry) -> Dict[str, Any]:
    """Encode a geometry as a document.

    The output has the ``type`` key first, followed by either
    ``coordinates`` or (for a ``GeometryCollection``) ``geometries``. All
    coordinates are output as floats.

    Parameters
    ----------
    geometry : Geometry
        The geometry to encode.

    Returns
    -------
    doc : dict
        A new document, composed only of builtin types.

    See Also
    --------
    decode
    """
    cls = type(geometry)
    if cls is GeometryCollection:
        return {
            "type": geometry.type,
            "geometries": [encode(g) for g in geometry.geometries],
        }
    depth = _COORDINATE_DEPTHS.get(cls)
    if depth is not None:
        return {
            "type": geometry.type,
            "coordinates": _encode_coordinates(geometry.coordinates, depth),
        }
    if cls is UnknownGeometry:
        return {"type": geometry.type_name}
    raise TypeError(f"Encoding objects of type {cls.__name__} is unsupported")
