import enum
from typing import Any, List, Optional, Union

from msgspec import Struct, ValidationError

__all__ = (
    "GeometryType",
    "Position",
    "PositionSequence",
    "PathSequence",
    "PolygonSequence",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "UnknownGeometry",
    "AnyGeometry",
    "GeometryError",
    "MissingTypeError",
    "InvalidTypeError",
    "InvalidPositionError",
    "InvalidPositionSequenceError",
    "InvalidPathSequenceError",
    "InvalidPolygonSequenceError",
    "InvalidGeometrySequenceError",
    "MaxDepthError",
    "OutOfBoundsError",
)


class GeometryType(str, enum.Enum):
    """The seven GeoJSON geometry types."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


# A single coordinate tuple, conventionally [longitude, latitude, (altitude)].
# Valid longitudes are in [-180, 180] and latitudes in [-90, 90], but neither
# the arity nor the ranges are enforced when decoding (see `geomspec.validate`).
Position = List[float]
PositionSequence = List[Position]
PathSequence = List[List[Position]]
PolygonSequence = List[List[List[Position]]]


class Geometry(Struct):
    """The base class of all geometry types.

    Every concrete geometry is a tagged struct whose tag (stored under the
    ``"type"`` field when encoded) is its class name. Use the ``is_*``
    predicates or ``isinstance`` checks to find out which variant you have.
    """

    @property
    def type(self) -> str:
        """The geometry type tag (e.g. ``"Point"``)"""
        return self.__struct_config__.tag

    def is_point(self) -> bool:
        return self.type == GeometryType.POINT

    def is_multi_point(self) -> bool:
        return self.type == GeometryType.MULTI_POINT

    def is_line_string(self) -> bool:
        return self.type == GeometryType.LINE_STRING

    def is_multi_line_string(self) -> bool:
        return self.type == GeometryType.MULTI_LINE_STRING

    def is_polygon(self) -> bool:
        return self.type == GeometryType.POLYGON

    def is_multi_polygon(self) -> bool:
        return self.type == GeometryType.MULTI_POLYGON

    def is_geometry_collection(self) -> bool:
        return self.type == GeometryType.GEOMETRY_COLLECTION


# All types set `tag=True`, meaning that they're identified by a `type` field
# holding the class name.
class Point(Geometry, tag=True):
    """A single position.

    Examples
    --------
    >>> Point([102.0, 0.5])
    Point(coordinates=[102.0, 0.5])
    """

    coordinates: Position


class MultiPoint(Geometry, tag=True):
    coordinates: PositionSequence


class LineString(Geometry, tag=True):
    """A path through two or more positions."""

    coordinates: PositionSequence


class MultiLineString(Geometry, tag=True):
    coordinates: PathSequence


class Polygon(Geometry, tag=True):
    """A polygon, as a list of linear rings.

    The first ring is the exterior boundary, any others are holes. Ring
    closure and winding order are not checked.
    """

    coordinates: PathSequence


class MultiPolygon(Geometry, tag=True):
    coordinates: PolygonSequence


class GeometryCollection(Geometry, tag=True):
    """An ordered collection of geometries, which may itself contain
    collections.

    When decoded with ``allow_unknown=True``, members may also be
    `UnknownGeometry` instances. The annotation lists only the seven GeoJSON
    types, so the generated JSON schema never describes unknown members.
    """

    geometries: List["AnyGeometry"]


class UnknownGeometry(Geometry):
    """A geometry whose type tag isn't one of the seven GeoJSON types.

    Only produced when decoding with ``allow_unknown=True``. The payload of
    the original document is not retained.

    Parameters
    ----------
    type_name: str
        The type tag found in the document.
    """

    type_name: str

    @property
    def type(self) -> str:
        return self.type_name


AnyGeometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]


class GeometryError(ValidationError):
    """The base class of all errors raised when a document doesn't describe a
    valid geometry.

    Attributes
    ----------
    value: Any
        The offending raw value, at the level where validation failed.
    path: str
        Where in the document validation failed (e.g. ``$.coordinates[0]``).
    inner: GeometryError or None
        For failures at a nesting level, the error raised by the level below.
    detail: str
        The message of the innermost error.
    """

    def __init__(
        self,
        msg: str,
        value: Any = None,
        path: str = "$",
        inner: "Optional[GeometryError]" = None,
    ):
        super().__init__(msg)
        self.value = value
        self.path = path
        self.inner = inner
        self.detail = inner.detail if inner is not None else msg

    @property
    def root_cause(self) -> "GeometryError":
        """The innermost error in the chain"""
        err = self
        while err.inner is not None:
            err = err.inner
        return err


class MissingTypeError(GeometryError):
    """The document has no ``type`` field"""


class InvalidTypeError(GeometryError):
    """The ``type`` field isn't a string, or names no known geometry type"""


class InvalidPositionError(GeometryError):
    """A position isn't an array of numbers"""


class InvalidPositionSequenceError(GeometryError):
    pass


class InvalidPathSequenceError(GeometryError):
    pass


class InvalidPolygonSequenceError(GeometryError):
    pass


class InvalidGeometrySequenceError(GeometryError):
    """A collection's ``geometries`` isn't an array of valid geometries"""


class MaxDepthError(GeometryError):
    """Geometry collections are nested deeper than the configured limit"""


class OutOfBoundsError(GeometryError):
    """A longitude or latitude lies outside its valid range"""
