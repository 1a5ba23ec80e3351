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
    OutOfBoundsError,
    PathSequence,
    Point,
    Polygon,
    PolygonSequence,
    Position,
    PositionSequence,
    UnknownGeometry,
)
from ._codec import (
    DEFAULT_MAX_DEPTH,
    Decoder,
    decode,
    decode_geometries,
    decode_path_sequence,
    decode_polygon_sequence,
    decode_position,
    decode_position_sequence,
    encode,
)
from ._validate import validate

from . import bson, json, msgpack, toml, yaml
from ._version import __version__
