from typing import Optional, Union

from msgspec import DecodeError as _DecodeError

from ._codec import DEFAULT_MAX_DEPTH, decode as _decode, encode as _encode
from ._core import Geometry

__all__ = ("encode", "decode")


def __dir__():
    return __all__


def _import_bson(name):
    try:
        import bson
    except ImportError:
        raise ImportError(
            f"`geomspec.bson.{name}` requires the `bson` package from pymongo"
            " be installed.\n\n"
            "Please either `pip` or `conda` install it as follows:\n\n"
            "  $ python -m pip install pymongo  # using pip\n"
            "  $ conda install pymongo          # or using conda"
        ) from None
    else:
        return bson


def encode(geometry: Geometry) -> bytes:
    """Serialize a geometry as a BSON document.

    The ``type`` element is always written first, followed by
    ``coordinates`` or ``geometries``, so equal geometries encode to equal
    bytes. Coordinates are written as BSON doubles.

    Notes
    -----
    This function requires that `pymongo <https://pymongo.readthedocs.io/>`_
    (which provides the ``bson`` package) is installed.

    See Also
    --------
    decode
    """
    bson = _import_bson("encode")
    return bson.encode(_encode(geometry))


def decode(
    buf: Union[bytes, bytearray, memoryview],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_unknown: bool = False,
) -> Optional[Geometry]:
    """Deserialize a geometry from a BSON document.

    Parameters
    ----------
    buf : bytes-like
        The message to decode.
    max_depth : int, optional
        The maximum number of nested geometry levels. Defaults to 64.
    allow_unknown : bool, optional
        Whether to decode documents with an unrecognized ``type`` as an
        `UnknownGeometry` rather than erroring. Defaults to ``False``.

    Returns
    -------
    geometry : Geometry or None
        The deserialized geometry, or ``None`` if ``buf`` is empty (an unset
        geometry field).

    Raises
    ------
    msgspec.DecodeError
        If ``buf`` isn't a valid BSON document.
    GeometryError
        If ``buf`` is valid BSON, but not a valid geometry.

    Notes
    -----
    BSON int32, int64 and double values are all accepted as coordinates.

    See Also
    --------
    encode
    """
    bson = _import_bson("decode")
    if not isinstance(buf, bytes):
        buf = bytes(memoryview(buf))
    if not buf:
        return None
    try:
        obj = bson.decode(buf)
    except bson.errors.BSONError as exc:
        raise _DecodeError(str(exc)) from None

    return _decode(obj, max_depth=max_depth, allow_unknown=allow_unknown)
