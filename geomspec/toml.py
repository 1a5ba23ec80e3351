from typing import Union

from msgspec import DecodeError as _DecodeError

from ._codec import DEFAULT_MAX_DEPTH, decode as _decode, encode as _encode
from ._core import Geometry

__all__ = ("encode", "decode")


def __dir__():
    return __all__


def _import_tomllib():
    try:
        import tomllib

        return tomllib
    except ImportError:
        pass

    try:
        import tomli

        return tomli
    except ImportError:
        raise ImportError(
            "`geomspec.toml.decode` requires `tomli` be installed.\n\n"
            "Please either `pip` or `conda` install it as follows:\n\n"
            "  $ python -m pip install tomli   # using pip\n"
            "  $ conda install tomli           # or using conda"
        ) from None


def _import_tomli_w():
    try:
        import tomli_w

        return tomli_w
    except ImportError:
        raise ImportError(
            "`geomspec.toml.encode` requires `tomli_w` be installed.\n\n"
            "Please either `pip` or `conda` install it as follows:\n\n"
            "  $ python -m pip install tomli_w   # using pip\n"
            "  $ conda install tomli_w           # or using conda"
        ) from None


def encode(geometry: Geometry) -> bytes:
    """Serialize a geometry as a TOML document.

    The geometry becomes the top-level table. Members of a
    ``GeometryCollection`` are written as an array of tables.

    See Also
    --------
    decode
    """
    toml = _import_tomli_w()
    return toml.dumps(_encode(geometry)).encode("utf-8")


def decode(
    buf: Union[bytes, str],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_unknown: bool = False,
) -> Geometry:
    """Deserialize a geometry from TOML.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    max_depth : int, optional
        The maximum number of nested geometry levels. Defaults to 64.
    allow_unknown : bool, optional
        Whether to decode tables with an unrecognized ``type`` as an
        `UnknownGeometry` rather than erroring. Defaults to ``False``.

    Returns
    -------
    geometry : Geometry
        The deserialized geometry.

    See Also
    --------
    encode
    """
    toml = _import_tomllib()
    if isinstance(buf, str):
        str_buf = buf
    elif isinstance(buf, (bytes, bytearray)):
        str_buf = buf.decode("utf-8")
    else:
        # call `memoryview` first, since `bytes(1)` is actually valid
        str_buf = bytes(memoryview(buf)).decode("utf-8")
    try:
        obj = toml.loads(str_buf)
    except toml.TOMLDecodeError as exc:
        raise _DecodeError(str(exc)) from None

    return _decode(obj, max_depth=max_depth, allow_unknown=allow_unknown)
