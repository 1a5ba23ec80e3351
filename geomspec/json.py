from typing import Any, Dict, Union

import msgspec

from ._codec import DEFAULT_MAX_DEPTH, Decoder as _GeometryDecoder, encode as _encode
from ._core import AnyGeometry, Geometry

__all__ = ("Encoder", "Decoder", "encode", "decode", "schema")


def __dir__():
    return __all__


class Encoder:
    """A JSON geometry encoder.

    Coordinates are always written with a fractional part, so ``Point([1,
    2])`` encodes as ``{"type":"Point","coordinates":[1.0,2.0]}``.
    """

    __slots__ = ("_encoder",)

    def __init__(self):
        self._encoder = msgspec.json.Encoder()

    def encode(self, geometry: Geometry) -> bytes:
        """Serialize a geometry as JSON.

        Parameters
        ----------
        geometry : Geometry
            The geometry to serialize.

        Returns
        -------
        data : bytes
            The serialized geometry.
        """
        return self._encoder.encode(_encode(geometry))


class Decoder:
    """A JSON geometry decoder.

    Parameters
    ----------
    max_depth : int, optional
        The maximum number of nested geometry levels. Defaults to 64.
    allow_unknown : bool, optional
        Whether to decode objects with an unrecognized ``type`` as an
        `UnknownGeometry` rather than erroring. Defaults to ``False``.
    """

    __slots__ = ("_decoder", "_geometry_decoder")

    def __init__(
        self, *, max_depth: int = DEFAULT_MAX_DEPTH, allow_unknown: bool = False
    ):
        self._decoder = msgspec.json.Decoder()
        self._geometry_decoder = _GeometryDecoder(
            max_depth=max_depth, allow_unknown=allow_unknown
        )

    @property
    def max_depth(self) -> int:
        return self._geometry_decoder.max_depth

    @property
    def allow_unknown(self) -> bool:
        return self._geometry_decoder.allow_unknown

    def decode(self, buf: Union[bytes, str]) -> Geometry:
        """Deserialize a geometry from JSON.

        Parameters
        ----------
        buf : bytes-like or str
            The message to decode.

        Returns
        -------
        geometry : Geometry

        Raises
        ------
        msgspec.DecodeError
            If ``buf`` isn't valid JSON.
        GeometryError
            If ``buf`` is valid JSON, but not a valid geometry.
        """
        return self._geometry_decoder.decode(self._decoder.decode(buf))


_encoder = Encoder()
_decoder = Decoder()


def encode(geometry: Geometry) -> bytes:
    """Serialize a geometry as JSON. See `Encoder.encode`."""
    return _encoder.encode(geometry)


def decode(
    buf: Union[bytes, str],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_unknown: bool = False,
) -> Geometry:
    """Deserialize a geometry from JSON. See `Decoder.decode`."""
    if max_depth == DEFAULT_MAX_DEPTH and not allow_unknown:
        return _decoder.decode(buf)
    return Decoder(max_depth=max_depth, allow_unknown=allow_unknown).decode(buf)


def schema() -> Dict[str, Any]:
    """Generate a JSON Schema describing a GeoJSON geometry.

    Returns
    -------
    schema : dict
        The generated JSON Schema, as produced by `msgspec.json.schema`.
    """
    return msgspec.json.schema(AnyGeometry)
