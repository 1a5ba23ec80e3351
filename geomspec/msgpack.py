from typing import Union

import msgspec

from ._codec import DEFAULT_MAX_DEPTH, Decoder as _GeometryDecoder, encode as _encode
from ._core import Geometry

__all__ = ("Encoder", "Decoder", "encode", "decode")


def __dir__():
    return __all__


class Encoder:
    """A MessagePack geometry encoder. Coordinates are written as float64."""

    __slots__ = ("_encoder",)

    def __init__(self):
        self._encoder = msgspec.msgpack.Encoder()

    def encode(self, geometry: Geometry) -> bytes:
        return self._encoder.encode(_encode(geometry))


class Decoder:
    """A MessagePack geometry decoder.

    Parameters
    ----------
    max_depth : int, optional
        The maximum number of nested geometry levels. Defaults to 64.
    allow_unknown : bool, optional
        Whether to decode maps with an unrecognized ``type`` as an
        `UnknownGeometry` rather than erroring. Defaults to ``False``.
    """

    __slots__ = ("_decoder", "_geometry_decoder")

    def __init__(
        self, *, max_depth: int = DEFAULT_MAX_DEPTH, allow_unknown: bool = False
    ):
        self._decoder = msgspec.msgpack.Decoder()
        self._geometry_decoder = _GeometryDecoder(
            max_depth=max_depth, allow_unknown=allow_unknown
        )

    @property
    def max_depth(self) -> int:
        return self._geometry_decoder.max_depth

    @property
    def allow_unknown(self) -> bool:
        return self._geometry_decoder.allow_unknown

    def decode(self, buf: Union[bytes, bytearray, memoryview]) -> Geometry:
        """Deserialize a geometry from MessagePack.

        Raises ``msgspec.DecodeError`` if ``buf`` is malformed, or a
        `GeometryError` if it doesn't hold a valid geometry.
        """
        return self._geometry_decoder.decode(self._decoder.decode(buf))


_encoder = Encoder()
_decoder = Decoder()


def encode(geometry: Geometry) -> bytes:
    """Serialize a geometry as MessagePack."""
    return _encoder.encode(geometry)


def decode(
    buf: Union[bytes, bytearray, memoryview],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_unknown: bool = False,
) -> Geometry:
    """Deserialize a geometry from MessagePack. See `Decoder.decode`."""
    if max_depth == DEFAULT_MAX_DEPTH and not allow_unknown:
        return _decoder.decode(buf)
    return Decoder(max_depth=max_depth, allow_unknown=allow_unknown).decode(buf)
