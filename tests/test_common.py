import msgspec
import pytest

import geomspec
from geomspec import GeometryCollection, Point, UnknownGeometry

from utils import nested_collection


def test_roundtrip(proto, geometry):
    msg = proto.encode(geometry)
    assert isinstance(msg, bytes)
    assert proto.decode(msg) == geometry


def test_roundtrip_with_decoder_objects(proto, geometry):
    enc = proto.Encoder()
    dec = proto.Decoder()
    assert dec.decode(enc.encode(geometry)) == geometry


def test_encode_matches_document(proto, geometry):
    # Both adapters serialize exactly the document produced by `encode`
    msg = proto.encode(geometry)
    doc = geomspec.encode(geometry)
    if proto is geomspec.json:
        assert msgspec.json.decode(msg) == doc
    else:
        assert msgspec.msgpack.decode(msg) == doc


def test_integer_coordinates_encode_as_floats(proto):
    msg = proto.encode(Point([1, 2]))
    assert proto.encode(Point([1.0, 2.0])) == msg


def test_decode_accepts_integer_coordinates(proto):
    if proto is geomspec.json:
        msg = msgspec.json.encode({"type": "Point", "coordinates": [1, 2]})
    else:
        msg = msgspec.msgpack.encode({"type": "Point", "coordinates": [1, 2]})
    assert proto.decode(msg) == Point([1.0, 2.0])


def test_decode_unknown_type(proto):
    msg = proto.encode(UnknownGeometry("Curve"))
    with pytest.raises(geomspec.InvalidTypeError):
        proto.decode(msg)
    assert proto.decode(msg, allow_unknown=True) == UnknownGeometry("Curve")


def test_decode_max_depth(proto):
    doc = nested_collection(5)
    if proto is geomspec.json:
        msg = msgspec.json.encode(doc)
    else:
        msg = msgspec.msgpack.encode(doc)
    assert isinstance(proto.decode(msg), GeometryCollection)
    with pytest.raises(geomspec.InvalidGeometrySequenceError):
        proto.decode(msg, max_depth=4)
    with pytest.raises(geomspec.InvalidGeometrySequenceError):
        proto.Decoder(max_depth=4).decode(msg)


def test_decode_malformed(proto):
    with pytest.raises(msgspec.DecodeError):
        proto.decode(b"\xc1")
