from typing import Union

from msgspec import DecodeError as _DecodeError

from ._codec import DEFAULT_MAX_DEPTH, decode as _decode, encode as _encode
from ._core import Geometry

__all__ = ("encode", "decode")


def __dir__():
    return __all__


def _import_pyyaml(name):
    try:
        import yaml
    except ImportError:
        raise ImportError(
            f"`geomspec.yaml.{name}` requires PyYAML be installed.\n\n"
            "Please either `pip` or `conda` install it as follows:\n\n"
            "  $ python -m pip install pyyaml  # using pip\n"
            "  $ conda install pyyaml          # or using conda"
        ) from None
    else:
        return yaml


def encode(geometry: Geometry) -> bytes:
    """Serialize a geometry as YAML.

    Parameters
    ----------
    geometry : Geometry
        The geometry to serialize.

    Returns
    -------
    data : bytes
        The serialized geometry.

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    See Also
    --------
    decode
    """
    yaml = _import_pyyaml("encode")
    # Use the C extension if available
    Dumper = getattr(yaml, "CSafeDumper", yaml.SafeDumper)

    return yaml.dump_all(
        [_encode(geometry)],
        encoding="utf-8",
        Dumper=Dumper,
        allow_unicode=True,
        sort_keys=False,
    )


def decode(
    buf: Union[bytes, str],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_unknown: bool = False,
) -> Geometry:
    """Deserialize a geometry from YAML.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    max_depth : int, optional
        The maximum number of nested geometry levels. Defaults to 64.
    allow_unknown : bool, optional
        Whether to decode mappings with an unrecognized ``type`` as an
        `UnknownGeometry` rather than erroring. Defaults to ``False``.

    Returns
    -------
    geometry : Geometry
        The deserialized geometry.

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    PyYAML follows YAML 1.1, where a float needs a decimal point and a signed
    exponent. Scalars like ``1e3`` or ``1.0e3`` load as strings, so a position
    containing them fails with `InvalidPositionError`; write ``1.0e+3`` or
    ``1000`` instead. Output of `encode` is always read back as floats.

    See Also
    --------
    encode
    """
    yaml = _import_pyyaml("decode")
    # Use the C extension if available
    Loader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)
    if not isinstance(buf, (str, bytes)):
        # call `memoryview` first, since `bytes(1)` is actually valid
        buf = bytes(memoryview(buf))
    try:
        obj = yaml.load(buf, Loader)
    except yaml.YAMLError as exc:
        raise _DecodeError(str(exc)) from None

    return _decode(obj, max_depth=max_depth, allow_unknown=allow_unknown)
