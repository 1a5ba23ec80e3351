import pytest

import geomspec

from utils import GEOMETRIES


@pytest.fixture(params=GEOMETRIES, ids=lambda g: g.type)
def geometry(request):
    return request.param


@pytest.fixture(params=["json", "msgpack"])
def proto(request):
    if request.param == "json":
        return geomspec.json
    elif request.param == "msgpack":
        return geomspec.msgpack
