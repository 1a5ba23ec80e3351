import os
import re

from setuptools import setup

# Read the version without importing the package, which requires msgspec
with open(os.path.join("geomspec", "_version.py")) as f:
    version = re.search(r"^__version__ = \"([^\"]+)\"", f.read(), re.M).group(1)

yaml_deps = ["pyyaml"]
toml_deps = ['tomli ; python_version < "3.11"', "tomli_w"]
bson_deps = ["pymongo"]

setup(
    name="geomspec",
    version=version,
    description="Validated GeoJSON geometry encoding and decoding, built on msgspec",
    license="BSD",
    packages=["geomspec"],
    package_data={"geomspec": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18"],
    extras_require={
        "yaml": yaml_deps,
        "toml": toml_deps,
        "bson": bson_deps,
        "test": ["pytest"] + yaml_deps + toml_deps + bson_deps,
    },
)
