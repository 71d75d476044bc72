"""
pytest configuration and fixtures for genORM tests.
"""
import json
import logging

import pytest

from genorm.schema import Member, ObjectType, TargetOptions, Config
from genorm.output import MemoryArtifactWriter
from genorm.validator import validate


@pytest.fixture(autouse=True)
def reset_genorm_logger():
    """Drop handlers the CLI attaches so they don't outlive a test's capture."""
    yield
    genorm_logger = logging.getLogger("genorm")
    for h in genorm_logger.handlers[:]:
        if not isinstance(h, logging.NullHandler):
            genorm_logger.removeHandler(h)
    genorm_logger.setLevel(logging.NOTSET)


@pytest.fixture
def point_type() -> ObjectType:
    """Point { x: INT32, y: INT32 indexed }."""
    return ObjectType(
        name="Point",
        members=(
            Member(name="x", kind="INT32"),
            Member(name="y", kind="INT32", indexed=True),
        ),
    )


@pytest.fixture
def sample_type() -> ObjectType:
    """Object type using every kind and flag."""
    return ObjectType(
        name="MyObject",
        description="Example object",
        members=(
            Member(name="a", kind="INT32", description="Plain value"),
            Member(name="b", kind="INT64", allow_null=True, indexed=True),
            Member(name="c", kind="BYTEARRAY"),
        ),
    )


@pytest.fixture
def validated_point(point_type):
    """Validated Point."""
    return validate(point_type)


@pytest.fixture
def validated_sample(sample_type):
    """Validated MyObject."""
    return validate(sample_type)


@pytest.fixture
def options() -> TargetOptions:
    """Target options without an output root."""
    return TargetOptions(file_prefix="TestProj", namespace="testproj")


@pytest.fixture
def point_config(point_type, options) -> Config:
    """Config generating Point only."""
    return Config(version=1, target_options=options, object_types=(point_type,))


@pytest.fixture
def memory_writer() -> MemoryArtifactWriter:
    """Writer capturing artifacts in memory."""
    return MemoryArtifactWriter()


@pytest.fixture
def config_document() -> dict:
    """A valid config document."""
    return {
        "genORM-config-version": 1,
        "cxx-options": {
            "file-prefix": "TestProj",
            "namespace": "testproj",
            "output-dir": "out",
        },
        "object-types": [
            {
                "name": "Point",
                "description": "A point",
                "members": [
                    {"name": "x", "type": "INT32"},
                    {"name": "y", "type": "INT32", "index": True},
                ],
            }
        ],
    }


@pytest.fixture
def write_config(tmp_path):
    """Write a config document to a file and return its path."""
    def _write(document, name="orm.json"):
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document)
        else:
            path.write_text(json.dumps(document))
        return path
    return _write
