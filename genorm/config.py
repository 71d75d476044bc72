"""
genORM Config Loader

Reads the JSON config document into the schema model.

Document layout:
    {
        "genORM-config-version": 1,
        "cxx-options": {
            "file-prefix": "TestProj",
            "namespace": "testproj",
            "output-dir-root": "GIT_ROOT",      (optional)
            "output-dir": "generated/"          (optional)
        },
        "object-types": [
            {
                "name": "MyObject",
                "description": "...",           (optional)
                "members": [
                    {"name": "a", "type": "INT32", "allow-null": true, "index": true}
                ]
            }
        ]
    }

Only the document structure is checked here. Kind strings, empty names and
empty member lists are reported by the validator.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema

from ._logging import get_logger
from .schema import Config, Member, ObjectType, TargetOptions
from .types import ErrorCode, GenOrmError

logger = get_logger("config")

SUPPORTED_CONFIG_VERSION = 1

_OPTIONAL_STRING = {"type": ["string", "null"]}
_OPTIONAL_BOOL = {"type": ["boolean", "null"]}

CONFIG_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["genORM-config-version", "object-types"],
    "properties": {
        "genORM-config-version": {"type": "integer", "minimum": 0},
        "cxx-options": {
            "type": "object",
            "required": ["file-prefix", "namespace"],
            "properties": {
                "file-prefix": {"type": "string"},
                "namespace": {"type": "string"},
                "output-dir-root": _OPTIONAL_STRING,
                "output-dir": _OPTIONAL_STRING,
            },
        },
        "object-types": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "members"],
                "properties": {
                    "name": {"type": "string"},
                    "description": _OPTIONAL_STRING,
                    "members": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name", "type"],
                            "properties": {
                                "name": {"type": "string"},
                                "description": _OPTIONAL_STRING,
                                "type": {"type": "string"},
                                "allow-null": _OPTIONAL_BOOL,
                                "index": _OPTIONAL_BOOL,
                            },
                        },
                    },
                },
            },
        },
    },
}


def _malformed(message: str) -> GenOrmError:
    return GenOrmError.from_code(ErrorCode.CONFIG_MALFORMED, f"Error while loading config: {message}")


def _member(doc: Dict[str, Any]) -> Member:
    return Member(
        name=doc["name"],
        kind=doc["type"],
        description=doc.get("description"),
        allow_null=bool(doc.get("allow-null") or False),
        indexed=bool(doc.get("index") or False),
    )


def _object_type(doc: Dict[str, Any]) -> ObjectType:
    return ObjectType(
        name=doc["name"],
        members=tuple(_member(m) for m in doc["members"]),
        description=doc.get("description"),
    )


def config_from_document(document: Any) -> Config:
    """
    Build a Config from an already-decoded JSON document.

    Raises:
        ConfigError: If the document does not have the expected structure.
    """
    try:
        jsonschema.validate(
            instance=document,
            schema=CONFIG_DOCUMENT_SCHEMA,
            cls=jsonschema.Draft7Validator,
        )
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise _malformed(f"{location}: {e.message}") from e

    version = document["genORM-config-version"]
    if version != SUPPORTED_CONFIG_VERSION:
        logger.warning("Unsupported config version %s (expected %s)", version, SUPPORTED_CONFIG_VERSION)

    target_options = None
    options = document.get("cxx-options")
    if options is not None:
        target_options = TargetOptions(
            file_prefix=options["file-prefix"],
            namespace=options["namespace"],
            output_root_token=options.get("output-dir-root"),
            output_dir=options.get("output-dir"),
        )

    return Config(
        version=version,
        target_options=target_options,
        object_types=tuple(_object_type(t) for t in document["object-types"]),
    )


def parse_config(text: str) -> Config:
    """Parse a config document from JSON text."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise _malformed(str(e)) from e
    return config_from_document(document)


def load_config(path: Union[str, Path]) -> Config:
    """Load a config document from disk."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise GenOrmError.from_code(ErrorCode.CONFIG_UNREADABLE, f"Unable to open: {path}, reason: {e}") from e
    logger.debug("Loaded config document %s", path)
    return parse_config(text)
