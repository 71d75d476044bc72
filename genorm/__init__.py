"""
genORM: C++ ORM code generator.

Reads a JSON description of object types and emits a matched pair of C++
artifacts (<prefix>.orm.h and <prefix>.orm.cc) for the genORM runtime.

Example usage:
    >>> from genorm import load_config, generate
    >>> config = load_config("orm.json")
    >>> generate(config)
"""

__version__ = "1.0.0"

# Schema model
from genorm.schema import (
    Kind,
    Member,
    ObjectType,
    TargetOptions,
    Config,
    ValidatedMember,
    ValidatedObjectType,
)

# Exceptions
from genorm.types import (
    ErrorCode,
    GenOrmError,
    ConfigError,
    SchemaError,
    OutputPathError,
    GenerationIOError,
)

# Generation
from genorm.mapping import KIND_FACTS, facts_for, member_facts, object_facts
from genorm.validator import validate, validate_all
from genorm.declaration import DeclarationGenerator, generate_declaration
from genorm.definition import DefinitionGenerator, generate_definition
from genorm.config import load_config, parse_config
from genorm.output import (
    ArtifactWriter,
    FileArtifactWriter,
    MemoryArtifactWriter,
    resolve_output_dir,
)
from genorm.generator import GeneratedArtifacts, generate, render

# Logging configuration
from genorm._logging import configure_logging

__all__ = [
    "__version__",
    
    # Schema model
    "Kind",
    "Member",
    "ObjectType",
    "TargetOptions",
    "Config",
    "ValidatedMember",
    "ValidatedObjectType",
    
    # Exceptions
    "ErrorCode",
    "GenOrmError",
    "ConfigError",
    "SchemaError",
    "OutputPathError",
    "GenerationIOError",
    
    # Generation
    "KIND_FACTS",
    "facts_for",
    "member_facts",
    "object_facts",
    "validate",
    "validate_all",
    "DeclarationGenerator",
    "generate_declaration",
    "DefinitionGenerator",
    "generate_definition",
    "load_config",
    "parse_config",
    "ArtifactWriter",
    "FileArtifactWriter",
    "MemoryArtifactWriter",
    "resolve_output_dir",
    "GeneratedArtifacts",
    "generate",
    "render",
    
    # Logging
    "configure_logging",
]
