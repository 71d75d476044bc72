"""
genORM Generator

Runs one generation: validate every object type, then render and write the
declaration artifact, then render and write the definition artifact.

The two writes are not transactional. If the definition artifact fails
after the declaration artifact was written, the declaration artifact stays
on disk.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from ._logging import get_logger
from .declaration import declaration_filename, generate_declaration
from .definition import definition_filename, generate_definition
from .output import ArtifactWriter, FileArtifactWriter, RootResolver, resolve_output_dir
from .schema import Config, TargetOptions, ValidatedObjectType
from .validator import validate_all

logger = get_logger("generator")


@dataclass(frozen=True)
class GeneratedArtifacts:
    """Where the two artifacts of a run were written."""
    declaration_path: str
    definition_path: str


def render(options: TargetOptions, object_types: Sequence[ValidatedObjectType]) -> Tuple[str, str]:
    """Render (declaration text, definition text) without writing anything."""
    declaration = generate_declaration(options.namespace, object_types)
    definition = generate_definition(options.namespace, options.file_prefix, object_types)
    return declaration, definition


def generate(
    config: Config,
    writer: Optional[ArtifactWriter] = None,
    resolvers: Optional[Mapping[str, RootResolver]] = None,
) -> Optional[GeneratedArtifacts]:
    """
    Generate the artifacts described by `config`.

    Args:
        config: Loaded config document
        writer: Artifact destination (default: files in the resolved output dir)
        resolvers: Root token resolvers (default: output.DEFAULT_ROOT_RESOLVERS)

    Returns:
        The written artifact locations, or None when the config has no
        target options.

    Raises:
        SchemaError: If any object type is invalid; nothing is written.
        OutputPathError: If the output root token is unknown; nothing is written.
        GenerationIOError: If an artifact cannot be written.
    """
    object_types = validate_all(config.object_types)

    options = config.target_options
    if options is None:
        logger.info("No cxx-options in config, nothing to generate")
        return None

    output_dir = resolve_output_dir(options, resolvers)
    if writer is None:
        writer = FileArtifactWriter(output_dir)

    declaration = generate_declaration(options.namespace, object_types)
    declaration_path = writer.write(declaration_filename(options.file_prefix), declaration)

    definition = generate_definition(options.namespace, options.file_prefix, object_types)
    definition_path = writer.write(definition_filename(options.file_prefix), definition)

    return GeneratedArtifacts(declaration_path, definition_path)
