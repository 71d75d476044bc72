"""
genORM Output

Resolves the output directory from the target options and persists the
generated artifacts. Root tokens are resolved through a registry of
callables so callers can plug in their own resolution.
"""

import os
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

from ._logging import get_logger
from .schema import TargetOptions
from .types import ErrorCode, GenerationIOError, OutputPathError

logger = get_logger("output")

REPOSITORY_ROOT_TOKEN = "GIT_ROOT"

RootResolver = Callable[[], Path]


def current_directory_root() -> Path:
    """Placeholder resolution for the repository root: the working directory."""
    return Path(".")


DEFAULT_ROOT_RESOLVERS: Dict[str, RootResolver] = {
    REPOSITORY_ROOT_TOKEN: current_directory_root,
}


def resolve_output_dir(
    options: TargetOptions,
    resolvers: Optional[Mapping[str, RootResolver]] = None,
) -> Path:
    """
    Resolve the directory the artifacts are written to.

    Raises:
        OutputPathError: If the root token is not registered.
    """
    if resolvers is None:
        resolvers = DEFAULT_ROOT_RESOLVERS

    root = Path(".")
    token = options.output_root_token
    if token is not None:
        resolver = resolvers.get(token)
        if resolver is None:
            raise OutputPathError(ErrorCode.UNKNOWN_ROOT, f"Unknown root: {token}")
        root = resolver()

    if options.output_dir:
        return root / options.output_dir
    return root


class ArtifactWriter:
    """Destination for generated artifacts."""

    def write(self, filename: str, text: str) -> str:
        """Persist `text` as `filename`; return where it went."""
        raise NotImplementedError


class FileArtifactWriter(ArtifactWriter):
    """
    Write artifacts into a directory.

    Each file is written to a temporary sibling and moved into place, so a
    failed write never leaves a truncated artifact behind.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def write(self, filename: str, text: str) -> str:
        path = self.directory / filename
        tmp = self.directory / (filename + ".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            os.replace(tmp, path)
        except OSError as e:
            if tmp.exists():
                tmp.unlink()
            raise GenerationIOError(ErrorCode.WRITE_FAILED, f"Unable to write {path}: {e}") from e
        logger.debug("Wrote %s (%d bytes)", path, len(text))
        return str(path)


class MemoryArtifactWriter(ArtifactWriter):
    """Keep artifacts in memory, keyed by filename."""

    def __init__(self):
        self.artifacts: Dict[str, str] = {}

    def write(self, filename: str, text: str) -> str:
        self.artifacts[filename] = text
        return filename
