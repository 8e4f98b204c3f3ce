from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol

from .settings import PERSISTENT_FILE_ENV, get_settings

logger = logging.getLogger(__name__)

PathSource = Literal["argument", "environment", "default"]


@dataclass(frozen=True)
class ResolvedPath:
    path: str
    source: PathSource

    def describe_source(self) -> str:
        if self.source == "argument":
            return "from the 'filename' argument"
        if self.source == "environment":
            return f"from the '{PERSISTENT_FILE_ENV}' environment variable"
        return "by default"


class PathResolver(Protocol):
    def __call__(self, filename: str | os.PathLike[str] | None = None) -> ResolvedPath:
        ...


def default_store_path(default_filename: str) -> str:
    return os.path.join(os.path.expanduser("~"), default_filename)


def resolve_store_path(
    filename: str | os.PathLike[str] | None,
    persistent_file: str,
    default_filename: str,
) -> ResolvedPath:
    """
    Pick the backing file: explicit filename, then PERSISTENT_FILE, then
    ~/<default_filename>. Empty strings fall through to the next tier.
    """
    if filename is not None:
        explicit = os.fspath(filename)
        if explicit:
            return ResolvedPath(path=explicit, source="argument")
    if persistent_file:
        return ResolvedPath(path=persistent_file, source="environment")
    return ResolvedPath(path=default_store_path(default_filename), source="default")


class EnvPathResolver(PathResolver):
    """
    Resolves store paths from the process environment at call time.

    If env_file is set, that dotenv file is loaded before every lookup
    without overriding variables that are already exported.
    """

    def __init__(self, env_file: str | Path | None = None) -> None:
        self._env_file = env_file

    def __call__(self, filename: str | os.PathLike[str] | None = None) -> ResolvedPath:
        settings = get_settings(self._env_file)
        resolved = resolve_store_path(filename, settings.persistent_file, settings.default_filename)
        logger.debug("STORE PATH: %s (%s)", resolved.path, resolved.source)
        return resolved
