"""Input validation functions."""
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from jsl_lint.errors import LintConfigError, UnknownOptionError


def validate_options(options: Mapping[str, Any], defaults: Mapping[str, bool]) -> None:
    """Validate that every option name exists in the option table.

    Args:
        options: Caller-supplied option overrides
        defaults: Option table holding every recognised name

    Raises:
        UnknownOptionError: If any option name is not recognised
    """
    unknown = [name for name in options if name not in defaults]
    if unknown:
        raise UnknownOptionError(unknown)


def normalize_files(files: str | os.PathLike[str] | Iterable[str | os.PathLike[str]]) -> list[str]:
    """Normalize a single path or a sequence of paths into a list of strings.

    Glob patterns are passed through untouched; JavaScript Lint expands them.

    Args:
        files: A path, a glob pattern, or an iterable of either

    Returns:
        List of path strings in the original order

    Raises:
        LintConfigError: If the list is empty or an entry cannot be written
            as a single ``+process`` directive
    """
    if isinstance(files, (str, os.PathLike)):
        items = [files]
    else:
        items = list(files)

    if not items:
        raise LintConfigError("At least one file or pattern is required")

    normalized = []
    for item in items:
        path = os.fspath(item)
        if not path.strip():
            raise LintConfigError("File paths cannot be empty strings")
        if "\n" in path or "\r" in path:
            raise LintConfigError(f"File path contains a line break: {path!r}")
        if "\x00" in path:
            raise LintConfigError(f"File path contains a NUL byte: {path!r}")
        normalized.append(path)
    return normalized


def validate_executable(executable: Path) -> None:
    """Validate the linter executable path.

    A missing executable is reported by the runner as a launch error, so only
    paths that can never be executed are rejected here.

    Args:
        executable: Path to validate

    Raises:
        LintConfigError: If the path contains a NUL byte or is a directory
    """
    if "\x00" in str(executable):
        raise LintConfigError(f"Linter executable path contains a NUL byte: {executable!r}")

    if executable.is_dir():
        raise LintConfigError(f"Linter executable is a directory: {executable}")


def validate_config_dir(config_dir: Path) -> None:
    """Validate the directory that receives temporary configuration files.

    Args:
        config_dir: Path to validate

    Raises:
        LintConfigError: If path does not exist or is not a directory
    """
    if not config_dir.exists():
        raise LintConfigError(f"Configuration directory does not exist: {config_dir}")

    if not config_dir.is_dir():
        raise LintConfigError(f"Configuration directory is not a directory: {config_dir}")
