"""Serialization of JavaScript Lint configuration files."""
import itertools
import os
import time
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from jsl_lint.errors import LintConfigError
from jsl_lint.file_utils import write_new_file
from jsl_lint.logging_config import get_logger
from jsl_lint.options import DEFAULT_OPTIONS, merge_options

logger = get_logger(__name__)

OUTPUT_FORMAT_DIRECTIVE = "+output-format __FILE__:__LINE__: __ERROR__"
CONFIG_ENCODING = "ascii"

_counter = itertools.count(1)


def render_config(files: Iterable[str], options: Mapping[str, bool]) -> str:
    """Render the configuration file content.

    Args:
        files: Paths or patterns to lint, in order
        options: Fully merged option table

    Returns:
        One directive per line, newline-terminated
    """
    lines = [f"{'+' if enabled else '-'}{name}" for name, enabled in options.items()]
    lines.append(OUTPUT_FORMAT_DIRECTIVE)
    lines.extend(f"+process {path}" for path in files)
    return "".join(f"{line}\n" for line in lines)


def write_config_file(
    target: Path,
    files: list[str],
    overrides: Mapping[str, Any] | None,
    defaults: Mapping[str, bool] = DEFAULT_OPTIONS,
) -> None:
    """Validate options and write the configuration file for one lint run.

    Nothing is written unless every override is a known option and the
    content can be encoded.

    Args:
        target: Path of the configuration file to create
        files: Normalized file list
        overrides: Caller option overrides
        defaults: Option table

    Raises:
        UnknownOptionError: If an override names an unknown option
        LintConfigError: If the content cannot be encoded as ASCII
    """
    options = merge_options(overrides, defaults)
    content = render_config(files, options)

    try:
        data = content.encode(CONFIG_ENCODING)
    except UnicodeEncodeError as e:
        raise LintConfigError(
            f"Configuration must be plain ASCII, offending text: {e.object[e.start:e.end]!r}"
        ) from e

    write_new_file(data, target)
    logger.debug(f"Wrote configuration file {target} ({len(files)} file(s))")


def new_config_path(directory: Path) -> Path:
    """Return a fresh, unique configuration file path in ``directory``.

    Args:
        directory: Directory that will hold the file

    Returns:
        Path named from the current time, the process id and a call counter
    """
    return directory / f"jsl-{time.time_ns()}-{os.getpid()}-{next(_counter)}.conf"
