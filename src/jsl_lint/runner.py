"""Running JavaScript Lint and managing the lifecycle of a lint run."""
import os
import shutil
import subprocess
import tempfile
import threading
import time
from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import Future
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsl_lint.config import Config, get_default_config
from jsl_lint.config_file import new_config_path, write_config_file
from jsl_lint.file_utils import remove_file
from jsl_lint.logging_config import get_logger
from jsl_lint.metrics import RunMetrics
from jsl_lint.parser import OutputCollector
from jsl_lint.types import LintResult, ResultKind
from jsl_lint.validation import normalize_files, validate_config_dir, validate_executable

logger = get_logger(__name__)

EXECUTABLE_ENV_VAR = "JSL_LINT_EXECUTABLE"
EXECUTABLE_NAME = "jsl"
BUNDLED_EXECUTABLE = Path(__file__).parent / "vendor" / "javascriptlint" / EXECUTABLE_NAME

FileArg = str | os.PathLike[str] | Iterable[str | os.PathLike[str]]
LintCallback = Callable[[LintResult], Any]


@dataclass
class _Invocation:
    """A configured lint run whose configuration file is on disk."""

    executable: Path
    config_path: Path
    timeout_seconds: float | None
    metrics: RunMetrics


def resolve_executable(explicit: str | os.PathLike[str] | None = None) -> Path:
    """Locate the jsl executable.

    Lookup order: explicit path, the JSL_LINT_EXECUTABLE environment variable,
    the copy bundled next to this package, then ``jsl`` on PATH.

    Args:
        explicit: Path given by the caller or config file

    Returns:
        Path to the executable. When nothing is found the bundled location is
        returned so that the launch error names it.
    """
    if explicit:
        return Path(explicit)

    from_env = os.environ.get(EXECUTABLE_ENV_VAR)
    if from_env:
        return Path(from_env)

    if BUNDLED_EXECUTABLE.exists():
        return BUNDLED_EXECUTABLE

    on_path = shutil.which(EXECUTABLE_NAME)
    if on_path:
        return Path(on_path)

    return BUNDLED_EXECUTABLE


def _configure(
    files: FileArg,
    options: Mapping[str, Any] | None,
    config: Config | None,
    metrics: RunMetrics | None,
) -> _Invocation:
    """Validate inputs and write the configuration file.

    Raises:
        LintConfigError: If files, options, or paths are invalid. No file is
            left on disk in that case.
    """
    config = config or get_default_config()
    metrics = metrics or RunMetrics()

    file_list = normalize_files(files)
    overrides = {**config.options, **(options or {})}

    executable = resolve_executable(config.executable)
    validate_executable(executable)

    config_dir = Path(config.config_dir) if config.config_dir else Path(tempfile.gettempdir())
    validate_config_dir(config_dir)

    config_path = new_config_path(config_dir)
    write_config_file(config_path, file_list, overrides)

    metrics.files_requested = len(file_list)
    metrics.options_overridden = len(overrides)

    return _Invocation(
        executable=executable,
        config_path=config_path,
        timeout_seconds=config.timeout_seconds,
        metrics=metrics,
    )


def _invoke(invocation: _Invocation) -> LintResult:
    """Run the linter against a written configuration file.

    The exit status is recorded but never decides the outcome; only the
    linter's output does.
    """
    cmd = [str(invocation.executable), "-conf", str(invocation.config_path)]
    logger.info(f"Running {' '.join(cmd)}")

    started = time.monotonic()
    try:
        completed = subprocess.run(
            cmd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=invocation.timeout_seconds,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"Linter timed out after {invocation.timeout_seconds}s")
        return LintResult(
            kind=ResultKind.TIMEOUT,
            errors=1,
            warnings=0,
            message=f"Linter timed out after {invocation.timeout_seconds}s",
            elapsed_seconds=time.monotonic() - started,
        )
    except (OSError, ValueError) as e:
        # ValueError: the OS rejected the argument list (embedded NUL byte)
        logger.error(f"Could not start linter {invocation.executable}: {e}")
        return LintResult(
            kind=ResultKind.LAUNCH_ERROR,
            errors=1,
            warnings=0,
            message=f"Could not start linter {invocation.executable}: {e}",
            elapsed_seconds=time.monotonic() - started,
        )

    logger.info(f"Linter exited with status {completed.returncode}")

    collector = OutputCollector()
    collector.feed_stdout(completed.stdout or "")
    collector.feed_stderr(completed.stderr or "")

    invocation.metrics.stdout_bytes = len(collector.stdout)
    invocation.metrics.stderr_bytes = len(collector.stderr)

    return collector.result(
        returncode=completed.returncode, elapsed_seconds=time.monotonic() - started
    )


def _execute(invocation: _Invocation) -> LintResult:
    """Run the linter, then delete the configuration file whatever happened."""
    try:
        result = _invoke(invocation)
    finally:
        if remove_file(invocation.config_path):
            logger.debug(f"Removed configuration file {invocation.config_path}")

    invocation.metrics.findings = len(result.findings)
    invocation.metrics.finish()
    return result


def run_lint(
    files: FileArg,
    options: Mapping[str, Any] | None = None,
    *,
    config: Config | None = None,
    metrics: RunMetrics | None = None,
) -> LintResult:
    """Lint files and wait for the result.

    Args:
        files: A path or glob pattern, or an iterable of them
        options: Option overrides, applied over config.options
        config: Configuration; defaults are used when omitted
        metrics: Optional metrics object to fill in

    Returns:
        LintResult for the run

    Raises:
        LintConfigError: If inputs are invalid, before anything is spawned
    """
    return _execute(_configure(files, options, config, metrics))


def lint(
    files: FileArg,
    options: Mapping[str, Any] | None = None,
    callback: LintCallback | None = None,
    *,
    config: Config | None = None,
) -> "Future[LintResult]":
    """Lint files in the background and report through a callback.

    Inputs are validated and the configuration file is written before this
    function returns, so configuration errors raise here and the callback is
    never called for them. The linter then runs on a worker thread. Once it
    exits and the configuration file is deleted, the returned future
    completes and ``callback`` is called exactly once with the result. An
    unexpected exception on the worker thread is logged and delivered as an
    ``internal_error`` result; the future never holds an exception.

    The future is already running when returned and cannot be cancelled.

    Args:
        files: A path or glob pattern, or an iterable of them
        options: Option overrides, applied over config.options
        callback: Called with the LintResult when the run completes
        config: Configuration; defaults are used when omitted

    Returns:
        Future resolving to the LintResult

    Raises:
        LintConfigError: If inputs are invalid
    """
    invocation = _configure(files, options, config, None)

    future: Future[LintResult] = Future()
    future.set_running_or_notify_cancel()

    if callback is not None:
        future.add_done_callback(_deliver_to(callback))

    def worker() -> None:
        try:
            result = _execute(invocation)
        except Exception as e:
            logger.exception("Lint run failed unexpectedly")
            result = _internal_error(e)
        future.set_result(result)

    threading.Thread(
        target=worker, name=f"jsl-lint-{invocation.config_path.stem}", daemon=False
    ).start()
    return future


def _internal_error(error: Exception) -> LintResult:
    """Build the result delivered when a background run raises."""
    return LintResult(
        kind=ResultKind.INTERNAL_ERROR,
        errors=1,
        warnings=0,
        message=f"Lint run failed unexpectedly: {type(error).__name__}: {error}",
    )


def _deliver_to(callback: LintCallback) -> Callable[["Future[LintResult]"], None]:
    def deliver(future: "Future[LintResult]") -> None:
        callback(future.result())

    return deliver
