"""jsl-lint: run JavaScript Lint from Python."""

from jsl_lint.__version__ import __version__
from jsl_lint.config import Config, get_default_config, load_config
from jsl_lint.errors import LintConfigError, UnknownOptionError
from jsl_lint.options import DEFAULT_OPTIONS
from jsl_lint.runner import lint, run_lint
from jsl_lint.types import LintResult, ResultKind, Violation

__all__ = [
    "__version__",
    "Config",
    "load_config",
    "get_default_config",
    "lint",
    "run_lint",
    "DEFAULT_OPTIONS",
    "LintConfigError",
    "UnknownOptionError",
    "LintResult",
    "ResultKind",
    "Violation",
]
