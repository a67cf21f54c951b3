"""Extraction of lint results from JavaScript Lint output."""
import re

from jsl_lint.logging_config import get_logger
from jsl_lint.types import LintResult, ResultKind, Violation

logger = get_logger(__name__)

ERRORS_MARKER = "error(s)"
WARNINGS_MARKER = "warning(s)"

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
# Matches the "__FILE__:__LINE__: __ERROR__" output format
_FINDING_RE = re.compile(r"^(?P<file>.+?):(?P<line>\d+): (?P<message>.+)$")


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else None


def is_summary_line(line: str) -> bool:
    """Check whether a line is the linter's error/warning summary."""
    return ERRORS_MARKER in line and WARNINGS_MARKER in line


def parse_summary_line(line: str) -> tuple[int | None, int | None] | None:
    """Parse a summary line such as ``2 error(s), 5 warning(s)``.

    Counts are read from the leading integer of each comma-separated part;
    a part without one yields None for that count.

    Args:
        line: Single line of linter output

    Returns:
        Tuple of (errors, warnings), or None if the line is not a summary line
    """
    if not is_summary_line(line):
        return None

    parts = line.replace(f" {ERRORS_MARKER}", "").replace(f" {WARNINGS_MARKER}", "").split(",")
    errors = _leading_int(parts[0])
    warnings = _leading_int(parts[1]) if len(parts) > 1 else None
    return errors, warnings


def parse_findings(output: str) -> list[Violation]:
    """Parse per-finding lines from linter output.

    Args:
        output: Complete standard output of the linter

    Returns:
        List of findings in output order
    """
    findings: list[Violation] = []
    for raw_line in output.splitlines():
        line = raw_line.strip()
        if not line or is_summary_line(line):
            continue

        match = _FINDING_RE.match(line)
        if not match:
            continue

        message = match.group("message")
        prefix = message.split(":", 1)[0].lower()
        findings.append(
            {
                "file": match.group("file"),
                "line": int(match.group("line")),
                "type": "error" if "error" in prefix else "warning",
                "message": message,
            }
        )
    return findings


class OutputCollector:
    """Accumulates linter output chunks and builds the final result.

    Lines split across stdout chunks are reassembled before they are scanned,
    and the last complete summary line wins. Any standard error output turns
    the run into a tool error, whatever order the streams arrived in.
    """

    def __init__(self) -> None:
        self._stdout_parts: list[str] = []
        self._stderr_parts: list[str] = []
        self._pending = ""
        self._summary_line: str | None = None

    def feed_stdout(self, chunk: str) -> None:
        """Consume a chunk of standard output."""
        if not chunk:
            return
        self._stdout_parts.append(chunk)

        lines = (self._pending + chunk).split("\n")
        self._pending = lines.pop()
        for line in lines:
            self._scan(line)

    def feed_stderr(self, chunk: str) -> None:
        """Consume a chunk of standard error."""
        if chunk:
            self._stderr_parts.append(chunk)

    @property
    def stdout(self) -> str:
        return "".join(self._stdout_parts)

    @property
    def stderr(self) -> str:
        return "".join(self._stderr_parts)

    def _scan(self, line: str) -> None:
        line = line.rstrip("\r")
        if is_summary_line(line):
            self._summary_line = line

    def _flush(self) -> None:
        if self._pending:
            self._scan(self._pending)
            self._pending = ""

    def result(self, returncode: int | None = None, elapsed_seconds: float = 0.0) -> LintResult:
        """Build the result from everything consumed so far.

        Args:
            returncode: Exit status of the linter, recorded but not interpreted
            elapsed_seconds: Wall-clock duration of the run

        Returns:
            LintResult describing the run
        """
        self._flush()
        stderr = self.stderr
        stdout = self.stdout

        if stderr:
            logger.debug("Linter wrote to standard error, treating run as a tool error")
            return LintResult(
                kind=ResultKind.TOOL_ERROR,
                errors=1,
                warnings=0,
                message=stderr,
                returncode=returncode,
                elapsed_seconds=elapsed_seconds,
            )

        if self._summary_line is None:
            logger.warning("No error/warning summary found in linter output")
            return LintResult(
                kind=ResultKind.INCONCLUSIVE,
                errors=None,
                warnings=None,
                message=stdout,
                returncode=returncode,
                elapsed_seconds=elapsed_seconds,
            )

        # parse_summary_line never returns None for a line that passed is_summary_line
        errors, warnings = parse_summary_line(self._summary_line) or (None, None)
        if errors is None or warnings is None:
            logger.warning(f"Could not read counts from summary line: {self._summary_line!r}")
            kind = ResultKind.UNPARSEABLE
        else:
            kind = ResultKind.SUMMARY

        return LintResult(
            kind=kind,
            errors=errors,
            warnings=warnings,
            message=stdout,
            findings=parse_findings(stdout),
            returncode=returncode,
            elapsed_seconds=elapsed_seconds,
        )
