"""Type definitions for jsl-lint."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypedDict


class Violation(TypedDict):
    """Single finding reported by the linter."""

    file: str
    line: int
    type: str
    message: str


class ResultKind(str, Enum):
    """How the outcome of a lint run was determined."""

    SUMMARY = "summary"
    UNPARSEABLE = "unparseable"
    TOOL_ERROR = "tool_error"
    LAUNCH_ERROR = "launch_error"
    TIMEOUT = "timeout"
    INCONCLUSIVE = "inconclusive"
    INTERNAL_ERROR = "internal_error"


@dataclass
class LintResult:
    """Outcome of a single lint run."""

    kind: ResultKind
    errors: int | None
    warnings: int | None
    message: str
    findings: list[Violation] = field(default_factory=list)
    returncode: int | None = None
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        """True if the linter ran and reported no errors and no warnings."""
        return self.kind is ResultKind.SUMMARY and self.errors == 0 and self.warnings == 0

    @property
    def failed(self) -> bool:
        """True if the linter did not produce a usable summary."""
        return self.kind not in (ResultKind.SUMMARY, ResultKind.UNPARSEABLE)

    def to_dict(self) -> dict[str, Any]:
        """Convert result to a JSON-serializable dictionary."""
        return {
            "kind": self.kind.value,
            "errors": self.errors,
            "warnings": self.warnings,
            "message": self.message,
            "findings": list(self.findings),
            "returncode": self.returncode,
            "elapsed_seconds": round(self.elapsed_seconds, 2),
        }
