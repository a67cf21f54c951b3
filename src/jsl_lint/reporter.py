"""Report formatting and output."""
import json

from jsl_lint.metrics import RunMetrics
from jsl_lint.types import LintResult, ResultKind

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_FAILURE = 2

_KIND_TITLES = {
    ResultKind.TOOL_ERROR: "Linter reported an error",
    ResultKind.LAUNCH_ERROR: "Linter could not be started",
    ResultKind.TIMEOUT: "Linter timed out",
    ResultKind.INCONCLUSIVE: "Linter produced no summary",
    ResultKind.UNPARSEABLE: "Linter summary could not be read",
    ResultKind.INTERNAL_ERROR: "Lint run failed unexpectedly",
}


def format_detailed_report(result: LintResult, metrics: RunMetrics) -> str:
    """Format a result as a human-readable report.

    Args:
        result: Result of the lint run
        metrics: Run metrics

    Returns:
        Formatted report string
    """
    lines = []
    lines.append("=" * 70)
    lines.append("JAVASCRIPT LINT REPORT")
    lines.append("=" * 70)
    lines.append("")

    if result.kind in _KIND_TITLES:
        lines.append(f"[FAILED] {_KIND_TITLES[result.kind]}")
        message = result.message.strip()
        if message:
            for message_line in message.splitlines():
                lines.append(f"   {message_line}")
        lines.append("")

    if result.findings:
        current_file = None
        for finding in result.findings:
            if finding["file"] != current_file:
                current_file = finding["file"]
                lines.append(f"[FILE] {current_file}")
            lines.append(f"   [{finding['type'].upper()}] (line {finding['line']})")
            lines.append(f"      {finding['message']}")
        lines.append("")

    if result.kind is ResultKind.SUMMARY:
        status = "[OK]" if result.ok else "[ISSUES]"
        lines.append(f"{status} {result.errors} error(s), {result.warnings} warning(s)")
        lines.append("")

    lines.append("=" * 70)
    lines.append("RUN METRICS")
    lines.append("=" * 70)
    lines.append(f"Elapsed time: {metrics.elapsed_seconds:.2f}s")
    lines.append(f"Files requested: {metrics.files_requested}")
    lines.append(f"Options overridden: {metrics.options_overridden}")
    lines.append(f"Findings parsed: {metrics.findings}")
    lines.append("")

    return "\n".join(lines)


def format_json_report(result: LintResult, metrics: RunMetrics) -> str:
    """Format a result as JSON.

    Args:
        result: Result of the lint run
        metrics: Run metrics

    Returns:
        JSON string
    """
    report = {
        "result": result.to_dict(),
        "summary": get_summary(result),
        "metrics": metrics.to_dict(),
    }

    return json.dumps(report, indent=2)


def get_exit_code(result: LintResult) -> int:
    """Get exit code based on a result.

    Args:
        result: Result of the lint run

    Returns:
        0 if clean, 1 if errors or warnings were reported, 2 if the linter
        failed or its output could not be interpreted
    """
    if result.kind is not ResultKind.SUMMARY:
        return EXIT_FAILURE
    return EXIT_CLEAN if result.ok else EXIT_FINDINGS


def get_summary(result: LintResult) -> dict[str, int]:
    """Get summary statistics.

    Args:
        result: Result of the lint run

    Returns:
        Dict with summary counts
    """
    files_with_findings = {finding["file"] for finding in result.findings}
    return {
        "errors": result.errors or 0,
        "warnings": result.warnings or 0,
        "findings": len(result.findings),
        "files_with_findings": len(files_with_findings),
    }
