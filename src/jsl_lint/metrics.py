"""Metrics tracking for lint runs."""
import time
from dataclasses import dataclass, field


@dataclass
class RunMetrics:
    """Metrics collected during a lint run."""

    # Timing
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    # Input
    files_requested: int = 0
    options_overridden: int = 0

    # Output
    stdout_bytes: int = 0
    stderr_bytes: int = 0
    findings: int = 0

    def finish(self) -> None:
        """Mark run as finished."""
        self.end_time = time.time()

    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        end = self.end_time or time.time()
        return end - self.start_time

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        return {
            "elapsed_seconds": round(self.elapsed_seconds, 2),
            "files_requested": self.files_requested,
            "options_overridden": self.options_overridden,
            "stdout_bytes": self.stdout_bytes,
            "stderr_bytes": self.stderr_bytes,
            "findings": self.findings,
        }
