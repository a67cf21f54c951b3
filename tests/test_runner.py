"""Tests for running the linter and the run lifecycle."""
import subprocess
import tempfile
from pathlib import Path
from unittest.mock import patch
import pytest
from jsl_lint.config import Config
from jsl_lint.errors import LintConfigError, UnknownOptionError
from jsl_lint.metrics import RunMetrics
from jsl_lint.runner import (
    BUNDLED_EXECUTABLE,
    EXECUTABLE_ENV_VAR,
    resolve_executable,
    run_lint,
)
from jsl_lint.types import ResultKind

CLEAN_STDOUT = "test.js\n\n0 error(s), 0 warning(s)\n"


def make_config(tmpdir: str, **kwargs) -> Config:
    """Helper to build a config that writes into tmpdir."""
    return Config(executable="/opt/jsl/jsl", config_dir=tmpdir, **kwargs)


def completed(cmd, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


def test_run_lint_clean():
    """Test a clean run."""
    with tempfile.TemporaryDirectory() as tmpdir:
        seen = {}

        def fake_run(cmd, **kwargs):
            conf = Path(cmd[2])
            seen["cmd"] = cmd
            seen["conf"] = conf
            seen["content"] = conf.read_text(encoding="ascii")
            return completed(cmd, stdout=CLEAN_STDOUT)

        with patch("subprocess.run", side_effect=fake_run):
            result = run_lint("test.js", config=make_config(tmpdir))

        assert result.kind is ResultKind.SUMMARY
        assert (result.errors, result.warnings) == (0, 0)
        assert result.message == CLEAN_STDOUT

        assert seen["cmd"][0] == "/opt/jsl/jsl"
        assert seen["cmd"][1] == "-conf"
        assert seen["conf"].parent == Path(tmpdir)
        assert "+process test.js\n" in seen["content"]

        # Configuration file removed after the run
        assert not seen["conf"].exists()
        assert list(Path(tmpdir).iterdir()) == []


def test_run_lint_errors_and_warnings():
    """Test a run that reports errors and warnings."""
    stdout = "a.js\na.js:3: lint warning: missing semicolon\n2 error(s), 5 warning(s)\n"

    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run", return_value=completed(["jsl"], 1, stdout=stdout)):
            result = run_lint(["a.js"], config=make_config(tmpdir))

        assert result.kind is ResultKind.SUMMARY
        assert (result.errors, result.warnings) == (2, 5)
        assert result.returncode == 1
        assert len(result.findings) == 1


def test_run_lint_exit_code_not_consulted():
    """Test that a non-zero exit status does not change a clean summary."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run", return_value=completed(["jsl"], 3, stdout=CLEAN_STDOUT)):
            result = run_lint("a.js", config=make_config(tmpdir))

        assert result.ok
        assert result.returncode == 3


def test_run_lint_stderr_is_tool_error():
    """Test that stderr output is reported as a tool error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch(
            "subprocess.run", return_value=completed(["jsl"], 1, stderr="cannot open file")
        ):
            result = run_lint("missing.js", config=make_config(tmpdir))

        assert result.kind is ResultKind.TOOL_ERROR
        assert (result.errors, result.warnings) == (1, 0)
        assert result.message == "cannot open file"
        assert list(Path(tmpdir).iterdir()) == []


def test_run_lint_missing_executable():
    """Test that a missing executable is a launch error, not an exception."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run", side_effect=FileNotFoundError("No such file")):
            result = run_lint("a.js", config=make_config(tmpdir))

        assert result.kind is ResultKind.LAUNCH_ERROR
        assert result.errors == 1
        assert "/opt/jsl/jsl" in result.message
        assert result.failed
        assert list(Path(tmpdir).iterdir()) == []


def test_run_lint_rejected_arguments():
    """Test that arguments the OS refuses give a launch error, not an exception."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run", side_effect=ValueError("embedded null byte")):
            result = run_lint("a.js", config=make_config(tmpdir))

        assert result.kind is ResultKind.LAUNCH_ERROR
        assert "embedded null byte" in result.message
        assert list(Path(tmpdir).iterdir()) == []

def test_run_lint_timeout():
    """Test that an expired timeout is reported as such."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch(
            "subprocess.run", side_effect=subprocess.TimeoutExpired("jsl", 5.0)
        ) as mock_run:
            result = run_lint("a.js", config=make_config(tmpdir, timeout_seconds=5.0))

        assert mock_run.call_args[1]["timeout"] == 5.0
        assert result.kind is ResultKind.TIMEOUT
        assert "timed out" in result.message
        assert list(Path(tmpdir).iterdir()) == []


def test_run_lint_no_timeout_by_default():
    """Test that no timeout is applied unless configured."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run", return_value=completed(["jsl"], stdout=CLEAN_STDOUT)) as m:
            run_lint("a.js", config=make_config(tmpdir))

        assert m.call_args[1]["timeout"] is None


def test_run_lint_no_output_is_inconclusive():
    """Test that a silent linter yields an inconclusive result."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run", return_value=completed(["jsl"])):
            result = run_lint("a.js", config=make_config(tmpdir))

        assert result.kind is ResultKind.INCONCLUSIVE
        assert result.errors is None


def test_run_lint_unknown_option_spawns_nothing():
    """Test that an unknown option fails before any file or process."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run") as mock_run:
            with pytest.raises(UnknownOptionError, match="foo_bar"):
                run_lint("a.js", {"foo_bar": True}, config=make_config(tmpdir))

        assert not mock_run.called
        assert list(Path(tmpdir).iterdir()) == []


def test_run_lint_empty_file_list():
    """Test that an empty file list is rejected before spawning."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run") as mock_run:
            with pytest.raises(LintConfigError):
                run_lint([], config=make_config(tmpdir))

        assert not mock_run.called


def test_run_lint_missing_config_dir():
    """Test that a missing configuration directory is rejected."""
    with patch("subprocess.run") as mock_run:
        with pytest.raises(LintConfigError, match="does not exist"):
            run_lint("a.js", config=Config(executable="jsl", config_dir="/nonexistent/dir"))

    assert not mock_run.called


def test_run_lint_option_precedence():
    """Test that call options override config options which override defaults."""
    with tempfile.TemporaryDirectory() as tmpdir:
        seen = {}

        def fake_run(cmd, **kwargs):
            seen["lines"] = Path(cmd[2]).read_text(encoding="ascii").splitlines()
            return completed(cmd, stdout=CLEAN_STDOUT)

        config = make_config(tmpdir, options={"recurse": True, "context": False})

        with patch("subprocess.run", side_effect=fake_run):
            run_lint("a.js", {"context": True}, config=config)

        assert "+recurse" in seen["lines"]
        assert "+context" in seen["lines"]
        assert "-context" not in seen["lines"]


def test_run_lint_cleanup_failure_still_returns():
    """Test that a failed deletion does not lose the result."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with patch("subprocess.run", return_value=completed(["jsl"], stdout=CLEAN_STDOUT)):
            with patch("jsl_lint.file_utils.Path.unlink", side_effect=PermissionError("busy")):
                result = run_lint("a.js", config=make_config(tmpdir))

        assert result.ok


def test_run_lint_fills_metrics():
    """Test that metrics are recorded for the run."""
    stdout = "a.js:1: lint warning: useless assignment\n0 error(s), 1 warning(s)\n"

    with tempfile.TemporaryDirectory() as tmpdir:
        metrics = RunMetrics()
        with patch("subprocess.run", return_value=completed(["jsl"], stdout=stdout)):
            run_lint(
                ["a.js", "b.js"], {"recurse": True}, config=make_config(tmpdir), metrics=metrics
            )

        assert metrics.files_requested == 2
        assert metrics.options_overridden == 1
        assert metrics.stdout_bytes == len(stdout)
        assert metrics.findings == 1
        assert metrics.end_time is not None


def test_resolve_executable_explicit(monkeypatch):
    """Test that an explicit path wins."""
    monkeypatch.setenv(EXECUTABLE_ENV_VAR, "/from/env/jsl")
    assert resolve_executable("/explicit/jsl") == Path("/explicit/jsl")


def test_resolve_executable_env(monkeypatch):
    """Test lookup through the environment variable."""
    monkeypatch.setenv(EXECUTABLE_ENV_VAR, "/from/env/jsl")
    assert resolve_executable() == Path("/from/env/jsl")


def test_resolve_executable_path_lookup(monkeypatch):
    """Test fallback to jsl on PATH."""
    monkeypatch.delenv(EXECUTABLE_ENV_VAR, raising=False)
    with patch("jsl_lint.runner.BUNDLED_EXECUTABLE", Path("/nonexistent/jsl")):
        with patch("shutil.which", return_value="/usr/local/bin/jsl"):
            assert resolve_executable() == Path("/usr/local/bin/jsl")


def test_resolve_executable_nothing_found(monkeypatch):
    """Test that the bundled location is returned when nothing is found."""
    monkeypatch.delenv(EXECUTABLE_ENV_VAR, raising=False)
    with patch("shutil.which", return_value=None):
        assert resolve_executable() == BUNDLED_EXECUTABLE
