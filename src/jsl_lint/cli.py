"""Command-line interface for jsl-lint."""
import os
import sys
from pathlib import Path

import click

from jsl_lint.__version__ import __version__
from jsl_lint.config import CONFIG_FILENAME, load_config
from jsl_lint.logging_config import get_logger, setup_logging
from jsl_lint.metrics import RunMetrics
from jsl_lint.options import describe_options
from jsl_lint.reporter import format_detailed_report, format_json_report, get_exit_code
from jsl_lint.runner import run_lint


def _print_options() -> None:
    section = None
    for spec in describe_options():
        if spec.section != section:
            section = spec.section
            click.echo(f"\n{section}")
            click.echo("-" * len(section))
        default = "on" if spec.default else "off"
        click.echo(f"  {spec.name:<36} {spec.description} (default: {default})")


@click.command()
@click.version_option(version=__version__, prog_name="jsl-lint")
@click.argument("files", nargs=-1)
@click.option("--enable", "enabled", multiple=True, metavar="NAME", help="Turn an option on")
@click.option("--disable", "disabled", multiple=True, metavar="NAME", help="Turn an option off")
@click.option("--executable", type=str, help="Path to the jsl executable")
@click.option("--timeout", type=float, help="Kill the linter after this many seconds")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--verbose", is_flag=True, help="Log the jsl command line and its exit status")
@click.option("--debug", is_flag=True, help="Also log configuration file handling")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
@click.option("--config", type=click.Path(exists=True), help="Path to config file")
@click.option("--list-options", is_flag=True, help="List JavaScript Lint options and exit")
def main(
    files: tuple[str, ...],
    enabled: tuple[str, ...],
    disabled: tuple[str, ...],
    executable: str | None,
    timeout: float | None,
    output_json: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
    config: str | None,
    list_options: bool,
) -> None:
    """Lint JavaScript and HTML FILES with JavaScript Lint."""
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    if list_options:
        _print_options()
        sys.exit(0)

    if not files:
        click.echo("Error: At least one file or pattern is required", err=True)
        sys.exit(2)

    overlap = set(enabled) & set(disabled)
    if overlap:
        click.echo(
            f"Error: Options both enabled and disabled: {', '.join(sorted(overlap))}", err=True
        )
        sys.exit(2)

    try:
        config_path = Path(config) if config else Path.cwd() / CONFIG_FILENAME
        cfg = load_config(config_path)
        if executable:
            cfg.executable = executable
        if timeout is not None:
            cfg.timeout_seconds = timeout

        overrides = {name: True for name in enabled}
        overrides.update({name: False for name in disabled})

        metrics = RunMetrics()
        show_progress = (
            cfg.show_progress
            and not output_json
            and not os.environ.get("JSL_LINT_NO_PROGRESS")
        )

        if show_progress:
            from rich.console import Console

            console = Console(stderr=True)
            with console.status(f"[bold blue]Linting {len(files)} path(s)..."):
                result = run_lint(list(files), overrides, config=cfg, metrics=metrics)
        else:
            result = run_lint(list(files), overrides, config=cfg, metrics=metrics)

        if output_json:
            output = format_json_report(result, metrics)
        else:
            output = format_detailed_report(result, metrics)

        click.echo(output)

        sys.exit(get_exit_code(result))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)  # Standard SIGINT exit code
    except ValueError as e:
        # Includes pydantic ValidationError and LintConfigError
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger = get_logger(__name__)
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
