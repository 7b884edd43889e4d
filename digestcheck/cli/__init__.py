"""
digestcheck CLI.

Command-line interface for printing and checking checksum manifests.
"""

import click
import yaml

from digestcheck import __version__
from digestcheck.core.config import CONFIG_ENVVAR, load_tool_config
from digestcheck.core.primitive import ALGORITHMS
from digestcheck.logger import LOG_LEVELS, configure_logging, get_logger

logger = get_logger(__name__)


@click.command(
    epilog=(
        "With no FILE, or when FILE is -, read standard input. When checking, "
        "the input should be a former output of this program: one "
        "'<digest> <space or *><name>' line per file."
    )
)
@click.argument("files", nargs=-1)
@click.option("--check", "-c", is_flag=True, help="Read checksums from the FILEs and check them")
@click.option("--ignore-missing", is_flag=True, help="Don't fail or report status for missing files")
@click.option("--quiet", is_flag=True, help="Don't print OK for each successfully verified file")
@click.option("--status", is_flag=True, help="Don't output anything, status code shows success")
@click.option("--strict", is_flag=True, help="Exit non-zero for improperly formatted checksum lines")
@click.option("--warn", "-w", is_flag=True, help="Warn about improperly formatted checksum lines")
@click.option("--algorithm", "-a", type=click.Choice(sorted(ALGORITHMS), case_sensitive=False),
              help="Digest algorithm (default: md5, or the config file's)")
@click.option("--buffer-size", type=click.IntRange(min=1), help="Read chunk size in bytes")
@click.option("--config", "config_path", envvar=CONFIG_ENVVAR, help="Path to YAML settings file")
@click.option("--report", "report_path", help="Write a JSON report of the check run")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Logging level for internal diagnostics")
@click.version_option(version=__version__, prog_name="digestcheck")
def main(
    files: tuple[str, ...],
    check: bool,
    ignore_missing: bool,
    quiet: bool,
    status: bool,
    strict: bool,
    warn: bool,
    algorithm: str | None,
    buffer_size: int | None,
    config_path: str | None,
    report_path: str | None,
    log_level: str | None,
) -> None:
    """Print or check checksums (MD5 by default)."""
    from digestcheck.core.stream import StreamDigester
    from digestcheck.core.verify import VerificationEngine
    from digestcheck.errors import RunAborted
    from digestcheck.io.sources import STDIN_NAME
    from digestcheck.run.aggregator import ResultAggregator
    from digestcheck.run.check import run_check
    from digestcheck.run.console import ClickConsole
    from digestcheck.run.produce import produce_digests

    try:
        tool_config = load_tool_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error loading config: {e}", err=True)
        raise SystemExit(1)

    configure_logging(log_level or tool_config.log_level)

    algorithm = (algorithm or tool_config.algorithm).lower()
    digester = StreamDigester(algorithm, buffer_size or tool_config.buffer_size)
    targets = files or (STDIN_NAME,)
    console = ClickConsole()

    if not check:
        if report_path:
            raise click.UsageError("--report is only meaningful with --check")
        try:
            produce_digests(targets, digester, console, quiet=quiet)
        except RunAborted as e:
            raise SystemExit(e.exit_status)
        return

    run_config = tool_config.check.merged_with(
        ignore_missing=ignore_missing,
        quiet=quiet,
        status=status,
        strict=strict,
        warn=warn,
    )
    logger.debug("Check run: algorithm=%s flags=%s", algorithm, run_config.model_dump())

    aggregator = ResultAggregator(run_config, console)
    engine = VerificationEngine(digester)

    try:
        exit_status = run_check(targets, engine, aggregator)
    except RunAborted as e:
        exit_status = e.exit_status

    if report_path:
        from digestcheck.io.report import write_report

        try:
            write_report(report_path, aggregator.result, algorithm)
        except OSError as e:
            click.echo(f"Error writing report: {e}", err=True)
            exit_status = exit_status or 1

    if exit_status:
        raise SystemExit(exit_status)


if __name__ == "__main__":
    main()
