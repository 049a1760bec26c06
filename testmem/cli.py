"""Command-line interface for testmem."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click  # type: ignore
from pydantic import ValidationError  # type: ignore

from .core.config import ScanConfig
from .core.errors import ConfigError, SizeParseError
from .core.scanner import MemoryScanner
from .core.sizes import parse_size as parse_size_literal
from .reports.console import ConsoleReporter

LIMIT_USAGE = "Could not parse limit string. Please use form (FloatNumber)(TB|GB|MB|KB)"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_config(config_path: Optional[str], **overrides) -> ScanConfig:
    if config_path:
        config = ScanConfig.from_file(config_path)
    else:
        config = ScanConfig()
    return config.overrides(**overrides)


@click.command()
@click.option('-debug', '--debug',
              is_flag=True,
              help='Print raw go test and pprof output before interpreting it')
@click.option('-limit', '--limit',
              default=None,
              help='Dump the profile of suites using more than this, e.g. 64MB (env: TESTMEM_LIMIT)')
@click.option('--root',
              default=None,
              help='Directory to scan (default: current directory)',
              type=click.Path(file_okay=False, dir_okay=True))
@click.option('--count',
              default=None,
              help='How many times each suite is run (default: 5)',
              type=click.IntRange(min=1))
@click.option('--config',
              help='Path to configuration file (YAML or JSON)',
              type=click.Path(exists=True, file_okay=True, dir_okay=False))
@click.option('--json-report',
              help='Also write the scan report as JSON to this path',
              type=click.Path(dir_okay=False))
@click.option('--summary',
              is_flag=True,
              help='Print a summary table to stderr when the scan ends')
@click.option('--strict',
              is_flag=True,
              help='Exit with status 1 if any suite failed or exceeded the limit')
@click.option('-v', '--verbose',
              is_flag=True,
              help='Enable verbose logging')
def main(debug: bool,
         limit: Optional[str],
         root: Optional[str],
         count: Optional[int],
         config: Optional[str],
         json_report: Optional[str],
         summary: bool,
         strict: bool,
         verbose: bool):
    """
    Measure the memory used by every Go test suite under a directory.

    Each directory holding *_test.go files (outside hidden and vendor
    directories) is run with `go test -race -count=5 -memprofile` and the
    total reported by `go tool pprof -list` is printed next to its path.

    \b
    # Report every suite under the current directory
    testmem

    \b
    # Dump the profile of any suite above 64MB
    testmem -limit=64MB
    """
    _configure_logging(verbose)

    try:
        scan_config = _load_config(
            config,
            root=root,
            limit=limit,
            count=count,
            debug=debug or None,
            strict=strict or None,
        )
    except (ConfigError, ValidationError) as e:
        click.echo(f"Error loading config file: {e}", err=True)
        raise click.Abort()

    try:
        limit_bytes = scan_config.limit_bytes
    except SizeParseError:
        click.echo(LIMIT_USAGE)
        return

    reporter = ConsoleReporter()
    scanner = MemoryScanner(scan_config, limit_bytes, on_output=reporter.raw_output)
    report = scanner.scan(on_outcome=reporter.report_outcome)

    if json_report:
        try:
            Path(json_report).write_text(report.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            click.echo(f"Error writing JSON report: {e}", err=True)
    if summary:
        reporter.print_summary(report)

    if scan_config.strict and report.has_failures:
        sys.exit(1)


@click.group()
def cli():
    """testmem - per-directory memory usage of Go test suites."""
    pass


@cli.command()
@click.option('--config-template',
              default='testmem.yaml',
              help='Output file for configuration template')
def init_config(config_template: str):
    """Generate a configuration template file."""
    ScanConfig().save(config_template)
    click.echo(f"Configuration template created: {config_template}")
    click.echo("Edit the file with your settings and use with --config option")


@cli.command()
@click.argument('literal')
def parse_size(literal: str):
    """Print the number of bytes a size literal such as 2.5GB stands for."""
    try:
        click.echo(parse_size_literal(literal))
    except SizeParseError as e:
        click.echo(f"Could not parse size: {e}", err=True)
        sys.exit(1)


cli.add_command(main, name='scan')


if __name__ == '__main__':
    main()
