"""Record sorting CLI commands.

Contents:
    * :func:`cli_sort` - Sort records from a JSON file by one or more keys.
    * :func:`cli_demo` - Sort the bundled sample people.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, NoReturn

import lib_log_rich.runtime
import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sortkit.adapters.records.source import dump_records
from sortkit.domain.descriptors import sort_records
from sortkit.domain.enums import NonePosition, OutputFormat
from sortkit.domain.errors import ConfigurationError, InvalidSortKeyError, RecordFormatError
from sortkit.domain.keys import SortKey, build_descriptor, parse_sort_key
from sortkit.domain.records import SAMPLE_PEOPLE

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context, log_scope
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_by_option = click.option(
    "--by",
    "keys",
    multiple=True,
    metavar="FIELD[:asc|desc]",
    help="Sort key in priority order (repeatable). Prefix with '-' for descending. Default: sorting.keys",
)
_format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (table or JSON)",
)
_none_option = click.option(
    "--none-position",
    type=click.Choice([p.value for p in NonePosition], case_sensitive=False),
    default=None,
    help="Place missing/null values first or last. Default: sorting.none_position",
)
_ignore_case_option = click.option(
    "--ignore-case/--match-case",
    default=None,
    help="Compare strings ignoring case. Default: sorting.case_insensitive",
)


@click.command("sort", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@_by_option
@_format_option
@_none_option
@_ignore_case_option
@click.pass_context
def cli_sort(
    ctx: click.Context,
    path: Path,
    keys: tuple[str, ...],
    output_format: str,
    none_position: str | None,
    ignore_case: bool | None,
) -> None:
    r"""Sort the records of a JSON file (an array of objects) and print them.

    \b
    Examples:
      sortkit sort people.json --by last_name --by -birth_year
      sortkit sort people.json --format json
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "sort", "path": str(path), "keys": list(keys), "format": fmt.value}
    with log_scope("cli-sort", extra):
        sort_keys, none_first, case_insensitive = _resolve_options(cli_ctx, keys, none_position, ignore_case)
        records = _load(cli_ctx, path)
        logger.info("Sorting records", extra={"count": len(records), "keys": [str(k) for k in sort_keys]})
        ordered = _sort(records, sort_keys, none_first=none_first, case_insensitive=case_insensitive)
        _render(ordered, fmt)


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@_by_option
@_format_option
@click.pass_context
def cli_demo(ctx: click.Context, keys: tuple[str, ...], output_format: str) -> None:
    """Sort the bundled sample people to show lexicographic composition.

    Example:
        >>> from click.testing import CliRunner
        >>> from sortkit.composition import build_testing
        >>> from sortkit.adapters.cli.root import cli
        >>> result = CliRunner().invoke(cli, ["demo", "--format", "json"], obj=build_testing)
        >>> result.exit_code
        0
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with log_scope("cli-demo", {"command": "demo", "keys": list(keys)}):
        sort_keys, none_first, case_insensitive = _resolve_options(cli_ctx, keys, None, None)
        logger.info("Sorting sample people", extra={"keys": [str(k) for k in sort_keys]})
        ordered = _sort(SAMPLE_PEOPLE, sort_keys, none_first=none_first, case_insensitive=case_insensitive)
        _render([dataclasses.asdict(person) for person in ordered], fmt)


def _resolve_options(
    cli_ctx: CLIContext,
    keys: tuple[str, ...],
    none_position: str | None,
    ignore_case: bool | None,
) -> tuple[list[SortKey], bool, bool]:
    """Merge command options over the ``[sorting]`` configuration.

    Raises:
        SystemExit: CONFIG_ERROR for invalid configuration, INVALID_ARGUMENT
            for malformed ``--by`` keys.
    """
    try:
        settings = cli_ctx.sort_settings()
    except ConfigurationError as exc:
        _fail(exc, "Invalid sorting configuration", "Configuration error", ExitCode.CONFIG_ERROR)

    try:
        sort_keys = [parse_sort_key(raw) for raw in keys] if keys else settings.sort_keys()
    except InvalidSortKeyError as exc:
        _fail(exc, "Invalid sort key", "Invalid sort key", ExitCode.INVALID_ARGUMENT)

    none_first = settings.none_first if none_position is None else NonePosition(none_position) is NonePosition.FIRST
    case_insensitive = settings.case_insensitive if ignore_case is None else ignore_case
    return sort_keys, none_first, case_insensitive


def _load(cli_ctx: CLIContext, path: Path) -> list[dict[str, Any]]:
    try:
        return cli_ctx.services.load_records(path)
    except FileNotFoundError as exc:
        _fail(exc, "Record file not found", "File not found", ExitCode.FILE_NOT_FOUND)
    except PermissionError as exc:
        _fail(exc, "Record file not readable", "Permission denied", ExitCode.PERMISSION_DENIED)
    except RecordFormatError as exc:
        _fail(exc, "Malformed record file", "Invalid record file", ExitCode.INVALID_ARGUMENT)


def _sort(
    records: Sequence[Any],
    sort_keys: list[SortKey],
    *,
    none_first: bool,
    case_insensitive: bool,
) -> list[Any]:
    descriptor = build_descriptor(sort_keys, none_first=none_first, case_insensitive=case_insensitive)
    try:
        return sort_records(records, descriptor)
    except TypeError as exc:
        _fail(exc, "Records not comparable", "Records hold values of mixed types under one key", ExitCode.INVALID_ARGUMENT)


def _render(records: Sequence[Mapping[str, Any]], fmt: OutputFormat) -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    if fmt is OutputFormat.JSON:
        click.echo(dump_records(records))
        return

    columns: list[str] = []
    for record in records:
        for name in record:
            if name not in columns:
                columns.append(name)

    table = Table(*(escape(name) for name in columns))
    for record in records:
        table.add_row(*("" if record.get(name) is None else escape(str(record.get(name))) for name in columns))
    Console(soft_wrap=False).print(table)


def _fail(exc: Exception, log_message: str, user_message: str, exit_code: ExitCode) -> NoReturn:
    """Log ``exc``, report it on stderr, and exit.

    Raises:
        SystemExit: Always, with ``exit_code``.
    """
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code) from exc


__all__ = ["cli_demo", "cli_sort"]
