"""CLI module for MySQL schema diffing.

Provides commands to list configured profiles and to diff (and optionally
apply) the structure of one profile's database onto another's.

Usage:
    db-diff profiles
    db-diff diff --source prod --target staging
    db-diff diff --source prod --target staging --tables orders,customers
    db-diff diff --source prod --target staging --output fix.sql
    db-diff diff --source prod --target staging --execute --confirm

Commands:
    profiles  - List available profiles
    diff      - Print the statements that make target match source

Statements go to stdout (or ``--output``); summaries and errors go to
stderr, so the output can be piped straight into ``mysql``.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from db_diff.config.loader import default_config_path, load_db_config
from db_diff.exceptions import DbDiffError, ExecutionError
from db_diff.factory import get_introspector
from db_diff.schema.diff import apply_diff, generate_diff

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _config_path(args: argparse.Namespace) -> Path:
    return Path(args.config) if args.config else default_config_path()


# ============================================================================
# Command implementations
# ============================================================================


def cmd_profiles(args: argparse.Namespace) -> int:
    """List available profiles from db.toml.

    Reads only local TOML config -- no database calls.

    Args:
        args: Parsed CLI arguments.

    Returns:
        0 on success, 1 if db.toml not found or invalid.
    """
    try:
        config = load_db_config(_config_path(args))
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    table = Table(
        title="Database Profiles", show_header=True, header_style="bold"
    )
    table.add_column("Profile")
    table.add_column("Description")
    table.add_column("Excluded tables")

    for name, profile in config.profiles.items():
        table.add_row(
            f"[bold cyan]{name}[/bold cyan]",
            profile.description or "",
            ", ".join(profile.excluded_tables),
        )

    console.print(table)
    return 0


def cmd_diff(args: argparse.Namespace) -> int:
    """Diff source profile against target profile, optionally applying.

    Args:
        args: Parsed CLI arguments with source, target, tables, output,
            execute and confirm.

    Returns:
        0 on success (including "no differences"), 1 on failure.
    """
    if args.execute and not args.confirm:
        err_console.print("[yellow]--execute requires --confirm[/yellow]")
        return 1

    tables = None
    if args.tables:
        tables = [t.strip() for t in args.tables.split(",") if t.strip()]

    source = None
    target = None
    try:
        config = load_db_config(_config_path(args))
        source = get_introspector(args.source, config=config)
        target = get_introspector(args.target, config=config)

        err_console.print(
            f"Comparing [bold cyan]{args.source}[/bold cyan] -> "
            f"[bold cyan]{args.target}[/bold cyan]...",
            style="dim",
        )
        report = generate_diff(source, target, tables=tables)

        sql = report.to_sql()
        if args.output:
            Path(args.output).write_text(sql + "\n" if sql else "")
            err_console.print(f"[dim]Wrote statements to {args.output}[/dim]")
        elif sql:
            console.print(sql, markup=False, highlight=False, soft_wrap=True)

        err_console.print(escape(report.format_report()))

        if args.execute and report.has_changes:
            result = apply_diff(target.client, report, dry_run=False, confirm=True)
            err_console.print(
                f"[bold green]v[/bold green] Applied {len(result.executed)} "
                f"statement(s) to [bold cyan]{args.target}[/bold cyan]"
            )
        return 0

    except ExecutionError as e:
        err_console.print(f"[bold red]x[/bold red] Failed on table {e.table}: {escape(str(e))}")
        return 1
    except (DbDiffError, FileNotFoundError, ValueError) as e:
        err_console.print(f"[bold red]x[/bold red] {escape(str(e))}")
        return 1
    finally:
        for introspector in (source, target):
            if introspector is not None:
                introspector.client.close()


# ============================================================================
# Main entry point
# ============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Parses command line arguments and dispatches to appropriate handler.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        prog="db-diff",
        description="Compare MySQL schema structure and generate ALTER statements",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to db.toml (default: $DB_DIFF_CONFIG or ./db.toml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # profiles command
    p_profiles = subparsers.add_parser(
        "profiles",
        help="List available profiles",
    )
    p_profiles.set_defaults(func=cmd_profiles)

    # diff command
    p_diff = subparsers.add_parser(
        "diff",
        help="Generate statements that make target match source",
    )
    p_diff.add_argument(
        "--source",
        "-s",
        required=True,
        help="Profile holding the desired schema",
    )
    p_diff.add_argument(
        "--target",
        "-t",
        required=True,
        help="Profile holding the schema to bring in line",
    )
    p_diff.add_argument(
        "--tables",
        default=None,
        help="Comma-separated list of tables to compare (default: all source tables)",
    )
    p_diff.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write statements to this file instead of stdout",
    )
    p_diff.add_argument(
        "--execute",
        action="store_true",
        help="Apply the statements to the target",
    )
    p_diff.add_argument(
        "--confirm",
        action="store_true",
        help="Required together with --execute",
    )
    p_diff.set_defaults(func=cmd_diff)

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
