"""
Utility functions for DocuSign Wrapper output and logging.
"""

import csv
import io
import json
import logging
import re
import sys
from enum import Enum
from typing import Any, Dict, List, Optional

import click

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class OutputFormat(Enum):
    """Output format options."""
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging level from the CLI flags."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)

    # urllib3 is noisy at DEBUG
    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def print_success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def print_error(message: str, details: Optional[str] = None) -> None:
    """Print an error message to stderr."""
    click.secho(f"✗ {message}", fg="red", err=True)
    if details:
        click.echo(f"  {details}", err=True)


def print_warning(message: str) -> None:
    click.secho(f"! {message}", fg="yellow")


def print_info(message: str) -> None:
    click.secho(f"ℹ {message}", fg="blue")


def print_json(data: Any, indent: int = 2) -> None:
    """Print data as formatted JSON."""
    click.echo(json.dumps(data, indent=indent, default=str))


def _strip_ansi(value: Any) -> str:
    return ANSI_ESCAPE.sub("", str(value))


def print_table(headers: List[str], rows: List[List[Any]]) -> None:
    """Print rows as a plain-text table with aligned columns."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(_strip_ansi(cell)))

    def format_row(cells: List[Any]) -> str:
        parts = []
        for i, cell in enumerate(cells):
            text = str(cell)
            padding = widths[i] - len(_strip_ansi(cell))
            parts.append(text + " " * padding)
        return "  ".join(parts).rstrip()

    click.echo(format_row(headers))
    click.echo("  ".join("-" * w for w in widths))
    for row in rows:
        click.echo(format_row(row))


def print_csv(headers: List[str], rows: List[List[Any]]) -> None:
    """Print rows as CSV, stripping any ANSI colour codes."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_strip_ansi(cell) for cell in row])
    click.echo(buffer.getvalue(), nl=False)


def truncate_string(value: str, max_length: int = 50) -> str:
    """Truncate a string, ending it with '...' when shortened."""
    if len(value) <= max_length:
        return value
    return value[:max_length - 3] + "..."


def format_value(value: Any) -> str:
    """Render a tab or mapping value for table output."""
    if value is False:
        return click.style("not signed", fg="yellow")
    if value is None or value == "":
        return "-"
    if isinstance(value, dict):
        return "-" if not value else json.dumps(value)
    return str(value)


def format_mapping_rows(mapping: Dict[str, Any], max_length: int = 60) -> List[List[str]]:
    """Turn an id -> value mapping into table rows."""
    return [
        [key, truncate_string(format_value(value), max_length)]
        for key, value in mapping.items()
    ]


def format_tab_rows(tabs: Dict[str, Dict[str, Dict[str, Any]]]) -> List[List[str]]:
    """Flatten category -> tab id -> {label: value} into table rows."""
    rows = []
    for category, entries in tabs.items():
        for tab_id, labelled in entries.items():
            for label, value in labelled.items():
                rows.append([category, tab_id, label, format_value(value)])
    return rows


def print_mapping(
    mapping: Dict[str, Any],
    headers: List[str],
    fmt: OutputFormat,
    title: Optional[str] = None,
) -> None:
    """Print an id-keyed mapping in the requested format."""
    if fmt == OutputFormat.JSON:
        print_json(mapping)
        return

    rows = format_mapping_rows(mapping)
    if fmt == OutputFormat.CSV:
        print_csv(headers, rows)
        return

    if title:
        click.echo(f"\n{title} ({len(rows)} total):\n")
    print_table(headers, rows)
