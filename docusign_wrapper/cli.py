"""
DocuSign Wrapper CLI - Command Line Interface for the DocuSign REST API.

This module provides the main CLI entry point and all commands for:
- Configuration management
- Envelope, recipient and tab listing
- Folder listing and folder contents
- User and group listing
"""

import functools
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__, __prog_name__
from .api import get_client
from .config import (
    ConfigManager,
    get_config_manager,
    DEFAULT_HOST,
)
from .exceptions import DocuSignError, ConfigurationError
from .utils import (
    setup_logging,
    print_success,
    print_error,
    print_info,
    print_json,
    print_table,
    print_csv,
    print_mapping,
    format_tab_rows,
    OutputFormat,
)

logger = logging.getLogger(__name__)


# ============================================================================
# CLI Context and Common Options
# ============================================================================

class DocuSignContext:
    """CLI context object for sharing state between commands."""

    def __init__(self):
        self.config_manager: ConfigManager = None  # type: ignore[assignment]


pass_context = click.make_pass_decorator(DocuSignContext, ensure=True)


def common_options(f):
    """Common options for all data commands."""
    f = click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)
    f = click.option(
        '-q', '--quiet',
        is_flag=True,
        help='Suppress non-essential output'
    )(f)
    f = click.option(
        '-f', '--format',
        'output_format',
        type=click.Choice(['table', 'json', 'csv']),
        default='table',
        help='Output format'
    )(f)
    return f


def require_config(f):
    """Decorator to require complete login settings."""
    @functools.wraps(f)
    def wrapper(ctx: DocuSignContext, *args, **kwargs):
        try:
            config = ctx.config_manager.get()
        except ConfigurationError as e:
            print_error(e.message, e.details)
            sys.exit(1)

        if not config.is_configured():
            print_error(
                "DocuSign Wrapper is not configured.",
                f"Missing: {', '.join(config.missing_fields())}. "
                f"Run '{__prog_name__} configure' first."
            )
            sys.exit(1)

        return f(ctx, *args, **kwargs)

    return wrapper


def fail(error: DocuSignError) -> None:
    """Report an API error and exit."""
    print_error(error.message, error.details)
    sys.exit(1)


# ============================================================================
# Main CLI Group
# ============================================================================

@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--config-dir',
    type=click.Path(path_type=Path),
    envvar='DOCUSIGN_CONFIG_DIR',
    help='Custom configuration directory'
)
@click.pass_context
def cli(ctx, config_dir: Optional[Path]):
    """
    DocuSign Wrapper - read-only access to the DocuSign REST API.

    \b
    Quick Start:
      1. Configure credentials:   docusign configure
      2. List folders:            docusign folders
      3. List folder contents:    docusign folder-contents FOLDER_ID --status
      4. Read a signer's fields:  docusign tabs ENVELOPE_ID RECIPIENT_ID

    \b
    Environment Variables:
      DOCUSIGN_HOST             - API root (default: demo environment)
      DOCUSIGN_USERNAME         - Account username or email
      DOCUSIGN_PASSWORD         - Account password
      DOCUSIGN_INTEGRATOR_KEY   - Integration key
      DOCUSIGN_ACCOUNT_ID       - Account ID
      DOCUSIGN_CONFIG_DIR       - Custom configuration directory
    """
    ctx.ensure_object(DocuSignContext)
    ctx.obj.config_manager = get_config_manager(config_dir)


# ============================================================================
# Configuration Commands
# ============================================================================

@cli.command('configure')
@click.option('--host', '-H', help=f'API root URL (default: {DEFAULT_HOST})')
@click.option('--username', '-u', help='Account username or email')
@click.option('--password', '-p', help='Account password')
@click.option('--integrator-key', '-k', help='Integration key')
@click.option('--account-id', '-a', help='Account ID')
@click.option('--timeout', '-t', type=int, help='Request timeout in seconds')
@click.option('--no-verify-ssl', is_flag=True, help='Disable SSL certificate verification')
@click.option('--show', is_flag=True, help='Show current configuration')
@pass_context
def configure(
    ctx: DocuSignContext,
    host: Optional[str],
    username: Optional[str],
    password: Optional[str],
    integrator_key: Optional[str],
    account_id: Optional[str],
    timeout: Optional[int],
    no_verify_ssl: bool,
    show: bool
):
    """
    Configure DocuSign credentials and connection settings.

    \b
    Examples:
      docusign configure
      docusign configure --host https://www.docusign.net/restapi/v2
      docusign configure --account-id 1234567
      docusign configure --show
    """
    config_manager = ctx.config_manager

    try:
        current = config_manager.get()
    except ConfigurationError as e:
        fail(e)

    if show:
        click.echo("\nCurrent Configuration:")
        click.echo(f"  Host:            {current.host}")
        click.echo(f"  Username:        {current.username or '(not set)'}")
        click.echo(f"  Password:        {'*' * 8 if current.password else '(not set)'}")
        click.echo(f"  Integrator Key:  {current.integrator_key or '(not set)'}")
        click.echo(f"  Account ID:      {current.account_id or '(not set)'}")
        click.echo(f"  Timeout:         {current.timeout}s")
        click.echo(f"  Verify SSL:      {current.verify_ssl}")
        click.echo(f"  Config Path:     {config_manager.get_config_path()}")
        return

    # Interactive configuration if no options provided
    if not any([host, username, password, integrator_key, account_id, timeout, no_verify_ssl]):
        click.echo("Interactive configuration setup:")

        host = click.prompt("API root URL", default=current.host or DEFAULT_HOST)
        username = click.prompt("Username", default=current.username or None)
        password = click.prompt(
            "Password",
            hide_input=True,
            default=current.password or None,
            show_default=False
        )
        integrator_key = click.prompt("Integrator key", default=current.integrator_key or None)
        account_id = click.prompt("Account ID", default=current.account_id or None)
        timeout = click.prompt("Request timeout (seconds)", default=current.timeout, type=int)

    updates = {}
    if host:
        updates['host'] = host
    if username:
        updates['username'] = username
    if password:
        updates['password'] = password
    if integrator_key:
        updates['integrator_key'] = integrator_key
    if account_id:
        updates['account_id'] = account_id
    if timeout:
        updates['timeout'] = timeout
    if no_verify_ssl:
        updates['verify_ssl'] = False

    if updates:
        config_manager.update(**updates)
        print_success("Configuration saved successfully.")
    else:
        print_info("No changes made.")


@cli.command('config-clear')
@click.confirmation_option(prompt='Are you sure you want to clear all configuration?')
@pass_context
def config_clear(ctx: DocuSignContext):
    """Clear all stored configuration."""
    ctx.config_manager.clear()
    print_success("Configuration cleared.")


# ============================================================================
# Envelope Commands
# ============================================================================

@cli.command('envelopes')
@common_options
@click.option(
    '--from-date', '-d',
    type=click.DateTime(formats=['%Y-%m-%d']),
    help='Only envelopes changed since this date (YYYY-MM-DD)'
)
@pass_context
@require_config
def list_envelopes(ctx: DocuSignContext, verbose: bool, quiet: bool, output_format: str, from_date):
    """
    List envelope IDs.

    \b
    Examples:
      docusign envelopes
      docusign envelopes --from-date 2024-01-01 --format json
    """
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with get_client(ctx.config_manager.get()) as client:
            if from_date:
                envelopes = client.get_envelopes(from_date.date())
            else:
                envelopes = client.get_envelopes()

            if fmt == OutputFormat.JSON:
                print_json(list(envelopes))
            elif fmt == OutputFormat.CSV:
                print_csv(["Envelope ID"], [[envelope_id] for envelope_id in envelopes])
            else:
                if not quiet:
                    click.echo(f"\nEnvelopes ({len(envelopes)} total):\n")
                print_table(["Envelope ID"], [[envelope_id] for envelope_id in envelopes])

    except DocuSignError as e:
        fail(e)


@cli.command('recipients')
@common_options
@click.argument('envelope_id')
@pass_context
@require_config
def list_recipients(ctx: DocuSignContext, verbose: bool, quiet: bool, output_format: str, envelope_id: str):
    """List the signers of an envelope."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with get_client(ctx.config_manager.get()) as client:
            recipients = client.get_recipients_for_envelope(envelope_id)

            if fmt == OutputFormat.JSON:
                print_json(list(recipients))
            elif fmt == OutputFormat.CSV:
                print_csv(["Recipient ID"], [[recipient_id] for recipient_id in recipients])
            else:
                if not quiet:
                    click.echo(f"\nSigners of {envelope_id} ({len(recipients)} total):\n")
                print_table(["Recipient ID"], [[recipient_id] for recipient_id in recipients])

    except DocuSignError as e:
        fail(e)


@cli.command('tabs')
@common_options
@click.argument('envelope_id')
@click.argument('recipient_id')
@pass_context
@require_config
def list_tabs(
    ctx: DocuSignContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    envelope_id: str,
    recipient_id: str
):
    """
    Show the field values of a recipient.

    Sign-here fields show their status, or "not signed".

    \b
    Examples:
      docusign tabs ENVELOPE_ID 1
      docusign tabs ENVELOPE_ID 1 --format json
    """
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with get_client(ctx.config_manager.get()) as client:
            tabs = client.get_tabs_for_recipient_for_envelope(envelope_id, recipient_id)

            if fmt == OutputFormat.JSON:
                print_json(tabs)
                return

            headers = ["Category", "Tab ID", "Label", "Value"]
            rows = format_tab_rows(tabs)
            if fmt == OutputFormat.CSV:
                print_csv(headers, rows)
            else:
                if not quiet:
                    click.echo(f"\nTabs ({len(rows)} total):\n")
                print_table(headers, rows)

    except DocuSignError as e:
        fail(e)


# ============================================================================
# Folder Commands
# ============================================================================

@cli.command('folders')
@common_options
@pass_context
@require_config
def list_folders(ctx: DocuSignContext, verbose: bool, quiet: bool, output_format: str):
    """List all folders (nested folders included, hierarchy flattened)."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with get_client(ctx.config_manager.get()) as client:
            folders = client.get_folders()
            print_mapping(folders, ["Folder ID", "Name"], fmt, None if quiet else "Folders")

    except DocuSignError as e:
        fail(e)


@cli.command('folder-contents')
@common_options
@click.argument('folder_id')
@click.option('--status', '-s', 'include_status', is_flag=True, help='Append envelope status to subjects')
@pass_context
@require_config
def folder_contents(
    ctx: DocuSignContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    folder_id: str,
    include_status: bool
):
    """
    List the envelopes in a folder.

    Only the first page (up to 100 envelopes) is shown.
    """
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with get_client(ctx.config_manager.get()) as client:
            envelopes = client.get_folder_contents(folder_id, include_status=include_status)
            print_mapping(envelopes, ["Envelope ID", "Subject"], fmt, None if quiet else "Envelopes")

    except DocuSignError as e:
        fail(e)


# ============================================================================
# User Commands
# ============================================================================

@cli.command('users')
@common_options
@click.option('--active', 'active_only', is_flag=True, help='Only show active users')
@pass_context
@require_config
def list_users(ctx: DocuSignContext, verbose: bool, quiet: bool, output_format: str, active_only: bool):
    """List account users."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with get_client(ctx.config_manager.get()) as client:
            users = client.get_users(active_only=active_only)
            print_mapping(users, ["User ID", "User Name"], fmt, None if quiet else "Users")

    except DocuSignError as e:
        fail(e)


@cli.command('groups')
@common_options
@click.argument('user_id')
@pass_context
@require_config
def list_groups(ctx: DocuSignContext, verbose: bool, quiet: bool, output_format: str, user_id: str):
    """List the groups a user belongs to."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with get_client(ctx.config_manager.get()) as client:
            groups = client.get_user_groups(user_id)
            print_mapping(groups, ["Group ID", "Group Name"], fmt, None if quiet else "Groups")

    except DocuSignError as e:
        fail(e)


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point for the CLI."""
    try:
        cli(auto_envvar_prefix='DOCUSIGN')
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
