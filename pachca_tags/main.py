#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI module for the pachca-tags tool.

This module defines the main CLI interface for the pachca-tags tool.
"""
import sys
import logging
import click
from dotenv import load_dotenv

from pachca_tags import __version__
from pachca_tags.client import PachcaClient
from pachca_tags.config import OPTIONAL_ENV_VARS, load_config, missing_env_vars
from pachca_tags.exceptions import PachcaError
from pachca_tags.interactive import InteractiveMenu

# Import commands
from pachca_tags.commands.assign import assign
from pachca_tags.commands.export_tags import export_tags
from pachca_tags.commands.export_users import export_users
from pachca_tags.commands.template import template

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def check_environment():
    """Check if all required environment variables are set."""
    missing = missing_env_vars()

    if missing:
        click.echo("Error: admin token not found. Missing required environment variables:", err=True)
        for var in missing:
            click.echo(f"  {var}", err=True)
        click.echo("Optional:", err=True)
        for var, desc in OPTIONAL_ENV_VARS.items():
            click.echo(f"  {var} - {desc}", err=True)
        click.echo("\nCreate a .env file with these variables or set them in your environment.", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("--dry-run", is_flag=True,
              help="Preview tag assignments without creating tags or updating users")
@click.option("--verbose", is_flag=True,
              help="Log API requests and responses")
@click.pass_context
def cli(ctx, dry_run, verbose):
    """
    pachca-tags - Manage Pachca user tags in bulk from CSV files.

    Run without a command to open the interactive menu.

    Configuration:
    Create a .env file with:
    - PACHCA_ADMIN_TOKEN: Admin access token (required)
    - PACHCA_API_URL: API base URL (optional)

    Example Usage:
    $ pachca-tags
    $ pachca-tags template
    $ pachca-tags --dry-run assign --csv-file users_tags.csv
    $ pachca-tags export-users
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)

    if "CLIENT" not in ctx.obj:
        # Load environment variables from .env file
        load_dotenv()

        # Check environment variables
        check_environment()

        ctx.obj["CLIENT"] = PachcaClient(load_config())

    ctx.obj["DRY_RUN"] = dry_run

    if ctx.invoked_subcommand is None:
        InteractiveMenu(ctx).run()


# Register commands
cli.add_command(assign)
cli.add_command(export_tags)
cli.add_command(export_users)
cli.add_command(template)


def main():
    """Entry point for the pachca-tags CLI tool."""
    try:
        cli(obj={})
    except PachcaError as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
