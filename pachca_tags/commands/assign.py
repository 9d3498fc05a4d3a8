#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Assign command module for the pachca-tags CLI tool.

This module defines the 'assign' command for bulk-adding tags to users
from a CSV file.
"""

import csv

import click

from pachca_tags.assign import BulkAssigner
from pachca_tags.csv_processor import ASSIGNMENTS_FILE, read_assignments_csv
from pachca_tags.tags import TagDirectory
from pachca_tags.users import UserDirectory


@click.command()
@click.option(
    "--csv-file",
    default=ASSIGNMENTS_FILE,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="CSV file with email and tags columns",
)
@click.pass_context
def assign(ctx, csv_file):
    """
    Add tags to users from a CSV file.

    The CSV file must have a header row with at least these columns:
    - email: The user's email address
    - tags: Tag names separated by ',' or ';'

    Missing tags are created. Tags the user already has are kept.

    Example:
        pachca-tags assign --csv-file users_tags.csv
    """
    client = ctx.obj["CLIENT"]
    dry_run = ctx.obj.get("DRY_RUN", False)

    try:
        rows = read_assignments_csv(csv_file)
    except (OSError, ValueError, csv.Error) as e:
        click.echo(
            f"Error: could not read {csv_file}. Check that the file exists and is valid: {str(e)}",
            err=True,
        )
        return

    if dry_run:
        click.echo("DRY RUN: No changes will be made.")

    assigner = BulkAssigner(TagDirectory(client), UserDirectory(client), dry_run=dry_run)
    results = assigner.process_rows(rows)

    click.echo("\nResults:")
    click.echo(f"  Total rows: {results['total']}")
    click.echo(f"  Processed: {results['processed']}")
    click.echo(f"  Skipped: {results['skipped']}")
    click.echo(f"  Successful: {results['success']}")
    click.echo(f"  Failed: {results['failed']}")
    click.echo("Bulk tag assignment finished.")
