#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Export users command module for the pachca-tags CLI tool.
"""

import click

from pachca_tags.csv_processor import USERS_EXPORT_FILE, write_users_csv
from pachca_tags.users import UserDirectory


@click.command("export-users")
@click.option("--output-file", default=USERS_EXPORT_FILE, show_default=True,
              type=click.Path(dir_okay=False), help="Where to save the user list")
@click.pass_context
def export_users(ctx, output_file):
    """
    Export all workspace users with their tags to a CSV file.
    """
    users = UserDirectory(ctx.obj["CLIENT"]).list_all_users()
    if not users:
        click.echo("Error: failed to fetch the user list.", err=True)
        return

    try:
        write_users_csv(users, output_file)
    except OSError as e:
        click.echo(f"Error writing {output_file}: {str(e)}", err=True)
        return
    click.echo(f"User list saved to {output_file}.")
