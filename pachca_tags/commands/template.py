#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Template command module for the pachca-tags CLI tool.

This module defines the 'template' command, which generates a
users_tags.csv pre-filled with current users and their tags for an
administrator to edit before running 'assign'.
"""

import click

from pachca_tags.csv_processor import ASSIGNMENTS_FILE, write_template_csv
from pachca_tags.tags import TagDirectory
from pachca_tags.users import UserDirectory


@click.command()
@click.option("--output-file", default=ASSIGNMENTS_FILE, show_default=True,
              type=click.Path(dir_okay=False), help="Where to save the template")
@click.pass_context
def template(ctx, output_file):
    """
    Generate an assignment template from the users in the workspace.

    Example:
        pachca-tags template
        # edit users_tags.csv, then
        pachca-tags assign
    """
    client = ctx.obj["CLIENT"]

    users = UserDirectory(client).list_all_users()
    tags = TagDirectory(client).list_tags() or []

    try:
        write_template_csv(users, tags, output_file)
    except OSError as e:
        click.echo(f"Error writing {output_file}: {str(e)}", err=True)
        return

    click.echo("\n==============================")
    click.echo(f"Template {output_file} created. Fill in the tags column for each user.")
    click.echo("Existing tags:")
    click.echo(", ".join(tag.name for tag in tags))
    click.echo("==============================\n")
