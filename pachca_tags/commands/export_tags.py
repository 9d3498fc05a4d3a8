#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Export tags command module for the pachca-tags CLI tool.
"""

import click

from pachca_tags.csv_processor import TAGS_EXPORT_FILE, write_tags_csv
from pachca_tags.tags import TagDirectory


@click.command("export-tags")
@click.option("--output-file", default=TAGS_EXPORT_FILE, show_default=True,
              type=click.Path(dir_okay=False), help="Where to save the tag list")
@click.pass_context
def export_tags(ctx, output_file):
    """
    Export all workspace tags to a CSV file (columns: id, name).
    """
    tags = TagDirectory(ctx.obj["CLIENT"]).list_tags()
    if tags is None:
        return

    try:
        write_tags_csv(tags, output_file)
    except OSError as e:
        click.echo(f"Error writing {output_file}: {str(e)}", err=True)
        return
    click.echo(f"Tag list saved to {output_file}.")
