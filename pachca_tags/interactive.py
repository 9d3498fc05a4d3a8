#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Interactive menu module.

This module provides the numbered text menu shown when the pachca-tags
CLI tool is started without a subcommand.
"""

import logging

import click

from pachca_tags.commands.assign import assign
from pachca_tags.commands.export_tags import export_tags
from pachca_tags.commands.export_users import export_users
from pachca_tags.commands.template import template
from pachca_tags.exceptions import PachcaError

logger = logging.getLogger(__name__)

EXIT_CHOICE = "5"

MENU_ITEMS = [
    ("1", "Bulk assign or update user tags from users_tags.csv.", assign),
    ("2", "Export workspace tags to tags_export.csv.", export_tags),
    ("3", "Export all workspace users to users_export.csv.", export_users),
    ("4", "Create users_tags.csv from the users in the workspace.", template),
    (EXIT_CHOICE, "Exit", None),
]


class InteractiveMenu:
    """Reads numbered choices from stdin and runs the matching command."""

    def __init__(self, ctx: click.Context):
        """Initialize the InteractiveMenu.

        Args:
            ctx: The click context holding the API client
        """
        self.ctx = ctx
        self.commands = {key: command for key, _, command in MENU_ITEMS}

    def show(self):
        click.echo("\nWhat would you like to do?")
        for key, label, _ in MENU_ITEMS:
            click.echo(f"{key}. {label}")

    def read_choice(self) -> str:
        """Prompt for a choice; end of input counts as exit."""
        try:
            return click.prompt("", prompt_suffix="> ", default="", show_default=False).strip()
        except click.Abort:
            return EXIT_CHOICE

    def dispatch(self, choice: str) -> bool:
        """Run the command for a choice.

        Returns:
            False when the menu should exit, True otherwise
        """
        if choice == EXIT_CHOICE:
            click.echo("Exiting.")
            return False

        command = self.commands.get(choice)
        if command is None:
            click.echo("Invalid choice. Enter 1, 2, 3, 4 or 5.")
            return True

        try:
            self.ctx.invoke(command)
        except PachcaError as e:
            logger.debug(f"Menu action {choice} failed", exc_info=True)
            click.echo(f"Error: {str(e)}", err=True)
        return True

    def run(self):
        """Loop until the user chooses to exit."""
        while True:
            self.show()
            if not self.dispatch(self.read_choice()):
                break
