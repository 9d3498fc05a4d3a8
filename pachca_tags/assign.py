#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Bulk tag assignment module.

This module applies the rows of an assignment CSV to workspace users:
missing tags are created, each user is looked up by email, and the row's
tags are added to the tags the user already has. Tags are never removed.
"""

import logging
from typing import Dict, List, Optional, Sequence

import click

from pachca_tags.exceptions import ApiError
from pachca_tags.models import AssignmentRow
from pachca_tags.tags import TagDirectory, merge_tags
from pachca_tags.users import UserDirectory

logger = logging.getLogger(__name__)


class BulkAssigner:
    """Applies assignment rows one by one, continuing past failures."""

    def __init__(self, tags: TagDirectory, users: UserDirectory, dry_run: bool = False):
        """Initialize the BulkAssigner.

        Args:
            tags: Tag directory used to resolve and create tags
            users: User directory used to find and update users
            dry_run: Report what would change without creating or updating anything
        """
        self.tags = tags
        self.users = users
        self.dry_run = dry_run
        self.existing_tags: Dict[str, Optional[int]] = {}

    def ensure_tags(self, names: Sequence[str]) -> None:
        """Create every name not yet in existing_tags.

        Each name is attempted once per run; when creation does not return
        an id the tag is looked up by name instead.
        """
        for name in names:
            if name in self.existing_tags:
                continue
            self.existing_tags[name] = None
            if self.dry_run:
                click.echo(f"Would create tag '{name}'")
                continue
            tag_id = self.tags.create_tag(name)
            if tag_id is None:
                tag_id = self.tags.lookup_tag_id(name)
            self.existing_tags[name] = tag_id

    def assign_row(self, row: AssignmentRow) -> bool:
        """Add the row's tags to the matching user.

        Returns:
            True if the user's tags were updated (or would be, in dry-run mode)
        """
        self.ensure_tags(row.tags)

        user_id = self.users.find_user_id(row.email)
        if user_id is None:
            click.echo(f"[ERROR] User with email {row.email} not found.", err=True)
            return False

        current = self.users.get_user_tags(user_id)
        if current is None:
            click.echo(f"[ERROR] {row.email}: could not read current tags, nothing changed.", err=True)
            return False

        merged = merge_tags(current, row.tags)
        if self.dry_run:
            click.echo(f"Would assign tags to {row.email}: {', '.join(merged)}")
            return True

        resp = self.users.update_user_tags(user_id, merged)
        if resp.status == 200:
            click.echo(f"[OK] {row.email}: tags assigned: {', '.join(merged)}")
            return True

        click.echo(
            f"[ERROR] {row.email}: failed to assign tags ({', '.join(merged)}). API response: {resp.body}",
            err=True,
        )
        return False

    def process_rows(self, rows: List[AssignmentRow]) -> Dict[str, int]:
        """Apply every row in order.

        Args:
            rows: Rows read from the assignment CSV

        Returns:
            Dictionary with counts of processed, skipped, successful and failed rows
        """
        results = {
            "total": len(rows),
            "processed": 0,
            "skipped": 0,
            "success": 0,
            "failed": 0,
        }

        self.existing_tags = self.tags.fetch_existing_tags()

        for row in rows:
            if row.is_skipped():
                logger.debug(f"Skipping line {row.line} ({row.email or 'no email'})")
                results["skipped"] += 1
                continue

            try:
                success = self.assign_row(row)
            except ApiError as e:
                click.echo(f"[ERROR] {row.email}: {str(e)}", err=True)
                success = False

            results["processed"] += 1
            if success:
                results["success"] += 1
            else:
                results["failed"] += 1

        return results
