#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CSV processor module for tag and user exports and tag assignments.

This module reads and writes the three CSV shapes used by the pachca-tags
CLI tool: the tag list, the user list, and the user-tag assignment
template/input.
"""

import csv
import logging
from typing import Dict, List, Optional, Sequence

from pachca_tags.models import AssignmentRow, Tag, User
from pachca_tags.utils import join_tags, split_tags

logger = logging.getLogger(__name__)

TAGS_EXPORT_FILE = "tags_export.csv"
USERS_EXPORT_FILE = "users_export.csv"
ASSIGNMENTS_FILE = "users_tags.csv"

TAG_COLUMNS = ["id", "name"]
USER_COLUMNS = [
    "id",
    "email",
    "first_name",
    "last_name",
    "nickname",
    "department",
    "phone_number",
    "title",
    "tags",
]
TEMPLATE_COLUMNS = ["email", "first_name", "last_name", "tags", "comment"]

WORKSPACE_TAGS_ROW = "tags_from_workspace"
EXAMPLE_ROW = ["example@example.com", "Ivan", "Ivanov", "backend;qa;lead", "Example row, fill in like this"]


def write_tags_csv(tags: Sequence[Tag], output_path: str = TAGS_EXPORT_FILE) -> int:
    """Write one `id,name` row per tag.

    Returns:
        The number of rows written
    """
    with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(TAG_COLUMNS)
        for tag in tags:
            writer.writerow([tag.id, tag.name])
    logger.info(f"Wrote {len(tags)} tags to {output_path}")
    return len(tags)


def write_users_csv(users: Sequence[User], output_path: str = USERS_EXPORT_FILE) -> int:
    """Write one row per user; `tags` is list_tags joined with ';'.

    Returns:
        The number of rows written
    """
    with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(USER_COLUMNS)
        for user in users:
            row = []
            for column in USER_COLUMNS:
                if column == "tags":
                    row.append(join_tags(user.list_tags))
                else:
                    value = getattr(user, column)
                    row.append("" if value is None else value)
            writer.writerow(row)
    logger.info(f"Wrote {len(users)} users to {output_path}")
    return len(users)


def template_tags_for(user: User, tag_names_by_id: Dict[int, str]) -> str:
    """Tags cell for a user in the template.

    Uses list_tags when present and non-empty, otherwise the names of the
    user's group_tags (looked up by id where the name is missing).
    """
    if user.list_tags:
        return join_tags(user.list_tags)
    if user.group_tags:
        names = [ref.name or tag_names_by_id.get(ref.id) for ref in user.group_tags]
        return join_tags(names)
    return ""


def write_template_csv(users: Sequence[User], tags: Sequence[Tag],
                       output_path: str = ASSIGNMENTS_FILE) -> int:
    """Write the users_tags.csv template.

    The first data row lists every workspace tag (only when there are any),
    the second is a worked example, then one row per user.

    Returns:
        The number of user rows written
    """
    tag_names_by_id = {tag.id: tag.name for tag in tags}
    with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(TEMPLATE_COLUMNS)
        if tags:
            writer.writerow([WORKSPACE_TAGS_ROW, "", "", join_tags(tag.name for tag in tags), ""])
        writer.writerow(EXAMPLE_ROW)
        for user in users:
            writer.writerow([
                user.email or "",
                user.first_name or "",
                user.last_name or "",
                template_tags_for(user, tag_names_by_id),
                "",
            ])
    logger.info(f"Wrote template with {len(users)} users to {output_path}")
    return len(users)


def _cell(row: Dict[Optional[str], Optional[str]], column: str) -> str:
    value = row.get(column)
    return value.strip() if isinstance(value, str) else ""


def read_assignments_csv(csv_file_path: str = ASSIGNMENTS_FILE) -> List[AssignmentRow]:
    """Read email -> tags rows from an assignment CSV.

    Only the `email` and `tags` columns are required; `comment` is kept
    when present.

    Args:
        csv_file_path: Path to the CSV file

    Returns:
        List of AssignmentRow objects, one per data row (skippable rows included)

    Raises:
        OSError: If the file cannot be opened
        ValueError: If the header row is missing or lacks a required column
        csv.Error: If the file is not valid CSV
    """
    rows = []
    try:
        with open(csv_file_path, "r", newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)

            if not reader.fieldnames:
                raise ValueError("CSV file has no header row")

            fieldnames = [name.strip() for name in reader.fieldnames if name]
            for field in ("email", "tags"):
                if field not in fieldnames:
                    raise ValueError(f"CSV file is missing required column: {field}")
            reader.fieldnames = [name.strip() if name else name for name in reader.fieldnames]

            for row in reader:
                rows.append(AssignmentRow(
                    line=reader.line_num,
                    email=_cell(row, "email"),
                    tags=split_tags(row.get("tags")),
                    comment=_cell(row, "comment"),
                ))
    except (OSError, ValueError, csv.Error) as e:
        logger.error(f"Error reading CSV file '{csv_file_path}': {str(e)}")
        raise

    return rows
