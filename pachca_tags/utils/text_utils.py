#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Text utility functions for the pachca-tags CLI tool.
"""

import re
from typing import Iterable, List, Optional

TAG_SEPARATORS = re.compile(r"[,;]")


def normalize_email(email: Optional[str]) -> str:
    """Normalize an email address for comparison.

    Args:
        email: The email address, possibly None or padded with whitespace

    Returns:
        The trimmed, lower-cased address ("" for None)
    """
    if email is None:
        return ""
    return str(email).strip().lower()


def split_tags(raw: Optional[str]) -> List[str]:
    """Split a tags cell on ',' or ';' into trimmed, non-empty names.

    Args:
        raw: The raw cell value

    Returns:
        A list of tag names in the order they appear
    """
    if not raw:
        return []
    return [tag.strip() for tag in TAG_SEPARATORS.split(raw) if tag.strip()]


def unique_ordered(items: Iterable[str]) -> List[str]:
    """Drop duplicates while keeping the first occurrence of each item."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def join_tags(tags: Optional[Iterable[Optional[str]]], separator: str = ";") -> str:
    """Join tag names for a CSV cell, skipping empty entries."""
    if not tags:
        return ""
    return separator.join(str(tag) for tag in tags if tag is not None)
