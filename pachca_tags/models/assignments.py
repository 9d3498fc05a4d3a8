#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Assignment models module.

This module provides the Pydantic model for one row of the user-tag
assignment CSV.
"""

from typing import List

from pydantic import BaseModel

# Rows of the generated template that are not real users
RESERVED_EMAILS = frozenset({"tags_from_workspace", "example@example.com"})


class AssignmentRow(BaseModel):
    """One email -> tags row read from users_tags.csv."""

    line: int
    email: str = ""
    tags: List[str] = []
    comment: str = ""

    def is_reserved(self) -> bool:
        return self.email.strip().lower() in RESERVED_EMAILS

    def is_skipped(self) -> bool:
        """True for rows that must not touch the API."""
        return not self.email or not self.tags or self.is_reserved()


__all__ = ["AssignmentRow", "RESERVED_EMAILS"]
