#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Models module.

This module provides the Pydantic models used for validation and type
checking of API payloads and CSV rows throughout the application.
"""

from pachca_tags.models.assignments import RESERVED_EMAILS, AssignmentRow
from pachca_tags.models.directory import GroupTagRef, Tag, User

__all__ = [
    "AssignmentRow",
    "GroupTagRef",
    "RESERVED_EMAILS",
    "Tag",
    "User",
]
