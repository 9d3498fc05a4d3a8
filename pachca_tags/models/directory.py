#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Directory models module.

This module provides Pydantic models for the tag and user records
returned by the Pachca API.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, field_validator


class Tag(BaseModel):
    """A workspace tag (group tag)."""

    id: int
    name: str


class GroupTagRef(BaseModel):
    """A tag reference embedded in a user record."""

    id: Optional[int] = None
    name: Optional[str] = None


class User(BaseModel):
    """A workspace user as returned by GET /users."""

    id: int
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nickname: Optional[str] = None
    department: Optional[str] = None
    phone_number: Optional[str] = None
    title: Optional[str] = None
    list_tags: Optional[List[Optional[str]]] = None
    group_tags: Optional[List[GroupTagRef]] = None

    @field_validator("list_tags", "group_tags", mode="before")
    @classmethod
    def _drop_malformed_lists(cls, value: Any) -> Any:
        # Anything other than a list is treated as "no tags"
        if value is not None and not isinstance(value, list):
            return None
        return value

    def tag_names(self) -> List[str]:
        """Return list_tags with empty entries dropped."""
        return [str(tag) for tag in self.list_tags or [] if tag is not None]


__all__ = ["Tag", "GroupTagRef", "User"]
