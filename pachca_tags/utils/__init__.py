#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Utilities module.

This module provides utility functions for the pachca-tags CLI tool.
"""

from pachca_tags.utils.text_utils import join_tags, normalize_email, split_tags, unique_ordered

__all__ = [
    "join_tags",
    "normalize_email",
    "split_tags",
    "unique_ordered",
]
