# -*- coding: utf-8 -*-

"""
pachca-tags - A command line tool for managing Pachca user tags in bulk.

This package exports workspace tags and users to CSV, generates a user-tag
template, and applies tag assignments from CSV through the Pachca API.
"""

__version__ = "0.1.0"

# Import main components for easier access
from pachca_tags.client import ApiResponse, PachcaClient
from pachca_tags.config import ClientConfig, load_config
from pachca_tags.tags import TagDirectory
from pachca_tags.users import UserDirectory
from pachca_tags.assign import BulkAssigner

# Define public API
__all__ = [
    "ApiResponse",
    "BulkAssigner",
    "ClientConfig",
    "PachcaClient",
    "TagDirectory",
    "UserDirectory",
    "load_config",
]
