#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tag directory module.

This module provides lookup and creation of workspace tags (group tags)
through the Pachca API as part of the pachca-tags CLI tool.
"""

import logging
from typing import Dict, Iterable, List, Optional

import click
from pydantic import ValidationError

from pachca_tags.client import PachcaClient
from pachca_tags.exceptions import ApiError
from pachca_tags.models import Tag
from pachca_tags.utils import unique_ordered

logger = logging.getLogger(__name__)

TAGS_PATH = "/group_tags"

# Substring of a 422 body that means the tag name is already in use
DUPLICATE_MARKER = "taken"


class TagDirectory:
    """Resolves and creates workspace tags."""

    def __init__(self, client: PachcaClient):
        """Initialize the TagDirectory with an API client.

        Args:
            client: An authenticated PachcaClient instance
        """
        self.client = client

    def list_tags(self) -> Optional[List[Tag]]:
        """Fetch every tag in the workspace.

        Returns:
            A list of Tag objects, or None if the API did not answer 200
        """
        resp = self.client.get(TAGS_PATH)
        if resp.status != 200:
            logger.debug(f"GET {TAGS_PATH} returned {resp.status}: {resp.body}")
            click.echo("Error: failed to fetch the tag list.", err=True)
            return None
        items = resp.data() or []
        if not isinstance(items, list):
            raise ApiError(f"Expected a list of tags from GET {TAGS_PATH}", resp.status, resp.body)

        tags = []
        for item in items:
            try:
                tags.append(Tag.model_validate(item))
            except ValidationError as e:
                logger.error(f"Skipping malformed tag record: {str(e)}")
        return tags

    def fetch_existing_tags(self) -> Dict[str, Optional[int]]:
        """Return a name -> id mapping of existing tags (empty on failure)."""
        tags = self.list_tags()
        if tags is None:
            return {}
        return {tag.name: tag.id for tag in tags}

    def create_tag(self, name: str) -> Optional[int]:
        """Create a tag.

        Args:
            name: The tag name

        Returns:
            The id of the new tag, or None if it already exists or creation failed
        """
        resp = self.client.post(TAGS_PATH, {"group_tag": {"name": name}})
        if resp.status in (200, 201):
            data = resp.data()
            if not isinstance(data, dict) or not isinstance(data.get("id"), int):
                raise ApiError(f"Tag '{name}' was created but the response has no id", resp.status, resp.body)
            tag_id = data["id"]
            click.echo(f"Tag '{name}' created.")
            return tag_id
        if resp.status == 422 and DUPLICATE_MARKER in resp.body:
            click.echo(f"Tag '{name}' already exists.")
            return None
        click.echo(f"Error creating tag '{name}': {resp.body}", err=True)
        return None

    def lookup_tag_id(self, name: str) -> Optional[int]:
        """Find the id of an existing tag by exact name."""
        return self.fetch_existing_tags().get(name)


def merge_tags(current: Iterable[str], new: Iterable[str]) -> List[str]:
    """Union of two tag lists, existing tags first, without duplicates.

    Args:
        current: Tags the user already has
        new: Tags to add

    Returns:
        The merged list; nothing from `current` is ever dropped
    """
    return unique_ordered(list(current) + list(new))
