#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
User directory module.

This module provides paginated listing, email lookup and tag updates of
workspace users through the Pachca API as part of the pachca-tags CLI tool.
"""

import logging
from typing import Iterator, List, Optional

from pydantic import ValidationError

from pachca_tags.client import ApiResponse, PachcaClient
from pachca_tags.exceptions import ApiError
from pachca_tags.models import User
from pachca_tags.utils import normalize_email

logger = logging.getLogger(__name__)

USERS_PATH = "/users"
PAGE_SIZE = 100


class UserDirectory:
    """Lists, finds and updates workspace users."""

    def __init__(self, client: PachcaClient, page_size: int = PAGE_SIZE):
        """Initialize the UserDirectory with an API client.

        Args:
            client: An authenticated PachcaClient instance
            page_size: Number of users requested per page
        """
        self.client = client
        self.page_size = page_size

    def iter_pages(self) -> Iterator[List[User]]:
        """Yield pages of users starting at page 1.

        Stops at the first non-200 response, the first empty page, or the
        first page shorter than the page size. A server that caps `per`
        below page_size ends the listing after page 1.
        """
        page = 1
        while True:
            resp = self.client.get(USERS_PATH, {"page": page, "per": self.page_size})
            if resp.status != 200:
                logger.warning(f"Stopped listing users at page {page}: HTTP {resp.status}")
                return

            items = resp.data() or []
            if not isinstance(items, list):
                raise ApiError(f"Expected a list of users from GET {USERS_PATH}", resp.status, resp.body)
            if not items:
                return

            users = []
            for item in items:
                try:
                    users.append(User.model_validate(item))
                except ValidationError as e:
                    logger.error(f"Skipping malformed user record on page {page}: {str(e)}")
            yield users

            if len(items) < self.page_size:
                return
            page += 1

    def list_all_users(self) -> List[User]:
        """Fetch every user; partial results are kept if a page fails."""
        all_users = []
        for users in self.iter_pages():
            all_users.extend(users)
        logger.info(f"Fetched {len(all_users)} users")
        return all_users

    def find_user_id(self, email: str) -> Optional[int]:
        """Find a user id by email, ignoring case and surrounding whitespace.

        Args:
            email: The email address to look for

        Returns:
            The id of the first matching user, or None
        """
        wanted = normalize_email(email)
        for users in self.iter_pages():
            for user in users:
                if normalize_email(user.email) == wanted:
                    return user.id
        return None

    def get_user_tags(self, user_id: int) -> Optional[List[str]]:
        """Return the user's current list_tags.

        Returns:
            The tag names ([] if the record has none), or None if the user
            could not be fetched
        """
        resp = self.client.get(f"{USERS_PATH}/{user_id}")
        if resp.status != 200:
            logger.error(f"Error fetching user {user_id}: HTTP {resp.status} {resp.body}")
            return None

        data = resp.data()
        if not isinstance(data, dict):
            return []
        tags = data.get("list_tags")
        if not isinstance(tags, list):
            return []
        return [str(tag) for tag in tags if tag is not None]

    def update_user_tags(self, user_id: int, tag_names: List[str]) -> ApiResponse:
        """Replace the user's list_tags with tag_names."""
        resp = self.client.put(f"{USERS_PATH}/{user_id}", {"user": {"list_tags": tag_names}})
        logger.debug(f"API RESPONSE (user_id={user_id}): status={resp.status}, body={resp.body}")
        return resp
