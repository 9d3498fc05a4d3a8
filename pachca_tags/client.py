#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pachca API client module.

This module provides a thin authenticated wrapper around requests for the
handful of endpoints the pachca-tags CLI tool uses. Non-2xx responses are
returned to the caller as-is; only transport failures and unusable 2xx
bodies raise.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests

from pachca_tags.config import ClientConfig
from pachca_tags.exceptions import ApiError

logger = logging.getLogger(__name__)


class ApiResponse:
    """Status code and raw body of one API call."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body or ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def data(self) -> Any:
        """Return the top-level "data" field of a JSON body.

        Raises:
            ApiError: If the body is not JSON or has no "data" field
        """
        try:
            payload = json.loads(self.body)
        except ValueError as e:
            raise ApiError(f"Invalid JSON in API response: {e}", self.status, self.body) from e
        if not isinstance(payload, dict) or "data" not in payload:
            raise ApiError("API response has no 'data' field", self.status, self.body)
        return payload["data"]

    def __repr__(self) -> str:
        return f"ApiResponse(status={self.status}, body={self.body[:200]!r})"


class PachcaClient:
    """Issues bearer-authenticated requests against the Pachca API."""

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            config: Connection settings
            session: Optional pre-built session (used by tests)
        """
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {config.admin_token}",
            "Accept": "application/json",
        })

    def _url(self, path: str) -> str:
        return f"{self.config.api_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None,
                json_body: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Send a request and return its status and body.

        Raises:
            ApiError: If the request could not be sent or no response arrived
        """
        try:
            resp = self.session.request(method, self._url(path), params=params, json=json_body)
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {str(e)}")
            raise ApiError(f"{method} {path} failed: {e}") from e

        logger.debug(f"{method} {path} params={params} -> {resp.status_code}")
        return ApiResponse(resp.status_code, resp.text)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return self.request("GET", path, params=params)

    def post(self, path: str, json_body: Dict[str, Any]) -> ApiResponse:
        return self.request("POST", path, json_body=json_body)

    def put(self, path: str, json_body: Dict[str, Any]) -> ApiResponse:
        return self.request("PUT", path, json_body=json_body)
