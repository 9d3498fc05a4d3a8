#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exceptions for the pachca-tags CLI tool.
"""

from typing import Optional


class PachcaError(Exception):
    """Base class for errors reported by pachca-tags."""


class ConfigError(PachcaError):
    """Raised when required configuration is missing."""


class ApiError(PachcaError):
    """Raised when a request cannot be completed or a 2xx body is unusable.

    Attributes:
        status: HTTP status code, or None if no response was received
        body: Raw response body, if any
    """

    def __init__(self, message: str, status: Optional[int] = None, body: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(message)
