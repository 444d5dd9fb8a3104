"""Failure categories for the video fetch."""

from __future__ import annotations

from enum import StrEnum


class FetchErrorKind(StrEnum):
    """Why a fetch produced no video list."""
    NETWORK = "network"
    UPSTREAM = "upstream"
    PARSE = "parse"
    CONFIG = "config"
