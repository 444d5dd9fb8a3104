"""Tool table: the tools this package exposes to a tool-hosting runtime."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog
from pydantic import BaseModel

from cs50videos.settings import Settings
from cs50videos.youtube import VideoListFetcher

LATEST_VIDEOS_TOOL = "CS50 latest videos"


class UnknownToolError(KeyError):
    """No tool registered under the requested name."""


class Tool(BaseModel):
    name: str
    description: str
    parameters: dict[str, Any]
    handler: Callable[..., str]


def build_tools(settings: Settings, log: structlog.stdlib.BoundLogger | None = None) -> dict[str, Tool]:
    """Build the tool table once at startup."""
    fetcher = VideoListFetcher(settings, log)
    tools = [
        Tool(
            name=LATEST_VIDEOS_TOOL,
            description="Fetches the latest CS50 videos from YouTube",
            parameters={
                "type": "object",
                "properties": {
                    "limit": {"type": "integer", "description": "Maximum number of videos to return"},
                },
                "required": ["limit"],
            },
            handler=fetcher.fetch,
        ),
    ]
    return {tool.name: tool for tool in tools}


def call_tool(tools: dict[str, Tool], name: str, arguments: dict[str, Any]) -> str:
    """Invoke a registered tool with keyword arguments."""
    try:
        tool = tools[name]
    except KeyError:
        raise UnknownToolError(name) from None
    return tool.handler(**arguments)
