"""Builders for YouTube search responses and mock httpx clients."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx

from cs50videos.youtube import SEARCH_URL


def make_item(title: str = "Lecture 0 - Scratch", video_id: str | None = "abc123") -> dict:
    item_id = {"kind": "youtube#video"}
    if video_id is not None:
        item_id["videoId"] = video_id
    return {
        "kind": "youtube#searchResult",
        "id": item_id,
        "snippet": {"title": title, "channelId": "UCcabW7890RKJzL968QWEykA"},
    }


def make_search_response(*items) -> dict:
    return {"kind": "youtube#searchListResponse", "items": list(items)}


def make_response(status_code: int = 200, json: object = None, text: str | None = None) -> httpx.Response:
    """A real httpx.Response bound to a request, so raise_for_status() works."""
    request = httpx.Request("GET", SEARCH_URL)
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    return httpx.Response(status_code, json=json, request=request)


def mock_http_client(response: httpx.Response | None = None, error: Exception | None = None) -> MagicMock:
    """A mock httpx.Client whose get() returns *response* or raises *error*."""
    client = MagicMock()
    if error is not None:
        client.get.side_effect = error
    else:
        client.get.return_value = response
    return client
