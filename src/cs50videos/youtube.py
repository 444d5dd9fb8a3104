"""Latest CS50 uploads via the YouTube Data API v3 search endpoint."""

from __future__ import annotations

from typing import Annotated

import httpx
import structlog
from pydantic import BaseModel, BeforeValidator, Field, ValidationError

from cs50videos.http import create_http_client
from cs50videos.settings import Settings
from cs50videos.statuses import FetchErrorKind

SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
WATCH_URL = "https://www.youtube.com/watch?v="
CHANNEL_ID = "UCcabW7890RKJzL968QWEykA"  # CS50 official channel

REPORT_HEADER = "🎓 **CS50 Latest Videos:**\n\n"
FAILURE_PREFIX = "⚠️ Failed to fetch CS50 videos: "


# -- Wire models ---------------------------------------------------------------


class _Snippet(BaseModel):
    title: str


def _opt_string(value: object) -> str:
    """Null becomes "", other scalars their string form."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class _ItemId(BaseModel):
    video_id: Annotated[str, BeforeValidator(_opt_string)] = Field(default="", alias="videoId")


class _SearchItem(BaseModel):
    id: _ItemId = _ItemId()
    snippet: _Snippet


class _SearchResponse(BaseModel):
    items: list[_SearchItem]


# -- Results -------------------------------------------------------------------


class VideoEntry(BaseModel):
    title: str
    video_id: str = ""

    @property
    def watch_url(self) -> str:
        return f"{WATCH_URL}{self.video_id}"


class VideoList(BaseModel):
    videos: list[VideoEntry] = []


class FetchFailure(BaseModel):
    kind: FetchErrorKind
    message: str


FetchResult = VideoList | FetchFailure


def parse_search_response(payload: object) -> VideoList:
    """Map a search response body to a VideoList, keeping upstream order.

    Raises pydantic.ValidationError when ``items`` or an item's ``snippet.title``
    is missing.
    """
    response = _SearchResponse.model_validate(payload)
    return VideoList(
        videos=[VideoEntry(title=item.snippet.title, video_id=item.id.video_id) for item in response.items]
    )


def render_report(videos: VideoList) -> str:
    parts = [REPORT_HEADER]
    for i, video in enumerate(videos.videos, start=1):
        parts.append(f"{i}. {video.title}\n{video.watch_url}\n\n")
    return "".join(parts)


def render_failure(failure: FetchFailure) -> str:
    return f"{FAILURE_PREFIX}{failure.message}"


def _validation_message(exc: ValidationError) -> str:
    """First validation error as ``dotted.location: message``."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "response"
    return f"{location}: {first['msg']}"


def _upstream_message(resp: httpx.Response) -> str:
    """Status line plus the Google API error message when the body has one.

    Built from the response rather than str(HTTPStatusError), whose text
    includes the request URL and therefore the API key.
    """
    message = f"{resp.status_code} {resp.reason_phrase}".rstrip()
    try:
        error = resp.json().get("error", {})
    except (ValueError, AttributeError):
        return message
    detail = error.get("message") if isinstance(error, dict) else None
    if detail:
        message += f": {detail}"
    return message


class VideoListFetcher:
    """Fetches the most recent uploads of the CS50 channel."""

    def __init__(self, settings: Settings, log: structlog.stdlib.BoundLogger | None = None) -> None:
        self.settings = settings
        self.log = log or structlog.get_logger("cs50videos.youtube")

    def search_params(self, limit: int) -> dict[str, str | int]:
        return {
            "key": self.settings.youtube_api_key,
            "channelId": CHANNEL_ID,
            "part": "snippet",
            "order": "date",
            "maxResults": limit,
        }

    def fetch_videos(self, limit: int) -> FetchResult:
        """One GET against the search endpoint. Failures come back as FetchFailure."""
        self.log.info("youtube.fetching", channel_id=CHANNEL_ID, limit=limit)
        try:
            client = create_http_client(
                proxy_url=self.settings.proxy_url or None,
                timeout=self.settings.http_timeout,
            )
        except (ValueError, httpx.InvalidURL) as exc:
            # Bad proxy URL or scheme
            self.log.exception("youtube.fetch_failed", kind=FetchErrorKind.CONFIG, limit=limit)
            return FetchFailure(kind=FetchErrorKind.CONFIG, message=str(exc))

        try:
            resp = client.get(SEARCH_URL, params=self.search_params(limit))
            resp.raise_for_status()
            videos = parse_search_response(resp.json())
        except httpx.HTTPStatusError as exc:
            message = _upstream_message(exc.response)
            self.log.warning(
                "youtube.fetch_failed",
                kind=FetchErrorKind.UPSTREAM,
                limit=limit,
                status=exc.response.status_code,
                error=message,
            )
            return FetchFailure(kind=FetchErrorKind.UPSTREAM, message=message)
        except httpx.HTTPError as exc:
            self.log.exception("youtube.fetch_failed", kind=FetchErrorKind.NETWORK, limit=limit)
            return FetchFailure(kind=FetchErrorKind.NETWORK, message=str(exc))
        except ValidationError as exc:
            message = _validation_message(exc)
            self.log.warning("youtube.fetch_failed", kind=FetchErrorKind.PARSE, limit=limit, error=message)
            return FetchFailure(kind=FetchErrorKind.PARSE, message=message)
        except ValueError as exc:
            # Body is not JSON
            self.log.warning("youtube.fetch_failed", kind=FetchErrorKind.PARSE, limit=limit, error=str(exc))
            return FetchFailure(kind=FetchErrorKind.PARSE, message=str(exc))
        finally:
            client.close()

        self.log.info("youtube.videos_fetched", count=len(videos.videos), limit=limit)
        return videos

    def fetch(self, limit: int) -> str:
        """Formatted report of the latest ``limit`` videos, or a warning line on failure."""
        result = self.fetch_videos(limit)
        if isinstance(result, FetchFailure):
            return render_failure(result)
        return render_report(result)
