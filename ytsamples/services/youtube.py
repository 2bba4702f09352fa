import json
import logging

import httplib2
from googleapiclient.errors import HttpError
from googleapiclient.http import HttpRequest

from ytsamples.client import ClientConfig
from ytsamples.exceptions import ApiError, TransportError
from ytsamples.models.youtube import (
    CommentReply,
    CommentThreadItem,
    CommentThreadRequest,
    SearchRequest,
    SearchResultItem,
)

logger = logging.getLogger(__name__)


def _api_error(e: HttpError) -> ApiError:
    """Pull the code and message out of the JSON error body, falling back to the HTTP status."""
    code = e.resp.status
    message = str(e)
    try:
        error = json.loads(e.content.decode("utf-8"))["error"]
        code = error.get("code", code)
        message = error.get("message", message)
    except (ValueError, KeyError, TypeError, AttributeError):
        pass
    return ApiError(code, message)


def execute(client: ClientConfig, request: HttpRequest) -> dict:
    """Run the one blocking API call for *request*."""
    client.request_initializer(request)
    try:
        return request.execute()
    except HttpError as e:
        raise _api_error(e) from e
    except (OSError, httplib2.HttpLib2Error) as e:
        raise TransportError(f"{type(e).__name__} : {e}") from e


def _default_thumbnail(snippet: dict) -> str | None:
    return snippet.get("thumbnails", {}).get("default", {}).get("url")


def search(client: ClientConfig, request: SearchRequest) -> list[SearchResultItem]:
    """Search YouTube by keyword. Returns a single page of results in response order."""
    params = {
        "part": "id,snippet",
        "q": request.query,
        "maxResults": request.max_results,
        "key": request.api_key,
    }
    if request.resource_type_filter:
        params["type"] = request.resource_type_filter
    if request.field_projection:
        params["fields"] = request.field_projection
    logger.debug("search.list %s", {k: v for k, v in params.items() if k != "key"})
    result = execute(client, client.service.search().list(**params))
    items = []
    for item in result.get("items", []):
        resource_id = item.get("id", {})
        snippet = item.get("snippet", {})
        items.append(SearchResultItem(
            kind=resource_id.get("kind", ""),
            video_id=resource_id.get("videoId"),
            channel_id=snippet.get("channelId"),
            title=snippet.get("title"),
            thumbnail_url=_default_thumbnail(snippet),
        ))
    return items


def _comment_reply(comment: dict) -> CommentReply:
    snippet = comment.get("snippet", {})
    return CommentReply(
        comment_id=comment.get("id", ""),
        author_name=snippet.get("authorDisplayName"),
        text=snippet.get("textDisplay"),
        like_count=snippet.get("likeCount"),
    )


def list_comment_threads(client: ClientConfig, request: CommentThreadRequest) -> list[CommentThreadItem]:
    """List the comment threads of a video, with their replies when requested."""
    params = {
        "part": "snippet,replies" if request.include_replies else "snippet",
        "videoId": request.video_id,
        "key": request.api_key,
    }
    if request.search_terms:
        params["searchTerms"] = request.search_terms
    logger.debug("commentThreads.list %s", {k: v for k, v in params.items() if k != "key"})
    result = execute(client, client.service.commentThreads().list(**params))
    threads = []
    for item in result.get("items", []):
        snippet = item.get("snippet", {})
        top_level = snippet.get("topLevelComment", {}).get("snippet", {})
        replies = item.get("replies", {}).get("comments", [])
        threads.append(CommentThreadItem(
            kind=item.get("kind", ""),
            video_id=snippet.get("videoId"),
            channel_id=snippet.get("channelId"),
            top_level_comment_id=item.get("id", ""),
            top_level_comment_text=top_level.get("textDisplay"),
            like_count=top_level.get("likeCount"),
            replies=[_comment_reply(c) for c in replies],
        ))
    return threads
