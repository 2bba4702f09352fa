import logging
import sys
import traceback

from pydantic import ValidationError

from ytsamples.client import build_client
from ytsamples.config import Settings, get_api_key, get_settings, load_properties
from ytsamples.exceptions import ApiError, ConfigError, ErrorKind, TransportError
from ytsamples.models.youtube import CommentThreadRequest, SearchRequest
from ytsamples.render import print_comment_threads, print_search_results
from ytsamples.services import youtube as youtube_service

DEFAULT_QUERY = "YouTube Developers Live"
SEARCH_APPLICATION_NAME = "youtube-cmdline-search-sample"
COMMENT_THREADS_APPLICATION_NAME = "youtube-cmdline-commentThreads-sample"


def get_input_query() -> str:
    """Read one search term from the terminal; an empty line means the default query."""
    try:
        query = input("Please enter a search term: ")
    except EOFError:
        query = ""
    if len(query) < 1:
        query = DEFAULT_QUERY
    return query


def _report(kind: ErrorKind, message: str) -> None:
    print(f"[{kind.value}] {message}", file=sys.stderr)


def _setup() -> tuple[Settings, str]:
    """Load settings and the API key. Raises ConfigError on any configuration problem."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise ConfigError(f"Invalid YTSAMPLES_ settings: {e}") from e
    logging.basicConfig(level=settings.log_level)
    properties = load_properties(settings.properties_file)
    return settings, get_api_key(properties)


def run_search() -> int:
    try:
        settings, api_key = _setup()
    except ConfigError as e:
        _report(e.kind, str(e))
        return 1

    try:
        client = build_client(SEARCH_APPLICATION_NAME)
        query = get_input_query()
        request = SearchRequest(
            query=query,
            api_key=api_key,
            max_results=settings.search_max_results,
            resource_type_filter=settings.search_type or None,
            field_projection=settings.search_fields or None,
        )
        items = youtube_service.search(client, request)
        print_search_results(items, query, count=settings.search_max_results)
    except ApiError as e:
        _report(e.kind, f"There was a service error: {e.code} : {e.message}")
    except TransportError as e:
        _report(e.kind, f"There was an IO error: {e}")
    except Exception as e:
        _report(ErrorKind.UNEXPECTED, f"{type(e).__name__}: {e}")
        traceback.print_exc()
    return 0


def run_comment_threads() -> int:
    try:
        settings, api_key = _setup()
    except ConfigError as e:
        _report(e.kind, str(e))
        return 1

    try:
        client = build_client(COMMENT_THREADS_APPLICATION_NAME)
        query = get_input_query()
        request = CommentThreadRequest(
            video_id=settings.comment_threads_video_id,
            api_key=api_key,
            search_terms=query,
        )
        items = youtube_service.list_comment_threads(client, request)
        print_comment_threads(items, query, count=settings.comment_threads_count)
    except ApiError as e:
        _report(e.kind, f"There was a service error: {e.code} : {e.message}")
    except TransportError as e:
        _report(e.kind, f"There was an IO error: {e}")
    except Exception as e:
        _report(ErrorKind.UNEXPECTED, f"{type(e).__name__}: {e}")
        traceback.print_exc()
    return 0


if __name__ == "__main__":
    sys.exit(run_search())
