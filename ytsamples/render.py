"""Terminal output for the search and comment-thread samples."""

from ytsamples.models.youtube import (
    COMMENT_THREAD_KIND,
    VIDEO_KIND,
    CommentThreadItem,
    SearchResultItem,
)

BANNER_RULE = "=" * 61
ITEM_RULE = "-" * 61
NO_RESULTS = " There aren't any results for your query."


def print_banner(count: int, query: str) -> None:
    print("\n" + BANNER_RULE)
    print(f'   First {count} videos for search on "{query}".')
    print(BANNER_RULE + "\n")


def print_search_results(items: list[SearchResultItem], query: str, count: int = 25) -> None:
    """Print the title, ids and thumbnail of every video result.

    Results of any other kind (channels, playlists) are skipped.
    """
    print_banner(count, query)
    if not items:
        print(NO_RESULTS)
    for item in items:
        if item.kind != VIDEO_KIND:
            continue
        print(f" channel Id:{item.channel_id}")
        print(f" Video Id:{item.video_id}")
        print(f" Title: {item.title}")
        print(f" Thumbnail: {item.thumbnail_url}")
        print("\n" + ITEM_RULE + "\n")


def print_comment_threads(items: list[CommentThreadItem], query: str, count: int = 50) -> None:
    """Print each comment thread's top-level comment followed by its replies."""
    print_banner(count, query)
    if not items:
        print(NO_RESULTS)
    for item in items:
        if item.kind != COMMENT_THREAD_KIND:
            continue
        print(f" Video Id:{item.video_id}")
        print(f" Channel Id: {item.channel_id}")
        print(f" TopLevel Comment Id: {item.top_level_comment_id}")
        print(f" TopLevel Comment: {item.top_level_comment_text}")
        print(f" いいね: {item.like_count}")
        for reply in item.replies:
            print(f" Comment Id: {reply.comment_id}")
            print(f" Author Display Name: {reply.author_name}")
            print(f" コメント: {reply.text}")
            print(f" いいね: {reply.like_count}")
        print("\n" + ITEM_RULE + "\n")
