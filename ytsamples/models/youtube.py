from pydantic import BaseModel

VIDEO_KIND = "youtube#video"
COMMENT_THREAD_KIND = "youtube#commentThread"


class SearchRequest(BaseModel):
    query: str
    api_key: str
    max_results: int = 25
    resource_type_filter: str | None = "video"
    field_projection: str | None = None


class CommentThreadRequest(BaseModel):
    video_id: str
    api_key: str
    include_replies: bool = True
    search_terms: str | None = None


class SearchResultItem(BaseModel):
    kind: str
    video_id: str | None = None
    channel_id: str | None = None
    title: str | None = None
    thumbnail_url: str | None = None


class CommentReply(BaseModel):
    comment_id: str
    author_name: str | None = None
    text: str | None = None
    like_count: int | None = None


class CommentThreadItem(BaseModel):
    kind: str
    video_id: str | None = None
    channel_id: str | None = None
    top_level_comment_id: str
    top_level_comment_text: str | None = None
    like_count: int | None = None
    replies: list[CommentReply] = []
