import os

import pytest
from unittest.mock import MagicMock

from ytsamples.config import Settings


# --- Canned API responses ---

SEARCH_API_VIDEO = {
    "kind": "youtube#searchResult",
    "id": {"kind": "youtube#video", "videoId": "vid123"},
    "snippet": {
        "channelId": "chan456",
        "title": "YouTube Developers Live: Embedded Web Player Customization",
        "thumbnails": {
            "default": {"url": "https://i.ytimg.com/vi/vid123/default.jpg"},
            "high": {"url": "https://i.ytimg.com/vi/vid123/hqdefault.jpg"},
        },
    },
}

SEARCH_API_CHANNEL = {
    "kind": "youtube#searchResult",
    "id": {"kind": "youtube#channel", "channelId": "chan789"},
    "snippet": {
        "channelId": "chan789",
        "title": "GoogleDevelopers",
        "thumbnails": {"default": {"url": "https://yt3.ggpht.com/chan789.jpg"}},
    },
}

SEARCH_API_LIST = {"items": [SEARCH_API_VIDEO, SEARCH_API_CHANNEL]}

COMMENT_THREAD_API_ITEM = {
    "kind": "youtube#commentThread",
    "id": "thread123",
    "snippet": {
        "videoId": "um9_NWttXA4",
        "channelId": "chan456",
        "topLevelComment": {
            "kind": "youtube#comment",
            "id": "thread123",
            "snippet": {"textDisplay": "Great talk!", "likeCount": 7, "authorDisplayName": "Alice"},
        },
    },
    "replies": {
        "comments": [
            {
                "kind": "youtube#comment",
                "id": "thread123.reply1",
                "snippet": {"textDisplay": "ありがとう", "likeCount": 2, "authorDisplayName": "Bob"},
            },
        ],
    },
}

COMMENT_THREAD_API_LIST = {"items": [COMMENT_THREAD_API_ITEM]}

QUOTA_EXCEEDED_BODY = b'{"error": {"code": 403, "message": "quotaExceeded", "errors": [{"reason": "quotaExceeded"}]}}'


@pytest.fixture
def mock_youtube_build(mocker):
    mock_svc = MagicMock()
    mocker.patch("ytsamples.client.build", return_value=mock_svc)
    return mock_svc


@pytest.fixture
def properties_file(tmp_path):
    path = tmp_path / "youtube.properties"
    path.write_text("# developer key\nyoutube.apikey=test-key\n", encoding="utf-8")
    return path


@pytest.fixture
def settings(mocker, properties_file):
    """Settings pointing at a temporary properties file, patched into the entry points."""
    settings = Settings(properties_file=properties_file)
    mocker.patch("ytsamples.main.get_settings", return_value=settings)
    return settings


requires_live_api = pytest.mark.skipif(
    not os.environ.get("YTSAMPLES_LIVE_API_KEY"),
    reason="Live API key not configured — set YTSAMPLES_LIVE_API_KEY",
)
