from functools import lru_cache
from pathlib import Path
from typing import Literal

from jproperties import ParseError, Properties
from pydantic import field_validator
from pydantic_settings import BaseSettings

from ytsamples.exceptions import ConfigError

PROPERTIES_FILENAME = "youtube.properties"
PROPERTIES_ENCODING = "iso-8859-1"
API_KEY_PROPERTY = "youtube.apikey"
BUNDLED_PROPERTIES = Path(__file__).parent / "resources" / PROPERTIES_FILENAME


class Settings(BaseSettings):
    properties_file: Path | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    search_max_results: int = 25
    search_type: str = "video"
    search_fields: str = "items(id/kind,id/videoId,snippet/channelId,snippet/title,snippet/thumbnails/default/url)"
    comment_threads_video_id: str = "um9_NWttXA4"
    comment_threads_count: int = 50

    model_config = {"env_prefix": "YTSAMPLES_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_properties(path: Path | None = None) -> dict[str, str]:
    """Read a Java properties resource.

    Defaults to the ``youtube.properties`` file bundled next to the package.
    The file is decoded as ISO-8859-1, so any byte sequence is readable; keys
    may be separated from values by ``=``, ``:`` or whitespace.
    Raises ConfigError when the file cannot be read or parsed.
    """
    path = path or BUNDLED_PROPERTIES
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigError(f"There was an error reading {path.name}: {e}") from e
    properties = Properties()
    try:
        properties.load(data, PROPERTIES_ENCODING)
    except ParseError as e:
        raise ConfigError(f"There was an error parsing {path.name}: {e}") from e
    return {key: properties[key].data for key in properties}


def get_api_key(properties: dict[str, str]) -> str:
    api_key = properties.get(API_KEY_PROPERTY)
    if not api_key:
        raise ConfigError(f"{PROPERTIES_FILENAME} has no {API_KEY_PROPERTY} entry")
    return api_key
