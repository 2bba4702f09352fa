"""YouTube Data API client handle (API-key based, no OAuth)."""

from collections.abc import Callable
from dataclasses import dataclass

import httplib2
from googleapiclient.discovery import Resource, build
from googleapiclient.http import HttpRequest, set_user_agent

RequestInitializer = Callable[[HttpRequest], None]


def _no_op_initializer(request: HttpRequest) -> None:
    pass


@dataclass(frozen=True)
class ClientConfig:
    """Everything needed to issue requests, built once per process."""

    service: Resource
    http: httplib2.Http
    application_name: str
    request_initializer: RequestInitializer = _no_op_initializer


def build_client(
    application_name: str,
    request_initializer: RequestInitializer | None = None,
) -> ClientConfig:
    http = set_user_agent(httplib2.Http(), application_name)
    service = build("youtube", "v3", http=http)
    return ClientConfig(
        service=service,
        http=http,
        application_name=application_name,
        request_initializer=request_initializer or _no_op_initializer,
    )
