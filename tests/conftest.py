# Data Manager Client
# File: tests/conftest.py
# Version: v1

"""Shared fixtures: a scripted metadata server behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from data_manager_client.config import DataManagerConfig

PLATFORM = "https://metadata.example.com:9443"
SERVER = "cocoMDS1"
PREFIX = f"/servers/{SERVER}/open-metadata/access-services/data-manager/users"


class RecordingServer:
    """Records every request and answers from a queue of canned responses."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[httpx.Response] = []

    def reply(self, payload: Optional[Dict[str, Any]] = None, status: int = 200) -> None:
        self._responses.append(httpx.Response(status, json=payload if payload is not None else {"relatedHTTPCode": 200}))

    def reply_raw(self, content: bytes, status: int = 200) -> None:
        self._responses.append(httpx.Response(status, content=content))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={"relatedHTTPCode": 200})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Any:
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture
def config() -> DataManagerConfig:
    return DataManagerConfig(server_name=SERVER, platform_url_root=PLATFORM)
