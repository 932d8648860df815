"""Test helpers for simple-http-utilities."""

import json

import httpx


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, status_code: int = 200, body: str = "", headers=None) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body, headers=self.headers)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)
