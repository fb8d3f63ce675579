import json

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def make_response(status_code: int = 200, body=None, headers: dict | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    if body is None:
        content = b""
    elif isinstance(body, (bytes, str)):
        content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        content = json.dumps(body).encode("utf-8")
    resp._content = content
    resp.encoding = "utf-8"
    resp.headers = CaseInsensitiveDict(headers or {})
    return resp


class FakeSession:
    def __init__(self, response: requests.Response | None = None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[dict] = []

    def request(self, method, url, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def session_factory():
    return FakeSession
