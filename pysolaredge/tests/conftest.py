import json

import pytest
from requests.cookies import RequestsCookieJar


class FakeResponse:
    def __init__(self, status_code=200, content=b"", cookies=None):
        self.status_code = status_code
        self.content = content
        self.cookies = cookies if cookies is not None else RequestsCookieJar()


class FakeSession:
    """Stands in for requests.Session: records requests and returns canned responses in order."""

    def __init__(self):
        self.requests = []
        self.responses = []
        self.cookies = RequestsCookieJar()
        self.error = None

    def reply(self, payload=None, status_code=200, content=None, cookies=None):
        if content is None:
            content = json.dumps(payload).encode("utf-8") if payload is not None else b""
        self.responses.append(FakeResponse(status_code, content, cookies))

    def request(self, method, url, headers=None, data=None, params=None, timeout=None):
        self.requests.append({"method": method, "url": url, "headers": headers or {}, "data": data,
                              "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    @property
    def last(self):
        return self.requests[-1]

    def close(self):
        pass


@pytest.fixture
def fake_session():
    return FakeSession()
