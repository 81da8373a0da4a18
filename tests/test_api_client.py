# ApiClient against a fake requests session, plus the real app via TestClient.

import pytest
import requests

from pickbot.client import ApiClient, ApiError, Conversation
from pickbot.generate import Personality

PERSONA = Personality(description="Upbeat.")


class FakeResponse:
    def __init__(self, status=200, data=None):
        self.status_code = status
        self._data = data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._data is None:
            raise ValueError("no json")
        return self._data


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.posted = []

    def post(self, url, json=None, timeout=None):
        self.posted.append((url, json))
        if self.error:
            raise self.error
        return self.response

    def get(self, url, timeout=None):
        if self.error:
            raise self.error
        return self.response


def _transcript():
    conv = Conversation()
    return conv.send("hi there").transcript


def test_submit_posts_transcript_and_personality():
    session = FakeSession(FakeResponse(data={"options": ["a", "b", "c", "d"]}))
    client = ApiClient("http://bot.local/", session=session)
    assert client.submit(_transcript(), PERSONA) == ["a", "b", "c", "d"]

    url, body = session.posted[0]
    assert url == "http://bot.local/api/chat"
    assert body["personality"] == {"description": "Upbeat."}
    assert body["messages"][0]["type"] == "user"
    assert body["messages"][0]["content"] == "hi there"


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("refused")),
        FakeSession(FakeResponse(status=400, data={"error": "Messages array is required"})),
        FakeSession(FakeResponse(data=None)),
        FakeSession(FakeResponse(data={"error": "nope"})),
        FakeSession(FakeResponse(data={"options": ["a", "b", "c"]})),
        FakeSession(FakeResponse(data={"options": ["a", "b", "c", "d", "e"]})),
    ],
)
def test_submit_failures_raise_api_error(session):
    with pytest.raises(ApiError):
        ApiClient(session=session).submit(_transcript(), PERSONA)


def test_ping():
    client = ApiClient(session=FakeSession(FakeResponse(data={"message": "Chat API is running"})))
    assert client.ping() == "Chat API is running"


def test_submit_against_app(client):
    # TestClient is a requests-compatible session for our purposes
    api = ApiClient("http://testserver", session=client)
    options = api.submit(_transcript(), PERSONA)
    assert options == ["one option here", "two option here", "three option here", "four option here"]
