# HTTP client for POST /api/chat.

from typing import List

import requests

from pickbot.generate.types import OPTION_COUNT, Personality
from .conversation import ChatMessage


class ApiError(RuntimeError):
    """The chat endpoint could not be reached or answered with an error."""


class ApiClient:
    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 90.0, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def submit(self, transcript: List[ChatMessage], personality: Personality) -> List[str]:
        payload = {
            "messages": [m.to_wire() for m in transcript],
            "personality": {"description": personality.description},
        }
        try:
            resp = self.session.post(f"{self.base_url}/api/chat", json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise ApiError(f"Failed to get response: {e}") from e

        options = data.get("options") if isinstance(data, dict) else None
        if not isinstance(options, list) or len(options) != OPTION_COUNT:
            raise ApiError(f"Response did not contain {OPTION_COUNT} options")
        return [str(o) for o in options]

    def ping(self) -> str:
        try:
            resp = self.session.get(f"{self.base_url}/api/chat", timeout=self.timeout)
            resp.raise_for_status()
            return resp.json().get("message", "")
        except (requests.RequestException, ValueError) as e:
            raise ApiError(f"Chat API unreachable: {e}") from e
