# Dummy model client for local dev and testing without API calls.
# Answers with a JSON array of four variations on the latest user message.

import json
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams

PREFIX = "User's latest message: "


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        user_inputs = [m.content for m in messages if m.role == "user"]
        last = user_inputs[-1] if user_inputs else "(no user input)"
        latest = last.rsplit(PREFIX, 1)[-1].strip()
        text = json.dumps([
            f"[ECHO] Sure: {latest}",
            f"[ECHO] Hmm, about {latest}",
            f"[ECHO] Not sure: {latest}",
            f"[ECHO] Tell me more: {latest}",
        ])
        meta = {"engine": "echo", "model": "echo-dev", "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta
