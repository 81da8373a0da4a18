# Client for Ollama local inference.
# Takes a model name and exposes generate(messages, params).

import requests
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams

class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434", timeout: float = 60.0):
        self.model = model
        self.host = host.rstrip("/")
        self.timeout = timeout

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        system = "\n\n".join(m.content for m in messages if m.role == "system")
        prompt = self._compose_prompt([m for m in messages if m.role != "system"])
        payload = {
            "model": self.model,
            "system": system,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": float(params.temperature if params.temperature is not None else 0.8),
                "num_predict": int(params.max_tokens or 1000),
            },
        }
        url = f"{self.host}/api/generate"
        resp = requests.post(url, json=payload, timeout=params.timeout or self.timeout)
        resp.raise_for_status()
        data = resp.json()
        return data.get("response", "").strip(), {"engine": "ollama", "model": self.model}

    def _compose_prompt(self, messages: List[Message]) -> str:
        parts = []
        for m in messages:
            parts.append(f"{m.role.upper()}:\n{m.content.strip()}\n")
        return "\n".join(parts)
