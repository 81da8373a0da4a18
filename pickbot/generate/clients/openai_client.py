# Client for the OpenAI Chat Completions API.
# Same interface as OllamaClient: generate(messages, params) -> (text, meta).

from typing import List, Tuple, Dict, Any, Optional
from openai import OpenAI
from ..types import Message, ModelParams

class OpenAIClient:
    def __init__(self, model: str = "gpt-4-turbo-preview", api_key: Optional[str] = None, timeout: float = 60.0):
        self.model = model
        self.client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        kwargs: Dict[str, Any] = {}
        if params.timeout is not None:
            kwargs["timeout"] = params.timeout
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=formatted,
            temperature=params.temperature if params.temperature is not None else 0.8,
            max_tokens=params.max_tokens or 1000,
            **kwargs,
        )
        text = (resp.choices[0].message.content or "").strip()
        meta = {"engine": "openai", "model": self.model}
        return text, meta
