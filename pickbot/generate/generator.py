# OptionGenerator:
# - accepts any model client (Ollama, OpenAI, Echo)
# - builds prompts from personality + transcript
# - normalizes the model text into exactly four options
# - never raises on model failure; returns fixed fallback options instead

from __future__ import annotations
from typing import List, Optional

from pickbot.logs import get_logger
from .options import FALLBACK_OPTIONS, normalize_options
from .prompts import build_system_prompt, build_user_prompt
from .types import GenerationRequest, GenerationResult, Message, ModelParams, Personality

logger = get_logger("pickbot.generate")


class OptionGenerator:
    def __init__(
        self,
        model_client,
        temperature: float = 0.8,
        max_tokens: int = 1000,
        timeout: Optional[float] = None,
    ):
        self.model_client = model_client
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout

    def compose_messages(self, request: GenerationRequest) -> List[Message]:
        """System + user message pair sent to the model."""
        return [
            Message(role="system", content=build_system_prompt(request.personality.description)),
            Message(role="user", content=build_user_prompt(request.history, request.current)),
        ]

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Main entry point for generation."""
        params = ModelParams(temperature=self.temperature, max_tokens=self.max_tokens, timeout=self.timeout)
        try:
            text, meta = self.model_client.generate(self.compose_messages(request), params)
        except Exception:
            logger.exception("Model call failed, returning fallback options")
            return GenerationResult(options=list(FALLBACK_OPTIONS), source="fallback", meta={})

        options, source = normalize_options(text, request.current)
        if source == "lines":
            logger.warning("Failed to parse JSON response, used line-split parsing")
        elif source == "template":
            logger.warning("Could not extract options from model output, used templated options")
        return GenerationResult(options=options, source=source, meta=meta or {})

    def options_for(self, transcript: List[Message], personality: Personality) -> List[str]:
        """Convenience wrapper: transcript in, four strings out."""
        return self.generate(GenerationRequest.from_transcript(transcript, personality)).options
