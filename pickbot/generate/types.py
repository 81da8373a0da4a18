# Typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

OPTION_COUNT = 4


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    timeout: Optional[float] = None


@dataclass
class Personality:
    """Free-text description of the voice the model should speak in."""
    description: str


@dataclass
class GenerationRequest:
    """One call's worth of input: prior turns, the current turn, the persona."""
    history: List[Message]
    current: str
    personality: Personality

    @classmethod
    def from_transcript(cls, transcript: List[Message], personality: Personality) -> "GenerationRequest":
        if not transcript:
            raise ValueError("transcript must not be empty")
        *history, latest = transcript
        return cls(history=list(history), current=latest.content, personality=personality)


@dataclass
class GenerationResult:
    """Exactly four reply options, in the model's order."""
    options: List[str]
    source: str = "model"
    meta: dict = field(default_factory=dict)

    def __post_init__(self):
        if len(self.options) != OPTION_COUNT:
            raise ValueError(f"expected {OPTION_COUNT} options, got {len(self.options)}")
