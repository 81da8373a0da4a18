# Client-side conversation state.
#
# Two modes: COMPOSING (user may send) and CHOOSING (an assistant message
# holds four options and the user must pick one). Every in-flight request
# carries the epoch it was sent in; reset() bumps the epoch so late
# responses for a cleared conversation are dropped.

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pickbot.generate.types import Message as Turn

PENDING_PROMPT = "Choose your preferred response:"
ERROR_REPLY = "Sorry, I encountered an error. Please try again."


class Mode(str, Enum):
    COMPOSING = "composing"
    CHOOSING = "choosing"


class ConversationError(RuntimeError):
    """Mutation attempted in the wrong mode."""


@dataclass
class ChatMessage:
    role: str
    content: str
    options: Optional[List[str]] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_wire(self) -> dict:
        data = {
            "id": self.id,
            "type": self.role,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.options is not None:
            data["options"] = list(self.options)
        return data


@dataclass(frozen=True)
class PendingRequest:
    """Snapshot of what was sent, tagged with the epoch it belongs to."""
    epoch: int
    transcript: List[ChatMessage]

    def turns(self) -> List[Turn]:
        return [Turn(role=m.role, content=m.content) for m in self.transcript]


class Conversation:
    def __init__(self):
        self.messages: List[ChatMessage] = []
        self.mode = Mode.COMPOSING
        self.epoch = 0
        self.selected = -1
        self._pending_id: Optional[str] = None

    # -------------------------
    # Queries
    # -------------------------
    @property
    def pending(self) -> Optional[ChatMessage]:
        for m in self.messages:
            if m.id == self._pending_id:
                return m
        return None

    def is_current(self, request: PendingRequest) -> bool:
        return request.epoch == self.epoch

    # -------------------------
    # Mutations
    # -------------------------
    def send(self, content: str) -> PendingRequest:
        text = (content or "").strip()
        if not text:
            raise ConversationError("Cannot send an empty message")
        if self.mode is not Mode.COMPOSING:
            raise ConversationError("Pick one of the pending options first")
        self.messages.append(ChatMessage(role="user", content=text))
        return PendingRequest(epoch=self.epoch, transcript=list(self.messages))

    def receive(self, request: PendingRequest, options: List[str]) -> bool:
        """Attach options as the pending message. False if the request is stale."""
        if not self.is_current(request):
            return False
        msg = ChatMessage(role="assistant", content=PENDING_PROMPT, options=list(options))
        self.messages.append(msg)
        self._pending_id = msg.id
        self.mode = Mode.CHOOSING
        self.selected = 0
        return True

    def fail(self, request: PendingRequest) -> bool:
        """Record a transport failure as an apology message. False if stale."""
        if not self.is_current(request):
            return False
        self.messages.append(ChatMessage(role="assistant", content=ERROR_REPLY))
        return True

    def move(self, delta: int) -> int:
        """Move the highlighted option, wrapping at both ends."""
        pending = self.pending
        if self.mode is not Mode.CHOOSING or pending is None:
            raise ConversationError("No options to move through")
        self.selected = (self.selected + delta) % len(pending.options)
        return self.selected

    def choose(self, index: Optional[int] = None) -> str:
        """Collapse the pending message into the chosen option."""
        pending = self.pending
        if self.mode is not Mode.CHOOSING or pending is None:
            raise ConversationError("No options to choose from")
        index = self.selected if index is None else index
        if not 0 <= index < len(pending.options):
            raise ConversationError(f"Option {index + 1} does not exist")
        pending.content = pending.options[index]
        pending.options = None
        self._pending_id = None
        self.selected = -1
        self.mode = Mode.COMPOSING
        return pending.content

    def reset(self):
        self.messages = []
        self._pending_id = None
        self.selected = -1
        self.mode = Mode.COMPOSING
        self.epoch += 1
