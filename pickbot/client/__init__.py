# Terminal-side pieces: conversation state, personality storage, HTTP client.

from .api import ApiClient, ApiError
from .conversation import ChatMessage, Conversation, ConversationError, Mode, PendingRequest
from .store import PersonalityStore

__all__ = [
    "ApiClient",
    "ApiError",
    "ChatMessage",
    "Conversation",
    "ConversationError",
    "Mode",
    "PendingRequest",
    "PersonalityStore",
]
