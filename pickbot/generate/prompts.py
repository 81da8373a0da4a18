# Prompt fragments and builders for reply-option generation.
# The generator combines these into the system + user message pair.

from typing import List

from .types import Message

FORMAT_RULES = """\
Format your response as a JSON array with exactly 4 strings, each representing a complete response option this person might select. Do not include any other text or formatting - just the JSON array.

Example format: ["Response option 1", "Response option 2", "Response option 3", "Response option 4"]"""


def build_system_prompt(description: str) -> str:
    return f"""You are helping someone communicate who is unable to type their own responses. This person can only select from multiple choice options you provide.

The person you're speaking for has this personality and characteristics: {description}

Your task is to generate exactly 4 different response options that this person might want to say in reply to the user's latest message. Each response should:
1. Sound like it's coming from the person described above, not from an AI assistant
2. Reflect their personality, communication style, and perspective
3. Take into account the conversation context and relationship dynamics
4. Offer different emotional tones or approaches they might choose from (e.g., more formal vs casual, enthusiastic vs measured, etc.)
5. Be authentic responses this person would actually want to communicate

Think of yourself as providing communication options for someone who knows what they want to say but needs you to articulate it in different ways they can choose from.

{FORMAT_RULES}"""


def render_history(history: List[Message]) -> str:
    """One `User: ...` / `Assistant: ...` line per prior turn."""
    return "\n".join(
        f"{'User' if m.role == 'user' else 'Assistant'}: {m.content}" for m in history
    )


def build_user_prompt(history: List[Message], current: str) -> str:
    prompt = ""
    context = render_history(history)
    if context:
        prompt += f"Previous conversation:\n{context}\n\n"
    prompt += f"User's latest message: {current}"
    return prompt
