# pickbot/cli.py
"""
Command line entry point.

  pickbot serve            run the FastAPI app with uvicorn
  pickbot chat             terminal chat against a running server
  pickbot chat --local     same, but call the generator in-process

While options are shown: a number picks that option, `j` / `k` move the
highlight down / up, an empty line confirms the highlighted option.
Slash commands: /reset, /persona [text], /persona-preset <key>,
/persona-default, /quit.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from pickbot.settings import settings
from pickbot.generate.types import Personality
from pickbot.personas import load_persona, load_personas
from pickbot.client import (
    ApiClient,
    ApiError,
    Conversation,
    ConversationError,
    Mode,
    PendingRequest,
    PersonalityStore,
)

Submit = Callable[[PendingRequest, Personality], List[str]]


class ChatSession:
    def __init__(self, submit: Submit, store: PersonalityStore, out: Callable[[str], None] = print):
        self.submit = submit
        self.store = store
        self.out = out
        self.conversation = Conversation()
        self.personality = store.load()

    # -------------------------
    # Rendering
    # -------------------------
    def show_options(self):
        pending = self.conversation.pending
        if pending is None:
            return
        self.out(pending.content)
        for i, option in enumerate(pending.options):
            marker = ">" if i == self.conversation.selected else " "
            self.out(f" {marker} {i + 1}. {option}")

    # -------------------------
    # Input handling
    # -------------------------
    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the session should end."""
        text = line.strip()
        if text.startswith("/"):
            return self._command(text)
        if self.conversation.mode is Mode.CHOOSING:
            self._choosing(text)
        elif text:
            self._send(text)
        return True

    def _command(self, text: str) -> bool:
        name, _, arg = text.partition(" ")
        if name in ("/quit", "/exit"):
            return False
        if name == "/reset":
            self.conversation.reset()
            self.out("Conversation cleared.")
        elif name == "/persona-default":
            self.personality = self.store.reset()
            self.out("Personality reset to default.")
        elif name == "/persona-preset":
            try:
                self.personality = load_persona(arg.strip())
            except KeyError:
                self.out(f"Unknown preset. Available: {', '.join(load_personas())}")
                return True
            self.store.save(self.personality)
            self.out(f"Personality set from preset {arg.strip()}.")
        elif name == "/persona":
            if arg.strip():
                self.personality = Personality(description=arg.strip())
                self.store.save(self.personality)
                self.out("Personality updated.")
            else:
                self.out(self.personality.description)
        else:
            self.out(f"Unknown command: {name}")
        return True

    def _choosing(self, text: str):
        try:
            if text in ("j", "down"):
                self.conversation.move(1)
                self.show_options()
            elif text in ("k", "up"):
                self.conversation.move(-1)
                self.show_options()
            elif text == "" or (text.isascii() and text.isdecimal()):
                index = int(text) - 1 if text else None
                chosen = self.conversation.choose(index)
                self.out(f"assistant> {chosen}")
            else:
                self.out("Pick an option first (1-4, j/k to move, enter to confirm).")
        except ConversationError as e:
            self.out(str(e))

    def _send(self, text: str):
        request = self.conversation.send(text)
        try:
            options = self.submit(request, self.personality)
        except ApiError as e:
            if self.conversation.fail(request):
                self.out(f"assistant> {self.conversation.messages[-1].content}")
            print(f"[pickbot] {e}", file=sys.stderr)
            return
        if self.conversation.receive(request, options):
            self.show_options()


def remote_submit(client: ApiClient) -> Submit:
    def submit(request: PendingRequest, personality: Personality) -> List[str]:
        return client.submit(request.transcript, personality)
    return submit


def local_submit() -> Submit:
    from pickbot.app import get_generator

    generator = get_generator()

    def submit(request: PendingRequest, personality: Personality) -> List[str]:
        return generator.options_for(request.turns(), personality)
    return submit


def run_chat(session: ChatSession, read: Callable[[str], str] = input):
    session.out("Type a message. /persona to view or edit the personality, /quit to leave.")
    while True:
        prompt = "choose> " if session.conversation.mode is Mode.CHOOSING else "you> "
        try:
            line = read(prompt)
        except (EOFError, KeyboardInterrupt):
            break
        if not session.handle(line):
            break


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="pickbot", description="Pick-one-of-four reply assistant.")
    sub = p.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")

    chat = sub.add_parser("chat", help="Chat in the terminal.")
    chat.add_argument("--url", default=settings.API_URL, help="Base URL of the API.")
    chat.add_argument("--local", action="store_true", help="Call the generator in-process.")
    chat.add_argument("--state", default=settings.STATE_PATH, help="Where the personality is stored.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("pickbot.app:app", host=args.host, port=args.port, reload=args.reload)
        return

    submit = local_submit() if args.local else remote_submit(ApiClient(args.url))
    session = ChatSession(submit=submit, store=PersonalityStore(args.state))
    run_chat(session)


if __name__ == "__main__":
    main()
