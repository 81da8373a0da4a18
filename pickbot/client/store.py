# Persist the active personality as one key in a small JSON file.

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from pickbot.generate.types import Personality
from pickbot.logs import get_logger
from pickbot.personas import default_personality

KEY = "chatPersonality"

logger = get_logger("pickbot.client")


class PersonalityStore:
    def __init__(self, path: str):
        self.path = Path(os.path.expanduser(path))

    def _read_all(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Failed to load personality from %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> Personality:
        """Stored personality, or the built-in default if absent or unreadable."""
        raw = self._read_all().get(KEY)
        description: Optional[str] = None
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except ValueError:
                raw = None
        if isinstance(raw, dict) and isinstance(raw.get("description"), str):
            description = raw["description"]
        if not description:
            return default_personality()
        return Personality(description=description)

    def save(self, personality: Personality):
        data = self._read_all()
        data[KEY] = json.dumps({"description": personality.description})
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp, self.path)

    def reset(self) -> Personality:
        personality = default_personality()
        self.save(personality)
        return personality
