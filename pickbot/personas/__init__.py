# Built-in personalities read from personas.yaml in this folder
# (or from PERSONAS_PATH when set).

from __future__ import annotations

import os
from functools import lru_cache
from typing import Dict, Optional

import yaml

from pickbot.generate.types import Personality
from pickbot.settings import settings

DEFAULT_KEY = "default"
_BUILTIN_PATH = os.path.join(os.path.dirname(__file__), "personas.yaml")


def personas_path() -> str:
    return settings.PERSONAS_PATH or _BUILTIN_PATH


@lru_cache(maxsize=8)
def _read(path: str) -> Dict[str, dict]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"personas.yaml not found at {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_personas(path: Optional[str] = None) -> Dict[str, dict]:
    return _read(path or personas_path())


def load_persona(key: str, path: Optional[str] = None) -> Personality:
    data = load_personas(path)
    if key not in data:
        raise KeyError(f"Persona '{key}' not found in personas.yaml")
    return Personality(description=" ".join(str(data[key].get("description", "")).split()))


def default_personality(path: Optional[str] = None) -> Personality:
    return load_persona(DEFAULT_KEY, path)


__all__ = ["DEFAULT_KEY", "personas_path", "load_personas", "load_persona", "default_personality"]
