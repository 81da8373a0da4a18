# Turn raw model text into exactly four reply options.
#
# Parsing is an ordered chain of strategies. Each takes the raw text and
# returns a list of candidates or None; the first non-None result wins.
# If none succeed, templated strings built from the current turn are used.
# The result is then stringified, blank-filtered, padded and truncated.

from __future__ import annotations

import json
import re
from typing import Callable, List, Optional, Sequence, Tuple

from .types import OPTION_COUNT

MIN_FRAGMENT_LEN = 10

_SPLIT_RE = re.compile(r"\n|(?:\d+\.)|(?:Option \d+:)|(?:Response \d+:)", re.IGNORECASE | re.ASCII)

# Used when the model call itself fails; not derived from any content.
FALLBACK_OPTIONS = [
    "I'd be happy to help you with that question. Let me think about the best approach...",
    "That's an interesting question! Here's one way to consider it...",
    "I can offer several perspectives on this topic...",
    "Let me provide you with a thoughtful response to your inquiry...",
]

Strategy = Callable[[str], Optional[List[str]]]


def templated_options(current: str) -> List[str]:
    return [
        f'Based on your question about "{current}", here\'s one perspective...',
        f'Another way to think about "{current}" is...',
        f'From a different angle regarding "{current}"...',
        f'Here\'s an alternative approach to "{current}"...',
    ]


def padding_option(current: str) -> str:
    return f'Here\'s another perspective on your question: "{current}"'


def parse_json_array(raw: str) -> Optional[List[str]]:
    """Strict decode: a JSON array of exactly four strings, or nothing."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, list) or len(data) != OPTION_COUNT:
        return None
    if not all(isinstance(x, str) for x in data):
        return None
    return data


def split_lines(raw: str) -> Optional[List[str]]:
    """
    Heuristic extraction from prose or enumerated lists.
    - Split on newlines, `1.` style markers, `Option N:` and `Response N:`.
    - Strip fragments and drop those of MIN_FRAGMENT_LEN chars or fewer.
    - Succeeds only when at least four fragments survive; keeps the first four.
    """
    fragments = [f.strip() for f in _SPLIT_RE.split(raw or "")]
    kept = [f for f in fragments if len(f) > MIN_FRAGMENT_LEN][:OPTION_COUNT]
    if len(kept) < OPTION_COUNT:
        return None
    return kept


STRATEGIES: Sequence[Tuple[str, Strategy]] = (
    ("json", parse_json_array),
    ("lines", split_lines),
)


def extract_candidates(raw: str, current: str) -> Tuple[List[object], str]:
    """Run the strategy chain; returns (candidates, name of the winning strategy)."""
    for name, strategy in STRATEGIES:
        found = strategy(raw)
        if found is not None:
            return list(found), name
    return templated_options(current), "template"


def finalize(candidates: Sequence[object], current: str) -> List[str]:
    """Stringify, drop blanks, pad to four, keep the first four."""
    options = [str(c).strip() for c in candidates]
    options = [o for o in options if o]
    while len(options) < OPTION_COUNT:
        options.append(padding_option(current))
    return options[:OPTION_COUNT]


def normalize_options(raw: str, current: str) -> Tuple[List[str], str]:
    """Pure function of (raw, current): four non-empty strings plus how they were found."""
    candidates, source = extract_candidates(raw, current)
    return finalize(candidates, current), source
