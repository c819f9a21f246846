"""Deterministic keyword table."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class KeywordEntry:
    keyword: str
    response: str


_BUG_RESPONSE = (
    "Well, you know, all software has some bugs."
    "  But our software engineers are working very "
    "hard to fix them. Can you describe the problem "
    "a bit further?"
)

BUILTIN_RESPONSES: Tuple[Tuple[str, str], ...] = (
    (
        "crash",
        "Well, it never crashes on our system."
        "  It must have something to do with your system."
        "Tell me more about your configuration.",
    ),
    (
        "crashes",
        "Well, it never crashes on our system."
        "It must have something to do with your system."
        "  Tell me more about your configuration.",
    ),
    (
        "slow",
        "I think this has to do with your hardware."
        "Upgrading your processor should solve all "
        "performance problems. Have you got a "
        "problem with our software?",
    ),
    (
        "performance",
        "Performance was quite adequate in all our tests."
        "  Are you running any other processes in "
        "the background?",
    ),
    ("bug", _BUG_RESPONSE),
    ("buggy", _BUG_RESPONSE),
    (
        "windows",
        "This is a known bug to do with the Windows "
        "operating system.  Please report it to Microsoft."
        "  There is nothing we can do about this.",
    ),
    (
        "macintosh",
        "This is a known bug to do with the Mac "
        "operating system.  Please report it to Apple."
        "  There is nothing we can do about this.",
    ),
    (
        "expensive",
        "The cost of our product is quite competitive."
        "Have you looked around and really compared our "
        "features?",
    ),
    (
        "installation",
        "The installation is really quite straight "
        "forward.  We have tons of wizards that do all "
        "the work for you. Have you read the "
        "installation instructions?",
    ),
    (
        "memory",
        "If you read the system requirements carefully, "
        "you will see that the specified memory "
        "requirements are 1.5 giga byte.   You really "
        "should upgrade your memory.  Anything else you "
        "want to know?",
    ),
    (
        "linux",
        "We take Linux support very seriously."
        "  But there are some problems.  Most have "
        "to do with incompatible glibc versions."
        "  Can you be a bit more precise?",
    ),
    (
        "bluej",
        "Ahhh, BlueJ, yes. We tried to buy out those"
        " guys long ago, but they simply won't sell..."
        "  Stubborn people they are. Nothing we can "
        "do about it, I'm afraid.",
    ),
)


def normalize_token(token: str) -> str:
    return token.strip().lower()


class KeywordTable:
    """Exact-match lookup from a single word to its canned response.

    Keywords are stored normalized (trimmed, lowercase), so callers may pass
    raw tokens such as ``"Bug\\n"``.
    """

    def __init__(self, entries: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        if entries is None:
            entries = BUILTIN_RESPONSES
        self._table: Dict[str, KeywordEntry] = {}
        for keyword, response in entries:
            normalized = normalize_token(keyword)
            if not normalized:
                raise ValueError("keyword must not be blank")
            self._table[normalized] = KeywordEntry(
                keyword=normalized,
                response=response.rstrip("\r\n"),
            )

    @classmethod
    def from_json(cls, path: Path) -> "KeywordTable":
        with Path(path).open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, list):
            raise ValueError(f"keyword file must contain a list: {path}")
        try:
            pairs = [(entry["keyword"], entry["response"]) for entry in data]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed keyword entry in {path}: {exc}") from exc
        return cls(pairs)

    def match(self, token: str) -> Optional[KeywordEntry]:
        normalized = normalize_token(token)
        if not normalized:
            return None
        return self._table.get(normalized)

    def entries(self) -> Dict[str, KeywordEntry]:
        return dict(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.match(token) is not None
