"""Fallback response pool loaded from a line-oriented text file."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Could you elaborate on that?"


def load_default_responses(path: Path, encoding: str = "ascii") -> List[str]:
    """Read one response per line.

    Blank lines are skipped. A missing or unreadable file, or an unknown
    encoding, is logged and treated as an empty list; it never raises.
    """
    path = Path(path)
    try:
        with path.open("r", encoding=encoding) as handle:
            return [line.rstrip("\r\n") for line in handle if line.strip()]
    except FileNotFoundError:
        logger.error("Unable to open %s", path)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        logger.error("A problem was encountered reading %s: %s", path, exc)
    return []


class DefaultResponsePool:
    """Non-empty pool of responses used when no keyword matches."""

    def __init__(
        self,
        responses: Iterable[str],
        fallback_response: str = FALLBACK_RESPONSE,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not fallback_response or not fallback_response.strip():
            raise ValueError("fallback_response must not be blank")
        pool = tuple(responses)
        if not pool:
            logger.warning("no default responses loaded, using %r", fallback_response)
            pool = (fallback_response,)
        self._responses: Tuple[str, ...] = pool
        self._rng = rng or random.Random()

    @classmethod
    def from_file(
        cls,
        path: Path,
        encoding: str = "ascii",
        fallback_response: str = FALLBACK_RESPONSE,
        rng: Optional[random.Random] = None,
    ) -> "DefaultResponsePool":
        return cls(load_default_responses(path, encoding), fallback_response, rng)

    @property
    def responses(self) -> Tuple[str, ...]:
        return self._responses

    def pick(self) -> str:
        return self._rng.choice(self._responses)

    def __len__(self) -> int:
        return len(self._responses)

    def __contains__(self, response: object) -> bool:
        return response in self._responses
