"""Keyword-or-fallback response generator."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from .config import ResponderConfig
from .defaults import DefaultResponsePool
from .keywords import KeywordTable, normalize_token
from .observability import ResponseDecisionRecord

logger = logging.getLogger(__name__)


class ResponseGenerator:
    """
    Maps a set of input words to a single canned response.

    1. Normalize every word (trim, lowercase) and drop blanks
    2. Scan the distinct tokens in lexicographic order
    3. First token found in the keyword table → its response
    4. Nothing found → uniform random pick from the default pool

    Lookup tables are read-only after construction. The random source
    belongs to the instance; share an instance across threads only with
    external locking.
    """

    def __init__(
        self,
        config: Optional[ResponderConfig] = None,
        *,
        keywords: Optional[KeywordTable] = None,
        default_responses: Optional[DefaultResponsePool] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._config = config or ResponderConfig()

        if keywords is None:
            if self._config.keywords_path is not None:
                keywords = KeywordTable.from_json(self._config.keywords_path)
            else:
                keywords = KeywordTable()
        self._keywords = keywords

        self._rng = rng or random.Random(self._config.random_seed)

        if default_responses is None:
            default_responses = DefaultResponsePool.from_file(
                self._config.default_responses_path,
                encoding=self._config.encoding,
                fallback_response=self._config.fallback_response,
                rng=self._rng,
            )
        self._defaults = default_responses

        logger.info(
            "responder ready keywords=%d default_responses=%d",
            len(self._keywords), len(self._defaults),
        )

    @property
    def keywords(self) -> KeywordTable:
        return self._keywords

    @property
    def default_responses(self) -> DefaultResponsePool:
        return self._defaults

    def decide(self, words: Iterable[Optional[str]]) -> ResponseDecisionRecord:
        tokens = sorted({normalize_token(word) for word in words if word is not None} - {""})

        for token in tokens:
            entry = self._keywords.match(token)
            if entry is not None:
                record = ResponseDecisionRecord(
                    source="keyword",
                    keyword_hit=entry.keyword,
                    response=entry.response,
                    words_seen=len(tokens),
                )
                logger.debug("keyword hit=%s words=%d", entry.keyword, len(tokens))
                return record

        record = ResponseDecisionRecord(
            source="fallback",
            keyword_hit=None,
            response=self._defaults.pick(),
            words_seen=len(tokens),
        )
        logger.debug("no keyword in %d words, using default response", len(tokens))
        return record

    def generate_response(self, words: Iterable[Optional[str]]) -> str:
        """
        Main entry point. Takes a set of words, returns a response.
        Never throws. Never returns empty.
        """
        return self.decide(words).response
