"""Decision record schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

DECISION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["source", "keyword_hit", "response", "words_seen", "decided_at"],
    "properties": {
        "source": {"type": "string", "enum": ["keyword", "fallback"]},
        "keyword_hit": {"type": ["string", "null"]},
        "response": {"type": "string", "minLength": 1},
        "words_seen": {"type": "integer", "minimum": 0},
        "decided_at": {"type": "string", "format": "date-time"},
    },
    "additionalProperties": False,
}

_validator = Draft7Validator(DECISION_SCHEMA)


def validate_decision(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: e.path)
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"decision record validation failed: {messages}")


@dataclass
class ResponseDecisionRecord:
    source: str
    keyword_hit: Optional[str]
    response: str
    words_seen: int
    decided_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "source": self.source,
            "keyword_hit": self.keyword_hit,
            "response": self.response,
            "words_seen": self.words_seen,
            "decided_at": self.decided_at,
        }
        validate_decision(payload)
        return payload
