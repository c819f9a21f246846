"""Configuration loader for the responder."""

from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import FALLBACK_RESPONSE


@dataclass(frozen=True)
class ResponderConfig:
    default_responses_path: Path = Path("default.txt")
    encoding: str = "ascii"
    fallback_response: str = FALLBACK_RESPONSE
    keywords_path: Optional[Path] = None
    random_seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> "ResponderConfig":
        def _path(value: Any) -> Optional[Path]:
            if not value:
                return None
            path = Path(value)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            return path

        encoding = data.get("encoding") or "ascii"
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {encoding}") from exc

        seed = data.get("random_seed")
        return cls(
            default_responses_path=_path(data.get("default_responses_path") or "default.txt"),
            encoding=encoding,
            fallback_response=data.get("fallback_response") or FALLBACK_RESPONSE,
            keywords_path=_path(data.get("keywords_path")),
            random_seed=int(seed) if seed is not None else None,
        )


ENV_MAP = {
    "default_responses_path": "RESPONDER_DEFAULTS_PATH",
    "encoding": "RESPONDER_ENCODING",
    "fallback_response": "RESPONDER_FALLBACK_RESPONSE",
    "keywords_path": "RESPONDER_KEYWORDS_PATH",
    "random_seed": "RESPONDER_RANDOM_SEED",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        if key == "random_seed":
            value = int(value)
        merged[key] = value

    return merged


def load_config(config_path: str | Path = "config/responder.defaults.yml") -> ResponderConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data, base_dir=path.parent)
