"""
Responder
Canned keyword responses with a random default fallback.
"""

from .config import ResponderConfig, load_config
from .defaults import FALLBACK_RESPONSE, DefaultResponsePool, load_default_responses
from .generator import ResponseGenerator
from .keywords import KeywordEntry, KeywordTable

__all__ = [
    'FALLBACK_RESPONSE',
    'DefaultResponsePool',
    'KeywordEntry',
    'KeywordTable',
    'ResponderConfig',
    'ResponseGenerator',
    'load_config',
    'load_default_responses',
]
