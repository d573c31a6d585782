"""
Output validation for provider responses.

- extractor.py: first balanced JSON object in free-form text
- json_parse.py: extraction + decoding, failures returned as values
- normalizer.py: parsed dict -> result model with defaults
"""

from .extractor import extract_json_object
from .json_parse import JSONParseStage
from .normalizer import (
    CLASSIFICATION_DEFAULTS,
    SUMMARY_REPLY_DEFAULTS,
    normalize,
    normalize_classification,
    normalize_summary_reply,
)

__all__ = [
    "extract_json_object",
    "JSONParseStage",
    "CLASSIFICATION_DEFAULTS",
    "SUMMARY_REPLY_DEFAULTS",
    "normalize",
    "normalize_classification",
    "normalize_summary_reply",
]
