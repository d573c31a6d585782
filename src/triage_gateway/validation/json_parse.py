"""
JSON parse stage.

Turn raw provider text into a Python dict: extract the first balanced JSON
object, then decode it. Failures are returned as ``ProviderFailure`` values
instead of being raised, so the provider client can fold them into its
degraded result.
"""

import json
from typing import Any, Union
import structlog

from triage_gateway.models.enums import FailureKind
from triage_gateway.models.llm_models import ProviderFailure
from triage_gateway.validation.extractor import extract_json_object

logger = structlog.get_logger(__name__)

SNIPPET_LENGTH = 200


class JSONParseStage:
    """
    Parse stage: raw text -> dict.

    Returns a ``ProviderFailure`` with kind EXTRACTION when no JSON object
    is found, PARSE when the object does not decode.
    """

    def parse(self, content: str) -> Union[dict[str, Any], ProviderFailure]:
        """
        Extract and decode the JSON object in ``content``.

        Args:
            content: Raw text from the provider (already checked non-empty)

        Returns:
            Parsed dict, or ProviderFailure describing why parsing failed
        """
        json_text = extract_json_object(content)
        if json_text is None:
            logger.debug("No JSON object found", content_snippet=content[:SNIPPET_LENGTH])
            return ProviderFailure(
                kind=FailureKind.EXTRACTION,
                reason="No JSON block found in response.",
            )

        try:
            parsed = json.loads(json_text)
        except json.JSONDecodeError as e:
            logger.debug(
                "Extracted block is not valid JSON",
                parse_error=f"{e.msg} at line {e.lineno} col {e.colno}",
                content_snippet=json_text[:SNIPPET_LENGTH],
            )
            return ProviderFailure(
                kind=FailureKind.PARSE,
                reason=f"Failed to parse JSON block: {e.msg} at line {e.lineno} col {e.colno}",
            )
        except RecursionError:
            logger.debug("Extracted block nests too deeply to decode", block_length=len(json_text))
            return ProviderFailure(
                kind=FailureKind.PARSE,
                reason="Failed to parse JSON block: nesting too deep",
            )

        # A balanced {...} region always decodes to an object, but keep the
        # return type honest.
        if not isinstance(parsed, dict):
            return ProviderFailure(
                kind=FailureKind.PARSE,
                reason=f"Expected a JSON object, got {type(parsed).__name__}",
            )

        logger.debug(f"Parsed JSON with {len(parsed)} top-level keys")
        return parsed
