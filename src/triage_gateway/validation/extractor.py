"""
JSON object extraction from free-form model output.

Models often wrap the requested JSON in prose ("Here's the result: {...}")
or markdown fences. The extractor returns the first balanced ``{...}``
region. It never spans from the first ``{`` to the last ``}``: that
over-captures as soon as trailing prose contains another closing brace.
"""

from typing import Any, Optional


def extract_json_object(text: Any) -> Optional[str]:
    """
    Return the first balanced-brace substring of ``text``.

    Depth goes up on ``{`` and down on ``}``; the region ends at the brace
    that brings depth back to zero.

    Deliberate extension of a plain depth counter: braces inside JSON string
    literals (with backslash escapes) are ignored, so values like ``"a } b"``
    do not end the region early. For text with no braces inside strings the
    result is identical to the plain counter.

    Args:
        text: Raw model output

    Returns:
        The JSON object substring, or None if ``text`` is not a non-empty
        string or holds no balanced region.

    Examples:
        >>> extract_json_object('Here: {"a":1} trailing text')
        '{"a":1}'
        >>> extract_json_object('{"a": {"b": 1}} junk}')
        '{"a": {"b": 1}}'
    """
    if not isinstance(text, str) or not text:
        return None

    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]

        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]

    return None
