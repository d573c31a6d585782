"""
Text processing utilities for the provider layer.

Keeps prompts small: classification only sees the first line of the body,
summarization sees the body capped at a fixed length.
"""

TRUNCATION_MARKER = "..."


def first_line(text: str) -> str:
    """
    Return the first non-blank line of ``text``, stripped.

    Args:
        text: Email body

    Returns:
        First line with visible content, or "" if there is none.

    Examples:
        >>> first_line("\\n  Hi team,\\nSecond line")
        'Hi team,'
    """
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def truncate_with_marker(text: str, max_chars: int = 2000) -> str:
    """
    Cut ``text`` to ``max_chars`` characters and append "..." if anything was cut.

    Examples:
        >>> truncate_with_marker("abcdef", 3)
        'abc...'
        >>> truncate_with_marker("abc", 3)
        'abc'
    """
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER
