"""Text helpers shared by diagnostics and CLI output."""

from typing import Iterable, List


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def unique_in_order(items: Iterable[str]) -> List[str]:
    """
    Drop repeated items while keeping first-seen order.

    Example:
        >>> unique_in_order(["b", "a", "b"])
        ['b', 'a']
    """
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
