"""String searching and small text-processing routines."""

from __future__ import annotations

_OPERATORS = frozenset("+-*/^")


def prefix_function(pattern: str) -> list[int]:
    """Return, for each prefix of the pattern, the length of its longest proper border."""
    lps = [0] * len(pattern)
    length = 0
    index = 1
    while index < len(pattern):
        if pattern[index] == pattern[length]:
            length += 1
            lps[index] = length
            index += 1
        elif length:
            length = lps[length - 1]
        else:
            index += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlapping ones included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    positions: list[int] = []
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                positions.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return positions


def longest_unique_substring(text: str) -> int:
    """Return the length of the longest run of text without a repeated character."""
    last_seen: dict[str, int] = {}
    best = start = 0
    for index, char in enumerate(text):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def length_of_last_word(text: str) -> int:
    """Return the length of the last space-separated word, or 0 if there is none."""
    trimmed = text.rstrip(" ")
    return len(trimmed) - (trimmed.rfind(" ") + 1)


def find_substring(text: str, sub: str) -> int:
    """Return the zero-based index of the first occurrence of ``sub`` in ``text``.

    Raises ValueError when it does not occur.
    """
    position = text.find(sub)
    if position < 0:
        raise ValueError(f"{sub!r} does not occur in the text")
    return position


def postfix_to_infix(expression: str) -> str:
    """Turn a postfix expression of single-character operands into parenthesised infix."""
    stack: list[str] = []
    for char in expression:
        if char.isascii() and char.isalnum():
            stack.append(char)
        elif char in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(f"({left}{char}{right})")
    if not stack:
        raise ValueError("expression holds no operands")
    return stack[-1]