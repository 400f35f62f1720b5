"""String algorithms: bracket matching, pair removal, subsequences and word counts."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly drop pairs of equal adjacent characters until none are left."""
    stack: list[str] = []
    for char in s:
        if stack and stack[-1] == char:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in s is closed in the right order.

    Characters other than ()[]{} are ignored.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack.pop() != _CLOSERS[char]:
                return False
    return not stack


def reverse_string(chars: MutableSequence[Any]) -> MutableSequence[Any]:
    """Reverse a mutable sequence of characters in place and return it."""
    chars.reverse()
    return chars


def is_subsequence(s: str, t: str) -> bool:
    """Return True if s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def _words(s: str) -> list[str]:
    return [word for word in s.split(" ") if word]


def count_segments(s: str) -> int:
    """Number of runs of non-space characters; only ' ' separates them."""
    return len(_words(s))


def length_of_last_word(s: str) -> int:
    """Length of the last run of non-space characters, or 0 if there is none."""
    words = _words(s)
    return len(words[-1]) if words else 0