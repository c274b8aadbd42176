"""Checks and repairs for bracket strings."""

from __future__ import annotations

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Characters other than brackets are ignored while a bracket is open; on an
    empty stack they count as unmatched.
    """
    stack: list[str] = []
    for ch in s:
        if not stack or ch in _OPENERS:
            stack.append(ch)
        elif ch in _PAIRS:
            if stack[-1] == _PAIRS[ch]:
                stack.pop()
            else:
                stack.append(ch)
    return not stack


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed ``()`` substring of ``s``."""
    longest = 0
    bases = [-1]
    for index, ch in enumerate(s):
        if ch == "(":
            bases.append(index)
            continue
        bases.pop()
        if bases:
            longest = max(longest, index - bases[-1])
        else:
            bases.append(index)
    return longest


def min_add_to_make_valid(s: str) -> int:
    """Return how many characters are left after cancelling every ``()`` pair.

    For a string of parentheses this is the fewest insertions that make it valid.
    """
    remaining: list[str] = []
    for ch in s:
        if ch == ")" and remaining and remaining[-1] == "(":
            remaining.pop()
        else:
            remaining.append(ch)
    return len(remaining)


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def min_remove_to_make_valid(s: str) -> str:
    """Drop the fewest parentheses from ``s`` so that it becomes valid.

    Letters are always kept. Any other character that is not ``(`` is treated
    as a closing bracket on the forward pass.
    """
    kept: list[str] = []
    open_count = 0
    for ch in s:
        if _is_letter(ch):
            kept.append(ch)
        elif ch == "(":
            kept.append(ch)
            open_count += 1
        elif open_count:
            open_count -= 1
            kept.append(ch)
    if not open_count:
        return "".join(kept)

    reversed_kept: list[str] = []
    close_count = 0
    for ch in reversed(kept):
        if _is_letter(ch):
            reversed_kept.append(ch)
        elif ch == ")":
            reversed_kept.append(ch)
            close_count += 1
        elif close_count:
            close_count -= 1
            reversed_kept.append(ch)
    return "".join(reversed(reversed_kept))


def is_valid_abc(s: str) -> bool:
    """Tell whether ``s`` can be built from "" by inserting "abc" repeatedly."""
    stack: list[str] = []
    for ch in s:
        stack.append(ch)
        if stack[-3:] == ["a", "b", "c"]:
            del stack[-3:]
    return not stack