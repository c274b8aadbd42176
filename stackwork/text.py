"""Stack-based string utilities: paths, encoded strings, backspaces."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TypeVar

T = TypeVar("T")


def simplify_path(path: str) -> str:
    """Return the canonical form of a Unix-style absolute ``path``.

    Empty segments and ``.`` are dropped, ``..`` removes the previous
    directory (and is ignored at the root).
    """
    directories: list[str] = []
    for token in path.split("/"):
        if token in ("", "."):
            continue
        if token == "..":
            if directories:
                directories.pop()
        else:
            directories.append(token)
    return "/" + "/".join(directories)


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups in ``s``, nesting allowed.

    Digits only ever form repeat counts and never appear in the output. A
    group with no count repeats zero times. Brackets left open at the end are
    kept as literal ``[`` characters.

    Raises ValueError on a ``]`` that closes no group.
    """
    frames: list[tuple[list[str], int]] = []
    current: list[str] = []
    count = 0
    for ch in s:
        if _is_digit(ch):
            count = count * 10 + int(ch)
        elif ch == "[":
            frames.append((current, count))
            current = []
            count = 0
        elif ch == "]":
            if not frames:
                raise ValueError("unmatched ']' in encoded string")
            outer, repeat = frames.pop()
            outer.append("".join(current) * repeat)
            current = outer
        else:
            current.append(ch)
    unclosed = "".join("".join(parts) + "[" for parts, _ in frames)
    return unclosed + "".join(current)


def _typed(text: str) -> list[str]:
    """Return what is left of ``text`` once every ``#`` erases a character."""
    kept: list[str] = []
    for ch in text:
        if ch != "#":
            kept.append(ch)
        elif kept:
            kept.pop()
    return kept


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether ``s`` and ``t`` are equal once ``#`` acts as backspace."""
    return _typed(s) == _typed(t)


def reverse_string(chars: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``chars`` in place and return the same sequence."""
    chars[:] = chars[::-1]
    return chars