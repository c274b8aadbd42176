"""Questions about sequences of stack pushes and pops."""

from __future__ import annotations

from collections.abc import Sequence


def validate_stack_sequences(pushed: Sequence[int], popped: Sequence[int]) -> bool:
    """Tell whether ``popped`` can come out of a stack fed ``pushed`` in order.

    Sequences of different lengths never match.
    """
    if len(pushed) != len(popped):
        return False
    stack: list[int] = []
    pops = iter(popped)
    expected = next(pops, None)
    for value in pushed:
        stack.append(value)
        while stack and stack[-1] == expected:
            stack.pop()
            expected = next(pops, None)
    return not stack


def build_array(target: Sequence[int], n: int) -> list[str]:
    """Return the ``"Push"``/``"Pop"`` steps that build ``target`` from 1, 2, ...

    ``target`` must be strictly increasing; the stream stops as soon as the
    last target value is in place, so ``n`` only bounds the input.
    """
    operations: list[str] = []
    stream = 1
    for value in target:
        while stream < value:
            operations += ["Push", "Pop"]
            stream += 1
        operations.append("Push")
        stream += 1
    return operations