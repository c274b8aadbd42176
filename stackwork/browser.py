"""Back and forward navigation over a single browser tab."""

from __future__ import annotations


class BrowserHistory:
    """History of visited pages with back and forward moves."""

    def __init__(self, homepage: str) -> None:
        self._back = [homepage]
        self._forward: list[str] = []

    def visit(self, url: str) -> None:
        """Open ``url`` from the current page, dropping forward history."""
        self._back.append(url)
        self._forward.clear()

    @staticmethod
    def _shift(source: list[str], target: list[str], steps: int) -> None:
        for _ in range(steps):
            target.append(source.pop())

    @staticmethod
    def _check(steps: int) -> None:
        if steps < 0:
            raise ValueError("steps must not be negative")

    def back(self, steps: int) -> str:
        """Go back up to ``steps`` pages and return the current page."""
        self._check(steps)
        self._shift(self._back, self._forward, min(steps, len(self._back) - 1))
        return self._back[-1]

    def forward(self, steps: int) -> str:
        """Go forward up to ``steps`` pages and return the current page."""
        self._check(steps)
        self._shift(self._forward, self._back, min(steps, len(self._forward)))
        return self._back[-1]