"""Random quotes read from a text file, one per line."""

from __future__ import annotations

import os
import random

DEFAULT_QUOTES_FILE = "FuturamaQuotes.txt"
FALLBACK_QUOTE = "Kill all humans, must kill all humans!"


class QuoteBook:
    """Lazily loads quotes from a file; retries loading while it has none."""

    def __init__(
        self,
        path: str | os.PathLike[str] = DEFAULT_QUOTES_FILE,
        rng: random.Random | None = None,
    ) -> None:
        self.path = path
        self._rng = rng if rng is not None else random.Random()
        self._quotes: list[str] = []

    def _load(self) -> None:
        try:
            with open(self.path, encoding="utf-8") as handle:
                self._quotes = handle.read().splitlines()
        except OSError:
            self._quotes = []

    def random_quote(self) -> str:
        """A random line from the file, or a fixed quote when there are none."""
        if not self._quotes:
            self._load()
        if self._quotes:
            return self._rng.choice(self._quotes)
        return FALLBACK_QUOTE