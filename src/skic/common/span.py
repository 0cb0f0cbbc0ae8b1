"""Character ranges in parser input, used to point errors at the source."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    @classmethod
    def at(cls, index: int) -> Span:
        """Span covering the single character at ``index``."""

        return cls(index, index + 1)

    def extract(self, source: str) -> str:
        return source[self.start : self.end]
