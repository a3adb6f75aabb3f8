from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Callable, List


_HEADING_HASHES = re.compile(r"^#+")
_HEADING_PREFIX = re.compile(r"^#+\s*")


@dataclass(slots=True)
class ManuscriptLine:
    """One line of a manuscript, addressed by its original position."""

    text: str
    index: int = field(compare=False)

    @property
    def heading_level(self) -> float:
        """Number of leading ``#`` characters, or ``inf`` for non-heading lines."""

        match = _HEADING_HASHES.match(self.text)
        return len(match.group(0)) if match else math.inf

    @property
    def is_heading(self) -> bool:
        return self.heading_level != math.inf

    @property
    def content(self) -> str:
        """Text without the heading marker."""

        return _HEADING_PREFIX.sub("", self.text).strip()

    def modify(self, modification: Callable[[str], str]) -> "ManuscriptLine":
        self.text = modification(self.text)
        return self


def decorate_lines(text: str) -> List[ManuscriptLine]:
    """Split manuscript text on ``\\n`` and attach each line's position."""

    return [ManuscriptLine(text=line, index=index) for index, line in enumerate(text.split("\n"))]


__all__ = ["ManuscriptLine", "decorate_lines"]
