from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SectionRange:
    """Lines owned by a heading, up to the next heading of equal or lesser level.

    ``content_end`` is inclusive. A heading immediately followed by its
    terminator has ``content_end == heading_index``.
    """

    heading_index: int
    content_start: int
    content_end: int

    @property
    def is_empty(self) -> bool:
        return self.content_end < self.content_start

    def indices(self) -> range:
        return range(self.content_start, self.content_end + 1)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.content_start <= index <= self.content_end


__all__ = ["SectionRange"]
