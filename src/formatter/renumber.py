from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence

from src.models.configs import DEFAULT_ORDINAL_PREFIXES, DEFAULT_SECTION_KEYWORD
from src.models.line import ManuscriptLine, decorate_lines
from src.models.section import SectionRange


@dataclass(slots=True)
class RenumberResult:
    """Renumbered manuscript text plus counts used for reporting."""

    text: str
    sections: int = 0
    changed_lines: int = 0

    @property
    def changed(self) -> bool:
        return self.changed_lines > 0


def is_section_opener(line: ManuscriptLine, keyword: str = DEFAULT_SECTION_KEYWORD) -> bool:
    return line.is_heading and keyword in line.content


def find_section(lines: Sequence[ManuscriptLine], opener: ManuscriptLine) -> SectionRange:
    """Compute the content range owned by ``opener``.

    The range stops before the first later line whose heading level is equal
    to or lower than the opener's. Non-heading lines never terminate it.
    """

    level = opener.heading_level
    end = len(lines) - 1
    for line in lines[opener.index + 1 :]:
        if line.heading_level <= level:
            end = line.index - 1
            break
    return SectionRange(
        heading_index=opener.index,
        content_start=opener.index + 1,
        content_end=end,
    )


def _ordinal_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^(#+\s*{re.escape(prefix)}\s*)(\d+)")


def _collect_targets(
    lines: Sequence[ManuscriptLine],
    section: SectionRange,
    prefix: str,
    section_keyword: str,
) -> List[ManuscriptLine]:
    targets: List[ManuscriptLine] = []
    index = section.content_start
    while index <= section.content_end:
        line = lines[index]
        if is_section_opener(line, section_keyword):
            # headings under a nested section are numbered by that section
            index = find_section(lines, line).content_end + 1
            continue
        if line.is_heading and line.content.startswith(prefix):
            targets.append(line)
        index += 1
    return targets


def renumber_ordinals(
    lines: Sequence[ManuscriptLine],
    section: SectionRange,
    prefix: str,
    *,
    section_keyword: str = DEFAULT_SECTION_KEYWORD,
) -> int:
    """Number ``prefix`` headings inside ``section`` 1, 2, 3... in document order.

    Only the digit run directly after the heading's leading ``prefix`` is
    replaced, so ``Exercise 3.5`` keeps its ``.5`` and numbers later in the
    title are never touched. Headings without that digit run keep their text
    but still take a position. Nested sections, opener included, are left to
    their own pass. Returns the number of lines whose text changed.
    """

    pattern = _ordinal_pattern(prefix)
    targets = _collect_targets(lines, section, prefix, section_keyword)

    changed = 0
    for position, line in enumerate(targets, start=1):
        before = line.text
        line.modify(lambda text: pattern.sub(rf"\g<1>{position}", text, count=1))
        if line.text != before:
            changed += 1
    return changed


def renumber_lines(
    lines: List[ManuscriptLine],
    *,
    section_keyword: str = DEFAULT_SECTION_KEYWORD,
    prefixes: Sequence[str] = DEFAULT_ORDINAL_PREFIXES,
) -> RenumberResult:
    """Renumber every section opened by a ``section_keyword`` heading, in place."""

    original = [line.text for line in lines]
    sections = 0
    for line in lines:
        if not is_section_opener(line, section_keyword):
            continue
        sections += 1
        section = find_section(lines, line)
        if section.is_empty:
            continue
        for prefix in prefixes:
            renumber_ordinals(lines, section, prefix, section_keyword=section_keyword)

    changed_lines = sum(1 for before, line in zip(original, lines) if before != line.text)
    return RenumberResult(
        text="\n".join(line.text for line in lines),
        sections=sections,
        changed_lines=changed_lines,
    )


def renumber_with_report(
    manuscript_text: str,
    *,
    section_keyword: str = DEFAULT_SECTION_KEYWORD,
    prefixes: Sequence[str] = DEFAULT_ORDINAL_PREFIXES,
) -> RenumberResult:
    return renumber_lines(
        decorate_lines(manuscript_text),
        section_keyword=section_keyword,
        prefixes=prefixes,
    )


def renumber(
    manuscript_text: str,
    *,
    section_keyword: str = DEFAULT_SECTION_KEYWORD,
    prefixes: Sequence[str] = DEFAULT_ORDINAL_PREFIXES,
) -> str:
    """Return ``manuscript_text`` with exercise and solution headings renumbered.

    Text without a matching section comes back unchanged.
    """

    return renumber_with_report(
        manuscript_text,
        section_keyword=section_keyword,
        prefixes=prefixes,
    ).text


__all__ = [
    "RenumberResult",
    "find_section",
    "is_section_opener",
    "renumber",
    "renumber_lines",
    "renumber_ordinals",
    "renumber_with_report",
]
