from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from src.formatter.renumber import renumber_with_report
from src.models.configs import FormatterConfig


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FormatResult:
    """Outcome of formatting one manuscript file."""

    path: Path
    sections: int
    changed_lines: int
    written: bool = False

    @property
    def changed(self) -> bool:
        return self.changed_lines > 0


def _replace_text(path: Path, text: str, encoding: str) -> None:
    """Write ``text`` to a sibling temp file, then swap it over ``path``."""

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(text)
        shutil.copymode(path, tmp_path)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def format_manuscript(
    path: Path | None = None,
    config: FormatterConfig | None = None,
    *,
    check: bool = False,
) -> FormatResult:
    """Read a manuscript, renumber its exercise headings and write it back.

    The file is only rewritten when its content changes and ``check`` is off.
    """

    config = config or FormatterConfig()
    path = Path(path) if path is not None else config.manuscript_path
    if not path.exists():
        raise FileNotFoundError(f"Manuscript not found: {path}")

    # newline="" keeps \r\n line endings intact through the round trip
    with path.open(encoding=config.encoding, newline="") as handle:
        original = handle.read()
    result = renumber_with_report(
        original,
        section_keyword=config.section_keyword,
        prefixes=config.ordinal_prefixes,
    )

    outcome = FormatResult(path=path, sections=result.sections, changed_lines=result.changed_lines)
    if not result.changed:
        logger.debug("%s already numbered (%d sections)", path, result.sections)
        return outcome

    if check:
        logger.info("%s would renumber %d headings", path, result.changed_lines)
        return outcome

    _replace_text(path, result.text, config.encoding)
    outcome.written = True
    logger.info("Renumbered %d headings in %s", result.changed_lines, path)
    return outcome


__all__ = ["FormatResult", "format_manuscript"]
