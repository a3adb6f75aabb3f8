from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from pydantic import ValidationError

from src.formatter.config_loader import load_formatter_config
from src.formatter.manuscript import format_manuscript
from src.models.configs import FormatterConfig


logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Renumber Exercise/Solution headings under Exercises sections of a markdown manuscript."
    )
    parser.add_argument(
        "manuscript",
        type=Path,
        nargs="?",
        help="Markdown manuscript to format (default: BOOK_PATH or book-content/book.md)",
    )
    parser.add_argument("--config", type=Path, help="Optional YAML, TOML or JSON formatter config")
    parser.add_argument(
        "--section-keyword",
        help="Heading text that opens a section to renumber (default: Exercises)",
    )
    parser.add_argument(
        "--prefix",
        action="append",
        dest="prefixes",
        help="Heading prefix to renumber; repeat for several (default: Exercise, Solution)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit with status 1 when the manuscript needs renumbering.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> FormatterConfig:
    config = load_formatter_config(args.config) if args.config else FormatterConfig()
    overrides: dict[str, object] = {}
    if args.manuscript is not None:
        overrides["manuscript_path"] = args.manuscript
    if args.section_keyword is not None:
        overrides["section_keyword"] = args.section_keyword
    if args.prefixes:
        overrides["ordinal_prefixes"] = args.prefixes
    if not overrides:
        return config
    return FormatterConfig.model_validate({**config.model_dump(), **overrides})


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = build_config(args)
        result = format_manuscript(config.manuscript_path, config, check=args.check)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("%s", exc)
        return 2

    print(
        "Formatting complete",
        {
            "manuscript": str(result.path),
            "sections": result.sections,
            "changed_lines": result.changed_lines,
            "written": result.written,
        },
    )
    if args.check and result.changed:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
