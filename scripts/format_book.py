from __future__ import annotations

from src.formatter.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
