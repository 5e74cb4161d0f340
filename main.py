"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    verbose = "-v" in argv or "--verbose" in argv
    bootstrap_logging(
        service="lolranks",
        level=settings.LOG_LEVEL,
        console=True if verbose else None,
        log_dir=settings.LOG_DIR,
        log_file_name="lolranks.jsonl",
    )
    # Lazy import: settings and logging must be in place before the layers load.
    from presentation.cli.live_match_command import run

    try:
        return asyncio.run(run(argv))
    except KeyboardInterrupt:
        print("\nCancelled by user.", file=sys.stderr)
        return 130
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
