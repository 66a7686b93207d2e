"""
Delimiter Splitter - Main Entry Point

Loads the configuration, sets up logging, and splits each line read from
standard input with the configured splitter, printing one piece per line.
"""

import sys
from pathlib import Path
from typing import List, Optional, TextIO

from src.core.settings import SettingsError, load_settings
from src.libs.splitter.splitter_factory import SplitterFactory
from src.observability.logger import get_logger


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Main entry point.

    Args:
        argv: Optional argument list; the first item overrides the settings path.
        stdin: Stream to read lines from (defaults to sys.stdin).
        stdout: Stream to write pieces to (defaults to sys.stdout).

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    args = sys.argv[1:] if argv is None else argv
    settings_path = Path(args[0]) if args else Path("config/settings.yaml")
    try:
        settings = load_settings(settings_path)
    except SettingsError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    logger = get_logger(log_level=settings.observability.log_level)
    logger.info("Settings loaded successfully.")

    try:
        splitter = SplitterFactory.create(settings)
    except (ValueError, RuntimeError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    lines = 0
    for line in stdin:
        for piece in splitter.split_text(line.rstrip("\n")):
            stdout.write(piece + "\n")
        lines += 1

    logger.info(f"Split {lines} lines.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
