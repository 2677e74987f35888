#!/usr/bin/env python
"""Interactive terminal client for searching and bookmarking live news."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from newstracker.config import create_from_config, get_default_config_path, load_config
from newstracker.render import render
from newstracker.shell import handle_line

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    log_level: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(args: CLIArgs) -> None:
    """Run the interactive loop with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    logging.basicConfig(
        level=args.log_level or config.logging.level,
        format=config.logging.format,
        force=True,
    )
    app = create_from_config(config)
    logger.info(f"Config: {args.config}")

    print(render(app.state))
    print("Type /help for commands.")
    while True:
        try:
            line = await asyncio.to_thread(input, "\n> ")
        except EOFError:
            break
        output = await handle_line(app, line)
        if output is None:
            break
        print(output)


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Search live news, save searches and bookmark articles."
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level, overriding the config file (e.g. INFO, DEBUG)",
    )

    logging.basicConfig(level=logging.WARNING, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(config=config_path, log_level=ns.log_level)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
