from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from file_manager.container import DependencyContainer
from file_manager.container import container as default_container
from file_manager.entities.command import Verb
from file_manager.exceptions import ConfigurationError
from file_manager.use_cases.commands.messages import (
    current_dir_message,
    farewell_message,
    say,
    welcome_message,
)

PROMPT = "> "

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Interactive file manager working relative to a current directory.",
    )
    parser.add_argument(
        "--username",
        default="User",
        help="Name used in the greeting and farewell (default: User)",
    )
    # Unknown startup arguments are ignored rather than aborting the shell
    args, _ = parser.parse_known_args(argv)
    return args


def interactive_main(
    argv: Optional[list[str]] = None,
    container: Optional[DependencyContainer] = None,
) -> int:
    args = _parse_args(argv)
    container = container or default_container

    try:
        settings = container.get_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = container.get_console()
    dispatcher = container.get_dispatcher()
    session = container.new_session()

    say(console, welcome_message(args.username))
    say(console, current_dir_message(session.current_dir))
    logger.info(f"Session started in {session.current_dir}")

    while True:
        try:
            console.print(PROMPT, end="", markup=False, highlight=False)
            line = input().strip()
        except EOFError:
            console.print()
            break
        except KeyboardInterrupt:
            console.print()
            break

        try:
            command = dispatcher.run(line, session)
        except KeyboardInterrupt:
            # No graceful drain: in-flight work is abandoned
            console.print()
            break

        if command is not None and command.verb is Verb.EXIT:
            break

    say(console, farewell_message(args.username))
    logger.info("Session ended")
    return 0


def main(argv: Optional[list[str]] = None) -> int:  # pragma: no cover
    return interactive_main(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
