"""
Routes parsed commands to their handlers and turns failures into the two
user-visible error messages.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

from file_manager.entities.command import Command, Verb
from file_manager.entities.session import Session
from file_manager.exceptions import (
    FileRepositoryError,
    InvalidInputError,
    OSInfoError,
)
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.use_cases.commands.messages import (
    INVALID_INPUT,
    OPERATION_FAILED,
    say,
)


class CommandDispatcher:
    """Combine several command handlers behind a single entry point."""

    def __init__(
        self,
        handlers: list[CommandHandlerPort],
        console: Console,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._console = console
        self._logger = logger or logging.getLogger(__name__)
        self._routes: dict[Verb, CommandHandlerPort] = {}
        for handler in handlers:
            for verb in handler.verbs():
                if verb in self._routes:
                    raise ValueError(f"Verb handled twice: {verb.keyword}")
                self._routes[verb] = handler

    def run(self, line: str, session: Session) -> Optional[Command]:
        """
        Parse and execute one input line.

        Returns:
            The parsed command, or None when the line was rejected. The caller
            decides what to do with Verb.EXIT.
        """
        try:
            command = Command.parse(line)
        except InvalidInputError as e:
            self._logger.info(f"Rejected input {line!r}: {e}")
            say(self._console, INVALID_INPUT)
            return None

        if command.verb is Verb.EXIT:
            return command

        handler = self._routes.get(command.verb)
        if handler is None:
            self._logger.error(f"No handler registered for: {command.verb.keyword}")
            say(self._console, INVALID_INPUT)
            return None

        try:
            handler.dispatch(command, session)
        except InvalidInputError as e:
            self._logger.info(f"Invalid input for {command.verb.keyword}: {e}")
            say(self._console, INVALID_INPUT)
        except (FileRepositoryError, OSInfoError) as e:
            self._logger.warning(f"{command.verb.keyword} failed: {e}")
            say(self._console, OPERATION_FAILED)
        except Exception as e:
            # Real error in a handler: report it, keep the loop alive
            self._logger.error(f"Unexpected error in {command.verb.keyword}: {e}")
            say(self._console, OPERATION_FAILED)
        return command
