"""
Commands 'up' and 'cd' mapped to the navigation use cases.
"""

import logging
from typing import Optional

from rich.console import Console
from typing_extensions import override

from file_manager.entities.command import Command, Verb
from file_manager.entities.session import Session
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.use_cases.commands.messages import AT_ROOT, current_dir_message, say
from file_manager.use_cases.navigation.navigate import (
    ChangeDirectoryUseCase,
    NavigateUpUseCase,
)


class NavigationCommandsHandler(CommandHandlerPort):
    """Handler for commands that move the current directory."""

    def __init__(
        self,
        navigate_up_uc: NavigateUpUseCase,
        change_directory_uc: ChangeDirectoryUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        self._navigate_up_uc = navigate_up_uc
        self._change_directory_uc = change_directory_uc
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    @override
    def verbs(self) -> frozenset[Verb]:
        return frozenset({Verb.UP, Verb.CD})

    @override
    def dispatch(self, command: Command, session: Session) -> None:
        if command.verb is Verb.UP:
            if self._navigate_up_uc.execute(session):
                say(self._console, current_dir_message(session.current_dir))
            else:
                say(self._console, AT_ROOT)
            return

        if command.verb is Verb.CD:
            new_dir = self._change_directory_uc.execute(session, command.arg(0))
            say(self._console, current_dir_message(new_dir))
            return

        raise ValueError(f"Unknown command: {command.verb.keyword}")
