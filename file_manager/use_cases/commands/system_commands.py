"""
Command 'os' mapped to the host information use case.
"""

import logging
from typing import Optional

from rich.console import Console
from typing_extensions import override

from file_manager.entities.command import Command, Verb
from file_manager.entities.session import Session
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.use_cases.commands.messages import say
from file_manager.use_cases.system.os_info import OSInfoUseCase


class SystemCommandsHandler(CommandHandlerPort):
    """Handler for read-only host queries."""

    def __init__(
        self,
        os_info_uc: OSInfoUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._os_info_uc = os_info_uc
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    @override
    def verbs(self) -> frozenset[Verb]:
        return frozenset({Verb.OS})

    @override
    def dispatch(self, command: Command, session: Session) -> None:
        if command.verb is not Verb.OS:
            raise ValueError(f"Unknown command: {command.verb.keyword}")
        for line in self._os_info_uc.execute(command.arg(0)):
            say(self._console, line)
