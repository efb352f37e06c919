"""
Commands 'hash', 'compress' and 'decompress' mapped to the transform use cases.
"""

import logging
from typing import Optional

from rich.console import Console
from typing_extensions import override

from file_manager.entities.command import Command, Verb
from file_manager.entities.session import Session
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.use_cases.commands.messages import (
    FILE_COMPRESSED,
    FILE_DECOMPRESSED,
    say,
)
from file_manager.use_cases.transforms.compress_files import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.transforms.hash_file import HashFileUseCase


class TransformCommandsHandler(CommandHandlerPort):
    """Handler for commands that stream file content through a transform."""

    def __init__(
        self,
        hash_file_uc: HashFileUseCase,
        compress_file_uc: CompressFileUseCase,
        decompress_file_uc: DecompressFileUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        self._hash_file_uc = hash_file_uc
        self._compress_file_uc = compress_file_uc
        self._decompress_file_uc = decompress_file_uc
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    @override
    def verbs(self) -> frozenset[Verb]:
        return frozenset({Verb.HASH, Verb.COMPRESS, Verb.DECOMPRESS})

    @override
    def dispatch(self, command: Command, session: Session) -> None:
        verb = command.verb

        if verb is Verb.HASH:
            say(self._console, self._hash_file_uc.execute(session.resolve(command.arg(0))))
            return

        if verb is Verb.COMPRESS:
            self._compress_file_uc.execute(
                session.resolve(command.arg(0)), session.resolve(command.arg(1))
            )
            say(self._console, FILE_COMPRESSED)
            return

        if verb is Verb.DECOMPRESS:
            self._decompress_file_uc.execute(
                session.resolve(command.arg(0)), session.resolve(command.arg(1))
            )
            say(self._console, FILE_DECOMPRESSED)
            return

        raise ValueError(f"Unknown command: {verb.keyword}")
