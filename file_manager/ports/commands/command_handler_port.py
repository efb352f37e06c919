"""
Port and types for command handlers, independent of how input is read.
"""

from abc import ABC, abstractmethod

from file_manager.entities.command import Command, Verb
from file_manager.entities.session import Session


class CommandHandlerPort(ABC):
    """
    Port interface for handling shell commands.

    A handler declares the verbs it owns, performs them against a session and
    prints success output. Failures are raised (InvalidInputError,
    FileRepositoryError, OSInfoError) and turned into messages by the caller.
    """

    @abstractmethod
    def verbs(self) -> frozenset[Verb]:
        """
        Get the verbs handled by this handler.

        Returns:
            Set of verbs
        """
        pass

    @abstractmethod
    def dispatch(self, command: Command, session: Session) -> None:
        """
        Run a command to completion.

        Args:
            command: Parsed command whose verb belongs to this handler
            session: Session providing and receiving the current directory

        Raises:
            ValueError: If the verb is not handled here
        """
        pass
