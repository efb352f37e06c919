"""
Command domain entity: a verb from a closed set plus its positional arguments.
"""

from dataclasses import dataclass
from enum import Enum

from file_manager.exceptions import InvalidInputError


class Verb(Enum):
    """Every command the shell understands, with the number of required arguments."""

    EXIT = (".exit", 0)
    UP = ("up", 0)
    CD = ("cd", 1)
    LS = ("ls", 0)
    CAT = ("cat", 1)
    ADD = ("add", 1)
    RN = ("rn", 2)
    CP = ("cp", 2)
    MV = ("mv", 2)
    RM = ("rm", 1)
    OS = ("os", 1)
    HASH = ("hash", 1)
    COMPRESS = ("compress", 2)
    DECOMPRESS = ("decompress", 2)

    def __init__(self, keyword: str, arity: int):
        self.keyword = keyword
        self.arity = arity

    @classmethod
    def from_keyword(cls, keyword: str) -> "Verb":
        for verb in cls:
            if verb.keyword == keyword:
                return verb
        raise InvalidInputError(f"Unknown command: {keyword}")


@dataclass(frozen=True)
class Command:
    """Parsed input line, built fresh for every line and discarded after dispatch."""

    verb: Verb
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: str) -> "Command":
        """
        Parse one input line.

        Arguments are split on whitespace; quoting is not supported. Extra
        arguments beyond the verb's arity are ignored.

        Raises:
            InvalidInputError: For blank lines, unknown verbs or missing arguments
        """
        parts = line.split()
        if not parts:
            raise InvalidInputError("Empty command")
        verb = Verb.from_keyword(parts[0])
        args = tuple(parts[1:])
        if len(args) < verb.arity:
            raise InvalidInputError(
                f"'{verb.keyword}' expects {verb.arity} argument(s), got {len(args)}"
            )
        return cls(verb, args[: verb.arity])

    def arg(self, index: int) -> str:
        return self.args[index]
