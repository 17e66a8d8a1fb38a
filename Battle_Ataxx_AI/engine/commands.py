"""Parsing of text commands ("start", "block c3", "a7-b6", ...) into Command values."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

try:
    from engine.errors import UnknownCommand
except ImportError:
    from Battle_Ataxx_AI.engine.errors import UnknownCommand


class CommandType(Enum):
    AUTO = r"auto\s+(red|blue)"
    MANUAL = r"manual\s+(red|blue)"
    BLOCK = r"block\s+([a-g][1-7])"
    CLEAR = r"clear"
    DUMP = r"dump"
    HELP = r"help|\?"
    LOAD = r"load\s+(\S+)"
    PASS = r"pass|-"
    PIECEMOVE = r"([a-g])([1-7])-([a-g])([1-7])"
    SEED = r"seed\s+(\d+)"
    START = r"start"
    UNDO = r"undo"
    QUIT = r"quit"


@dataclass(frozen=True)
class Command:
    type: CommandType
    operands: Tuple[str, ...] = ()


def parse_command(line):
    """Return the Command for LINE, None for a blank line or comment; raise UnknownCommand otherwise."""
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    for ctype in CommandType:
        match = re.fullmatch(ctype.value, text, re.IGNORECASE)
        if match:
            if ctype == CommandType.LOAD:
                return Command(ctype, match.groups())
            return Command(ctype, tuple(g.lower() for g in match.groups()))
    raise UnknownCommand(f"Command not understood: {line.strip()}")
