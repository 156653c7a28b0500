#!/usr/bin/env python3
"""
Constants and shared type aliases for argweave.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Hashable, Iterable, Iterator, Mapping, TypeAlias, TypeVar)

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

__version__ : Final[str] = "0.3.0"

SIGNAL        : Final[str] = "-"
LONG_SIGNAL   : Final[str] = "--"
ASSIGN        : Final[str] = "="
NUL_CHAR      : Final[str] = "\0"
PRINTER_NAME  : Final[str] = "argweave._printer"
IMPORT_SEP    : Final[str] = ":"

MISSING_SUBCOMMAND_MSG      : Final[str] = "Error: Missing subcommand. Try --help for usage."
UNRECOGNIZED_SUBCOMMAND_MSG : Final[str] = "Unrecognized subcommand '%s'. Try --help for usage."
UNIMPLEMENTED_COMMAND_MSG   : Final[str] = "[No implementation was specified for this subcommand]"

Token     : TypeAlias = "None|str"
Tag       : TypeAlias = "str|enum.Enum"
Converter : TypeAlias = "Callable[[str], Any]"
Command   : TypeAlias = "Callable[[list[str]], int]"

class FlagForm_e(enum.Enum):
    """ Which spellings a flag specification carries """
    short = enum.auto()
    long  = enum.auto()
    both  = enum.auto()
