#!/usr/bin/env python3
"""
Option sets: mutually exclusive named options all writing one shared slot.

An OptionSet is a closed enumeration (eg: a display mode),
a CommandSet maps subcommand names to callables and dispatches to the chosen one.

For a single token the first declared matching option wins,
across tokens the last successful match wins.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
from pydantic import BaseModel, ConfigDict
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argweave.errors
from argweave._interface import (MISSING_SUBCOMMAND_MSG, PRINTER_NAME, SIGNAL,
                                 UNIMPLEMENTED_COMMAND_MSG,
                                 UNRECOGNIZED_SUBCOMMAND_MSG, Command, Tag)
from argweave._structs.cursor import Cursor
from argweave._structs.flag_spec import FlagSpec
from argweave.parsers.primitives import SlotParser

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(PRINTER_NAME)
##-- end logging

class Option(BaseModel):
    """ A flag, and the value it writes into its set's slot when matched """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    flag  : FlagSpec
    value : Any = None

    @classmethod
    def build(cls, *args:Any) -> Option:
        """ Option.build('h', '--human', Mode.kibi) : forms, then the value.
          Or from a dict of {short, long, value}
        """
        match args:
            case [Option() as opt]:
                return opt
            case [TomlGuard() as data]:
                return cls.build(dict(data._table()))
            case [dict() as data]:
                data  = dict(data)
                value = data.pop("value", None)
                return cls(flag=FlagSpec.build(data), value=value)
            case [*forms, value] if bool(forms):
                return cls(flag=FlagSpec.build(*forms), value=value)
            case _:
                raise argweave.errors.ParseError("An option needs at least one form and a value", args)

    def __repr__(self) -> str:
        return f"<Option: {self.flag!r} -> {self.value!r}>"

class OptionSet(SlotParser):
    """ Consumes one token matching any of its options,
      assigning that option's value to the shared slot
    """

    def __init__(self, tag:Tag, default:Any, *options:Option|tuple|dict):
        super().__init__(tag, default)
        self.options = [Option.build(*x) if isinstance(x, tuple) else Option.build(x) for x in options]

    def _match(self, pred:Callable[[FlagSpec], bool]) -> bool:
        match mitz.first_true(self.options, pred=lambda x: pred(x.flag)):
            case None:
                return False
            case Option() as opt:
                logging.debug("Option Matched: %s : %r", self.tag, opt)
                self.value = opt.value
                return True

    def advance(self, cursor:Cursor) -> Cursor:
        token = cursor.peek()
        if token is None or not self._match(lambda x: x.matches(token)):
            return cursor

        return cursor.step()

    def parse_char(self, char:str) -> bool:
        return self._match(lambda x: x.matches_char(char))

    def parse_long_form(self, token:str) -> bool:
        return self._match(lambda x: x.matches_long(token))

    def snapshot(self) -> Any:
        return self.value

    def restore(self, state:Any) -> None:
        self.value = state

class CommandSet(OptionSet):
    """ An OptionSet of subcommands.
      After parsing, call it to run the selected command.
      Indexing a CommandSet by its tag gives the CommandSet itself.

      When nothing was selected and there is no default,
      calling reports the problem through `on_missing` and returns its status.
    """

    def __init__(self, tag:Tag, default:None|Command, *options:Option|tuple|dict, on_missing:None|Callable[[None|str], int]=None):
        super().__init__(tag, default, *options)
        self.command_name : None|str                  = None
        self.on_missing   : Callable[[None|str], int] = on_missing or self.report_missing
        self._selected    : bool                      = False
        self._offered     : None|Cursor               = None

    def __bool__(self) -> bool:
        return self.value is not None

    def __getitem__(self, tag:Tag) -> CommandSet:
        super().__getitem__(tag)
        return self

    def __call__(self, args:Sequence[str]) -> int:
        match self.value:
            case None:
                return self.on_missing(self.command_name)
            case command if callable(command):
                logging.debug("Dispatching: %s -> %s", self.command_name, command)
                return command(list(args))
            case x:
                raise TypeError("Subcommand targets must be callable", x)

    def _select(self, name:str) -> None:
        self._selected    = True
        self._offered     = None
        self.command_name = name

    def advance(self, cursor:Cursor) -> Cursor:
        moved = super().advance(cursor)
        match cursor.peek():
            case None:
                pass
            case str() as token if moved is not cursor:
                self._select(token)
            case str() as token if not self._selected:
                # Kept for diagnostics, until finish shows the token went elsewhere
                self._offered     = cursor
                self.command_name = token

        return moved

    def parse_char(self, char:str) -> bool:
        if not super().parse_char(char):
            return False

        self._select(SIGNAL + char)
        return True

    def parse_long_form(self, token:str) -> bool:
        if not super().parse_long_form(token):
            return False

        self._select(token)
        return True

    def snapshot(self) -> Any:
        return (self.value, self._selected, self._offered, self.command_name)

    def restore(self, state:Any) -> None:
        self.value, self._selected, self._offered, self.command_name = state

    def finish(self, end:Cursor) -> None:
        """ An unmatched token is only worth reporting if the parse stopped on it """
        if self._offered is not None and self._offered.position != end.position:
            self.command_name = None
        self._offered = None

    def reset(self) -> None:
        super().reset()
        self.command_name = None
        self._selected    = False
        self._offered     = None

    def set_default_command(self, command:None|Command) -> None:
        """ Change the fallback, keeping any command already selected by parsing """
        if not self._selected:
            self.value = command
        self.default = command

    def get_default_command(self) -> None|Command:
        return self.default

    @staticmethod
    def report_missing(command_name:None|str) -> int:
        match command_name:
            case None:
                printer.error(MISSING_SUBCOMMAND_MSG)
            case str():
                printer.error(UNRECOGNIZED_SUBCOMMAND_MSG, command_name)

        return 1

def unimplemented_command(args:Sequence[str]) -> int:
    """ A placeholder subcommand target """
    printer.error(UNIMPLEMENTED_COMMAND_MSG)
    return 1
