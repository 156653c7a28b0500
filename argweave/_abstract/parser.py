#!/usr/bin/env python3
"""
The contract every parser, primitive or composite, implements.

advance(cursor) -> cursor:
  returns the same cursor to signal "no match, nothing consumed",
  otherwise a cursor further along, never past the end.
  Output slots are only written when the cursor advances.

"""
##-- imports
from __future__ import annotations

import abc
import enum
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from tomlguard import TomlGuard

import argweave.errors
from argweave._interface import Tag
from argweave._structs.cursor import Cursor

def tag_name(tag:Tag) -> str:
    match tag:
        case enum.Enum():
            return tag.name
        case str():
            return tag
        case _:
            return str(tag)

class ArgParser_i(abc.ABC):
    """
    A Single parsing unit. Reads tokens from a cursor,
    stores what it consumed in its own slots,
    and exposes those slots by tag once parsing is done.
    """

    @abc.abstractmethod
    def advance(self, cursor:Cursor) -> Cursor:
        pass

    @abc.abstractmethod
    def reset(self) -> None:
        """ Restore every slot to its default, for reuse between parses """
        pass

    @property
    @abc.abstractmethod
    def tags(self) -> tuple[Tag, ...]:
        pass

    @abc.abstractmethod
    def __getitem__(self, tag:Tag) -> Any:
        pass

    def __contains__(self, tag:Tag) -> bool:
        return tag in self.tags

    def finish(self, end:Cursor) -> None:
        """ Called once the whole parse has stopped, at `end` """
        pass

    def parse(self, args:Cursor|Sequence[None|str]|tuple[int, Sequence[None|str]], count:None|int=None) -> int:
        """ Parse an argument vector, returning how many tokens were consumed """
        match args:
            case Cursor():
                start = args
            case _:
                start = Cursor.build(args, count=count)

        end = self.advance(start)
        self.finish(end)
        logging.debug("Parsed %s of %s tokens", end.consumed_since(start), len(start))
        return end.consumed_since(start)

    def parse_all(self, args:Sequence[None|str]|tuple[int, Sequence[None|str]], count:None|int=None) -> TomlGuard:
        """ Parse an argument vector that must be consumed entirely.
          Returns the results, or raises UnconsumedArgsError listing what was left.
        """
        start = Cursor.build(args, count=count)
        end   = self.advance(start)
        self.finish(end)
        if not end.exhausted:
            raise argweave.errors.UnconsumedArgsError("Couldn't parse: %s", end.rest(), end.consumed_since(start))

        return self.results()

    def results(self) -> TomlGuard:
        """ The slots of this parser, keyed by tag name """
        return TomlGuard({tag_name(x) : self[x] for x in self.tags})

@runtime_checkable
class Clusterable_p(Protocol):
    """ What a parser needs to take part in short flag clusters (eg: -xyz) """

    def parse_char(self, char:str) -> bool:
        pass

    def parse_long_form(self, token:str) -> bool:
        pass

    def snapshot(self) -> Any:
        pass

    def restore(self, state:Any) -> None:
        pass
