#!/usr/bin/env python3
"""
Leaf parsers. Each owns a single output slot, addressed by its tag.

| Primitive     | Consumes                                  |
|---------------|-------------------------------------------|
| Flag          | -c or the long form                       |
| Value         | the current token                         |
| ValueFlag     | -c value, --long value                    |
| PrefixedValue | -cvalue, --long=value, or the two token forms |
| Item          | the current token, appended to a list     |
| ListRemaining | every remaining token                     |
| IgnoreArg     | the current token, discarded              |

"""
##-- imports
from __future__ import annotations

import copy
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import argweave.errors
from argweave._abstract.parser import ArgParser_i
from argweave._interface import ASSIGN, Converter, Tag
from argweave._structs.cursor import Cursor
from argweave._structs.flag_spec import FlagSpec
from argweave.parsers.conversion import lookup_converter, text, try_convert

class SlotParser(ArgParser_i):
    """ Base for parsers owning one tagged slot, initialised from a default """

    def __init__(self, tag:Tag, default:Any=None):
        if tag is None:
            raise argweave.errors.ParseError("A slot parser requires a tag", self.__class__.__name__)
        self.tag     = tag
        self.default = default
        self.value   = copy.copy(default)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.tag} = {self.value!r}>"

    @property
    def tags(self) -> tuple[Tag, ...]:
        return (self.tag,)

    def __getitem__(self, tag:Tag) -> Any:
        if tag != self.tag:
            raise argweave.errors.TagError("Unknown tag: %s", tag)
        return self.value

    def reset(self) -> None:
        self.value = copy.copy(self.default)

class Flag(SlotParser):
    """ A boolean, set by -c, or the long form, or within a cluster """

    def __init__(self, tag:Tag, *forms:str|dict|FlagSpec, default:bool=False):
        super().__init__(tag, default)
        self.spec = FlagSpec.build(*forms)

    def advance(self, cursor:Cursor) -> Cursor:
        if not self.spec.matches(cursor.peek()):
            return cursor

        logging.debug("Flag Set: %s", self.tag)
        self.value = True
        return cursor.step()

    def parse_char(self, char:str) -> bool:
        if not self.spec.matches_char(char):
            return False

        self.value = True
        return True

    def parse_long_form(self, token:str) -> bool:
        if not self.spec.matches_long(token):
            return False

        self.value = True
        return True

    def snapshot(self) -> bool:
        return self.value

    def restore(self, state:bool) -> None:
        self.value = state

class Value(SlotParser):
    """ Converts whatever the current token is """

    def __init__(self, tag:Tag, converter:None|str|Converter=None, default:Any=None):
        super().__init__(tag, default)
        self.converter = lookup_converter(converter)

    def advance(self, cursor:Cursor) -> Cursor:
        if cursor.exhausted:
            return cursor

        match try_convert(self.converter, cursor.peek()):
            case True, val:
                self.value = val
                return cursor.step()
            case _:
                return cursor

class String(Value):
    """ A Value that keeps the token as text """

    def __init__(self, tag:Tag, default:None|str=None):
        super().__init__(tag, text, default)

class ValueFlag(SlotParser):
    """ Two tokens: the flag, and its value. eg: -o value, --output value """

    def __init__(self, tag:Tag, *forms:str|dict|FlagSpec, converter:None|str|Converter=None, default:Any=None):
        super().__init__(tag, default)
        self.spec      = FlagSpec.build(*forms)
        self.converter = lookup_converter(converter)

    def advance(self, cursor:Cursor) -> Cursor:
        if cursor.remaining < 2 or not self.spec.matches(cursor.peek()):
            return cursor

        match try_convert(self.converter, cursor.peek_at(1)):
            case True, val:
                self.value = val
                return cursor.step(2)
            case _:
                return cursor

class PrefixedValue(SlotParser):
    """ A value attached to its flag:
      --width=80, -w80  : one token, split by the flag's prefix length
      --width 80, -w 80 : two tokens
    """

    def __init__(self, tag:Tag, *forms:str|dict|FlagSpec, converter:None|str|Converter=None, default:Any=None):
        super().__init__(tag, default)
        self.spec      = FlagSpec.build(*forms)
        self.converter = lookup_converter(converter)

    def _attached_value(self, token:str) -> None|str:
        """ The remainder of a single token form, or None """
        prefix = self.spec.match_prefix(token)
        if prefix == 0:
            return None
        if prefix < len(token):
            return token[prefix:]
        if self.spec.long is not None and token == self.spec.long and self.spec.long.endswith(ASSIGN):
            # --opt= with an empty value
            return ""

        return None

    def advance(self, cursor:Cursor) -> Cursor:
        token = cursor.peek()
        if token is None:
            return cursor

        match self._attached_value(token):
            case str() as attached:
                ok, val = try_convert(self.converter, attached)
                count   = 1
            case None if 2 <= cursor.remaining and self.spec.matches_bare(token):
                ok, val = try_convert(self.converter, cursor.peek_at(1))
                count   = 2
            case None:
                return cursor

        if not ok:
            return cursor

        logging.debug("Prefixed Value: %s = %r", self.tag, val)
        self.value = val
        return cursor.step(count)

class Item(SlotParser):
    """ Appends one converted token per call to a list """

    def __init__(self, tag:Tag, converter:None|str|Converter=None, default:None|list=None):
        super().__init__(tag, [] if default is None else default)
        self.converter = lookup_converter(converter)

    def advance(self, cursor:Cursor) -> Cursor:
        if cursor.exhausted:
            return cursor

        match try_convert(self.converter, cursor.peek()):
            case True, val:
                self.value.append(val)
                return cursor.step()
            case _:
                return cursor

class ListRemaining(SlotParser):
    """ Takes every remaining token at once, replacing the list wholesale """

    def __init__(self, tag:Tag, converter:None|str|Converter=None, default:None|list=None):
        super().__init__(tag, [] if default is None else default)
        self.converter = lookup_converter(converter)

    def advance(self, cursor:Cursor) -> Cursor:
        if cursor.exhausted:
            return cursor

        values = []
        for token in cursor.rest():
            match try_convert(self.converter, token):
                case True, val:
                    values.append(val)
                case _:
                    return cursor

        self.value = values
        return cursor.step(cursor.remaining)

class IgnoreArg(ArgParser_i):
    """ Consumes a single token, if there is one, and keeps nothing """

    def __repr__(self) -> str:
        return "<IgnoreArg>"

    @property
    def tags(self) -> tuple[Tag, ...]:
        return ()

    def __getitem__(self, tag:Tag) -> Any:
        raise argweave.errors.TagError("IgnoreArg has no tags: %s", tag)

    def reset(self) -> None:
        pass

    def advance(self, cursor:Cursor) -> Cursor:
        return cursor.step() if not cursor.exhausted else cursor

ListOf     = ListRemaining
ignore_arg = IgnoreArg()
