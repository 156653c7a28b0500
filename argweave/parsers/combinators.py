#!/usr/bin/env python3
"""
Composite parsers, built from an ordered list of children.

They differ only in how they iterate their children:

- Sequential : each child once, in order, stopping at the first that consumes nothing.
- Group      : repeatedly offers the current token to the children in order,
               until none of them can consume anything more.
- FlagGroup  : token by token, understanding clusters of short flags (-xyz),
               rolling back the whole cluster if any character is unknown.

"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import argweave.errors
from argweave._abstract.parser import ArgParser_i, Clusterable_p
from argweave._interface import SIGNAL, Tag
from argweave._structs.cursor import Cursor

class CompositeParser(ArgParser_i):
    """ Holds the children, and the tag -> (index, child) table resolved on construction """

    def __init__(self, *children:ArgParser_i):
        self.children   : list[ArgParser_i]                = []
        self._tag_table : dict[Tag, tuple[int, ArgParser_i]] = {}
        for i, child in enumerate(children):
            if not isinstance(child, ArgParser_i):
                raise argweave.errors.ParseError("Composite children must be parsers", child)
            for tag in child.tags:
                if tag in self._tag_table:
                    raise argweave.errors.TagError("Duplicate tag in composite: %s", tag)
                self._tag_table[tag] = (i, child)

            self.children.append(child)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {len(self.children)} children>"

    @property
    def tags(self) -> tuple[Tag, ...]:
        return tuple(self._tag_table.keys())

    def __getitem__(self, tag:Tag) -> Any:
        return self.child_for(tag)[tag]

    def child_for(self, tag:Tag) -> ArgParser_i:
        match self._tag_table.get(tag, None):
            case None:
                raise argweave.errors.TagError("Unknown tag: %s", tag)
            case (_, child):
                return child

    def reset(self) -> None:
        for child in self.children:
            child.reset()

    def finish(self, end:Cursor) -> None:
        for child in self.children:
            child.finish(end)

class Sequential(CompositeParser):
    """ Positional grammar: each child gets one attempt, in order.
      The first child to consume nothing ends the sequence,
      later children are never tried.
    """

    def advance(self, cursor:Cursor) -> Cursor:
        for child in self.children:
            moved = child.advance(cursor)
            if moved.position <= cursor.position:
                logging.debug("Sequence stopped at: %s", child)
                break

            cursor = moved

        return cursor

class Group(CompositeParser):
    """ Order independent repetition.
      Each step offers the current position to the children in declaration order,
      the first child to consume wins, and the next step starts again from the first child.
      Ends when no child consumes anything, or the input is exhausted.
    """

    def advance(self, cursor:Cursor) -> Cursor:
        progressed = True
        while progressed and not cursor.exhausted:
            progressed = False
            for child in self.children:
                moved = child.advance(cursor)
                if cursor.position < moved.position:
                    cursor     = moved
                    progressed = True
                    break

        return cursor

class FlagGroup(CompositeParser):
    """ Clustered short flags.
      For each token, -xyz is tried as the flags x, y and z together.
      If any character doesn't match, every child is restored to its state from before the token,
      and the whole token is tried as a long form instead.
    """

    def __init__(self, *children:ArgParser_i):
        super().__init__(*children)
        for child in self.children:
            if not isinstance(child, Clusterable_p):
                raise argweave.errors.ParseError("Flag group children must support clustering", child)

    def advance(self, cursor:Cursor) -> Cursor:
        while not cursor.exhausted:
            token = cursor.peek()
            if self._parse_cluster(token) or self._parse_long_form(token):
                cursor = cursor.step()
                continue

            break

        return cursor

    def _parse_cluster(self, token:str) -> bool:
        if not (token.startswith(SIGNAL) and 1 < len(token)):
            return False

        saved = [child.snapshot() for child in self.children]
        for char in token[1:]:
            if any(child.parse_char(char) for child in self.children):
                continue

            logging.debug("Cluster Rollback: %s at %r", token, char)
            for child, state in zip(self.children, saved):
                child.restore(state)
            return False

        return True

    def _parse_long_form(self, token:str) -> bool:
        return any(child.parse_long_form(token) for child in self.children)

Section = Group
FlagSet = FlagGroup
