#!/usr/bin/env python3
"""
A Cursor is the shared position over an argument vector.
Every parser reads the current token from it, and returns a new cursor
describing how far it consumed.

Cursors are immutable. A parser that consumes nothing returns the
*same* cursor object it was given.

"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Sequence, Tuple, TypeAlias,
                    TypeVar, cast, final, overload)
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import argweave.errors
from argweave._interface import Token

@final
class Cursor:
    """ (position, end) over a tuple of tokens.
      position <= end always, position == end means exhausted.
    """

    __slots__ = ("_tokens", "_position", "_end")

    def __init__(self, tokens:Sequence[str], position:int=0, end:None|int=None):
        tokens = tuple(tokens)
        end    = len(tokens) if end is None else end
        if not (0 <= position <= end <= len(tokens)):
            raise argweave.errors.ParseError("Cursor bounds are invalid: %s <= %s <= %s", position, end, len(tokens))

        self._tokens   = tokens
        self._position = position
        self._end      = end

    @staticmethod
    def build(argv:None|Sequence[None|str]|tuple[int, Sequence[None|str]], count:None|int=None) -> Cursor:
        """
          Build a cursor from:
          a list of strings,
          an (argc, argv) pair,
          or a None terminated list of strings, which ends at the first None.

          A negative count, or a missing argv, produces an empty cursor.
          A bare string is refused, rather than split into characters.
        """
        match argv:
            case str():
                raise argweave.errors.ParseError("Cursor.build needs a sequence of tokens, not a string: %s", argv)
            case None:
                return Cursor(())
            case (int() as argc, argv_list) if count is None:
                return Cursor.build(argv_list, count=argc)
            case _ if count is not None and count < 0:
                return Cursor(())
            case _:
                pass

        tokens = []
        for i, token in enumerate(argv):
            if token is None or (count is not None and count <= i):
                break
            tokens.append(token)

        return Cursor(tokens)

    @property
    def position(self) -> int:
        return self._position

    @property
    def end(self) -> int:
        return self._end

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    @property
    def remaining(self) -> int:
        return self._end - self._position

    @property
    def exhausted(self) -> bool:
        return self._position == self._end

    def __len__(self) -> int:
        return self.remaining

    def __bool__(self) -> bool:
        return self._position < self._end

    def __eq__(self, other) -> bool:
        match other:
            case Cursor():
                return (self._tokens is other._tokens or self._tokens == other._tokens) and (self._position, self._end) == (other._position, other._end)
            case _:
                return False

    def __hash__(self):
        return hash((self._tokens, self._position, self._end))

    def __repr__(self) -> str:
        return f"<Cursor: {self._position}/{self._end} : {self.peek()!r}>"

    def peek(self) -> Token:
        """ The current token, or None if exhausted """
        return self.peek_at(0)

    def peek_at(self, offset:int) -> Token:
        index = self._position + offset
        if offset < 0 or self._end <= index:
            return None

        return self._tokens[index]

    def starts_with(self, prefix:str) -> bool:
        match self.peek():
            case None:
                return False
            case str() as token:
                return token.startswith(prefix)

    def step(self, count:int=1) -> Cursor:
        """ Move forward by count tokens, clamped to the end """
        if count <= 0:
            return self

        position = min(self._position + count, self._end)
        return self._moved_to(position)

    def pop(self) -> tuple[Token, Cursor]:
        """ Take the current token, returning it and the advanced cursor """
        if self.exhausted:
            return None, self

        return self.peek(), self.step()

    def rest(self) -> list[str]:
        """ The tokens not yet consumed """
        return list(self._tokens[self._position:self._end])

    def consumed_since(self, other:Cursor) -> int:
        return self._position - other._position

    def _moved_to(self, position:int) -> Cursor:
        # Shares the token tuple
        new_cursor            = object.__new__(Cursor)
        new_cursor._tokens    = self._tokens
        new_cursor._position  = position
        new_cursor._end       = self._end
        return new_cursor
