#!/usr/bin/env python3
"""
Errors raised around parsing.
Ordinary non-matches never raise, these are for misuse and reporting.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import ArgweaveError, BackendError, UserError

class ParseError(BackendError):
    """ A parser was built or driven incorrectly. """
    general_msg = "Argweave Parsing Failure:"
    pass

class UnconsumedArgsError(ParseError, UserError):
    """ The top level parser stopped before the end of the input. """
    general_msg = "Argweave Unparsed Arguments:"

    def __init__(self, msg, remaining:list[str], consumed:int):
        super().__init__(msg, remaining)
        self.remaining = remaining
        self.consumed  = consumed

class TagError(ParseError, KeyError):
    """ A tag was unknown, or declared twice among siblings """
    general_msg = "Argweave Tag Failure:"
    pass

class ConversionError(BackendError, ValueError):
    """ A token could not be converted into a typed value """
    general_msg = "Argweave Conversion Failure:"
    pass
