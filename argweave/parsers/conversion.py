#!/usr/bin/env python3
"""
Token to value conversions.

A converter is any callable taking the token, returning the typed value,
and raising ValueError when the token is malformed.
Primitives treat a ValueError as a non-match, consuming nothing.

"""
##-- imports
from __future__ import annotations

import functools as ftz
import logging as logmod
import re
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import argweave.errors
from argweave._interface import Converter

SIGNED_RE   : Final[re.Pattern] = re.compile(r"-?[0-9]+")
UNSIGNED_RE : Final[re.Pattern] = re.compile(r"[0-9]+")

def text(token:str) -> str:
    """ Passthrough """
    return token

def _fixed_width(token:str, *, bits:int, signed:bool) -> int:
    """ Strict whole-token integer parsing.
      No whitespace, no '+', no underscores, no trailing characters.
    """
    pattern = SIGNED_RE if signed else UNSIGNED_RE
    if not pattern.fullmatch(token):
        raise argweave.errors.ConversionError("Not an integer: %r", token)

    value = int(token)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1

    if not (low <= value <= high):
        raise argweave.errors.ConversionError("Integer out of range for %s bits: %s", bits, token)

    return value

int8   = ftz.partial(_fixed_width, bits=8,  signed=True)
int16  = ftz.partial(_fixed_width, bits=16, signed=True)
int32  = ftz.partial(_fixed_width, bits=32, signed=True)
int64  = ftz.partial(_fixed_width, bits=64, signed=True)
uint8  = ftz.partial(_fixed_width, bits=8,  signed=False)
uint16 = ftz.partial(_fixed_width, bits=16, signed=False)
uint32 = ftz.partial(_fixed_width, bits=32, signed=False)
uint64 = ftz.partial(_fixed_width, bits=64, signed=False)

CONVERTERS : Final[dict[str, Converter]] = {
    "str"    : text,
    "text"   : text,
    "int"    : int64,
    "uint"   : uint64,
    "int8"   : int8,
    "int16"  : int16,
    "int32"  : int32,
    "int64"  : int64,
    "uint8"  : uint8,
    "uint16" : uint16,
    "uint32" : uint32,
    "uint64" : uint64,
}

def lookup_converter(conv:None|str|Converter) -> Converter:
    match conv:
        case None:
            return text
        case str() if conv in CONVERTERS:
            return CONVERTERS[conv]
        case str():
            raise argweave.errors.ParseError("Unknown converter name", conv)
        case x if callable(x):
            return x
        case _:
            raise argweave.errors.ParseError("Converters must be callable", conv)

def try_convert(converter:Converter, token:str) -> tuple[bool, Any]:
    """ The one place conversion failure becomes a (False, None) result """
    try:
        return True, converter(token)
    except ValueError as err:
        logging.debug("Conversion Failed: %r : %s", token, err)
        return False, None
