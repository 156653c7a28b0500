#!/usr/bin/env python3
"""
Load a parser tree, and its logging setup, from toml.

[logging.stream]   -> the root logger
[logging.printer]  -> the argweave printer, which reports dispatch failures
[logging.{name}]   -> the logger called {name}

[parser]           -> a ParserSpec

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

try:
    # For py 3.11 onwards:
    import tomllib as toml
except ImportError:
    # Fallback to external package
    import toml

from tomlguard import TomlGuard
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import argweave.errors
from argweave._abstract.parser import ArgParser_i
from argweave._interface import PRINTER_NAME
from argweave._structs.logger_spec import LoggerSpec
from argweave._structs.parser_spec import ParserSpec

SPECIAL_LOGGERS : Final[dict[str, str]] = {
    "stream"  : LoggerSpec.RootName,
    "printer" : PRINTER_NAME,
}

def read_config(source:str|pl.Path) -> TomlGuard:
    """ A path to a toml file, or toml text """
    match source:
        case pl.Path():
            text = source.read_text()
        case str() if source.endswith(".toml") and pl.Path(source).exists():
            text = pl.Path(source).read_text()
        case str():
            text = source
        case x:
            raise TypeError("Unknown parser config source", x)

    try:
        return TomlGuard(toml.loads(text))
    except ValueError as err:
        raise argweave.errors.StructLoadError("Bad parser config toml: %s", err) from err

def setup_logging(config:TomlGuard) -> list[LoggerSpec]:
    """ Apply each table of the [logging] section, returning the specs applied """
    specs = []
    for key, data in config.on_fail({}).logging().items():
        name = SPECIAL_LOGGERS.get(key, key)
        try:
            spec = LoggerSpec.build(data, name=name)
        except (TypeError, ValueError) as err:
            raise argweave.errors.StructLoadError("Bad logging spec for %s: %s", key, err) from err

        logging.debug("Applying Logger Spec: %s", spec.name)
        spec.apply()
        specs.append(spec)

    return specs

def load_parser(source:str|pl.Path) -> ArgParser_i:
    """ Read the config, set up logging, and build the [parser] table """
    config = read_config(source)
    setup_logging(config)
    match config.on_fail(None).parser():
        case None:
            raise argweave.errors.StructLoadError("No [parser] table in config")
        case data:
            return ParserSpec.build(data).make()
