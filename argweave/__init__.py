#!/usr/bin/env python3
"""
Argweave : Composable command line argument parsing.

Small parsers, each consuming tokens from a shared cursor,
combined into a grammar for a whole command line:

    parser = Sequential(String("program"),
                        FlagGroup(Flag("all", "a", "--all"),
                                  OptionSet("mode", None, ("l", "long"), ("1", "single"))),
                        ListRemaining("files"))
    results = parser.parse_all(sys.argv)

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__
from argweave._abstract.parser import ArgParser_i, Clusterable_p
from argweave._structs.cursor import Cursor
from argweave._structs.flag_spec import FlagSpec
from argweave.parsers.combinators import (FlagGroup, FlagSet, Group, Section,
                                          Sequential)
from argweave.parsers.options import (CommandSet, Option, OptionSet,
                                      unimplemented_command)
from argweave.parsers.primitives import (Flag, IgnoreArg, Item, ListOf,
                                         ListRemaining, PrefixedValue, String,
                                         Value, ValueFlag, ignore_arg)

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging
