#!/usr/bin/env python3
"""
Whole command lines, parsed by parsers shaped like real programs:
an ls clone, a flag cluster demo, and a subcommand dispatcher.
"""
from __future__ import annotations

import enum
import logging as logmod
import re
from typing import (Any, Callable, ClassVar, Final, Generic, Iterable,
                    Iterator, Mapping, Match, MutableMapping, Sequence, Tuple,
                    TypeAlias, TypeVar, cast)

import pytest

import argweave.errors
from argweave import (CommandSet, Flag, FlagGroup, Group, Item, OptionSet,
                      PrefixedValue, Sequential, String, ignore_arg,
                      unimplemented_command)
from argweave._interface import PRINTER_NAME
from argweave.parsers.conversion import uint64

logging = logmod.root

##-- ls

BLOCK_RE     : Final[re.Pattern] = re.compile(r"([0-9]+)([KMGTPEZY]?)(B?)")
BLOCK_POWERS : Final[str]        = "KMGTPEZY"

class Show_e(enum.Enum):
    regular    = enum.auto()
    almost_all = enum.auto()
    all        = enum.auto()

class SizeDisplay_e(enum.Enum):
    bytes = enum.auto()
    kibi  = enum.auto()
    kilo  = enum.auto()

class Colour_e(enum.Enum):
    always    = enum.auto()
    never     = enum.auto()
    automatic = enum.auto()

class Sort_e(enum.Enum):
    none      = enum.auto()
    file_size = enum.auto()
    time      = enum.auto()
    extension = enum.auto()

def block_size(token:str) -> int:
    """ 10, 10K (kibi), 10KB (kilo) ... up to Y """
    match BLOCK_RE.fullmatch(token):
        case None:
            raise ValueError("Block size must be a number, with an optional suffix", token)
        case found if found[3] and not found[2]:
            raise ValueError("Unrecognized block size suffix", token)
        case found if not found[2]:
            return int(found[1])
        case found:
            base = 1000 if found[3] else 1024
            return int(found[1]) * base ** (BLOCK_POWERS.index(found[2]) + 1)

def ls_parser() -> Sequential:
    return Sequential(
        ignore_arg,
        Group(
            FlagGroup(
                OptionSet("scope", Show_e.regular,
                          ("a", Show_e.all),
                          ("A", Show_e.almost_all)),
                OptionSet("use_color", Colour_e.never,
                          ("--color=always", Colour_e.always),
                          ("--color=never", Colour_e.never),
                          ("--color=auto", Colour_e.automatic)),
                Flag("list_directories", "d"),
                Flag("long_format", "l"),
                OptionSet("size_display", SizeDisplay_e.bytes,
                          ("h", "--human_readable", SizeDisplay_e.kibi),
                          ("--si", SizeDisplay_e.kilo)),
                Flag("reverse_order", "r"),
                Flag("list_recurse", "R"),
                Flag("show_block_size", "s"),
                OptionSet("sort_method", Sort_e.none,
                          ("S", Sort_e.file_size),
                          ("t", Sort_e.time),
                          ("X", Sort_e.extension)),
            ),
            PrefixedValue("block_size", "--block-size=", converter=block_size, default=1024),
            PrefixedValue("column_width", "w", "--width=", converter=uint64, default=80),
            Item("files"),
        ),
    )

##-- end ls

class TestBlockSize:

    def test_sanity(self):
        assert(True is not False)

    @pytest.mark.parametrize("token,expected", [
        ("512", 512),
        ("1K", 1024),
        ("2M", 2 * 1024**2),
        ("1G", 1024**3),
        ("1KB", 1000),
        ("3MB", 3 * 1000**2),
        ("1Y", 1024**8),
    ])
    def test_sizes(self, token, expected):
        assert(block_size(token) == expected)

    @pytest.mark.parametrize("token", ["", "K", "1Q", "1B", "1KiB", "-1K", "1 K"])
    def test_rejects(self, token):
        with pytest.raises(ValueError):
            block_size(token)

class TestLsParser:

    def test_defaults(self):
        parser  = ls_parser()
        results = parser.parse_all(["ls"])
        assert(results["scope"] is Show_e.regular)
        assert(results["use_color"] is Colour_e.never)
        assert(results["size_display"] is SizeDisplay_e.bytes)
        assert(results["sort_method"] is Sort_e.none)
        assert(results["block_size"] == 1024)
        assert(results["column_width"] == 80)
        assert(results["files"] == [])
        assert(parser["long_format"] is False)

    def test_clustered_flags(self):
        parser  = ls_parser()
        results = parser.parse_all(["ls", "-lahS", "src"])
        assert(results["long_format"] is True)
        assert(results["scope"] is Show_e.all)
        assert(results["size_display"] is SizeDisplay_e.kibi)
        assert(results["sort_method"] is Sort_e.file_size)
        assert(results["files"] == ["src"])

    def test_unordered(self):
        parser  = ls_parser()
        results = parser.parse_all(["ls", "a.txt", "-R", "--color=auto", "b.txt", "--si", "-t"])
        assert(results["files"] == ["a.txt", "b.txt"])
        assert(results["list_recurse"] is True)
        assert(results["use_color"] is Colour_e.automatic)
        assert(results["size_display"] is SizeDisplay_e.kilo)
        assert(results["sort_method"] is Sort_e.time)

    def test_last_option_wins(self):
        parser  = ls_parser()
        results = parser.parse_all(["ls", "-a", "-A", "-tX"])
        assert(results["scope"] is Show_e.almost_all)
        assert(results["sort_method"] is Sort_e.extension)

    @pytest.mark.parametrize("args,expected", [
        (["--block-size=4K"], 4096),
        (["--block-size=1MB"], 1000**2),
        (["--block-size", "512"], 512),
    ])
    def test_block_size(self, args, expected):
        parser  = ls_parser()
        results = parser.parse_all(["ls", *args])
        assert(results["block_size"] == expected)

    @pytest.mark.parametrize("args", [["-w100"], ["--width=100"], ["-w", "100"], ["--width", "100"]])
    def test_width(self, args):
        parser  = ls_parser()
        results = parser.parse_all(["ls", *args])
        assert(results["column_width"] == 100)

    def test_bad_block_size_is_a_file(self):
        parser  = ls_parser()
        results = parser.parse_all(["ls", "--block-size=4Q"])
        assert(results["block_size"] == 1024)
        assert(results["files"] == ["--block-size=4Q"])

    def test_unknown_cluster_is_a_file(self):
        parser  = ls_parser()
        results = parser.parse_all(["ls", "-lz"])
        assert(parser["long_format"] is False)
        assert(results["files"] == ["-lz"])

    def test_reuse_after_reset(self):
        parser = ls_parser()
        parser.parse_all(["ls", "-l", "a.txt"])
        parser.reset()
        results = parser.parse_all(["ls", "b.txt"])
        assert(parser["long_format"] is False)
        assert(results["files"] == ["b.txt"])

class TestHelloFlagSet:

    @pytest.fixture(scope="function")
    def parser(self):
        return Sequential(
            String("program_name"),
            FlagGroup(
                Flag("hello", "h", "--hello"),
                Flag("print_name", "n", "--print-name"),
                Flag("goodbye", "g", "--goodbye"),
            ))

    def test_all(self, parser):
        assert(parser.parse(["hello", "-hng"]) == 2)
        assert(parser["program_name"] == "hello")
        assert(parser["hello"] and parser["print_name"] and parser["goodbye"])

    def test_mixed(self, parser):
        assert(parser.parse(["hello", "-g", "--print-name"]) == 3)
        assert(parser["hello"] is False)

    def test_partial(self, parser):
        args = ["hello", "-h", "-gx", "--goodbye"]
        assert(parser.parse(args) == 2)
        assert(parser["hello"] is True)
        assert(parser["goodbye"] is False)

    def test_no_program_name(self, parser):
        assert(parser.parse([]) == 0)
        assert(parser["program_name"] is None)

class TestHelloCommand:

    @pytest.fixture(scope="function")
    def calls(self):
        return []

    @pytest.fixture(scope="function")
    def parser(self, calls):

        def hello(args:list[str]) -> int:
            calls.append(("hello", args))
            return 0

        def goodbye(args:list[str]) -> int:
            calls.append(("goodbye", args))
            return 0

        def print_name(args:list[str]) -> int:
            calls.append(("name", args[0]))
            return 0

        return Sequential(
            String("program_name"),
            CommandSet("subcommand", None,
                       ("hello", hello),
                       ("goodbye", goodbye),
                       ("help", unimplemented_command),
                       ("name", print_name)))

    def test_dispatch(self, parser, calls):
        args = ["prog", "goodbye"]
        parser.parse(args)
        assert(parser["subcommand"](args) == 0)
        assert(calls == [("goodbye", args)])

    def test_print_name(self, parser, calls):
        args = ["prog", "name"]
        parser.parse(args)
        assert(parser["subcommand"](args) == 0)
        assert(calls == [("name", "prog")])

    def test_unimplemented(self, parser, caplog):
        parser.parse(["prog", "help"])
        with caplog.at_level(logmod.ERROR, logger=PRINTER_NAME):
            assert(parser["subcommand"]([]) == 1)

        assert("[No implementation was specified for this subcommand]" in caplog.messages)

    def test_missing(self, parser, calls, caplog):
        parser.parse(["prog"])
        with caplog.at_level(logmod.ERROR, logger=PRINTER_NAME):
            assert(parser["subcommand"](["prog"]) == 1)

        assert("Error: Missing subcommand. Try --help for usage." in caplog.messages)
        assert(not bool(calls))

    def test_unrecognized(self, parser, calls, caplog):
        assert(parser.parse(["prog", "blah"]) == 1)
        with caplog.at_level(logmod.ERROR, logger=PRINTER_NAME):
            assert(parser["subcommand"](["prog", "blah"]) == 1)

        assert("Unrecognized subcommand 'blah'. Try --help for usage." in caplog.messages)
        assert(not bool(calls))

    def test_results_expose_dispatcher(self, parser):
        parser.parse(["prog", "hello"])
        assert(isinstance(parser.results()["subcommand"], CommandSet))
