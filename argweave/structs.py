#!/usr/bin/env python3
"""
Public Access point for argweave Structures
"""
from __future__ import annotations

from argweave._structs.code_ref import CodeReference
from argweave._structs.cursor import Cursor
from argweave._structs.flag_spec import (FlagSpec, make_either_flag,
                                         make_long_flag, make_short_flag)
from argweave._structs.logger_spec import LoggerSpec
from argweave._structs.parser_spec import ParserSpec
