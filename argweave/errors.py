#!/usr/bin/env python3
"""
These are the argweave specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from argweave._errors.base import ArgweaveError, BackendError, UserError
from argweave._errors.parse import (ConversionError, ParseError, TagError,
                                    UnconsumedArgsError)
from argweave._errors.struct import StructError, StructLoadError

# ##-- end 1st party imports
