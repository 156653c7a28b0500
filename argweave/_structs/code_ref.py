#!/usr/bin/env python3
"""
A reference to a function or class, written as "module.path:attr",
so subcommand targets can be named from toml.

"""

##-- builtin imports
from __future__ import annotations

import importlib
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

##-- end builtin imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from pydantic import BaseModel, ConfigDict

from argweave._interface import IMPORT_SEP

class CodeReference(BaseModel):
    """
      A reference to a class or function. can be created from a string (so can be used from toml),
      or from the actual object (from in python)
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    module  : str
    value   : str
    target  : Any = None

    _separator : ClassVar[str] = IMPORT_SEP

    @classmethod
    def build(cls, name:str|Callable) -> CodeReference:
        match name:
            case str() if cls._separator not in name:
                raise ValueError("a separator needs to be used", name, cls._separator)
            case str():
                module, value = name.split(cls._separator, 1)
                return cls(module=module, value=value)
            case x if callable(x):
                return cls(module=x.__module__, value=x.__qualname__, target=x)
            case _:
                raise ValueError("Bad Value used to try to build a coderef", name)

    def __str__(self) -> str:
        return "{}{}{}".format(self.module, self._separator, self.value)

    def __repr__(self) -> str:
        return f"<CodeRef: {self}>"

    def __hash__(self):
        return hash(str(self))

    def try_import(self) -> Any:
        if self.target is not None:
            return self.target

        try:
            curr = importlib.import_module(self.module)
            for name in self.value.split("."):
                curr = getattr(curr, name)
        except ModuleNotFoundError as err:
            raise ImportError("Failed to import module", str(self)) from err
        except AttributeError as err:
            raise ImportError("Attempted to import %s but failed" % str(self)) from err

        return curr
