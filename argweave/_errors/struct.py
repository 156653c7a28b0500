#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import ArgweaveError, BackendError

class StructError(BackendError):
    pass

class StructLoadError(StructError):
    """ An error indicating a parser could not be built correctly from its TOML spec """
    general_msg = "Argweave Parser Load Failure:"
    pass
