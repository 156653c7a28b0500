"""
Interfaces and Protocols for argweave.

Protocols have names: {}_p
Interfaces have names {}_i

Interfaces need to be inherited from.
"""

from .parser import ArgParser_i, Clusterable_p
