"""
Bit flag sets over fixed, ordered label tables.

Key features:
- Each label owns the bit given by its position (1 << position)
- Combine labels into a single integer and decode it back in order
- Explicit conversion between flag values and plain integers
- Compact letter flagstrings for filenames and the command line
"""

from .definitions import FlagDefinition, FlagLabel, MAX_WIDTH
from .registry import FlagRegistry
from .flags import (
    FlagValue,
    combine,
    contains,
    decode,
    from_flagstring,
    from_integer,
    to_flagstring,
    to_integer,
)

__all__ = [
    'FlagDefinition',
    'FlagLabel',
    'MAX_WIDTH',
    'FlagRegistry',
    'FlagValue',
    'combine',
    'contains',
    'decode',
    'from_flagstring',
    'from_integer',
    'to_flagstring',
    'to_integer',
]
