"""
Lodown -- generic collection utilities.

Pure, synchronous functions over sequences and mappings:
  types      type_of, strict_equals, MISSING
  iteration  identity, each, first, last
  search     index_of, contains, filter, reject, partition, unique
  transform  map, pluck
  aggregate  every, some, reduce
  merge      extend (the one function that mutates an argument)

Callbacks receive (element, index_or_key, collection) trimmed to the
number of positional parameters they accept.
"""

from lodown.aggregate import every, reduce, some
from lodown.callbacks import truthy
from lodown.config import settings
from lodown.errors import CallbackError, ExtendTargetError, LodownError
from lodown.iteration import each, each_mapping, each_sequence, entries, first, identity, last
from lodown.log import setup_logger
from lodown.merge import extend
from lodown.search import contains, filter, index_of, partition, reject, unique
from lodown.transform import map, pluck
from lodown.types import MISSING, strict_equals, type_of

setup_logger()

__all__ = [
    "identity",
    "type_of",
    "first",
    "last",
    "each",
    "index_of",
    "filter",
    "reject",
    "partition",
    "unique",
    "map",
    "pluck",
    "contains",
    "every",
    "some",
    "reduce",
    "extend",
    "MISSING",
    "entries",
    "each_sequence",
    "each_mapping",
    "strict_equals",
    "truthy",
    "LodownError",
    "CallbackError",
    "ExtendTargetError",
    "settings",
]
